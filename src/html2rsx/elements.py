"""Element name tables shared by the parser and the emitter."""

# Elements that never have children or an end tag
VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# Content is scanned as text up to the matching end tag.
# Escapable raw text elements decode character references, raw text ones do not.
RAW_TEXT_ELEMENTS = frozenset({"script", "style"})
ESCAPABLE_RAW_TEXT_ELEMENTS = frozenset({"textarea", "title"})

# Whitespace inside these elements is significant
PREFORMATTED_ELEMENTS = frozenset({"pre", "textarea", "script", "style", "listing"})

# Opening one of these closes an open <p>
BLOCK_ELEMENTS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "details",
        "dialog",
        "div",
        "dl",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "header",
        "hgroup",
        "hr",
        "main",
        "menu",
        "nav",
        "ol",
        "p",
        "pre",
        "section",
        "table",
        "ul",
    }
)

# Start tag -> open elements it implicitly closes when they are the current node
IMPLIED_END_TAGS: dict[str, frozenset[str]] = {
    "li": frozenset({"li"}),
    "dt": frozenset({"dt", "dd"}),
    "dd": frozenset({"dt", "dd"}),
    "option": frozenset({"option"}),
    "optgroup": frozenset({"option", "optgroup"}),
    "tr": frozenset({"tr", "td", "th"}),
    "td": frozenset({"td", "th"}),
    "th": frozenset({"td", "th"}),
    "thead": frozenset({"tbody", "tfoot", "tr", "td", "th"}),
    "tbody": frozenset({"thead", "tfoot", "tr", "td", "th"}),
    "tfoot": frozenset({"thead", "tbody", "tr", "td", "th"}),
}

HTML_ELEMENTS = frozenset(
    {
        "a", "abbr", "address", "area", "article", "aside", "audio",
        "b", "base", "bdi", "bdo", "blockquote", "body", "br", "button",
        "canvas", "caption", "cite", "code", "col", "colgroup",
        "data", "datalist", "dd", "del", "details", "dfn", "dialog", "div", "dl", "dt",
        "em", "embed",
        "fieldset", "figcaption", "figure", "footer", "form",
        "h1", "h2", "h3", "h4", "h5", "h6", "head", "header", "hgroup", "hr", "html",
        "i", "iframe", "img", "input", "ins",
        "kbd", "keygen",
        "label", "legend", "li", "link", "listing",
        "main", "map", "mark", "math", "menu", "meta", "meter",
        "nav", "noscript",
        "object", "ol", "optgroup", "option", "output",
        "p", "param", "picture", "pre", "progress",
        "q",
        "rp", "rt", "ruby",
        "s", "samp", "script", "search", "section", "select", "slot", "small",
        "source", "span", "strong", "style", "sub", "summary", "sup", "svg",
        "table", "tbody", "td", "template", "textarea", "tfoot", "th", "thead",
        "time", "title", "tr", "track",
        "u", "ul",
        "var", "video",
        "wbr",
    }
)

SVG_ELEMENTS = frozenset(
    {
        "a", "animate", "animateMotion", "animateTransform",
        "circle", "clipPath",
        "defs", "desc",
        "ellipse",
        "feBlend", "feColorMatrix", "feComponentTransfer", "feComposite",
        "feConvolveMatrix", "feDiffuseLighting", "feDisplacementMap",
        "feDistantLight", "feDropShadow", "feFlood", "feFuncA", "feFuncB",
        "feFuncG", "feFuncR", "feGaussianBlur", "feImage", "feMerge",
        "feMergeNode", "feMorphology", "feOffset", "fePointLight",
        "feSpecularLighting", "feSpotLight", "feTile", "feTurbulence",
        "filter", "foreignObject",
        "g",
        "image",
        "line", "linearGradient",
        "marker", "mask", "metadata", "mpath",
        "path", "pattern", "polygon", "polyline",
        "radialGradient", "rect",
        "set", "stop", "svg", "switch", "symbol",
        "text", "textPath", "title", "tspan",
        "use",
        "view",
    }
)

KNOWN_ELEMENTS = HTML_ELEMENTS | SVG_ELEMENTS

# Lowercased spelling -> canonical camelCase spelling
SVG_TAG_CASE = {name.lower(): name for name in SVG_ELEMENTS if name != name.lower()}


def canonical_tag_name(raw_name: str) -> str:
    """Lowercase a tag name, restoring the canonical case of SVG camelCase tags."""
    lowered = raw_name.lower()
    return SVG_TAG_CASE.get(lowered, lowered)


def is_void(tag: str) -> bool:
    return tag.lower() in VOID_ELEMENTS


def is_known(tag: str) -> bool:
    return tag in KNOWN_ELEMENTS or tag.lower() in HTML_ELEMENTS
