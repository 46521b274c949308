"""Exception hierarchy for HTML to RSX conversion."""


class ConversionError(Exception):
    """Base class for every error raised while converting HTML to RSX."""

    pass


class ParseError(ConversionError):
    """Raised when HTML input cannot be turned into a document tree."""

    pass


class MalformedTagError(ParseError):
    """Raised for structurally unrecoverable markup.

    Covers a tag with no closing ``>`` before end of input, a quoted
    attribute value that is never closed, and an unterminated comment.
    """

    def __init__(self, message: str, offset: int, line: int, column: int):
        self.reason = message
        self.offset = offset
        self.line = line
        self.column = column
        super().__init__(f"{message} at line {line}, column {column}")


class EmitError(ConversionError):
    """Raised when a document tree cannot be rendered as RSX."""

    pass


class UnknownTagError(EmitError):
    """Raised in strict mode for a tag outside the known HTML and SVG sets."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Unknown tag '{tag}' rejected in strict mode")


class InvalidVoidElementChildrenError(EmitError):
    """Raised when a void element carries children."""

    def __init__(self, tag: str, child_count: int):
        self.tag = tag
        self.child_count = child_count
        super().__init__(
            f"Void element '{tag}' cannot have children (found {child_count})"
        )
