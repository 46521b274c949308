"""HTML parsing: tokenizer, tree builder and BeautifulSoup producer."""

from .soup import parse_soup
from .tokenizer import Characters, CommentToken, EndTag, StartTag, State, Tokenizer, tokenize
from .tree_builder import TreeBuilder, parse

__all__ = [
    "Characters",
    "CommentToken",
    "EndTag",
    "StartTag",
    "State",
    "Tokenizer",
    "TreeBuilder",
    "parse",
    "parse_soup",
    "tokenize",
]
