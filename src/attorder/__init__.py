from .node import AttrKind, Attribute, BangTagNode, CommentNode, Document, EndTagNode, TagNode, TextNode
from .order import OrderSettings, sort_attributes
from .parser import Parser, parse, reorder, reorder_stream
from .serialize import to_html, to_test_format
from .tokenizer import Tokenizer
from .tokens import ParseError, PatternError, Token, TokenKind

__all__ = [
    "AttrKind",
    "Attribute",
    "BangTagNode",
    "CommentNode",
    "Document",
    "EndTagNode",
    "OrderSettings",
    "ParseError",
    "Parser",
    "PatternError",
    "TagNode",
    "TextNode",
    "Token",
    "TokenKind",
    "Tokenizer",
    "parse",
    "reorder",
    "reorder_stream",
    "sort_attributes",
    "to_html",
    "to_test_format",
]
