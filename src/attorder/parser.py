"""Recursive descent parser building a lossless :class:`Document`."""

import logging

from .node import AttrKind, Attribute, BangTagNode, CommentNode, Document, EndTagNode, TagNode, TextNode
from .order import OrderSettings, sort_attributes
from .tokenizer import Tokenizer
from .tokens import ParseError, TokenKind

logger = logging.getLogger(__name__)

# Tokens that may make up a tag name.
_TAG_NAME_KINDS = frozenset({TokenKind.IDENT, TokenKind.MINUS})

# Tokens that may make up an attribute name: ng-model, app.foo, xml:lang, @named
_ATTR_NAME_KINDS = frozenset({TokenKind.IDENT, TokenKind.MINUS, TokenKind.COLON, TokenKind.DOT, TokenKind.AT})

# Tokens that end a run of text.
_TEXT_STOP_KINDS = frozenset({TokenKind.TAG_OPEN, TokenKind.COMMENT_START, TokenKind.EOF})

_ATTR_START_KINDS = {
    TokenKind.IDENT: AttrKind.PLAIN,
    TokenKind.LPAREN: AttrKind.PAREN,
    TokenKind.LBRACKET: AttrKind.BRACKET,
    TokenKind.HASH: AttrKind.HASH,
    TokenKind.AT: AttrKind.AT,
    TokenKind.STAR: AttrKind.STAR,
}


class Parser:
    """Consume tokens with one token of lookahead and build the tree.

    Attributes of each opening tag are reordered according to ``settings``
    as soon as the tag is complete. There is no error recovery: the first
    unexpected token raises :class:`ParseError`.
    """

    __slots__ = ("current", "peek", "settings", "tokenizer")

    def __init__(self, tokenizer, settings=None):
        self.tokenizer = tokenizer
        self.settings = settings if settings is not None else OrderSettings()
        self.current = None
        self.peek = None
        self._step()
        self._step()

    def parse(self):
        document = Document()
        while not self._is(TokenKind.EOF):
            document.append_child(self.parse_node())
        logger.debug("parsed %d nodes", len(document))
        return document

    def parse_node(self):
        kind = self.current.kind
        if kind == TokenKind.TAG_OPEN:
            if self.peek.kind == TokenKind.SLASH:
                return self.parse_end_tag()
            return self.parse_tag()
        if kind == TokenKind.BANG_TAG:
            return self.parse_bang_tag()
        if kind == TokenKind.COMMENT_START:
            return self.parse_comment()
        return self.parse_text()

    def parse_text(self):
        return TextNode(self._collect_until(_TEXT_STOP_KINDS))

    def parse_tag(self):
        self._expect("tag opening '<'", TokenKind.TAG_OPEN)
        self._skip_whitespace()
        node = TagNode(self._parse_name(_TAG_NAME_KINDS))
        while not self._is(TokenKind.EOF):
            whitespace = self._skip_whitespace()
            if self._is(TokenKind.SLASH):
                self._step()
                node.trailing = whitespace
                node.self_closing = True
                break
            if self._is(TokenKind.TAG_CLOSE):
                node.trailing = whitespace
                break
            node.append_attr(self.parse_attribute(), whitespace)
        self._expect("closing '>'", TokenKind.TAG_CLOSE)
        sort_attributes(node.attrs, self.settings)
        return node

    def parse_end_tag(self):
        self._expect("tag opening '<'", TokenKind.TAG_OPEN)
        self._expect("closing tag '/'", TokenKind.SLASH)
        node = EndTagNode(self._parse_name(_TAG_NAME_KINDS))
        self._expect("closing tag '>'", TokenKind.TAG_CLOSE)
        return node

    def parse_comment(self):
        self._expect("comment start '<!--'", TokenKind.COMMENT_START)
        data = self._collect_until((TokenKind.COMMENT_END, TokenKind.EOF))
        self._expect("comment end '-->'", TokenKind.COMMENT_END)
        return CommentNode(data)

    def parse_bang_tag(self):
        self._expect("bang tag '<!'", TokenKind.BANG_TAG)
        data = self._collect_until((TokenKind.TAG_CLOSE, TokenKind.EOF))
        self._expect("bang tag closing '>'", TokenKind.TAG_CLOSE)
        return BangTagNode(data)

    def parse_attribute(self):
        kind = _ATTR_START_KINDS.get(self.current.kind)
        if kind is None:
            raise ParseError.unexpected("attribute identifier", TokenKind.IDENT, self.current)
        if kind == AttrKind.BRACKET and self.peek.kind == TokenKind.LPAREN:
            kind = AttrKind.TWO_WAY
            self._step()
        if kind != AttrKind.PLAIN:
            self._step()

        name = self._parse_name(_ATTR_NAME_KINDS)
        if kind in (AttrKind.PAREN, AttrKind.TWO_WAY):
            self._expect("attribute ')'", TokenKind.RPAREN)
        if kind in (AttrKind.BRACKET, AttrKind.TWO_WAY):
            self._expect("attribute ']'", TokenKind.RBRACKET)

        if not self._is(TokenKind.EQUALS):
            return Attribute(name, kind=kind)
        self._step()
        if self._is(TokenKind.IDENT):
            value = self.current.text
            self._step()
        else:
            value = self.parse_quoted_string()
        return Attribute(name, value, kind, has_value=True)

    def parse_quoted_string(self):
        """Return a quoted value including both quote characters."""
        if not self._is(TokenKind.QUOTE) and not self._is(TokenKind.DQUOTE):
            raise ParseError.unexpected("string start ('\"' or \"'\")", TokenKind.DQUOTE, self.current)
        delimiter = self.current.kind
        opening = self.current.text
        self._step()
        body = self._collect_until((delimiter, TokenKind.EOF))
        closing = self._expect("string end", delimiter)
        return opening + body + closing.text

    def _parse_name(self, kinds):
        parts = []
        while self.current.kind in kinds:
            parts.append(self.current.text)
            self._step()
        return "".join(parts)

    def _collect_until(self, stop_kinds):
        parts = []
        while self.current.kind not in stop_kinds:
            parts.append(self.current.text)
            self._step()
        return "".join(parts)

    def _skip_whitespace(self):
        if self._is(TokenKind.WHITESPACE):
            text = self.current.text
            self._step()
            return text
        return ""

    def _step(self):
        self.current = self.peek
        self.peek = self.tokenizer.next_token()

    def _is(self, kind):
        return self.current.kind == kind

    def _expect(self, description, kind):
        if not self._is(kind):
            raise ParseError.unexpected(description, kind, self.current)
        token = self.current
        self._step()
        return token


def _settings(order):
    if isinstance(order, OrderSettings):
        return order
    return OrderSettings(order or ())


def parse(source, order=None):
    """Parse ``source`` (a ``str`` or text stream) into a :class:`Document`."""
    return Parser(Tokenizer(source), _settings(order)).parse()


def reorder(text, order=None):
    """Return ``text`` with the attributes of every opening tag reordered.

    ``order`` is a list of regular expressions or an :class:`OrderSettings`.
    """
    return parse(text, order).to_html()


def reorder_stream(stream, order=None):
    """Like :func:`reorder` but reads the document from a text stream."""
    return parse(stream, order).to_html()
