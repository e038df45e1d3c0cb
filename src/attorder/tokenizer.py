from .buffer import InputBuffer
from .tokens import PUNCTUATION, Token, TokenKind

# str.isspace() also accepts the information separators, which are not
# Unicode White_Space.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def _is_space(c):
    return c.isspace() and c not in _NOT_WHITESPACE


class Tokenizer:
    """Turn markup text into a stream of :class:`Token` objects.

    Purely lexical: it knows nothing about tags or attributes, it only
    groups characters. Whitespace is kept as tokens so the parser can put
    every byte of the input back. Once the input is exhausted every further
    call returns an EOF token.
    """

    __slots__ = ("buffer", "column", "line")

    def __init__(self, source):
        self.buffer = source if isinstance(source, InputBuffer) else InputBuffer(source)
        self.line = 1
        self.column = 1

    def __iter__(self):
        while True:
            token = self.next_token()
            yield token
            if token.kind == TokenKind.EOF:
                return

    def all(self):
        return list(self)

    def next_token(self):
        buffer = self.buffer
        line = self.line
        column = self.column
        c = buffer.peek()

        if c is None:
            return Token(TokenKind.EOF, "", line, column)

        if _is_space(c):
            chars = []
            while c is not None and _is_space(c):
                chars.append(self._advance())
                c = buffer.peek()
            return Token(TokenKind.WHITESPACE, "".join(chars), line, column)

        if c == "<":
            if buffer.peek(1) == "!":
                if buffer.peek(2) == "-" and buffer.peek(3) == "-":
                    return Token(TokenKind.COMMENT_START, self._advance_n(4), line, column)
                return Token(TokenKind.BANG_TAG, self._advance_n(2), line, column)
            return Token(TokenKind.TAG_OPEN, self._advance(), line, column)

        if c == "-":
            if buffer.peek(1) == "-" and buffer.peek(2) == ">":
                return Token(TokenKind.COMMENT_END, self._advance_n(3), line, column)
            return Token(TokenKind.MINUS, self._advance(), line, column)

        kind = PUNCTUATION.get(c)
        if kind is not None:
            return Token(kind, self._advance(), line, column)

        if c.isalpha():
            chars = []
            while c is not None and (c.isalpha() or c.isdecimal()):
                chars.append(self._advance())
                c = buffer.peek()
            return Token(TokenKind.IDENT, "".join(chars), line, column)

        return Token(TokenKind.UNKNOWN, self._advance(), line, column)

    def _advance(self):
        c = self.buffer.next()
        if c == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return c

    def _advance_n(self, count):
        return "".join(self._advance() for _ in range(count))
