class TokenKind:
    __slots__ = ()

    UNKNOWN = 0
    TAG_OPEN = 1
    TAG_CLOSE = 2
    IDENT = 3
    EQUALS = 4
    LPAREN = 5
    RPAREN = 6
    LBRACKET = 7
    RBRACKET = 8
    QUOTE = 9
    DQUOTE = 10
    SLASH = 11
    BANG = 12
    WHITESPACE = 13
    MINUS = 14
    HASH = 15
    AT = 16
    EOF = 17
    STAR = 18
    BANG_TAG = 19
    COMMENT_START = 20
    COMMENT_END = 21
    COLON = 22
    DOT = 23

    NAMES = {
        UNKNOWN: "unknown",
        TAG_OPEN: "tag-open",
        TAG_CLOSE: "tag-close",
        IDENT: "identifier",
        EQUALS: "equals",
        LPAREN: "lparen",
        RPAREN: "rparen",
        LBRACKET: "lbracket",
        RBRACKET: "rbracket",
        QUOTE: "quote",
        DQUOTE: "dquote",
        SLASH: "slash",
        BANG: "bang",
        WHITESPACE: "whitespace",
        MINUS: "minus",
        HASH: "hash",
        AT: "at",
        EOF: "eof",
        STAR: "star",
        BANG_TAG: "bang-tag-start",
        COMMENT_START: "comment-start",
        COMMENT_END: "comment-end",
        COLON: "colon",
        DOT: "dot",
    }

    @classmethod
    def name(cls, kind):
        return cls.NAMES.get(kind, f"kind({kind})")


# Single character punctuation recognized by the tokenizer. '<' and '-' are
# handled separately since they start multi-character tokens.
PUNCTUATION = {
    ">": TokenKind.TAG_CLOSE,
    '"': TokenKind.DQUOTE,
    "'": TokenKind.QUOTE,
    ":": TokenKind.COLON,
    ".": TokenKind.DOT,
    "=": TokenKind.EQUALS,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "/": TokenKind.SLASH,
    "!": TokenKind.BANG,
    "#": TokenKind.HASH,
    "@": TokenKind.AT,
    "*": TokenKind.STAR,
}


class Token:
    __slots__ = ("column", "kind", "line", "text")

    def __init__(self, kind, text, line, column):
        self.kind = kind
        self.text = text
        self.line = line
        self.column = column

    def __setattr__(self, name, value):
        if hasattr(self, name):
            raise AttributeError(f"Token is immutable, cannot set {name!r}")
        object.__setattr__(self, name, value)

    def __repr__(self):
        return f"[{self.line}:{self.column}]({TokenKind.name(self.kind)} {self.text!r})"

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.text == other.text
            and self.line == other.line
            and self.column == other.column
        )

    __hash__ = None  # Unhashable since we define __eq__


class ParseError(Exception):
    """Raised when the token stream does not fit the markup grammar.

    ``code`` is a short machine readable tag (``"unexpected-token"``,
    ``"eof-in-comment"`` ...), ``expected`` is the token kind the parser
    required and ``token`` is what it found instead.
    """

    def __init__(self, code, line=None, column=None, message=None, expected=None, token=None):
        self.code = code
        self.line = line
        self.column = column
        self.message = message or code
        self.expected = expected
        self.token = token
        super().__init__(str(self))

    @classmethod
    def unexpected(cls, description, expected, token):
        if token.kind == TokenKind.EOF:
            code = "unexpected-eof"
        else:
            code = "unexpected-token"
        message = f"expected {description} ({TokenKind.name(expected)}) but got {token!r}"
        return cls(code, line=token.line, column=token.column, message=message, expected=expected, token=token)

    def __repr__(self):
        if self.line is not None and self.column is not None:
            return f"ParseError({self.code!r}, line={self.line}, column={self.column})"
        return f"ParseError({self.code!r})"

    def __str__(self):
        if self.line is not None and self.column is not None:
            if self.message != self.code:
                return f"({self.line},{self.column}): {self.code} - {self.message}"
            return f"({self.line},{self.column}): {self.code}"
        if self.message != self.code:
            return f"{self.code} - {self.message}"
        return self.code


class PatternError(ValueError):
    """An order pattern is not a valid regular expression."""

    def __init__(self, pattern, reason):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid order pattern {pattern!r}: {reason}")
