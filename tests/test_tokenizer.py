from __future__ import annotations

import io
import unittest

from attorder.buffer import InputBuffer
from attorder.tokenizer import Tokenizer
from attorder.tokens import Token, TokenKind

K = TokenKind


def kinds(source):
    return [token.kind for token in Tokenizer(source)]


class TestTokenizer(unittest.TestCase):
    def test_tag_with_bound_attributes(self) -> None:
        html = '<a [href]="test" (click)="clickEvent()" class="test asd"></a>'
        assert kinds(html) == [
            K.TAG_OPEN, K.IDENT, K.WHITESPACE,
            K.LBRACKET, K.IDENT, K.RBRACKET, K.EQUALS, K.DQUOTE, K.IDENT, K.DQUOTE, K.WHITESPACE,
            K.LPAREN, K.IDENT, K.RPAREN, K.EQUALS, K.DQUOTE, K.IDENT, K.LPAREN, K.RPAREN, K.DQUOTE,
            K.WHITESPACE,
            K.IDENT, K.EQUALS, K.DQUOTE, K.IDENT, K.WHITESPACE, K.IDENT, K.DQUOTE,
            K.TAG_CLOSE,
            K.TAG_OPEN, K.SLASH, K.IDENT, K.TAG_CLOSE,
            K.EOF,
        ]

    def test_comment_tokens(self) -> None:
        assert kinds("<div></div>\n<!-- <div> -->") == [
            K.TAG_OPEN, K.IDENT, K.TAG_CLOSE,
            K.TAG_OPEN, K.SLASH, K.IDENT, K.TAG_CLOSE,
            K.WHITESPACE,
            K.COMMENT_START, K.WHITESPACE, K.TAG_OPEN, K.IDENT, K.TAG_CLOSE, K.WHITESPACE, K.COMMENT_END,
            K.EOF,
        ]

    def test_bang_tag_start(self) -> None:
        tokens = Tokenizer("<!DOCTYPE html>").all()
        assert tokens[0].kind == K.BANG_TAG
        assert tokens[0].text == "<!"
        assert tokens[1].kind == K.IDENT
        assert tokens[1].text == "DOCTYPE"

    def test_bang_with_single_dash_is_not_a_comment(self) -> None:
        assert kinds("<!-x") == [K.BANG_TAG, K.MINUS, K.IDENT, K.EOF]

    def test_minus_and_comment_end(self) -> None:
        assert kinds("a-b") == [K.IDENT, K.MINUS, K.IDENT, K.EOF]
        assert kinds("-->") == [K.COMMENT_END, K.EOF]
        assert kinds("--x") == [K.MINUS, K.MINUS, K.IDENT, K.EOF]

    def test_whitespace_run_is_one_token(self) -> None:
        tokens = Tokenizer(" \t\n  x").all()
        assert tokens[0].kind == K.WHITESPACE
        assert tokens[0].text == " \t\n  "

    def test_identifier_must_start_with_letter(self) -> None:
        tokens = Tokenizer("h1 1h").all()
        assert [(t.kind, t.text) for t in tokens] == [
            (K.IDENT, "h1"),
            (K.WHITESPACE, " "),
            (K.UNKNOWN, "1"),
            (K.IDENT, "h"),
            (K.EOF, ""),
        ]

    def test_information_separators_are_not_whitespace(self) -> None:
        for char in "\x1c\x1d\x1e\x1f":
            tokens = Tokenizer(char).all()
            assert tokens[0].kind == K.UNKNOWN
            assert tokens[0].text == char
        assert kinds("\x85\xa0 ") == [K.WHITESPACE, K.EOF]

    def test_identifier_digits_must_be_decimal(self) -> None:
        tokens = Tokenizer("x2²").all()
        assert [(t.kind, t.text) for t in tokens] == [
            (K.IDENT, "x2"),
            (K.UNKNOWN, "²"),
            (K.EOF, ""),
        ]

    def test_punctuation(self) -> None:
        assert kinds("#@*:.=!/") == [
            K.HASH, K.AT, K.STAR, K.COLON, K.DOT, K.EQUALS, K.BANG, K.SLASH, K.EOF,
        ]

    def test_unknown_characters_are_not_rejected(self) -> None:
        tokens = Tokenizer("{{ $x }}").all()
        assert tokens[0].kind == K.UNKNOWN
        assert tokens[0].text == "{"
        assert "".join(t.text for t in tokens) == "{{ $x }}"

    def test_token_text_concatenates_to_input(self) -> None:
        html = '<!-- c --><p id=x [(a.b)]="1 > 2">t&amp;</p>\r\n<!doctype html>'
        assert "".join(t.text for t in Tokenizer(html)) == html

    def test_eof_is_repeated(self) -> None:
        tokenizer = Tokenizer("a")
        assert tokenizer.next_token().kind == K.IDENT
        for _ in range(3):
            assert tokenizer.next_token().kind == K.EOF

    def test_positions_follow_lines(self) -> None:
        tokens = Tokenizer("<a>\n  <b>").all()
        assert (tokens[0].line, tokens[0].column) == (1, 1)
        assert (tokens[1].line, tokens[1].column) == (1, 2)
        b_open = tokens[4]
        assert b_open.kind == K.TAG_OPEN
        assert (b_open.line, b_open.column) == (2, 3)

    def test_reads_from_stream_in_chunks(self) -> None:
        html = '<div class="a" id="b"></div>' * 50
        stream_tokens = Tokenizer(InputBuffer(io.StringIO(html), chunk_size=7)).all()
        string_tokens = Tokenizer(html).all()
        assert stream_tokens == string_tokens

    def test_comment_start_split_across_chunks(self) -> None:
        buffer = InputBuffer(io.StringIO("x<!-- y -->"), chunk_size=2)
        assert kinds(buffer) == [K.IDENT, K.COMMENT_START, K.WHITESPACE, K.IDENT, K.WHITESPACE, K.COMMENT_END, K.EOF]

    def test_stream_errors_propagate(self) -> None:
        class BrokenStream:
            def read(self, size=-1):
                raise OSError("disk on fire")

        tokenizer = Tokenizer(BrokenStream())
        with self.assertRaises(OSError):
            tokenizer.next_token()


class TestToken(unittest.TestCase):
    def test_token_is_immutable(self) -> None:
        token = Token(K.IDENT, "div", 1, 2)
        with self.assertRaises(AttributeError):
            token.text = "span"

    def test_token_repr(self) -> None:
        token = Token(K.IDENT, "div", 1, 2)
        assert repr(token) == "[1:2](identifier 'div')"

    def test_token_equality(self) -> None:
        assert Token(K.IDENT, "a", 1, 1) == Token(K.IDENT, "a", 1, 1)
        assert Token(K.IDENT, "a", 1, 1) != Token(K.IDENT, "a", 1, 2)
        assert Token(K.IDENT, "a", 1, 1).__eq__("a") is NotImplemented


class TestInputBuffer(unittest.TestCase):
    def test_peek_does_not_consume(self) -> None:
        buffer = InputBuffer("abc")
        assert buffer.peek() == "a"
        assert buffer.peek(2) == "c"
        assert buffer.peek(3) is None
        assert buffer.next() == "a"
        assert buffer.next() == "b"
        assert buffer.next() == "c"
        assert buffer.next() is None
        assert buffer.is_empty()

    def test_peek_across_stream_chunks(self) -> None:
        buffer = InputBuffer(io.StringIO("abcdef"), chunk_size=2)
        assert buffer.peek(4) == "e"
        assert "".join(iter(buffer.next, None)) == "abcdef"
