"""Tests for the stylesheet tokenizer."""

import pytest

from scopecss.parser import ParseError, tokenize


def _kinds(source: str) -> list[str]:
    return [t.kind for t in tokenize(source)]


def _values(source: str) -> list[str]:
    return [t.value for t in tokenize(source)]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


class TestClassification:
    def test_declaration(self) -> None:
        assert _kinds("color: red;") == [
            "TEXT",
            "COLON",
            "WS",
            "TEXT",
            "SEMICOLON",
            "EOF",
        ]

    def test_braces_and_current_selector(self) -> None:
        assert _kinds("&:hover{}") == [
            "AMPERSAND",
            "COLON",
            "TEXT",
            "LBRACE",
            "RBRACE",
            "EOF",
        ]

    def test_at_keyword(self) -> None:
        tokens = tokenize("@media screen")
        assert tokens[0].kind == "AT_KEYWORD"
        assert tokens[0].value == "@media"

    def test_vendor_prefixed_at_keyword(self) -> None:
        tokens = tokenize("@-webkit-keyframes spin")
        assert tokens[0].kind == "AT_KEYWORD"
        assert tokens[0].value == "@-webkit-keyframes"

    def test_parentheses_and_commas(self) -> None:
        assert _kinds("rgba(0,1)") == [
            "TEXT",
            "LPAREN",
            "TEXT",
            "COMMA",
            "TEXT",
            "RPAREN",
            "EOF",
        ]

    def test_strings_are_single_tokens(self) -> None:
        tokens = tokenize('content: "a; {b}";')
        strings = [t for t in tokens if t.kind == "STRING"]
        assert len(strings) == 1
        assert strings[0].value == '"a; {b}"'

    def test_single_quoted_string(self) -> None:
        tokens = tokenize("content: 'x'")
        assert tokens[-2].kind == "STRING"
        assert tokens[-2].value == "'x'"

    def test_attribute_selector(self) -> None:
        assert _values('a[href="x"]')[:3] == ["a[href=", '"x"', "]"]

    def test_slash_inside_text(self) -> None:
        assert _values("font: 12px/1.5 serif")[3] == "12px/1.5"

    def test_whitespace_runs_are_one_token(self) -> None:
        tokens = tokenize("a  \n\t b")
        assert [t.kind for t in tokens] == ["TEXT", "WS", "TEXT", "EOF"]

    def test_empty_source(self) -> None:
        tokens = tokenize("")
        assert len(tokens) == 1
        assert tokens[0].kind == "EOF"


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------


class TestComments:
    def test_comment_is_stripped(self) -> None:
        assert _values("/* note */a") == ["a", ""]

    def test_multiline_comment(self) -> None:
        assert _kinds("/* one\ntwo */") == ["EOF"]

    def test_comment_between_tokens(self) -> None:
        assert _values("a/* x */b") == ["a", "b", ""]

    def test_unterminated_comment(self) -> None:
        with pytest.raises(ParseError, match="Unterminated comment"):
            tokenize("a /* never closed")


# ---------------------------------------------------------------------------
# Positions and errors
# ---------------------------------------------------------------------------


class TestPositions:
    def test_line_and_column(self) -> None:
        tokens = tokenize("a\n  b")
        b = tokens[2]
        assert b.value == "b"
        assert b.line == 2
        assert b.column == 3
        assert b.pos == 4

    def test_eof_position(self) -> None:
        eof = tokenize("ab\ncd")[-1]
        assert eof.kind == "EOF"
        assert eof.pos == 5
        assert eof.line == 2
        assert eof.column == 3


class TestLexerErrors:
    def test_unterminated_string(self) -> None:
        with pytest.raises(ParseError, match="Unterminated string") as exc_info:
            tokenize('content: "abc')
        assert exc_info.value.line == 1
        assert exc_info.value.column == 10

    def test_bare_at_sign(self) -> None:
        with pytest.raises(ParseError, match="at-rule name"):
            tokenize("@ media")

    def test_error_carries_snippet(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            tokenize('width: 1px; content: "oops')
        assert exc_info.value.snippet is not None
        assert "content" in exc_info.value.snippet
