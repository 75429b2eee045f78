"""Tokenizer for the scopecss dialect, driven by lark's basic lexer."""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from scopecss.parser.errors import ParseError, snippet_at

__all__ = ["Token", "tokenize", "PUNCTUATION"]

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Token kinds that carry no text of their own beyond a single character.
PUNCTUATION = frozenset({
    "LBRACE",
    "RBRACE",
    "LPAREN",
    "RPAREN",
    "SEMICOLON",
    "COLON",
    "AMPERSAND",
    "COMMA",
})


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexical token with its source position (1-based line/column)."""

    kind: str
    value: str
    pos: int
    line: int
    column: int

    def __str__(self) -> str:
        return self.value


@lru_cache(maxsize=1)
def _lexer() -> Lark:
    return Lark(
        GRAMMAR_PATH.read_text(encoding="utf-8"),
        parser="lalr",
        lexer="basic",
        start="start",
    )


def tokenize(source: str) -> list[Token]:
    """Split *source* into tokens, dropping comments.

    The returned list always ends with an ``EOF`` token positioned just past
    the last character. Raises ``ParseError`` for characters the dialect
    cannot classify (unterminated strings or comments, a bare ``@``).
    """
    tokens: list[Token] = []
    try:
        for tok in _lexer().lex(source):
            tokens.append(
                Token(tok.type, str(tok), tok.start_pos, tok.line, tok.column)
            )
    except UnexpectedCharacters as exc:
        raise ParseError(
            _describe(source, exc.pos_in_stream),
            line=exc.line,
            column=exc.column,
            snippet=snippet_at(source, exc.pos_in_stream),
        ) from exc

    line, column = _end_position(source)
    tokens.append(Token("EOF", "", len(source), line, column))
    return tokens


def _describe(source: str, pos: int) -> str:
    char = source[pos]
    if char in "\"'":
        return f"Unterminated string starting with {char}"
    if source.startswith("/*", pos):
        return "Unterminated comment"
    if char == "@":
        return "Expected an at-rule name after '@'"
    return f"Unexpected character {char!r}"


def _end_position(source: str) -> tuple[int, int]:
    line = source.count("\n") + 1
    column = len(source) - (source.rfind("\n") + 1) + 1
    return line, column
