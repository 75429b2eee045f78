"""Recursive-descent parser turning a token stream into ``Scopes``.

Supported dialect::

    color: red;                       /* applies to the styled element    */
    .inner { color: blue; }           /* descendants matching .inner      */
    &:hover { color: green; }         /* & stands for the styled element  */
    @media (max-width: 600px) {       /* conditioned scope                */
        color: black;
        .inner { color: white; }
    }
    @keyframes spin {                 /* body passed through unparsed     */
        from { transform: rotate(0deg); }
        to { transform: rotate(360deg); }
    }
"""

from __future__ import annotations

import logging
import re

from scopecss.model.ast import (
    Block,
    CurlyBraces,
    Fragment,
    Rule,
    RuleContent,
    Scope,
    ScopeContent,
    Scopes,
    StyleAttribute,
)
from scopecss.parser.errors import ParseError, snippet_at
from scopecss.parser.lexer import Token, tokenize

__all__ = ["StyleParser", "parse", "parse_or_empty", "SCOPE_AT_RULES", "RULE_AT_RULES"]

logger = logging.getLogger(__name__)

# At-rules whose bodies hold declarations and selector blocks.
SCOPE_AT_RULES = frozenset({"media", "supports"})

# At-rules whose bodies are kept as opaque, brace-balanced text.
RULE_AT_RULES = frozenset({
    "keyframes",
    "-webkit-keyframes",
    "-moz-keyframes",
    "-o-keyframes",
    "font-face",
})

# At-rules that take no prelude.
_PRELUDE_FORBIDDEN = frozenset({"font-face"})

_TRIVIA = frozenset({"WS", "SEMICOLON"})

_PROPERTY_NAME = re.compile(r"-?-?[A-Za-z_][\w-]*")


class StyleParser:
    """Parse one stylesheet source. Instances are single-use."""

    def __init__(self, source: str):
        self._source = source
        self._tokens = tokenize(source)
        self._index = 0

    def parse(self) -> Scopes:
        items = self._parse_body(opening=None, allow_scopes=True)

        scopes: list[Scope] = []
        pending: list[ScopeContent] = []
        for item in items:
            if isinstance(item, Scope):
                if pending:
                    scopes.append(Scope(None, tuple(pending)))
                    pending = []
                scopes.append(item)
            else:
                pending.append(item)
        if pending:
            scopes.append(Scope(None, tuple(pending)))
        return Scopes(tuple(scopes))

    # --- bodies ---------------------------------------------------------------

    def _parse_body(
        self, opening: Token | None, allow_scopes: bool
    ) -> list[Scope | ScopeContent]:
        """Parse a document or a scope at-rule body.

        With *opening* set the body must end with a matching ``}``; without it
        the body runs to the end of input and a ``}`` is unbalanced.
        """
        items: list[Scope | ScopeContent] = []
        declarations: list[StyleAttribute] = []

        def flush() -> None:
            if declarations:
                items.append(Block(None, tuple(declarations)))
                declarations.clear()

        while True:
            self._skip_trivia()
            token = self._peek()
            if token.kind == "EOF":
                if opening is not None:
                    raise self._error("Unterminated block, expected '}'", opening)
                break
            if token.kind == "RBRACE":
                if opening is None:
                    raise self._error("Unbalanced braces: unexpected '}'", token)
                self._consume()
                break
            if token.kind == "AT_KEYWORD":
                flush()
                items.append(self._parse_at_rule(allow_scopes))
                continue

            statement, terminator = self._read_statement()
            if terminator.kind == "LBRACE":
                flush()
                items.append(self._parse_block(statement, terminator))
            else:
                declarations.append(self._make_declaration(statement))

        flush()
        return items

    def _parse_block(self, header: list[Token], opening: Token) -> Block:
        selector = self._join(header)
        if not selector:
            raise self._error("Empty selector", opening)
        self._check_selector(selector, header)

        declarations: list[StyleAttribute] = []
        while True:
            self._skip_trivia()
            token = self._peek()
            if token.kind == "EOF":
                raise self._error(
                    f"Unterminated block for selector {selector!r}, expected '}}'",
                    opening,
                )
            if token.kind == "RBRACE":
                self._consume()
                break
            if token.kind == "AT_KEYWORD":
                raise self._error(
                    f"At-rule {token.value!r} is not allowed inside a selector block",
                    token,
                )
            statement, terminator = self._read_statement()
            if terminator.kind == "LBRACE":
                raise self._error(
                    f"Nested block {self._join(statement)!r} inside selector "
                    f"{selector!r} is not supported",
                    statement[0] if statement else terminator,
                )
            declarations.append(self._make_declaration(statement))

        return Block(selector, tuple(declarations))

    # --- at-rules -------------------------------------------------------------

    def _parse_at_rule(self, allow_scopes: bool) -> Scope | Rule:
        keyword = self._consume()
        name = keyword.value[1:].lower()

        if name not in SCOPE_AT_RULES and name not in RULE_AT_RULES:
            raise self._error(f"Unrecognized at-rule {keyword.value!r}", keyword)
        if name in SCOPE_AT_RULES and not allow_scopes:
            raise self._error(
                f"Nested {keyword.value!r} is not supported here", keyword
            )

        prelude_tokens, terminator = self._read_statement()
        if terminator.kind != "LBRACE":
            raise self._error(
                f"At-rule {keyword.value!r} must be followed by a block", keyword
            )

        prelude = self._join(prelude_tokens)
        if name in _PRELUDE_FORBIDDEN and prelude:
            raise self._error(
                f"At-rule {keyword.value!r} does not take a prelude", keyword
            )
        if name not in _PRELUDE_FORBIDDEN and not prelude:
            raise self._error(f"At-rule {keyword.value!r} is missing its prelude", keyword)
        condition = f"{keyword.value} {prelude}" if prelude else keyword.value

        if name in SCOPE_AT_RULES:
            body = self._parse_body(opening=terminator, allow_scopes=False)
            return Scope(condition, tuple(body))  # type: ignore[arg-type]

        return Rule(condition, _trim(self._read_braced(terminator)))

    def _read_braced(self, opening: Token) -> tuple[RuleContent, ...]:
        """Capture everything up to the ``}`` matching *opening*."""
        parts: list[RuleContent] = []
        buffer: list[str] = []

        while True:
            token = self._consume()
            if token.kind == "EOF":
                raise self._error("Unterminated block, expected '}'", opening)
            if token.kind == "RBRACE":
                break
            if token.kind == "LBRACE":
                if buffer:
                    parts.append(Fragment("".join(buffer)))
                    buffer = []
                parts.append(CurlyBraces(self._read_braced(token)))
                continue
            buffer.append(token.value)

        if buffer:
            parts.append(Fragment("".join(buffer)))
        return tuple(parts)

    # --- statements -----------------------------------------------------------

    def _read_statement(self) -> tuple[list[Token], Token]:
        """Collect tokens up to ``;``, ``{``, ``}`` or end of input.

        ``;`` and ``{`` are consumed and returned as the terminator; ``}`` and
        EOF are left for the enclosing body. A ``;`` nested in parentheses does
        not end the statement.
        """
        statement: list[Token] = []
        depth = 0
        while True:
            token = self._peek()
            if token.kind in ("EOF", "RBRACE", "LBRACE"):
                break
            if token.kind == "SEMICOLON" and depth == 0:
                break
            if token.kind == "LPAREN":
                depth += 1
            elif token.kind == "RPAREN":
                if depth == 0:
                    raise self._error("Unbalanced parentheses: unexpected ')'", token)
                depth -= 1
            statement.append(self._consume())

        if depth and statement:
            raise self._error("Unbalanced parentheses: missing ')'", statement[0])

        terminator = self._peek()
        if terminator.kind in ("SEMICOLON", "LBRACE"):
            self._consume()
        return statement, terminator

    def _make_declaration(self, statement: list[Token]) -> StyleAttribute:
        start = statement[0]
        depth = 0
        for index, token in enumerate(statement):
            if token.kind == "LPAREN":
                depth += 1
            elif token.kind == "RPAREN":
                depth -= 1
            elif token.kind == "COLON" and depth == 0:
                key = self._join(statement[:index])
                value = self._join(statement[index + 1:])
                break
        else:
            raise self._error(
                f"Expected ':' in declaration {self._join(statement)!r}", start
            )

        if not _PROPERTY_NAME.fullmatch(key):
            raise self._error(f"Invalid property name {key!r}", start)
        if not value:
            raise self._error(f"Missing value for property {key!r}", start)
        return StyleAttribute(key, value)

    def _check_selector(self, selector: str, header: list[Token]) -> None:
        if selector.count("(") != selector.count(")") or selector.count(
            "["
        ) != selector.count("]"):
            raise self._error(f"Malformed selector {selector!r}", header[0])

        # "color: red .a {" is a declaration that lost its ";".
        depth = 0
        for token, following in zip(header, header[1:]):
            if token.kind == "LPAREN":
                depth += 1
            elif token.kind == "RPAREN":
                depth -= 1
            elif token.kind == "COLON" and depth == 0 and following.kind == "WS":
                raise self._error(
                    f"Malformed selector {selector!r}, "
                    "is a ';' missing after a declaration?",
                    header[0],
                )

    # --- token helpers --------------------------------------------------------

    @staticmethod
    def _join(tokens: list[Token]) -> str:
        """Rebuild source text from tokens, collapsing whitespace runs."""
        parts: list[str] = []
        for token in tokens:
            if token.kind == "WS":
                if parts and parts[-1] != " ":
                    parts.append(" ")
            else:
                parts.append(token.value)
        return "".join(parts).strip()

    def _skip_trivia(self) -> None:
        while self._peek().kind in _TRIVIA:
            self._consume()

    def _peek(self) -> Token:
        return self._tokens[self._index]

    def _consume(self) -> Token:
        token = self._tokens[self._index]
        if token.kind != "EOF":
            self._index += 1
        return token

    def _error(self, message: str, token: Token) -> ParseError:
        return ParseError(
            message,
            line=token.line,
            column=token.column,
            snippet=snippet_at(self._source, token.pos),
        )


def _trim(parts: tuple[RuleContent, ...]) -> tuple[RuleContent, ...]:
    """Strip whitespace at the outer edges of an at-rule body."""
    trimmed = list(parts)
    if trimmed and isinstance(trimmed[0], Fragment):
        trimmed[0] = Fragment(trimmed[0].text.lstrip())
    if trimmed and isinstance(trimmed[-1], Fragment):
        trimmed[-1] = Fragment(trimmed[-1].text.rstrip())
    return tuple(p for p in trimmed if not (isinstance(p, Fragment) and not p.text))


def parse(source: str) -> Scopes:
    """Parse a stylesheet source string into ``Scopes``.

    Raises ``ParseError`` describing the first problem found.
    """
    scopes = StyleParser(source).parse()
    logger.debug("Parsed %d scope(s) from %d characters", len(scopes), len(source))
    return scopes


def parse_or_empty(source: str) -> Scopes:
    """Parse *source*, degrading to an empty sheet when it is invalid."""
    try:
        return parse(source)
    except ParseError as exc:
        logger.warning("Invalid stylesheet, using an empty one instead: %s", exc)
        return Scopes()
