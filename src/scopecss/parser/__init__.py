from scopecss.parser.errors import ParseError
from scopecss.parser.lexer import Token, tokenize
from scopecss.parser.parser import (
    RULE_AT_RULES,
    SCOPE_AT_RULES,
    StyleParser,
    parse,
    parse_or_empty,
)

__all__ = [
    "ParseError",
    "Token",
    "tokenize",
    "StyleParser",
    "parse",
    "parse_or_empty",
    "SCOPE_AT_RULES",
    "RULE_AT_RULES",
]
