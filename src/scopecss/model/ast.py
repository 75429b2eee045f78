"""Stylesheet AST: scopes, blocks, rules and declarations.

A compiled sheet is a sequence of scopes. The default scope has no
condition; a conditioned scope is guarded by an at-rule header such as
``@media only screen and (min-width: 1000px)``::

    /* scope without condition */
    .wrapper {
        width: 100vw;
    }
    /* scope with condition */
    @media only screen and (min-width: 1000px) {
        .wrapper {
            width: 1000px;
        }
    }

Nodes are immutable and hold tuples, so equality and hashing are structural.
Nothing in this module knows about the class name a sheet is rendered for;
see ``scopecss.render``.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

__all__ = [
    "StyleAttribute",
    "Block",
    "Fragment",
    "CurlyBraces",
    "RuleContent",
    "Rule",
    "ScopeContent",
    "Scope",
    "Scopes",
]


@dataclass(frozen=True)
class StyleAttribute:
    """A single declaration, e.g. ``color: red``."""

    key: str
    value: str


@dataclass(frozen=True)
class Block:
    """Declarations applied to the elements matching *condition*.

    ``condition=None`` targets the element carrying the generated class.
    A condition containing ``&`` is used as the full selector with ``&``
    standing for that element; any other condition selects descendants.
    """

    condition: str | None = None
    declarations: tuple[StyleAttribute, ...] = ()


@dataclass(frozen=True)
class Fragment:
    """Opaque text inside an at-rule body."""

    text: str


@dataclass(frozen=True)
class CurlyBraces:
    """A brace-delimited group inside an at-rule body."""

    content: tuple[RuleContent, ...] = ()


RuleContent = Union[Fragment, CurlyBraces]


@dataclass(frozen=True)
class Rule:
    """An at-rule whose body is passed through unparsed, e.g. ``@keyframes``."""

    condition: str
    content: tuple[RuleContent, ...] = ()

    def __post_init__(self) -> None:
        if not self.condition:
            raise ValueError("Rule condition must be a non-empty string")


ScopeContent = Union[Block, Rule]


@dataclass(frozen=True)
class Scope:
    """Top-level unit of output, optionally guarded by an at-rule condition."""

    condition: str | None = None
    contents: tuple[ScopeContent, ...] = ()


@dataclass(frozen=True)
class Scopes:
    """The parse result: an ordered sequence of scopes."""

    scopes: tuple[Scope, ...] = field(default=())

    @classmethod
    def parse(cls, source: str) -> Scopes:
        """Parse *source*; raises ``ParseError`` on malformed input."""
        from scopecss.parser.parser import parse

        return parse(source)

    def append(self, other: Scopes) -> Scopes:
        """Return a new value holding these scopes followed by *other*'s."""
        return Scopes(self.scopes + other.scopes)

    def __iter__(self) -> Iterator[Scope]:
        return iter(self.scopes)

    def __len__(self) -> int:
        return len(self.scopes)

    def __bool__(self) -> bool:
        return bool(self.scopes)
