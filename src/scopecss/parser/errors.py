"""Parser error types."""

from __future__ import annotations

from scopecss.errors import ScopeCssError

__all__ = ["ParseError", "snippet_at"]

_SNIPPET_RADIUS = 20


class ParseError(ScopeCssError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        snippet: str | None = None,
    ):
        self.message = message
        self.line = line
        self.column = column
        self.snippet = snippet
        super().__init__(self._format())

    def _format(self) -> str:
        text = self.message
        if self.line is not None:
            text += f" (line {self.line}, column {self.column})"
        if self.snippet:
            text += f" near {self.snippet!r}"
        return text


def snippet_at(source: str, pos: int) -> str:
    """Return the text surrounding *pos*, whitespace collapsed."""
    start = max(0, pos - _SNIPPET_RADIUS)
    end = min(len(source), pos + _SNIPPET_RADIUS)
    return " ".join(source[start:end].split())
