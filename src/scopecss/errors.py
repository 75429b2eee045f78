"""Error hierarchy shared by the compiler and the style runtime."""

from __future__ import annotations


class ScopeCssError(Exception):
    """Base error for all scopecss errors."""


class MountError(ScopeCssError):
    """The injection collaborator failed to attach or detach a style."""

    def __init__(
        self,
        message: str,
        *,
        class_name: str | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.class_name = class_name
        self.cause = cause
