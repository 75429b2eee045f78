"""Injection collaborators that attach compiled CSS to a document.

The runtime only needs ``inject(class_name, css) -> handle`` and
``remove(handle)``; how a style reaches a live document is up to the
implementation.
"""

from __future__ import annotations

import html
import threading
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from scopecss.errors import MountError

__all__ = ["Injector", "NullInjector", "StyleElement", "MemoryDocument"]


@runtime_checkable
class Injector(Protocol):
    """Attaches and detaches style resources."""

    def inject(self, class_name: str, css: str) -> Any: ...

    def remove(self, handle: Any) -> None: ...


class NullInjector:
    """For processes without a document: nothing is attached."""

    def inject(self, class_name: str, css: str) -> None:
        return None

    def remove(self, handle: Any) -> None:
        return None


@dataclass(eq=False)
class StyleElement:
    """A ``<style data-style="...">`` node in a ``MemoryDocument`` head."""

    class_name: str
    css: str

    def to_html(self) -> str:
        return (
            f'<style data-style="{html.escape(self.class_name, quote=True)}">'
            f"{self.css}</style>"
        )


class MemoryDocument:
    """In-process document head holding style elements in mount order.

    Set ``available = False`` to simulate a missing document surface;
    injection and removal then raise ``MountError``.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._elements: list[StyleElement] = []
        self.available = True

    def inject(self, class_name: str, css: str) -> StyleElement:
        with self._lock:
            self._ensure_available(class_name)
            element = StyleElement(class_name, css)
            self._elements.append(element)
            return element

    def remove(self, handle: StyleElement) -> None:
        with self._lock:
            self._ensure_available(handle.class_name)
            for index, element in enumerate(self._elements):
                if element is handle:
                    del self._elements[index]
                    return
        raise MountError(
            f"Style element {handle.class_name!r} is not attached",
            class_name=handle.class_name,
        )

    @property
    def elements(self) -> list[StyleElement]:
        """Return a copy of the attached elements."""
        with self._lock:
            return list(self._elements)

    def find(self, class_name: str) -> StyleElement | None:
        with self._lock:
            for element in self._elements:
                if element.class_name == class_name:
                    return element
            return None

    def to_html(self) -> str:
        """Render the head's style elements, one per line."""
        return "\n".join(element.to_html() for element in self.elements)

    def __len__(self) -> int:
        with self._lock:
            return len(self._elements)

    def _ensure_available(self, class_name: str) -> None:
        if not self.available:
            raise MountError("Document is not available", class_name=class_name)
