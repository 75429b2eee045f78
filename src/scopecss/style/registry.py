"""Registry of mounted styles with reference-counted lifetime.

Every mutation, and the injector call that goes with it, happens while
holding a single lock, so mount and unmount of one class name are strictly
ordered. If an unexpected exception escapes a critical section the registry
is marked poisoned; the next caller salvages it by dropping records that no
longer hold a mount, then carries on.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from scopecss.errors import MountError, ScopeCssError
from scopecss.model.ast import Scopes
from scopecss.style.injector import Injector

__all__ = ["StyleState", "StyleRecord", "StyleRegistry"]

logger = logging.getLogger(__name__)


class StyleState(str, Enum):
    UNMOUNTED = "unmounted"
    MOUNTED = "mounted"


@dataclass(eq=False)
class StyleRecord:
    """Shared state behind every handle to one compiled style."""

    class_name: str
    prefix: str
    ast: Scopes | None
    css: str
    is_global: bool = False
    mount_count: int = 0
    state: StyleState = StyleState.UNMOUNTED
    handle: Any = field(default=None, repr=False)


class StyleRegistry:
    """Maps class names to live ``StyleRecord`` objects."""

    def __init__(self, injector: Injector) -> None:
        self.injector = injector
        self._lock = threading.Lock()
        self._styles: dict[str, StyleRecord] = {}
        self._poisoned = False

    # --- lifecycle ------------------------------------------------------------

    def mount(self, record: StyleRecord) -> StyleRecord:
        """Register *record* and inject it with a mount count of one.

        If injection fails the entry is evicted again and ``MountError``
        propagates.
        """
        with self._locked() as styles:
            if record.class_name in styles:
                raise ScopeCssError(
                    f"Class name {record.class_name!r} is already registered"
                )
            styles[record.class_name] = record
            try:
                record.handle = self._inject(record.class_name, record.css)
            except MountError:
                del styles[record.class_name]
                raise
            record.mount_count = 1
            record.state = StyleState.MOUNTED
            logger.debug("Mounted style %s", record.class_name)
            return record

    def acquire(self, record: StyleRecord) -> StyleRecord:
        """Add an owner to an already mounted record."""
        with self._locked() as styles:
            if styles.get(record.class_name) is not record:
                raise ScopeCssError(f"Style {record.class_name!r} is not mounted")
            record.mount_count += 1
            return record

    def release(self, record: StyleRecord) -> None:
        """Drop one owner; the last one unmounts and evicts the record.

        The record is evicted only once the injector has removed its
        resource. If removal fails the record stays mounted with its count
        intact, so the release can be retried.
        """
        with self._locked() as styles:
            if styles.get(record.class_name) is not record:
                raise ScopeCssError(f"Style {record.class_name!r} is not mounted")
            if record.mount_count > 1:
                record.mount_count -= 1
                return
            logger.debug("Unmounting style %s", record.class_name)
            self._remove(record.class_name, record.handle)
            del styles[record.class_name]
            record.mount_count = 0
            record.state = StyleState.UNMOUNTED
            record.handle = None

    def swap(self, record: StyleRecord, ast: Scopes | None, css: str) -> bool:
        """Replace the content of a record held by a single owner.

        The new CSS is injected before the old resource is removed. Returns
        ``False`` without changing anything when the record is shared. If the
        old resource cannot be removed, the new one is withdrawn again and
        the record keeps its previous content.
        """
        with self._locked() as styles:
            if styles.get(record.class_name) is not record:
                raise ScopeCssError(f"Style {record.class_name!r} is not mounted")
            if record.mount_count > 1:
                return False
            new_handle = self._inject(record.class_name, css)
            try:
                self._remove(record.class_name, record.handle)
            except MountError:
                self._remove(record.class_name, new_handle)
                raise
            record.handle = new_handle
            record.ast = ast
            record.css = css
            logger.debug("Replaced content of style %s", record.class_name)
            return True

    # --- lookup ---------------------------------------------------------------

    def get(self, class_name: str) -> StyleRecord | None:
        with self._locked() as styles:
            return styles.get(class_name)

    def class_names(self) -> list[str]:
        """Return the registered class names in mount order."""
        with self._locked() as styles:
            return list(styles)

    def __contains__(self, class_name: str) -> bool:
        with self._locked() as styles:
            return class_name in styles

    def __len__(self) -> int:
        with self._locked() as styles:
            return len(styles)

    @property
    def poisoned(self) -> bool:
        return self._poisoned

    # --- internal helpers -----------------------------------------------------

    @contextmanager
    def _locked(self) -> Iterator[dict[str, StyleRecord]]:
        with self._lock:
            if self._poisoned:
                self._recover()
            try:
                yield self._styles
            except ScopeCssError:
                raise
            except BaseException:
                self._poisoned = True
                raise

    def _recover(self) -> None:
        dead = [
            name
            for name, record in self._styles.items()
            if record.mount_count <= 0 or record.state is not StyleState.MOUNTED
        ]
        for name in dead:
            del self._styles[name]
        self._poisoned = False
        logger.warning(
            "Recovered style registry after a failure; dropped %d stale entr%s",
            len(dead),
            "y" if len(dead) == 1 else "ies",
        )

    def _inject(self, class_name: str, css: str) -> Any:
        try:
            return self.injector.inject(class_name, css)
        except MountError:
            raise
        except Exception as exc:
            raise MountError(
                f"Failed to mount style {class_name!r}: {exc}",
                class_name=class_name,
                cause=exc,
            ) from exc

    def _remove(self, class_name: str, handle: Any) -> None:
        try:
            self.injector.remove(handle)
        except MountError:
            raise
        except Exception as exc:
            raise MountError(
                f"Failed to unmount style {class_name!r}: {exc}",
                class_name=class_name,
                cause=exc,
            ) from exc
