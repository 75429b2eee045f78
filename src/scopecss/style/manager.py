"""Style handles and the manager that creates them.

A ``Style`` is one owner's handle to a compiled, mounted stylesheet. Handles
created with ``clone()`` share the same record and injected resource; the
resource is removed when the last handle is released::

    manager = StyleManager(injector=MemoryDocument())
    with manager.create("color: red; &:hover { color: blue; }", prefix="button") as style:
        html = f'<button class="{style}">...</button>'
"""

from __future__ import annotations

import logging
import threading

from scopecss.config import ScopeCssConfig
from scopecss.errors import ScopeCssError
from scopecss.model.ast import Scopes
from scopecss.naming import ClassNameGenerator
from scopecss.parser.parser import parse, parse_or_empty
from scopecss.render import render
from scopecss.style.injector import Injector, MemoryDocument
from scopecss.style.registry import StyleRecord, StyleRegistry, StyleState

__all__ = [
    "Style",
    "StyleManager",
    "StyleSource",
    "default_manager",
    "reset_default_manager",
    "create_style",
    "create_global_style",
]

logger = logging.getLogger(__name__)

# Raw stylesheet text or an already parsed sheet.
StyleSource = str | Scopes


class Style:
    """A counted handle to a mounted style."""

    def __init__(self, record: StyleRecord, manager: StyleManager) -> None:
        self._record = record
        self._manager = manager
        self._released = False

    @property
    def class_name(self) -> str:
        return self._record.class_name

    @property
    def prefix(self) -> str:
        return self._record.prefix

    @property
    def ast(self) -> Scopes | None:
        return self._record.ast

    @property
    def css(self) -> str:
        return self._record.css

    @property
    def is_global(self) -> bool:
        return self._record.is_global

    @property
    def mount_count(self) -> int:
        return self._record.mount_count

    @property
    def released(self) -> bool:
        return self._released

    @property
    def state(self) -> StyleState:
        if self._released:
            return StyleState.UNMOUNTED
        return self._record.state

    def get_class_name(self) -> str:
        return self.class_name

    def get_style_str(self) -> str:
        return self.css

    def clone(self) -> Style:
        """Return another handle to the same mounted style."""
        if self._released:
            raise ScopeCssError(f"Cannot clone released style {self.class_name!r}")
        self._manager.registry.acquire(self._record)
        return Style(self._record, self._manager)

    def release(self) -> None:
        """Give up this handle. Releasing twice is a no-op.

        If the injector fails to remove the last owner's resource,
        ``MountError`` propagates and the handle stays live for a retry.
        """
        if self._released:
            return
        self._manager.registry.release(self._record)
        self._released = True

    unregister = release

    def replace(self, css: StyleSource) -> Style:
        return self._manager.replace(self, css)

    def __enter__(self) -> Style:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __str__(self) -> str:
        return self.class_name

    def __repr__(self) -> str:
        return (
            f"Style(class_name={self.class_name!r}, state={self.state.value}, "
            f"mount_count={self.mount_count})"
        )


class StyleManager:
    """Compiles sheets and owns the registry they are mounted in."""

    def __init__(
        self,
        config: ScopeCssConfig | None = None,
        *,
        injector: Injector | None = None,
        generator: ClassNameGenerator | None = None,
        registry: StyleRegistry | None = None,
    ) -> None:
        self.config = config or ScopeCssConfig()
        self.generator = generator or ClassNameGenerator(
            self.config.class_name_strategy, self.config.class_name_length
        )
        if registry is None:
            registry = StyleRegistry(injector if injector is not None else MemoryDocument())
        self.registry = registry

    @property
    def injector(self) -> Injector:
        return self.registry.injector

    def create(self, css: StyleSource, *, prefix: str | None = None) -> Style:
        """Compile *css* under a fresh class name and mount it.

        Raises ``ParseError`` for invalid text in strict mode and
        ``MountError`` when the injector fails.
        """
        return self._create(css, prefix or self.config.prefix, is_global=False)

    def create_global(self, css: StyleSource) -> Style:
        """Compile and mount *css* without class scoping."""
        return self._create(css, self.config.global_prefix, is_global=True)

    def replace(self, style: Style, css: StyleSource) -> Style:
        """Switch the content behind *style*, returning the same handle.

        A sole owner keeps its class name; a shared handle is detached and
        rebound to a newly created style with the same prefix.
        """
        if style.released:
            raise ScopeCssError(f"Cannot replace released style {style.class_name!r}")
        record = style._record
        ast = self._compile(css)
        rendered = render(ast, None if record.is_global else record.class_name)
        if rendered == record.css:
            return style
        if self.registry.swap(record, ast, rendered):
            return style

        replacement = self._mount(record.prefix, ast, record.is_global)
        style._record = replacement
        logger.debug(
            "Detached shared style %s, now %s", record.class_name, replacement.class_name
        )
        self.registry.release(record)
        return style

    # --- internal helpers -----------------------------------------------------

    def _create(self, css: StyleSource, prefix: str, is_global: bool) -> Style:
        ast = self._compile(css)
        return Style(self._mount(prefix, ast, is_global), self)

    def _mount(self, prefix: str, ast: Scopes, is_global: bool) -> StyleRecord:
        class_name = self.generator.make_class_name(prefix)
        record = StyleRecord(
            class_name=class_name,
            prefix=prefix,
            ast=ast,
            css=render(ast, None if is_global else class_name),
            is_global=is_global,
        )
        return self.registry.mount(record)

    def _compile(self, css: StyleSource) -> Scopes:
        if isinstance(css, Scopes):
            return css
        if self.config.strict:
            return parse(css)
        return parse_or_empty(css)


_default_manager: StyleManager | None = None
_default_lock = threading.Lock()


def default_manager() -> StyleManager:
    """Return the process-wide manager, building it from the environment on first use."""
    global _default_manager
    if _default_manager is None:
        with _default_lock:
            if _default_manager is None:
                _default_manager = StyleManager(ScopeCssConfig.from_env())
    return _default_manager


def reset_default_manager(manager: StyleManager | None = None) -> None:
    """Replace the process-wide manager; ``None`` rebuilds it lazily."""
    global _default_manager
    with _default_lock:
        _default_manager = manager


def create_style(css: StyleSource, *, prefix: str | None = None) -> Style:
    return default_manager().create(css, prefix=prefix)


def create_global_style(css: StyleSource) -> Style:
    return default_manager().create_global(css)
