from scopecss.style.injector import Injector, MemoryDocument, NullInjector, StyleElement
from scopecss.style.manager import (
    Style,
    StyleManager,
    StyleSource,
    create_global_style,
    create_style,
    default_manager,
    reset_default_manager,
)
from scopecss.style.registry import StyleRecord, StyleRegistry, StyleState

__all__ = [
    "Injector",
    "MemoryDocument",
    "NullInjector",
    "StyleElement",
    "Style",
    "StyleManager",
    "StyleSource",
    "create_global_style",
    "create_style",
    "default_manager",
    "reset_default_manager",
    "StyleRecord",
    "StyleRegistry",
    "StyleState",
]
