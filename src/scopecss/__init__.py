"""scopecss: compile nested CSS into class-scoped stylesheets and manage their lifetime."""

__version__ = "0.1.0"

from scopecss.config import ScopeCssConfig
from scopecss.errors import MountError, ScopeCssError
from scopecss.model import (
    Block,
    CurlyBraces,
    Fragment,
    Rule,
    Scope,
    Scopes,
    StyleAttribute,
)
from scopecss.naming import ClassNameGenerator, ClassNameStrategy
from scopecss.parser import ParseError, parse, parse_or_empty
from scopecss.render import render, to_css
from scopecss.style import (
    MemoryDocument,
    NullInjector,
    Style,
    StyleManager,
    StyleRegistry,
    StyleState,
    create_global_style,
    create_style,
    default_manager,
)

__all__ = [
    "__version__",
    "ScopeCssConfig",
    "ScopeCssError",
    "MountError",
    "ParseError",
    "Block",
    "CurlyBraces",
    "Fragment",
    "Rule",
    "Scope",
    "Scopes",
    "StyleAttribute",
    "ClassNameGenerator",
    "ClassNameStrategy",
    "parse",
    "parse_or_empty",
    "render",
    "to_css",
    "MemoryDocument",
    "NullInjector",
    "Style",
    "StyleManager",
    "StyleRegistry",
    "StyleState",
    "create_global_style",
    "create_style",
    "default_manager",
]
