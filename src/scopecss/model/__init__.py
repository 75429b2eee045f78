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

__all__ = [
    "Block",
    "CurlyBraces",
    "Fragment",
    "Rule",
    "RuleContent",
    "Scope",
    "ScopeContent",
    "Scopes",
    "StyleAttribute",
]
