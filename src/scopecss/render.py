"""Serialize ``Scopes`` into CSS text for a class name.

Rendering is a pure function of (AST, class name): the same input always
yields byte-identical output. Passing ``class_name=None`` renders a global
sheet whose selectors are emitted without class scoping.
"""

from __future__ import annotations

from scopecss.model.ast import (
    Block,
    CurlyBraces,
    Fragment,
    Rule,
    Scope,
    Scopes,
    StyleAttribute,
)

__all__ = ["render", "to_css", "CURRENT_SELECTOR", "GLOBAL_ROOT"]

CURRENT_SELECTOR = "&"

# Stands in for the styled element when a sheet is not bound to a class.
GLOBAL_ROOT = "html"

Node = Scopes | Scope | Block | Rule | StyleAttribute | Fragment | CurlyBraces


def render(scopes: Scopes, class_name: str | None) -> str:
    """Render a whole sheet."""
    return "\n".join(_scope(scope, class_name) for scope in scopes)


def to_css(node: Node, class_name: str | None) -> str:
    """Render any single AST node."""
    if isinstance(node, Scopes):
        return render(node, class_name)
    if isinstance(node, Scope):
        return _scope(node, class_name)
    if isinstance(node, Block):
        return _block(node, class_name)
    if isinstance(node, Rule):
        return _rule(node)
    if isinstance(node, StyleAttribute):
        return _attribute(node)
    if isinstance(node, (Fragment, CurlyBraces)):
        return _rule_content(node)
    raise TypeError(f"Cannot render {type(node).__name__}")


def _scope(scope: Scope, class_name: str | None) -> str:
    body = "\n".join(
        _block(item, class_name) if isinstance(item, Block) else _rule(item)
        for item in scope.contents
    )
    if scope.condition is None:
        return body.strip()
    return f"{scope.condition} {{\n{body}\n}}"


def _block(block: Block, class_name: str | None) -> str:
    declarations = "\n".join(_attribute(attr) for attr in block.declarations)
    return f"{_selector(block.condition, class_name)} {{\n{declarations}\n}}"


def _selector(condition: str | None, class_name: str | None) -> str:
    root = f".{class_name}" if class_name is not None else GLOBAL_ROOT
    if condition is None:
        return root
    if CURRENT_SELECTOR in condition:
        return condition.replace(CURRENT_SELECTOR, root)
    if class_name is None:
        return condition
    return f"{root} {condition}"


def _rule(rule: Rule) -> str:
    body = "".join(_rule_content(part) for part in rule.content)
    return f"{rule.condition} {{\n{body}\n}}"


def _rule_content(part: Fragment | CurlyBraces) -> str:
    if isinstance(part, Fragment):
        return part.text
    return "{" + "".join(_rule_content(child) for child in part.content) + "}"


def _attribute(attr: StyleAttribute) -> str:
    return f"{attr.key}: {attr.value};"
