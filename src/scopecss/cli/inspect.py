"""CLI command: scopecss inspect -- display the parsed structure of a stylesheet."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from scopecss.model.ast import Block, CurlyBraces, Fragment, RuleContent
from scopecss.parser import ParseError, parse


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
def inspect(cssfile: str) -> None:
    """Parse a stylesheet and display its scopes, blocks and rules."""
    css_path = Path(cssfile)

    try:
        scopes = parse(css_path.read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Scopes: {len(scopes)}")
    for scope in scopes:
        click.echo()
        click.echo(f"Scope: {scope.condition or '(default)'}")
        for item in scope.contents:
            if isinstance(item, Block):
                click.echo(f"  Block: {item.condition or '(root)'}")
                for attr in item.declarations:
                    click.echo(f"    {attr.key}: {attr.value}")
            else:
                click.echo(f"  Rule: {item.condition}")
                click.echo(f"    {_summary(item.content)}")


def _summary(content: tuple[RuleContent, ...]) -> str:
    fragments = 0
    groups = 0
    stack = list(content)
    while stack:
        part = stack.pop()
        if isinstance(part, Fragment):
            fragments += 1
        elif isinstance(part, CurlyBraces):
            groups += 1
            stack.extend(part.content)
    return f"{fragments} text fragment(s), {groups} brace group(s)"
