"""CLI command: scopecss check -- parse a stylesheet and report errors."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from scopecss.parser import ParseError, parse


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
def check(cssfile: str) -> None:
    """Parse a stylesheet and exit with code 1 if it is invalid."""
    css_path = Path(cssfile)

    try:
        scopes = parse(css_path.read_text(encoding="utf-8"))
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    blocks = sum(len(scope.contents) for scope in scopes)
    click.echo(f"OK: {css_path.name} ({len(scopes)} scope(s), {blocks} block(s)/rule(s))")
