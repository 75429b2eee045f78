"""CLI command: scopecss compile -- render a stylesheet for a class name."""

from __future__ import annotations

import dataclasses
import sys
from pathlib import Path

import click

from scopecss.config import ScopeCssConfig
from scopecss.naming import ClassNameStrategy
from scopecss.parser import ParseError, parse
from scopecss.render import render
from scopecss.style import MemoryDocument, StyleManager


@click.command("compile")
@click.argument("cssfile", type=click.Path(exists=True))
@click.option("--prefix", default=None, help="Prefix for the generated class name")
@click.option(
    "--class-name",
    default=None,
    help="Render for this exact class name instead of generating one",
)
@click.option(
    "--strategy",
    type=click.Choice([s.value for s in ClassNameStrategy]),
    default=None,
    help="How the class name suffix is generated",
)
@click.option("--global", "is_global", is_flag=True, help="Render without class scoping")
@click.option("--html", "as_html", is_flag=True, help="Emit a <style> element instead of CSS")
def compile_(
    cssfile: str,
    prefix: str | None,
    class_name: str | None,
    strategy: str | None,
    is_global: bool,
    as_html: bool,
) -> None:
    """Compile CSSFILE and print the resulting CSS."""
    source = Path(cssfile).read_text(encoding="utf-8")

    if class_name is not None and not is_global:
        try:
            click.echo(render(parse(source), class_name))
        except ParseError as exc:
            click.echo(f"Parse error: {exc}", err=True)
            sys.exit(1)
        return

    config = ScopeCssConfig.from_env()
    overrides: dict[str, object] = {}
    if prefix:
        overrides["prefix"] = prefix
    if strategy:
        overrides["class_name_strategy"] = ClassNameStrategy(strategy)
    if overrides:
        config = dataclasses.replace(config, **overrides)  # type: ignore[arg-type]

    document = MemoryDocument()
    manager = StyleManager(config, injector=document)
    try:
        style = manager.create_global(source) if is_global else manager.create(source)
    except ParseError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)

    with style:
        if as_html:
            click.echo(document.to_html())
        else:
            click.echo(f"/* {style.class_name} */")
            click.echo(style.css)
