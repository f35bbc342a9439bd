"""CLI command: fluidtype check -- report problems without writing output."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from fluidtype.cli._common import build_options, load_stylesheet, root_font_size_option
from fluidtype.model.result import Result
from fluidtype.stylesheet import CssSyntaxError
from fluidtype.transforms import FluidTypographyTransform


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@root_font_size_option
def check(cssfile: str, root_font_size: str | None) -> None:
    """Check that every fluid declaration in a CSS file can be rewritten.

    Prints warnings and exits with code 0 if there are no errors, or code 1
    if the file cannot be transformed.
    """
    root = load_stylesheet(cssfile)
    result = Result(root=root)
    transform = FluidTypographyTransform(build_options(root_font_size))

    try:
        rewrites = transform.plan(root, result)
    except CssSyntaxError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    warnings = result.warnings()
    for warning in warnings:
        click.echo(str(warning))

    name = Path(cssfile).name
    if not warnings:
        click.echo(f"OK: {name} ({len(rewrites)} fluid declaration(s))")
    else:
        click.echo()
        click.echo(
            f"Summary: {len(rewrites)} fluid declaration(s), {len(warnings)} warning(s)"
        )
