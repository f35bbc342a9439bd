"""CLI command: fluidtype process -- rewrite a CSS file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from fluidtype.cli._common import build_options, load_stylesheet, root_font_size_option
from fluidtype.stylesheet import CssSyntaxError
from fluidtype.transforms import FluidTypographyTransform, apply_transforms


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@click.option("-o", "--output", default=None, help="Write CSS here instead of stdout")
@root_font_size_option
def process(cssfile: str, output: str | None, root_font_size: str | None) -> None:
    """Rewrite the fluid declarations of a CSS file.

    Warnings go to stderr. Nothing is written if the file cannot be
    transformed.
    """
    root = load_stylesheet(cssfile)
    transform = FluidTypographyTransform(build_options(root_font_size))

    try:
        result = apply_transforms(root, [transform])
    except CssSyntaxError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    for warning in result.warnings():
        click.echo(f"  {warning}", err=True)

    if output:
        Path(output).write_text(result.css, encoding="utf-8")
        click.echo(f"Wrote {output}", err=True)
    else:
        click.echo(result.css, nl=False)
