"""CLI command: fluidtype inspect -- show the resolved fluid parameters."""

from __future__ import annotations

import sys

import click

from fluidtype.cli._common import build_options, load_stylesheet, root_font_size_option
from fluidtype.model.result import Result
from fluidtype.stylesheet import CssSyntaxError
from fluidtype.transforms import FluidTypographyTransform


@click.command()
@click.argument("cssfile", type=click.Path(exists=True))
@root_font_size_option
def inspect(cssfile: str, root_font_size: str | None) -> None:
    """List each fluid declaration in a CSS file with its resolved parameters."""
    root = load_stylesheet(cssfile)
    result = Result(root=root)
    transform = FluidTypographyTransform(build_options(root_font_size))

    try:
        rewrites = transform.plan(root, result)
    except CssSyntaxError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Fluid declarations: {len(rewrites)}")
    for rewrite in rewrites:
        params = rewrite.params
        location = ""
        if rewrite.decl.source:
            location = f" (line {rewrite.decl.source.line})"
        click.echo()
        click.echo(f"  {rewrite.rule.selector} {{ {rewrite.decl.prop} }}{location}")
        click.echo(f"    size:  {params.min_size} -> {params.max_size}")
        click.echo(f"    width: {params.min_width} -> {params.max_width}")
        click.echo(f"    value: {rewrite.output.fluid_decl.value}")
