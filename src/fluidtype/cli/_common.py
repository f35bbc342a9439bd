"""Helpers shared by the CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from fluidtype.stylesheet import CssSyntaxError, Root, parse_stylesheet
from fluidtype.transforms.fluid import FluidTypographyOptions


def load_stylesheet(cssfile: str) -> Root:
    """Read and parse *cssfile*, exiting with code 1 on a syntax error."""
    css_path = Path(cssfile)
    try:
        source = css_path.read_text(encoding="utf-8")
        return parse_stylesheet(source, name=str(css_path))
    except CssSyntaxError as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)


def build_options(root_font_size: str | None) -> FluidTypographyOptions:
    if root_font_size:
        return FluidTypographyOptions(root_font_size=root_font_size)
    return FluidTypographyOptions()


root_font_size_option = click.option(
    "--root-font-size",
    default=None,
    help="Root font size to assume before any :root/html rule (default 16px)",
)
