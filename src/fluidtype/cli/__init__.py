from fluidtype.cli.main import cli

__all__ = ["cli"]
