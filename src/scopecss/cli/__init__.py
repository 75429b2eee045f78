from scopecss.cli.main import cli

__all__ = ["cli"]
