from twstyle.cli.main import cli

__all__ = ["cli"]
