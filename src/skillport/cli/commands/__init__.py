"""CLI command modules."""

from skillport.cli.commands import config, skill

__all__ = ["config", "skill"]
