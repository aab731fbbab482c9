"""CLI commands package."""
from symbol_quest.cli.init_db import init_db_command

__all__ = ["init_db_command"]
