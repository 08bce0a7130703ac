"""CLI command implementations for devbranch.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .config import show_config
from .create import create
from .init import init
from .validate import validate

__all__ = [
    "create",
    "init",
    "show_config",
    "validate",
]
