"""Demonstration command line front-end built on the option parser."""

from .main import CliError, main, run
from .shell_quote import ShellKind, quote_for_shell, resolve_shell

__all__ = [
    "CliError",
    "main",
    "run",
    "ShellKind",
    "quote_for_shell",
    "resolve_shell",
]
