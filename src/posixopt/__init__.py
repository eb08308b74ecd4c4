"""posixopt: a POSIX getopt(3) style command-line option parser."""

from __future__ import annotations

from .core import (
    Cursor,
    ErrorKind,
    OptionError,
    OptionSpec,
    ParsedOption,
    ParseOutcome,
    Parser,
    getopt,
)
from .core.utils import ParamValidationError, RuntimeConfig, configure, get_config, get_logger

__version__ = "0.1.0"

__all__ = [
    "Cursor",
    "ErrorKind",
    "OptionError",
    "OptionSpec",
    "ParsedOption",
    "ParseOutcome",
    "Parser",
    "getopt",
    "ParamValidationError",
    "RuntimeConfig",
    "configure",
    "get_config",
    "get_logger",
]
