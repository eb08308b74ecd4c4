"""Option parser core: spec strings, the scanning state machine and its errors."""

from .errors import ErrorKind, OptionError, debug_quote
from .option_spec import OptionSpec
from .parser import Parser, getopt
from .types import Cursor, ParsedOption, ParseOutcome

__all__ = [
    "ErrorKind",
    "OptionError",
    "debug_quote",
    "OptionSpec",
    "Parser",
    "getopt",
    "Cursor",
    "ParsedOption",
    "ParseOutcome",
]
