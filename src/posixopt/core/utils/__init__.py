"""Shared utility helpers used across the core library."""

from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .logging import (
    get_logger,
    configure_logging,
    OptionValueFilter,
)
from .param_validation import (
    ensure,
    ensure_type,
    ensure_argument_vector,
    ensure_index,
    validate_arguments,
    ParamValidationError,
)

__all__ = [
    "RuntimeConfig",
    "get_config",
    "configure",
    "get_logger",
    "configure_logging",
    "OptionValueFilter",
    "ensure",
    "ensure_type",
    "ensure_argument_vector",
    "ensure_index",
    "validate_arguments",
    "ParamValidationError",
]
