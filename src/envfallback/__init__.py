"""
envfallback - environment overrides with typed record fallbacks

Every setting an application declares on a configuration record can be
overridden at deployment time through an environment variable of the same
name, without repeating its default anywhere else.

Package Structure:
- core/config/: field lookup, override parsing, override stores and resolver
- core/utils/: logging helpers
"""

__version__ = "0.1.0"

from envfallback.core.config import (
    ConfigResolver,
    EnvironOverrideStore,
    EnvOverridable,
    FailureReason,
    FieldNotFoundError,
    FieldTypeMismatchError,
    Kind,
    MappingOverrideStore,
    OverrideStore,
    ResolutionError,
    describe_fields,
    lookup_field,
    resolve,
    resolve_bool,
    resolve_float,
    resolve_int,
    resolve_string,
)
from envfallback.core.utils.logger import get_logger, setup_logging

__all__ = [
    "ConfigResolver",
    "EnvironOverrideStore",
    "EnvOverridable",
    "FailureReason",
    "FieldNotFoundError",
    "FieldTypeMismatchError",
    "Kind",
    "MappingOverrideStore",
    "OverrideStore",
    "ResolutionError",
    "__version__",
    "describe_fields",
    "get_logger",
    "lookup_field",
    "resolve",
    "resolve_bool",
    "resolve_float",
    "resolve_int",
    "resolve_string",
    "setup_logging",
]
