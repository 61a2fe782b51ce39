"""Override-then-record resolution of configuration values."""

from .registry import (
    FieldLookup,
    FieldMetadata,
    Kind,
    LookupStatus,
    describe_fields,
    kind_for_type,
    lookup_field,
)
from .coercion import PARSE_FAILED, parse_override
from .errors import (
    FailureReason,
    FieldNotFoundError,
    FieldTypeMismatchError,
    ResolutionError,
)
from .store import (
    EnvironOverrideStore,
    MappingOverrideStore,
    OverrideStore,
    default_store,
)
from .resolver import (
    ConfigResolver,
    EnvOverridable,
    resolve,
    resolve_bool,
    resolve_float,
    resolve_int,
    resolve_string,
)

__all__ = [
    "ConfigResolver",
    "EnvOverridable",
    "EnvironOverrideStore",
    "FailureReason",
    "FieldLookup",
    "FieldMetadata",
    "FieldNotFoundError",
    "FieldTypeMismatchError",
    "Kind",
    "LookupStatus",
    "MappingOverrideStore",
    "OverrideStore",
    "PARSE_FAILED",
    "ResolutionError",
    "default_store",
    "describe_fields",
    "kind_for_type",
    "lookup_field",
    "parse_override",
    "resolve",
    "resolve_bool",
    "resolve_float",
    "resolve_int",
    "resolve_string",
]
