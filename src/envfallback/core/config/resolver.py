"""Resolution of configuration values: override store first, record second.

For every kind the algorithm is the same:

1. Read ``field_name`` from the override store.
2. If present and it parses as the requested kind, return it. The record
   is not consulted.
3. Otherwise (absent, or present but unparsable) read the field from the
   record. Unparsable overrides are only logged at DEBUG level.
4. A field missing from the record raises FieldNotFoundError; a field of
   another type raises FieldTypeMismatchError.

Booleans use the strict vocabulary ``1/t/true`` and ``0/f/false``
(case-insensitive). Any other override text, including ``yes``, ``on`` and
``off``, is ignored in favour of the record value.
"""

from __future__ import annotations

from typing import Any, Optional

from envfallback.core.utils.logger import log_debug

from .coercion import PARSE_FAILED, parse_override
from .errors import FieldNotFoundError, FieldTypeMismatchError
from .registry import Kind, LookupStatus, lookup_field
from .store import OverrideStore, default_store

_MODULE = "resolver"


def resolve(
    record: Any,
    field_name: str,
    kind: Kind,
    store: Optional[OverrideStore] = None,
) -> Any:
    """
    Resolve ``field_name`` as ``kind``, preferring the override store.

    Args:
        record: Configuration record supplying fallback values.
        field_name: Exact name used both as override key and field name.
        kind: The kind of value to produce.
        store: Override store; defaults to the process environment.

    Returns:
        A value whose type is exactly ``kind.python_type``.

    Raises:
        FieldNotFoundError: No override applied and the record has no such field.
        FieldTypeMismatchError: No override applied and the field has another type.
    """
    if store is None:
        store = default_store()

    raw = store.get(field_name)
    if raw is not None:
        parsed = parse_override(raw, kind)
        if parsed is not PARSE_FAILED:
            log_debug(_MODULE, f"Using override for {field_name}", context=kind.value)
            return parsed
        log_debug(
            _MODULE,
            f"Ignoring override for {field_name}: not a valid {kind.value}",
        )

    outcome = lookup_field(record, field_name, kind)
    if outcome.status is LookupStatus.FOUND:
        log_debug(_MODULE, f"Using record value for {field_name}", context=kind.value)
        return outcome.value
    if outcome.status is LookupStatus.WRONG_KIND:
        raise FieldTypeMismatchError(field_name, kind, outcome.declared_type)
    raise FieldNotFoundError(field_name, kind, type(record))


def resolve_string(
    record: Any, field_name: str, store: Optional[OverrideStore] = None
) -> str:
    """Resolve a string field. Any override text, even empty, is used verbatim."""
    return resolve(record, field_name, Kind.STRING, store)


def resolve_bool(
    record: Any, field_name: str, store: Optional[OverrideStore] = None
) -> bool:
    """Resolve a boolean field using the strict token vocabulary."""
    return resolve(record, field_name, Kind.BOOL, store)


def resolve_int(
    record: Any, field_name: str, store: Optional[OverrideStore] = None
) -> int:
    """Resolve a base-10, signed 64-bit integer field."""
    return resolve(record, field_name, Kind.INT, store)


def resolve_float(
    record: Any, field_name: str, store: Optional[OverrideStore] = None
) -> float:
    """Resolve a floating point field."""
    return resolve(record, field_name, Kind.FLOAT, store)


class ConfigResolver:
    """Resolver bound to one record and one override store."""

    def __init__(self, record: Any, store: Optional[OverrideStore] = None):
        self.record = record
        self.store = store if store is not None else default_store()

    def resolve(self, field_name: str, kind: Kind) -> Any:
        return resolve(self.record, field_name, kind, self.store)

    def get_string(self, field_name: str) -> str:
        return resolve_string(self.record, field_name, self.store)

    def get_bool(self, field_name: str) -> bool:
        return resolve_bool(self.record, field_name, self.store)

    def get_int(self, field_name: str) -> int:
        return resolve_int(self.record, field_name, self.store)

    def get_float(self, field_name: str) -> float:
        return resolve_float(self.record, field_name, self.store)

    def __repr__(self) -> str:
        return f"ConfigResolver({type(self.record).__name__}, {self.store!r})"


class EnvOverridable:
    """
    Mixin giving a record ``get_env_*`` accessors over its own fields.

    Set ``override_store`` on the subclass to read overrides from somewhere
    other than the process environment::

        @dataclass
        class AppConfig(EnvOverridable):
            DB_HOST: str = "localhost"
            DB_PORT: int = 5432

        AppConfig().get_env_int("DB_PORT")
    """

    override_store = None

    def get_env_string(self, field: str) -> str:
        return resolve_string(self, field, self.override_store)

    def get_env_bool(self, field: str) -> bool:
        return resolve_bool(self, field, self.override_store)

    def get_env_int(self, field: str) -> int:
        return resolve_int(self, field, self.override_store)

    def get_env_float(self, field: str) -> float:
        return resolve_float(self, field, self.override_store)
