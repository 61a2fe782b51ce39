"""Field registry: structural lookup of named fields on a configuration record.

A record is any flat object whose class declares its fields: a dataclass,
a pydantic model, or a class (including ``typing.NamedTuple``) with
annotated attributes. The declared fields of each record class are
collected once into a table of ``FieldMetadata``; values are always read
from the instance at lookup time.

Records are read without any locking. Mutating a record while another
thread resolves values from it is the caller's responsibility.
"""

from __future__ import annotations

import dataclasses
import weakref
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, ClassVar, Mapping, Optional, get_origin, get_type_hints

from pydantic import BaseModel


class Kind(Enum):
    """The value kinds a field can be resolved as."""

    STRING = "string"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"

    @property
    def python_type(self) -> type:
        return _PYTHON_TYPES[self]


_PYTHON_TYPES = {
    Kind.STRING: str,
    Kind.BOOL: bool,
    Kind.INT: int,
    Kind.FLOAT: float,
}

# Unresolvable string annotations, e.g. from forward references
_TYPE_NAMES = {"str": str, "bool": bool, "int": int, "float": float}


@dataclass(frozen=True)
class FieldMetadata:
    """Metadata describing a declared record field."""

    name: str
    type: Any
    kind: Optional[Kind]


class LookupStatus(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    WRONG_KIND = "wrong_kind"


@dataclass(frozen=True)
class FieldLookup:
    """Outcome of a single field lookup."""

    status: LookupStatus
    field: str
    value: Any = None
    declared_type: Any = None

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND


def kind_for_type(declared: Any) -> Optional[Kind]:
    """Map a declared annotation to a Kind, or None if it is not a scalar kind."""
    if isinstance(declared, str):
        declared = _TYPE_NAMES.get(declared.strip(), declared)
    for kind, python_type in _PYTHON_TYPES.items():
        if declared is python_type:
            return kind
    return None


def _safe_type_hints(cls: type) -> dict:
    try:
        return get_type_hints(cls)
    except (NameError, TypeError):
        hints: dict = {}
        for klass in reversed(cls.__mro__):
            hints.update(getattr(klass, "__annotations__", {}))
        return hints


def _declared_types(cls: type) -> dict:
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return {name: info.annotation for name, info in cls.model_fields.items()}

    hints = _safe_type_hints(cls)
    if dataclasses.is_dataclass(cls):
        return {f.name: hints.get(f.name, f.type) for f in dataclasses.fields(cls)}

    return {
        name: hint
        for name, hint in hints.items()
        if get_origin(hint) is not ClassVar and hint is not ClassVar
    }


# Keyed weakly so record classes created at run time can be collected
_FIELD_TABLES: weakref.WeakKeyDictionary[type, Mapping[str, FieldMetadata]] = (
    weakref.WeakKeyDictionary()
)


def _field_table(cls: type) -> Mapping[str, FieldMetadata]:
    cached = _FIELD_TABLES.get(cls)
    if cached is not None:
        return cached
    table = MappingProxyType(
        {
            name: FieldMetadata(name=name, type=declared, kind=kind_for_type(declared))
            for name, declared in _declared_types(cls).items()
        }
    )
    _FIELD_TABLES[cls] = table
    return table


def describe_fields(record: Any) -> Mapping[str, FieldMetadata]:
    """Return the declared fields of a record, keyed by exact field name.

    Raises:
        TypeError: If the record's class declares no fields at all.
    """
    cls = type(record)
    table = _field_table(cls)
    if not table and not (
        dataclasses.is_dataclass(cls) or issubclass(cls, BaseModel)
    ):
        raise TypeError(
            f"{cls.__name__} declares no fields; expected a dataclass, "
            "a pydantic model or a class with annotated attributes"
        )
    return table


_MISSING = object()


def _as_kind(value: Any, kind: Kind) -> Any:
    """Convert a field value to the native type of ``kind``, or return _MISSING."""
    if kind is Kind.STRING:
        return str(value) if isinstance(value, str) else _MISSING
    if kind is Kind.BOOL:
        return bool(value) if isinstance(value, bool) else _MISSING
    if isinstance(value, bool):
        return _MISSING
    if kind is Kind.INT:
        return int(value) if isinstance(value, int) else _MISSING
    if isinstance(value, (int, float)):
        return float(value)
    return _MISSING


def lookup_field(record: Any, field_name: str, kind: Kind) -> FieldLookup:
    """
    Look up ``field_name`` on ``record`` and return it as ``kind``.

    The name must match a declared field exactly. No defaulting happens
    here: an empty string stored in a string field is FOUND, a field that
    is not declared (or has no value on this instance) is NOT_FOUND, and a
    field declared with another type is WRONG_KIND.

    Args:
        record: The configuration record to read from. Never mutated.
        field_name: Exact, case-sensitive field name.
        kind: The kind the caller expects.

    Returns:
        A FieldLookup describing the outcome.
    """
    meta = describe_fields(record).get(field_name)
    if meta is None:
        return FieldLookup(LookupStatus.NOT_FOUND, field_name)

    value = getattr(record, field_name, _MISSING)
    if value is _MISSING:
        return FieldLookup(LookupStatus.NOT_FOUND, field_name, declared_type=meta.type)

    if meta.kind is not kind:
        return FieldLookup(LookupStatus.WRONG_KIND, field_name, declared_type=meta.type)

    converted = _as_kind(value, kind)
    if converted is _MISSING:
        return FieldLookup(LookupStatus.WRONG_KIND, field_name, declared_type=meta.type)
    return FieldLookup(LookupStatus.FOUND, field_name, converted, meta.type)
