"""Exceptions raised when a configuration value cannot be resolved."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from .registry import Kind


class FailureReason(Enum):
    """Why a field could not be resolved from the record."""

    NOT_FOUND = "not_found"
    TYPE_MISMATCH = "type_mismatch"


class ResolutionError(Exception):
    """Base exception for a field that could not be resolved."""

    reason: FailureReason

    def __init__(
        self,
        field: str,
        kind: Kind,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        """
        Initialize the resolution error.

        Args:
            field: Name of the field that could not be resolved
            kind: Kind the caller asked for
            message: Human readable message (always names the field)
            context: Additional structured context
        """
        super().__init__(message)
        self.field = field
        self.kind = kind
        self.message = message
        self.context = context or {}


class FieldNotFoundError(ResolutionError):
    """The requested name matches no field on the record."""

    reason = FailureReason.NOT_FOUND

    def __init__(self, field: str, kind: Kind, record_type: Optional[type] = None):
        record_name = record_type.__name__ if record_type is not None else "record"
        super().__init__(
            field,
            kind,
            f"env var not in config {record_name}: `{field}`",
            context={"record_type": record_type},
        )
        self.record_type = record_type


class FieldTypeMismatchError(ResolutionError):
    """The field exists but does not hold the requested kind."""

    reason = FailureReason.TYPE_MISMATCH

    def __init__(self, field: str, kind: Kind, declared_type: Any):
        declared_name = getattr(declared_type, "__name__", repr(declared_type))
        super().__init__(
            field,
            kind,
            f"config field `{field}` is declared as {declared_name}, "
            f"cannot resolve it as {kind.value}",
            context={"declared_type": declared_type},
        )
        self.declared_type = declared_type
