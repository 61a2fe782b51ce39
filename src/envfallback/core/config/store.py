"""
Override stores consulted before a record field.

An override store is any object with a ``get(key)`` method returning the raw
override text or ``None``. A plain ``dict`` qualifies.

Stores are read once per resolution and never locked. When the store is
the process environment, other threads may change it between two
resolutions; each resolution only sees the value present at its own read.
"""

from __future__ import annotations

import os
from typing import Mapping, MutableMapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class OverrideStore(Protocol):
    """Protocol for key/value override text stores."""

    def get(self, key: str) -> Optional[str]:
        """Return the raw override for ``key`` or None if it is not set."""
        ...


class EnvironOverrideStore:
    """
    Override store backed by the process environment.

    The environment is read at call time, so changes made after the store
    was created are visible to later lookups.
    """

    def __init__(self, environ: Optional[MutableMapping[str, str]] = None):
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return self._environ if self._environ is not None else os.environ

    def get(self, key: str) -> Optional[str]:
        return self.environ.get(key)

    def __repr__(self) -> str:
        source = "os.environ" if self._environ is None else "custom mapping"
        return f"EnvironOverrideStore({source})"


class MappingOverrideStore:
    """Override store holding a private snapshot of a mapping."""

    def __init__(self, values: Optional[Mapping[str, str]] = None, **kwargs: str):
        snapshot = dict(values or {})
        snapshot.update(kwargs)
        for key, value in snapshot.items():
            if not isinstance(value, str):
                raise TypeError(
                    f"override for {key!r} must be a string, got {type(value).__name__}"
                )
        self._values = snapshot

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"MappingOverrideStore({sorted(self._values)})"


def default_store() -> OverrideStore:
    """Return the store used when callers do not inject one."""
    return EnvironOverrideStore()
