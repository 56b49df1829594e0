"""Destinations for loaded values.

Every read and write performed by envseek goes through an
:class:`EnvironmentStore`. The default store is the process environment;
:class:`MappingEnvironment` lets callers pass an explicit dictionary instead
of touching ``os.environ``.
"""

from __future__ import annotations

import os
from typing import MutableMapping, Protocol, runtime_checkable


@runtime_checkable
class EnvironmentStore(Protocol):
    def get(self, key: str) -> str | None:
        """Return the current value of ``key`` or ``None`` when unset."""

    def set(self, key: str, value: str) -> None:
        """Set ``key`` to ``value``, replacing any previous value."""

    def unset(self, key: str) -> None:
        """Remove ``key``; absent keys are ignored."""


class ProcessEnvironment:
    """Store backed by ``os.environ``; shared, unsynchronized process state."""

    def get(self, key: str) -> str | None:
        return os.environ.get(key)

    def set(self, key: str, value: str) -> None:
        os.environ[key] = value

    def unset(self, key: str) -> None:
        os.environ.pop(key, None)


class MappingEnvironment:
    def __init__(self, values: MutableMapping[str, str] | None = None) -> None:
        self.values: MutableMapping[str, str] = values if values is not None else {}

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value

    def unset(self, key: str) -> None:
        self.values.pop(key, None)


_PROCESS_STORE = ProcessEnvironment()


def default_store() -> EnvironmentStore:
    return _PROCESS_STORE


def resolve_store(store: EnvironmentStore | None) -> EnvironmentStore:
    return store if store is not None else _PROCESS_STORE
