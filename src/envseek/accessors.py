"""Typed lookups with fallback.

The ``get_*`` helpers never raise: an absent key or a value that does not
convert yields ``fallback`` unchanged. :func:`must_get_string` is the one
exception and raises :class:`MissingRequiredError` for configuration that
cannot be defaulted.
"""

from __future__ import annotations

import re

from envseek.errors import MissingRequiredError
from envseek.store import EnvironmentStore, resolve_store

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_TRUE_VALUES = {"true", "1"}
_FALSE_VALUES = {"false", "0"}


def get_string(key: str, fallback: str, *, store: EnvironmentStore | None = None) -> str:
    value = resolve_store(store).get(key)
    return fallback if value is None else value


def get_int(key: str, fallback: int, *, store: EnvironmentStore | None = None) -> int:
    value = resolve_store(store).get(key)
    if value is None or _INT_PATTERN.fullmatch(value) is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def get_float(key: str, fallback: float, *, store: EnvironmentStore | None = None) -> float:
    value = resolve_store(store).get(key)
    if value is None or not value.isascii() or value != value.strip() or "_" in value:
        return fallback
    try:
        return float(value)
    except ValueError:
        return fallback


def get_bool(key: str, fallback: bool, *, store: EnvironmentStore | None = None) -> bool:
    value = resolve_store(store).get(key)
    if value is None:
        return fallback
    lowered = value.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    return fallback


def must_get_string(key: str, *, store: EnvironmentStore | None = None) -> str:
    value = resolve_store(store).get(key)
    if value is None:
        raise MissingRequiredError(key=key)
    return value
