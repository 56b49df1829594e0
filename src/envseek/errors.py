"""Exception types raised by envseek."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class EnvSeekError(RuntimeError):
    """Base class for every error raised by envseek."""


@dataclass
class EnvIOError(EnvSeekError):
    path: Path | str
    reason: str

    def __str__(self) -> str:
        return f"failed to read {self.path}: {self.reason}"


@dataclass
class FormatError(EnvSeekError):
    path: Path
    line_number: int
    line: str

    def __str__(self) -> str:
        return f"invalid format in {self.path} at line {self.line_number}: {self.line}"


@dataclass
class InvalidKeyError(EnvSeekError):
    path: Path
    line_number: int
    key: str

    def __str__(self) -> str:
        return f"invalid environment variable name in {self.path} at line {self.line_number}: {self.key}"


@dataclass
class MissingRequiredError(EnvSeekError):
    """Raised by ``must_get_string``; callers decide whether it is fatal."""

    key: str

    def __str__(self) -> str:
        return f"required environment variable {self.key} not found"


@dataclass
class EnvStoreError(EnvSeekError):
    key: str
    reason: str

    def __str__(self) -> str:
        return f"cannot update environment variable {self.key}: {self.reason}"
