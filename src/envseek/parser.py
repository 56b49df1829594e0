"""Line parser for .env files."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
import re
from typing import Iterable, Iterator

from envseek.errors import EnvIOError, FormatError, InvalidKeyError

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_QUOTES = {'"', "'"}


@dataclass(frozen=True)
class ParsedAssignment:
    key: str
    value: str
    path: Path
    line_number: int


def is_valid_key(key: str) -> bool:
    return _KEY_PATTERN.fullmatch(key) is not None


def unquote(value: str) -> str:
    """Strip one matching pair of outer quotes; escapes are left untouched."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in _QUOTES:
        return value[1:-1]
    return value


def parse_line(line: str, *, path: Path, line_number: int) -> ParsedAssignment | None:
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    key, sep, value = stripped.partition("=")
    if not sep:
        raise FormatError(path=path, line_number=line_number, line=stripped)

    key = key.strip()
    value = unquote(value.strip())
    if not is_valid_key(key):
        raise InvalidKeyError(path=path, line_number=line_number, key=key)
    return ParsedAssignment(key=key, value=value, path=path, line_number=line_number)


def parse_lines(lines: Iterable[str], *, path: Path, strict: bool = True) -> Iterator[ParsedAssignment]:
    """Yield assignments from ``lines`` in file order.

    In strict mode the first malformed line raises. Assignments yielded before
    it have already been seen by the consumer and are not taken back. In
    lenient mode malformed lines are logged and skipped.
    """
    for line_number, line in enumerate(lines, start=1):
        try:
            assignment = parse_line(line, path=path, line_number=line_number)
        except (FormatError, InvalidKeyError) as exc:
            if strict:
                raise
            logger.warning("Skipping line: %s", exc)
            continue
        if assignment is not None:
            yield assignment


def parse_file(path: Path | str, *, strict: bool = True) -> Iterator[ParsedAssignment]:
    env_path = Path(path)
    try:
        # Lines end at "\n" only; a stray "\r" stays part of the line.
        with env_path.open("r", encoding="utf-8-sig", newline="\n") as handle:
            yield from parse_lines(handle, path=env_path, strict=strict)
    except (OSError, UnicodeDecodeError) as exc:
        raise EnvIOError(path=env_path, reason=str(exc)) from exc
