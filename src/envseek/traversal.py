"""Breadth-first discovery of candidate .env files."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Iterator

from envseek.config import SearchConfig
from envseek.errors import EnvIOError

logger = logging.getLogger(__name__)


@dataclass
class TraversalFrontier:
    pending: deque[tuple[Path, int]] = field(default_factory=deque)
    visited: set[Path] = field(default_factory=set)

    def push(self, path: Path, depth: int) -> None:
        self.pending.append((path, depth))

    def pop(self) -> tuple[Path, int]:
        return self.pending.popleft()

    def __bool__(self) -> bool:
        return bool(self.pending)


def iter_candidate_files(root: Path | str, config: SearchConfig) -> Iterator[Path]:
    """Yield files under ``root`` whose name is a candidate filename.

    ``root`` sits at depth 0 and each directory level adds one. Directories
    deeper than ``config.max_depth`` are never listed. The walk is lazy: a
    consumer that stops iterating stops the walk.
    """
    root_path = Path(root)
    if not _canonicalize(root_path).is_dir():
        raise EnvIOError(path=root_path, reason="not a directory")

    frontier = TraversalFrontier()
    frontier.push(root_path, 0)
    while frontier:
        path, depth = frontier.pop()
        if _is_directory(path):
            if depth > config.max_depth:
                continue
            canonical = _canonicalize(path)
            if canonical in frontier.visited:
                logger.debug("Skipping already visited directory %s", path)
                continue
            frontier.visited.add(canonical)
            for child in _list_children(path):
                if config.skip_hidden_dirs and child.name.startswith(".") and _is_directory(child):
                    continue
                frontier.push(child, depth + 1)
        elif config.matches(path.name):
            yield path


def _is_directory(path: Path) -> bool:
    try:
        return path.is_dir()
    except OSError as exc:
        raise EnvIOError(path=path, reason=str(exc)) from exc


def _canonicalize(path: Path) -> Path:
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise EnvIOError(path=path, reason=str(exc)) from exc


def _list_children(path: Path) -> list[Path]:
    logger.debug("Reading directory %s", path)
    try:
        return sorted(path.iterdir(), key=lambda child: child.name)
    except OSError as exc:
        raise EnvIOError(path=path, reason=f"failed to read directory: {exc}") from exc
