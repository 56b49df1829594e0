"""Load .env files into an environment store."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from envseek.config import SearchConfig, default_search_config
from envseek.errors import EnvIOError, EnvStoreError
from envseek.parser import parse_file
from envseek.store import EnvironmentStore, resolve_store
from envseek.traversal import iter_candidate_files

logger = logging.getLogger(__name__)


def load(*, store: EnvironmentStore | None = None) -> list[Path]:
    """Search the working directory with the default configuration."""
    return load_with_config(None, store=store)


def load_with_config(
    config: SearchConfig | None = None,
    *,
    root: Path | str | None = None,
    store: EnvironmentStore | None = None,
) -> list[Path]:
    """Walk ``root`` (default: cwd) and apply every candidate file found.

    Returns the applied files in the order they were applied. With
    ``stop_on_first_match`` the walk ends after the first file parses.
    """
    if config is None:
        config = default_search_config()
    search_root = Path(root) if root is not None else Path.cwd()
    target = resolve_store(store)

    applied: list[Path] = []
    for path in iter_candidate_files(search_root, config):
        load_file(
            path,
            strict=config.strict,
            override=config.override,
            prefix=config.prefix,
            store=target,
        )
        applied.append(path)
        if config.stop_on_first_match:
            logger.debug("Stopping after first match %s", path)
            break
    if not applied:
        logger.debug("No %s file found under %s", "/".join(config.candidate_filenames), search_root)
    return applied


def load_file(
    path: Path | str,
    *,
    strict: bool = True,
    override: bool = True,
    prefix: str = "",
    store: EnvironmentStore | None = None,
) -> int:
    """Parse one file and commit its assignments; no traversal.

    Assignments are committed line by line, so a strict-mode error leaves the
    earlier lines of the file applied. Returns the number of keys committed.
    """
    target = resolve_store(store)
    committed = 0
    for assignment in parse_file(path, strict=strict):
        if prefix and not assignment.key.startswith(prefix):
            continue
        if not override and target.get(assignment.key) is not None:
            continue
        try:
            target.set(assignment.key, assignment.value)
        except (OSError, ValueError) as exc:
            raise EnvIOError(path=assignment.path, reason=f"cannot set {assignment.key}: {exc}") from exc
        committed += 1
    logger.debug("Applied %d assignment(s) from %s", committed, path)
    return committed


def unload(keys: Iterable[str], *, store: EnvironmentStore | None = None) -> None:
    target = resolve_store(store)
    for key in keys:
        try:
            target.unset(key)
        except (OSError, ValueError) as exc:
            raise EnvStoreError(key=key, reason=str(exc)) from exc
