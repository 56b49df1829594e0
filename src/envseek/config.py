"""Search configuration for envseek loads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

DEFAULT_ENV_FILE = ".env"
DEFAULT_MAX_DEPTH = 10


@dataclass(frozen=True)
class SearchConfig:
    candidate_filenames: tuple[str, ...] = (DEFAULT_ENV_FILE,)
    max_depth: int = DEFAULT_MAX_DEPTH
    stop_on_first_match: bool = True
    skip_hidden_dirs: bool = True
    strict: bool = True
    override: bool = True
    prefix: str = ""

    def __post_init__(self) -> None:
        names = _dedupe(self.candidate_filenames)
        if not names:
            raise ValueError("candidate_filenames must name at least one file.")
        for name in names:
            if not name or "/" in name or "\\" in name:
                raise ValueError(f"Invalid candidate filename: {name!r}")
        if self.max_depth < 0:
            raise ValueError("max_depth must be non-negative.")
        object.__setattr__(self, "candidate_filenames", names)

    def matches(self, name: str) -> bool:
        return name in self.candidate_filenames

    def to_dict(self) -> dict:
        return {
            "candidate_filenames": list(self.candidate_filenames),
            "max_depth": self.max_depth,
            "stop_on_first_match": self.stop_on_first_match,
            "skip_hidden_dirs": self.skip_hidden_dirs,
            "strict": self.strict,
            "override": self.override,
            "prefix": self.prefix,
        }


def default_search_config() -> SearchConfig:
    return SearchConfig()


def _dedupe(names: Iterable[str] | str) -> tuple[str, ...]:
    if isinstance(names, str):
        names = [names]
    seen: list[str] = []
    for name in names:
        if name not in seen:
            seen.append(name)
    return tuple(seen)
