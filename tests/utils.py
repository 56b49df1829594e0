from __future__ import annotations

from pathlib import Path


def write_env(directory: Path, content: str, name: str = ".env") -> Path:
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / name
    path.write_text(content, encoding="utf-8")
    return path


def nested_dir(base: Path, levels: int) -> Path:
    path = base
    for index in range(1, levels + 1):
        path = path / f"level{index}"
    path.mkdir(parents=True, exist_ok=True)
    return path
