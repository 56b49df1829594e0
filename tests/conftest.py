from __future__ import annotations

import os

import pytest

from envseek.store import MappingEnvironment


@pytest.fixture(autouse=True)
def restore_environ():
    saved = dict(os.environ)
    yield
    os.environ.clear()
    os.environ.update(saved)


@pytest.fixture
def store() -> MappingEnvironment:
    return MappingEnvironment()
