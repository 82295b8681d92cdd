from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import patch

import pytest

from gitkit.git.version import clear_version_cache
from gitkit.test.fakes import FakeGit


@pytest.fixture(autouse=True)
def _fresh_version_cache() -> Iterator[None]:  # pyright: ignore[reportUnusedFunction]
    clear_version_cache()
    yield
    clear_version_cache()


@pytest.fixture
def fake_git() -> Iterator[FakeGit]:
    """Patch subprocess.run with a FakeGit and hand it to the test."""
    fake = FakeGit()
    with patch("subprocess.run", side_effect=fake):
        yield fake
