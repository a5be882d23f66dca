"""pytest plugin providing a fresh MockFS per test.

Registered through the ``pytest11`` entry point, so the ``mock_fs`` fixture
is available wherever mockfs is installed.
"""

from collections.abc import Iterator

import pytest

from .memory import MockFS


@pytest.fixture
def mock_fs() -> Iterator[MockFS]:
    """An empty store, reset at teardown."""
    fs = MockFS()
    yield fs
    fs.reset()
