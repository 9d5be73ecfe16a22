from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.gopath_builder import GoPathBuilder


@pytest.fixture
def gopath(tmp_path: Path) -> GoPathBuilder:
    """Provide a GOPATH builder rooted at the pytest tmp_path."""
    return GoPathBuilder(tmp_path)
