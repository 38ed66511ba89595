from collections.abc import Iterator
from pathlib import Path

import pytest

import linecol.config
from linecol.config import INDEXING_POLICY_ENV_VARIABLE
from linecol.config import Config


@pytest.fixture
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    monkeypatch.delenv(INDEXING_POLICY_ENV_VARIABLE, raising=False)
    monkeypatch.setattr(Config, "_ENV_FILE_PATH", tmp_path / ".env")
    monkeypatch.setattr(linecol.config, "_config", None)
    yield
