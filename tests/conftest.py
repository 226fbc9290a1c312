from __future__ import annotations

import pytest

from tidates.config import ENCODING_ORDER_VAR, LOG_LEVEL_VAR


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(ENCODING_ORDER_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_VAR, raising=False)
