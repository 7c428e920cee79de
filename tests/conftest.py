from collections.abc import Iterator

import pytest

from giftdates.config import reset_settings


@pytest.fixture(autouse=True)
def _set_test_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep tests independent of the host's time zone setting."""
    monkeypatch.delenv("TIMEZONE", raising=False)
    reset_settings()
    yield
    reset_settings()
