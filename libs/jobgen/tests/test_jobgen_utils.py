from __future__ import annotations

from datetime import UTC, datetime, timedelta, timezone

import pytest
from jobgen.utils import epoch_millis, now_utc_iso, search_delay_from_env, to_iso

pytestmark = pytest.mark.unit


def test_now_utc_iso_returns_parseable_utc_timestamp() -> None:
    parsed = datetime.fromisoformat(now_utc_iso())
    assert parsed.tzinfo is not None
    assert parsed.utcoffset() is not None
    assert parsed.utcoffset().total_seconds() == 0


def test_to_iso_converts_offsets_to_utc() -> None:
    moment = datetime(2026, 3, 1, 12, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
    assert to_iso(moment) == "2026-03-01T06:30:00+00:00"


def test_to_iso_treats_naive_datetimes_as_utc() -> None:
    assert to_iso(datetime(2026, 3, 1, 12, 0)) == "2026-03-01T12:00:00+00:00"


def test_epoch_millis() -> None:
    assert epoch_millis(datetime(1970, 1, 1, 0, 0, 1, tzinfo=UTC)) == 1000


def test_search_delay_defaults_when_unset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PORTAL_SEARCH_DELAY_MS", raising=False)
    assert search_delay_from_env() == 1.5


def test_search_delay_reads_milliseconds(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PORTAL_SEARCH_DELAY_MS", "250")
    assert search_delay_from_env() == 0.25


@pytest.mark.parametrize("raw", ["fast", "1.5s", "-10"])
def test_search_delay_falls_back_on_bad_values(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, raw: str
) -> None:
    monkeypatch.setenv("PORTAL_SEARCH_DELAY_MS", raw)

    assert search_delay_from_env() == 1.5
    assert "PORTAL_SEARCH_DELAY_MS" in caplog.text
