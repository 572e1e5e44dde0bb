import pytest
from pydantic import ValidationError

from airbook.config import Settings
from airbook.services.booking import BookingRules
from airbook.services.fares import FareRules
from airbook.services.session import AirlineSession


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("AIRBOOK_MAX_PASSENGERS", "2")
    monkeypatch.setenv("AIRBOOK_BASE_TICKET_PRICE", "1000")
    monkeypatch.setenv("AIRBOOK_FRONTEND_ALLOWED_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("AIRBOOK_LOG_LEVEL", "debug")

    config = Settings()

    assert config.max_passengers == 2
    assert FareRules.from_settings(config).base_price == 1000.0
    assert BookingRules.from_settings(config).max_passengers == 2
    assert config.frontend_allowed_origins == ("http://a.test", "http://b.test")
    assert config.log_level == "DEBUG"


def test_lead_time_tiers_must_be_ordered():
    with pytest.raises(ValidationError):
        Settings(short_notice_days=30, advance_purchase_days=30)


def test_session_from_settings_seeds_crew_when_enabled():
    seeded = AirlineSession.from_settings(Settings(seed_crew=True))
    empty = AirlineSession.from_settings(Settings(seed_crew=False, max_passengers=5))

    assert [person.name for person in seeded.list_people()] == ["Capt. Sharma", "Anita"]
    assert seeded.roster_summary().crew_ok
    assert empty.list_people() == []
    assert empty.engine.rules.max_passengers == 5


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ('["http://a.test", "http://b.test"]', ("http://a.test", "http://b.test")),
        ("http://only.test", ("http://only.test",)),
    ],
)
def test_allowed_origins_accept_json_and_single_values(monkeypatch: pytest.MonkeyPatch, raw: str, expected: tuple[str, ...]):
    monkeypatch.setenv("AIRBOOK_FRONTEND_ALLOWED_ORIGINS", raw)

    assert Settings().frontend_allowed_origins == expected
