import logging
from typing import Iterable

import pytest

from airbook import cli
from airbook.logging_config import setup_logging
from airbook.services.session import AirlineSession


def _run(session: AirlineSession, answers: Iterable[str]) -> list[str]:
    feed = iter(answers)
    output: list[str] = []

    def read(prompt: str) -> str:
        try:
            return next(feed)
        except StopIteration:
            raise EOFError from None

    assert cli.run_menu(session, read=read, write=output.append) == 0
    return output


def _seeded() -> AirlineSession:
    session = AirlineSession()
    session.seed_default_crew()
    return session


def test_menu_books_and_lists_ticket():
    session = _seeded()

    output = _run(session, ["2", "Ravi", "6", "del", "bom", "3", "n", "45", "7", "0"])

    assert "Added Passenger #3 - Ravi" in output
    assert "Ticket booked for Ravi." in output
    listing = next(line for line in output if line.startswith("----- Ticket -----"))
    assert "Price           : 3538.52" in listing
    assert output[-1] == "Goodbye!"


def test_menu_reports_booking_failure_and_keeps_running():
    session = _seeded()

    output = _run(session, ["6", "DEL", "DEL", "1", "y", "5", "7", "0"])

    assert "Source and destination cannot be the same." in output
    assert "No tickets booked." in output


def test_menu_pilot_cannot_book():
    session = _seeded()

    output = _run(session, ["6", "DEL", "BOM", "1", "n", "10", "0"])

    assert any(line.startswith("Only passengers can book tickets") for line in output)


def test_menu_crew_listing_and_time_simulation():
    session = AirlineSession()

    output = _run(
        session,
        ["5", "3", "Capt. Rao", "abc", "12", "4", "Anita", "IndiGo", "5", "2", "Ravi", "6", "DEL", "CCU", "3", "n", "10", "8", "2", "7", "0"],
    )

    assert output.count("Crew missing!") == 1
    assert "Crew OK." in output
    assert "2 year(s) passed. Ticket validity updated." in output
    assert any("Validity (years): -1 (Expired)" in line for line in output)


def test_menu_ignores_garbage_and_unknown_choices():
    output = _run(AirlineSession(), ["x", "42", "1", "0"])

    assert "Invalid choice." in output
    assert any(line.startswith("--- Airports ---") and "DEL - Delhi" in line for line in output)


def test_menu_exits_cleanly_on_end_of_input():
    output = _run(AirlineSession(), ["1"])

    assert output[-1] == "Goodbye!"


def test_main_defaults_to_menu(monkeypatch: pytest.MonkeyPatch):
    calls = []
    monkeypatch.setattr(cli, "setup_logging", lambda level: calls.append(("logging", level)))
    monkeypatch.setattr(cli, "run_menu", lambda session: calls.append(("menu", len(session.list_people()))) or 0)

    assert cli.main(["--log-level", "debug"]) == 0
    assert calls == [("logging", "debug"), ("menu", 2)]


def test_setup_logging_installs_single_handler():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        setup_logging("debug")

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("chatty")
