import pytest

from airbook.services.booking import (
    BookingRules,
    CapacityFullError,
    CrewMissingError,
    InvalidPassengerRoleError,
    PassengerNotFoundError,
    SameAirportError,
    UnknownAirportError,
)
from airbook.services.session import AirlineSession


def _session(*, crew: bool = True, max_passengers: int = 180) -> AirlineSession:
    session = AirlineSession(booking_rules=BookingRules(max_passengers=max_passengers))
    if crew:
        session.seed_default_crew()
    return session


def test_book_ticket_prices_and_records_ticket():
    session = _session()
    traveler = session.add_traveler("Ravi")

    ticket = session.book_ticket("DEL", "BOM", traveler.person_id, False, 45)

    assert ticket.ticket_id == 1
    assert ticket.passenger is traveler
    assert ticket.validity_years == 1
    assert ticket.is_valid()
    assert round(ticket.price, 2) == pytest.approx(3538.52)
    assert list(session.list_tickets()) == [ticket]


def test_ticket_ids_increase_monotonically():
    session = _session()
    traveler = session.add_traveler("Ravi")

    first = session.book_ticket("DEL", "BOM", traveler.person_id, False, 10)
    second = session.book_ticket("BLR", "CCU", traveler.person_id, True, 3)

    assert (first.ticket_id, second.ticket_id) == (1, 2)


def test_unknown_airport_is_checked_first():
    session = _session(crew=False)

    with pytest.raises(UnknownAirportError) as excinfo:
        session.book_ticket("XXX", "XXX", 99, False, 10)

    assert excinfo.value.code == "UnknownAirport"
    assert "XXX" in excinfo.value.message


def test_same_airport_fails_regardless_of_other_problems():
    session = _session(crew=False)

    with pytest.raises(SameAirportError):
        session.book_ticket("DEL", "DEL", 42, False, 10)


def test_crew_missing_without_attendant():
    session = AirlineSession()
    session.add_pilot("Capt. Rao", 12)
    traveler = session.add_traveler("Meera")

    with pytest.raises(CrewMissingError):
        session.book_ticket("DEL", "BOM", traveler.person_id, False, 10)


def test_crew_missing_without_pilot():
    session = AirlineSession()
    session.add_attendant("Anita", "IndiGo")
    traveler = session.add_traveler("Meera")

    with pytest.raises(CrewMissingError):
        session.book_ticket("DEL", "BOM", traveler.person_id, False, 10)


def test_capacity_counts_registered_travelers_not_tickets():
    session = _session(max_passengers=3)
    travelers = [session.add_traveler(f"Traveler {i}") for i in range(2)]
    session.book_ticket("DEL", "BOM", travelers[0].person_id, False, 40)
    session.book_ticket("DEL", "HYD", travelers[0].person_id, False, 40)

    session.add_traveler("Traveler 3")

    with pytest.raises(CapacityFullError):
        session.book_ticket("DEL", "BOM", travelers[1].person_id, False, 40)
    assert len(session.ledger) == 2


def test_capacity_full_at_default_limit():
    session = _session()
    travelers = [session.add_traveler(f"Traveler {i}") for i in range(180)]

    with pytest.raises(CapacityFullError):
        session.book_ticket("DEL", "BOM", travelers[0].person_id, False, 10)


def test_passenger_not_found():
    session = _session()

    with pytest.raises(PassengerNotFoundError):
        session.book_ticket("DEL", "BOM", 999, False, 10)


def test_pilot_cannot_be_ticketed():
    session = _session()
    pilot = session.find_person_by_id(1)

    with pytest.raises(InvalidPassengerRoleError):
        session.book_ticket("DEL", "BOM", pilot.person_id, False, 10)


def test_failed_booking_leaves_no_trace():
    session = _session()
    traveler = session.add_traveler("Ravi")

    with pytest.raises(SameAirportError):
        session.book_ticket("MAA", "MAA", traveler.person_id, False, 10)
    ticket = session.book_ticket("MAA", "DEL", traveler.person_id, False, 10)

    assert ticket.ticket_id == 1
    assert len(session.ledger) == 1


def test_quote_does_not_book():
    session = _session()

    quote = session.quote_fare("DEL", "BOM", True, 5)

    assert quote.total == pytest.approx(9554.00, abs=0.01)
    assert len(session.ledger) == 0


def test_quote_rejects_unknown_airport():
    session = _session()

    with pytest.raises(UnknownAirportError):
        session.quote_fare("DEL", "LHR", False, 5)


def test_crew_check_runs_before_capacity_and_passenger_lookup():
    session = _session(crew=False, max_passengers=2)
    session.add_traveler("Ravi")
    session.add_traveler("Meera")

    with pytest.raises(CrewMissingError):
        session.book_ticket("DEL", "BOM", 999, False, 10)


@pytest.mark.parametrize("passenger_id", [1, 999])
def test_capacity_check_runs_before_passenger_lookup(passenger_id: int):
    session = _session(max_passengers=2)
    session.add_traveler("Ravi")
    session.add_traveler("Meera")

    with pytest.raises(CapacityFullError):
        session.book_ticket("DEL", "BOM", passenger_id, False, 10)
    assert len(session.ledger) == 0
