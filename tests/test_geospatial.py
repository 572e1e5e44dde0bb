import pytest

from airbook.data.airport_repository import AirportCatalog, load_airports
from airbook.models.domain import Airport
from airbook.services.geospatial import airport_distance, planar_distance


def test_planar_distance_is_euclidean():
    assert planar_distance(0, 0, 3, 4) == pytest.approx(5.0)
    assert planar_distance(1, 1, 1, 1) == 0.0


def test_airport_distance_del_bom():
    catalog = AirportCatalog()

    distance = airport_distance(catalog.get_airport("DEL"), catalog.get_airport("BOM"))

    assert distance == pytest.approx(107.7033, abs=1e-4)


def test_seeded_catalog_has_six_airports():
    catalog = AirportCatalog()

    assert [airport.code for airport in catalog.list_airports()] == ["DEL", "BOM", "BLR", "HYD", "MAA", "CCU"]
    assert catalog.get_airport("CCU") == Airport(code="CCU", name="Kolkata", x=120.0, y=90.0)
    assert "LHR" not in catalog
    assert catalog.get_airport("LHR") is None


def test_catalog_rejects_duplicate_codes():
    airport = load_airports()[0]

    with pytest.raises(ValueError):
        AirportCatalog((airport, airport))
