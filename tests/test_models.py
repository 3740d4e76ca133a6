"""Tests for domain models."""

from datetime import UTC, datetime, timedelta

import pytest

from oebb_connections.domain.exceptions import TransientFetchError
from oebb_connections.domain.models import (
    Connection,
    CorrelationKey,
    ErrorDetails,
    Journey,
    Leg,
    Line,
    RefreshRequest,
    RouteConfiguration,
    Station,
    TransportCatalog,
    TransportProduct,
)

BASE = datetime(2024, 1, 1, 8, 0, tzinfo=UTC)


def _leg(
    start_minutes: int,
    end_minutes: int,
    line_name: str | None = "S 1",
    walking: bool = False,
    delay_seconds: int | None = None,
) -> Leg:
    line = None if walking or line_name is None else Line(line_name, TransportProduct.SUBURBAN)
    return Leg(
        departure=BASE + timedelta(minutes=start_minutes),
        arrival=BASE + timedelta(minutes=end_minutes),
        line=line,
        delay_seconds=delay_seconds,
        walking=walking,
    )


def test_journey_derives_departure_arrival_and_duration() -> None:
    """Given a two-leg journey, when reading derived fields, then they come from first and last leg."""
    journey = Journey(legs=(_leg(0, 10), _leg(14, 31)))

    assert journey.departure == BASE
    assert journey.arrival == BASE + timedelta(minutes=31)
    assert journey.duration_minutes == 31


def test_journey_duration_rounds_to_nearest_minute() -> None:
    """Given 10 minutes 40 seconds, when reading duration, then it rounds to 11 minutes."""
    leg = Leg(departure=BASE, arrival=BASE + timedelta(minutes=10, seconds=40))
    journey = Journey(legs=(leg,))

    assert journey.duration_minutes == 11


def test_journey_transfers_ignore_walking_legs() -> None:
    """Given vehicle, walk, vehicle, when counting transfers, then only vehicle changes count."""
    journey = Journey(legs=(_leg(0, 10), _leg(10, 14, walking=True), _leg(14, 30)))

    assert journey.transfers == 1


def test_journey_with_single_vehicle_leg_has_no_transfers() -> None:
    """Given a single vehicle leg, when counting transfers, then result is zero."""
    assert Journey(legs=(_leg(0, 10),)).transfers == 0


def test_journey_with_only_walking_has_no_transfers() -> None:
    """Given only walking legs, when counting transfers, then result is clamped at zero."""
    assert Journey(legs=(_leg(0, 10, walking=True),)).transfers == 0


def test_journey_requires_legs() -> None:
    """Given no legs, when creating a journey, then ValueError is raised."""
    with pytest.raises(ValueError, match="at least one leg"):
        Journey(legs=())


def test_first_transport_leg_skips_leading_walk() -> None:
    """Given a journey starting with a footpath, when asking for the first transport leg, then the vehicle leg is returned."""
    vehicle = _leg(5, 20, line_name="S 2")
    journey = Journey(legs=(_leg(0, 5, walking=True), vehicle))

    assert journey.first_transport_leg is vehicle


def test_leg_delay_minutes() -> None:
    """Given delays in seconds, when converting, then whole minutes are returned."""
    assert _leg(0, 10, delay_seconds=None).delay_minutes == 0
    assert _leg(0, 10, delay_seconds=120).delay_minutes == 2
    assert _leg(0, 10, delay_seconds=100).delay_minutes == 2


def test_correlation_key_uses_departure_and_first_line_name() -> None:
    """Given two journeys with equal departure and first line, when building keys, then they are equal."""
    first = Journey(legs=(_leg(0, 20),))
    second = Journey(legs=(_leg(0, 35),))

    assert CorrelationKey.for_journey(first) == CorrelationKey.for_journey(second)
    assert CorrelationKey.for_journey(first) == CorrelationKey(BASE, "S 1")


def test_correlation_key_differs_by_line_name() -> None:
    """Given same departure but different line, when building keys, then they differ."""
    s1 = Journey(legs=(_leg(0, 20, line_name="S 1"),))
    s2 = Journey(legs=(_leg(0, 20, line_name="S 2"),))

    assert CorrelationKey.for_journey(s1) != CorrelationKey.for_journey(s2)


def test_correlation_key_without_line_uses_empty_name() -> None:
    """Given a first leg without line, when building key, then line name is empty."""
    journey = Journey(legs=(_leg(0, 5, walking=True), _leg(5, 20)))

    assert CorrelationKey.for_journey(journey).line_name == ""


def test_connection_with_auxiliary_arrival_returns_new_connection() -> None:
    """Given a connection, when attaching an arrival, then the original stays unchanged."""
    connection = Connection(journey=Journey(legs=(_leg(0, 20),)))
    arrival = BASE + timedelta(minutes=8)

    enriched = connection.with_auxiliary_arrival("Praterstern", arrival)

    assert enriched.auxiliary_arrivals == {"Praterstern": arrival}
    assert connection.auxiliary_arrivals == {}
    assert enriched.duration_minutes == 20


def test_connection_is_frozen() -> None:
    """Given a connection, when trying to modify it, then raises AttributeError."""
    connection = Connection(journey=Journey(legs=(_leg(0, 20),)))

    with pytest.raises(AttributeError):
        connection.journey = Journey(legs=(_leg(0, 30),))  # type: ignore[misc]


def test_transport_product_parse() -> None:
    """Given upstream product tags, when parsing, then known tags map and others return None."""
    assert TransportProduct.parse("suburban") is TransportProduct.SUBURBAN
    assert TransportProduct.parse("nationalExpress") is TransportProduct.NATIONAL_EXPRESS
    assert TransportProduct.parse("hovercraft") is None
    assert TransportProduct.parse(None) is None


def test_transport_catalog_lookups() -> None:
    """Given a catalog, when looking up unknown keys, then ValueError names the problem."""
    station = Station(key="FLORIDSDORF", id="1292101", name="Floridsdorf")
    route = RouteConfiguration(key="f-f", label="F", origin=station, destination=station)
    catalog = TransportCatalog(stations={station.key: station}, routes={route.key: route})

    assert catalog.station("FLORIDSDORF") is station
    assert catalog.route("f-f") is route
    with pytest.raises(ValueError, match="Unknown route 'x-y'"):
        catalog.route("x-y")
    with pytest.raises(ValueError, match="Unknown station"):
        catalog.station("NOWHERE")


def test_transport_catalog_defaults_to_suburban_and_regional() -> None:
    """Given no admissible products, when creating a catalog, then S-Bahn and REX are admissible."""
    catalog = TransportCatalog(stations={}, routes={})

    assert catalog.admissible_products == {TransportProduct.SUBURBAN, TransportProduct.REGIONAL}


def test_refresh_request_for_route_maps_correlations() -> None:
    """Given a route with a correlation station, when building a request, then label maps to station id."""
    floridsdorf = Station("FLORIDSDORF", "1292101", "Floridsdorf")
    mitte = Station("WIEN_MITTE", "1290302", "Wien Mitte")
    praterstern = Station("PRATERSTERN", "1290201", "Praterstern")
    route = RouteConfiguration(
        key="f-m",
        label="F → M",
        origin=floridsdorf,
        destination=mitte,
        correlations=[praterstern],
    )

    request = RefreshRequest.for_route(route, frozenset({TransportProduct.SUBURBAN}), limit=3)

    assert request.route_key == "f-m"
    assert request.origin == "1292101"
    assert request.destination == "1290302"
    assert request.correlations == {"Praterstern": "1290201"}
    assert request.limit == 3


@pytest.mark.parametrize(
    ("status_code", "reason"),
    [
        (429, "Rate limit exceeded"),
        (502, "Bad gateway (server error)"),
        (504, "Gateway timeout"),
        (500, "HTTP 500"),
    ],
)
def test_error_details_from_http_error(status_code: int, reason: str) -> None:
    """Given an error with a status code, when summarizing, then a readable reason is chosen."""
    details = ErrorDetails.from_exception(TransientFetchError("boom", status_code=status_code))

    assert details.status_code == status_code
    assert details.reason == reason


def test_error_details_from_plain_error() -> None:
    """Given an error without status code, when summarizing, then its message is the reason."""
    assert ErrorDetails.from_exception(RuntimeError("session closed")) == ErrorDetails(
        reason="session closed"
    )
    assert ErrorDetails.from_exception(TimeoutError()).reason == "TimeoutError"


@pytest.mark.parametrize("limit", [0, -1])
def test_refresh_request_rejects_non_positive_limit(limit: int) -> None:
    """Given a limit below 1, when creating a request, then ValueError is raised."""
    with pytest.raises(ValueError, match="limit must be at least 1"):
        RefreshRequest(
            route_key="f-m",
            origin="1292101",
            destination="1290302",
            admissible_products=frozenset({TransportProduct.SUBURBAN}),
            limit=limit,
        )
