"""Enrichment of raw flights with airports and absolute times"""
from typing import Mapping

from flightfinder.exceptions import (
    InconsistentFlight,
    InvalidTimestamp,
    InvalidTimezone,
    MalformedDataset,
    UnknownAirport,
)
from flightfinder.models.airport import Airport
from flightfinder.models.flight import EnrichedFlight, Flight
from flightfinder.utils.time_utils import minutes_between, parse_local_timestamp, to_absolute_instant

import logging

logger = logging.getLogger(__name__)


def resolve_airport(code: str, airports: Mapping[str, Airport], flight_number: str) -> Airport:
    """
    Look up an airport referenced by a flight

    Raises:
        UnknownAirport: If the code is not in the airport table
    """
    airport = airports.get(code)
    if airport is None:
        raise UnknownAirport(code, context=f"referenced by flight {flight_number}")
    return airport


def enrich_flight(flight: Flight, airports: Mapping[str, Airport]) -> EnrichedFlight:
    """
    Enrich flight with resolved airports, UTC departure/arrival and duration

    Departure is interpreted in the origin airport's timezone and arrival in the
    destination airport's timezone, so duration is correct across zones and
    across the date line.

    Args:
        flight: Raw dataset flight
        airports: Airport table keyed by code

    Returns:
        EnrichedFlight

    Raises:
        UnknownAirport: If origin or destination is missing from the table
        MalformedDataset: If a timestamp or timezone cannot be interpreted
        InconsistentFlight: If the absolute arrival precedes the departure
    """
    origin_airport = resolve_airport(flight.origin, airports, flight.flight_number)
    destination_airport = resolve_airport(flight.destination, airports, flight.flight_number)

    try:
        departure_utc = to_absolute_instant(flight.departure_time, origin_airport.timezone)
        arrival_utc = to_absolute_instant(flight.arrival_time, destination_airport.timezone)
    except (InvalidTimestamp, InvalidTimezone) as e:
        raise MalformedDataset(f"Flight {flight.flight_number}: {e}") from e

    duration_minutes = minutes_between(departure_utc, arrival_utc)
    if arrival_utc < departure_utc:
        raise InconsistentFlight(flight.flight_number, duration_minutes)

    return EnrichedFlight(
        flight=flight,
        origin_airport=origin_airport,
        destination_airport=destination_airport,
        departure_utc=departure_utc,
        arrival_utc=arrival_utc,
        duration_minutes=duration_minutes,
        departure_date=parse_local_timestamp(flight.departure_time).date()
    )
