"""Connection rules for chaining flights into itineraries"""
import re
from typing import Sequence

from flightfinder.models.flight import EnrichedFlight
from flightfinder.utils.time_utils import minutes_between

# Layover constraints in minutes
MIN_LAYOVER_DOMESTIC = 45
MIN_LAYOVER_INTERNATIONAL = 90
MAX_LAYOVER = 360

_AIRPORT_CODE_PATTERN = re.compile(r'[A-Z]{3}')


def is_domestic(arriving: EnrichedFlight, departing: EnrichedFlight) -> bool:
    """
    Check whether a connection stays within one country

    Only countries are compared; two airports in different timezones of the
    same country still make a domestic connection.

    Args:
        arriving: Leg landing at the connecting airport
        departing: Leg leaving the connecting airport

    Returns:
        True if the arrival and departure airports share a country
    """
    return arriving.destination_airport.country == departing.origin_airport.country


def is_layover_duration_valid(minutes: int, domestic: bool) -> bool:
    """
    Check a layover against the minimum connection time and the maximum wait

    Args:
        minutes: Layover length in minutes
        domestic: Whether the connection is domestic

    Returns:
        True if MIN <= minutes <= MAX_LAYOVER
    """
    min_required = MIN_LAYOVER_DOMESTIC if domestic else MIN_LAYOVER_INTERNATIONAL
    return min_required <= minutes <= MAX_LAYOVER


def layover_minutes(arriving: EnrichedFlight, departing: EnrichedFlight) -> int:
    """Minutes between landing of one leg and departure of the next"""
    return minutes_between(arriving.arrival_utc, departing.departure_utc)


def can_connect(leg_a: EnrichedFlight, leg_b: EnrichedFlight) -> bool:
    """
    Check if leg_b is a legal onward connection from leg_a

    Requires the same airport (no ground transfers), strictly later departure
    in absolute time, and a layover within the domestic or international bounds.
    """
    if leg_a.destination != leg_b.origin:
        return False

    if leg_b.departure_utc <= leg_a.arrival_utc:
        return False

    return is_layover_duration_valid(
        layover_minutes(leg_a, leg_b),
        is_domestic(leg_a, leg_b)
    )


def minimum_layover(arriving: EnrichedFlight, departing: EnrichedFlight) -> int:
    """Minimum connection time that applies between two legs"""
    if is_domestic(arriving, departing):
        return MIN_LAYOVER_DOMESTIC
    return MIN_LAYOVER_INTERNATIONAL


def is_valid_path(segments: Sequence[EnrichedFlight]) -> bool:
    """
    Check that every adjacent pair of legs connects

    An empty path is invalid; a single leg is always valid.
    """
    if not segments:
        return False
    return all(can_connect(a, b) for a, b in zip(segments, segments[1:]))


def is_valid_airport_code(code: str) -> bool:
    """Check if a code is three upper-case letters"""
    return isinstance(code, str) and _AIRPORT_CODE_PATTERN.fullmatch(code) is not None
