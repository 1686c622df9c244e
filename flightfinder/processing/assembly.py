"""Conversion of connection candidates into presentable itineraries"""
import uuid
from typing import List, Sequence

from flightfinder.models.flight import EnrichedFlight
from flightfinder.models.itinerary import FlightSegment, Itinerary, Layover
from flightfinder.processing.connection_rules import is_domestic, layover_minutes
from flightfinder.utils.time_utils import to_local_timestamp


def build_segment(flight: EnrichedFlight) -> FlightSegment:
    """Segment with departure/arrival shown in each airport's local time"""
    return FlightSegment(
        flight_number=flight.flight_number,
        airline=flight.airline,
        aircraft=flight.flight.aircraft,
        origin=flight.origin,
        origin_city=flight.origin_airport.city,
        origin_country=flight.origin_airport.country,
        destination=flight.destination,
        destination_city=flight.destination_airport.city,
        destination_country=flight.destination_airport.country,
        departure_time=to_local_timestamp(flight.departure_utc, flight.origin_airport.timezone),
        arrival_time=to_local_timestamp(flight.arrival_utc, flight.destination_airport.timezone),
        duration=flight.duration_minutes,
        price=flight.price
    )


def build_layovers(legs: Sequence[EnrichedFlight]) -> List[Layover]:
    """Layovers between each pair of consecutive legs"""
    layovers = []
    for arriving, departing in zip(legs, legs[1:]):
        airport = arriving.destination_airport
        layovers.append(Layover(
            airport=airport.code,
            airport_city=airport.city,
            airport_country=airport.country,
            duration=layover_minutes(arriving, departing),
            is_domestic=is_domestic(arriving, departing)
        ))
    return layovers


def build_itinerary(legs: Sequence[EnrichedFlight], total_duration: int, total_price: float) -> Itinerary:
    """
    Assemble an itinerary from an ordered sequence of connecting legs

    Args:
        legs: One to three legs, already validated as connecting
        total_duration: Flight time plus layovers, in minutes
        total_price: Sum of leg prices

    Returns:
        Itinerary with a fresh unique id
    """
    return Itinerary(
        id=str(uuid.uuid4()),
        segments=[build_segment(leg) for leg in legs],
        layovers=build_layovers(legs),
        total_duration=total_duration,
        total_price=total_price,
        stops=len(legs) - 1
    )
