"""
Itinerary search over the flight store.

Three independent stages enumerate direct, one-stop and two-stop routes as
lazy generators of candidates. Results are concatenated in stage order and
stable-sorted by total duration, so ties keep encounter order.
"""
from datetime import date
from typing import Iterator, List, NamedTuple, Tuple

from flightfinder.exceptions import SameAirport, UnknownAirport
from flightfinder.models.flight import EnrichedFlight
from flightfinder.models.itinerary import Itinerary, SearchRequest, SearchResult
from flightfinder.processing.assembly import build_itinerary
from flightfinder.processing.connection_rules import can_connect, layover_minutes
from flightfinder.services.flight_store import FlightStore
from flightfinder.utils.time_utils import parse_search_date

import logging

logger = logging.getLogger(__name__)


class ConnectionCandidate(NamedTuple):
    """Ordered legs from search origin to search destination"""
    segments: Tuple[EnrichedFlight, ...]
    total_duration: int
    total_price: float


def make_candidate(*legs: EnrichedFlight) -> ConnectionCandidate:
    """Candidate with duration = flight time + layovers and price = sum of fares"""
    total_duration = sum(leg.duration_minutes for leg in legs)
    total_duration += sum(layover_minutes(a, b) for a, b in zip(legs, legs[1:]))
    return ConnectionCandidate(
        segments=legs,
        total_duration=total_duration,
        total_price=sum(leg.price for leg in legs)
    )


def iter_direct(store: FlightStore, origin: str, destination: str,
                departure_date: date) -> Iterator[ConnectionCandidate]:
    """Non-stop flights departing on the search date"""
    for leg in store.flights_departing_origin_on_date(origin, departure_date):
        if leg.destination == destination:
            yield make_candidate(leg)


def iter_one_stop(store: FlightStore, origin: str, destination: str,
                  departure_date: date) -> Iterator[ConnectionCandidate]:
    """
    Routes with one connection

    Only the first leg is restricted to the search date; the onward leg may
    depart on a later local date.
    """
    for first in store.flights_departing_origin_on_date(origin, departure_date):
        if first.destination == destination:
            continue

        for second in store.flights_departing_from(first.destination):
            if second.destination != destination:
                continue
            if can_connect(first, second):
                yield make_candidate(first, second)


def iter_two_stop(store: FlightStore, origin: str, destination: str,
                  departure_date: date) -> Iterator[ConnectionCandidate]:
    """
    Routes with two connections

    The middle leg may not land at the destination (that is a one-stop route)
    or back at the origin (circular route).
    """
    for first in store.flights_departing_origin_on_date(origin, departure_date):
        if first.destination == destination:
            continue

        for second in store.flights_departing_from(first.destination):
            if second.destination in (destination, origin):
                continue
            if not can_connect(first, second):
                continue

            for third in store.flights_departing_from(second.destination):
                if third.destination != destination:
                    continue
                if can_connect(second, third):
                    yield make_candidate(first, second, third)


class ItinerarySearch:
    """Search engine bound to one flight store"""

    def __init__(self, store: FlightStore):
        self.store = store

    def validate_search_params(self, origin: str, destination: str, departure_date: str) -> date:
        """
        Check search inputs and return the parsed date

        Raises:
            UnknownAirport: If origin or destination is not in the store
            SameAirport: If origin equals destination
            InvalidDate: If the date is not a valid YYYY-MM-DD calendar date
        """
        if self.store.airport(origin) is None:
            raise UnknownAirport(origin, context="origin")

        if self.store.airport(destination) is None:
            raise UnknownAirport(destination, context="destination")

        if origin == destination:
            raise SameAirport(origin)

        return parse_search_date(departure_date)

    def search(self, origin: str, destination: str, departure_date: str) -> SearchResult:
        """
        Find all valid direct, one-stop and two-stop itineraries

        Args:
            origin: Origin airport code
            destination: Destination airport code
            departure_date: Local departure date at the origin (YYYY-MM-DD)

        Returns:
            SearchResult with itineraries sorted by total duration, shortest first
        """
        parsed_date = self.validate_search_params(origin, destination, departure_date)

        itineraries: List[Itinerary] = []
        stages = (
            ('direct', iter_direct),
            ('one-stop', iter_one_stop),
            ('two-stop', iter_two_stop),
        )
        for stage_name, stage in stages:
            found = [
                build_itinerary(candidate.segments, candidate.total_duration, candidate.total_price)
                for candidate in stage(self.store, origin, destination, parsed_date)
            ]
            logger.debug(f"{origin}->{destination} on {departure_date}: {len(found)} {stage_name} itineraries")
            itineraries.extend(found)

        itineraries.sort(key=lambda itinerary: itinerary.total_duration)

        return SearchResult(
            itineraries=itineraries,
            search_params=SearchRequest(origin=origin, destination=destination, date=departure_date),
            total_results=len(itineraries)
        )

    def search_request(self, request: SearchRequest) -> SearchResult:
        """Run a search from a SearchRequest"""
        return self.search(request.origin, request.destination, request.date)
