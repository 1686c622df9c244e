"""In-memory flight store with lookup indices"""
import threading
from collections import defaultdict
from datetime import date
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, NamedTuple, Optional, Tuple, Union
import logging

from flightfinder.exceptions import MalformedDataset
from flightfinder.models.airport import Airport
from flightfinder.models.flight import EnrichedFlight, FlightDataset
from flightfinder.processing.enrichment import enrich_flight
from flightfinder.services.dataset_reader import read_dataset
from flightfinder.utils.time_utils import parse_search_date

logger = logging.getLogger(__name__)

FlightBucket = Tuple[EnrichedFlight, ...]


class _Snapshot(NamedTuple):
    """Complete, immutable set of indices published by one load"""
    airports: Mapping[str, Airport]
    flights: FlightBucket
    by_origin: Mapping[str, FlightBucket]
    by_destination: Mapping[str, FlightBucket]
    by_origin_date: Mapping[Tuple[str, date], FlightBucket]


_EMPTY = _Snapshot(
    airports=MappingProxyType({}),
    flights=(),
    by_origin=MappingProxyType({}),
    by_destination=MappingProxyType({}),
    by_origin_date=MappingProxyType({}),
)


def _freeze(index: Dict[object, List[EnrichedFlight]]) -> Mapping:
    return MappingProxyType({key: tuple(bucket) for key, bucket in index.items()})


class FlightStore:
    """
    Load-once, read-many store of enriched flights

    A load builds a whole new snapshot of indices and publishes it with a single
    reference swap, so concurrent readers see either the old or the new data and
    never a half-built index. Accessors never mutate anything and need no lock.
    """

    def __init__(self):
        self._snapshot: _Snapshot = _EMPTY
        self._loaded = False
        self._load_lock = threading.Lock()

    @classmethod
    def from_dataset(cls, dataset: FlightDataset) -> 'FlightStore':
        """Create a store and load the given dataset into it"""
        store = cls()
        store.load(dataset)
        return store

    @classmethod
    def from_file(cls, dataset_file: Union[str, Path]) -> 'FlightStore':
        """Create a store from a dataset JSON file"""
        return cls.from_dataset(read_dataset(dataset_file))

    def load(self, dataset: FlightDataset) -> None:
        """
        Enrich every flight and build the lookup indices

        Calling load again replaces the store contents atomically. On failure
        the previous contents are kept.

        Args:
            dataset: Airports and flights to index

        Raises:
            UnknownAirport: If a flight references an airport not in the dataset
            MalformedDataset: If airports are duplicated or flight times are invalid
            InconsistentFlight: If a flight's absolute duration is negative
        """
        with self._load_lock:
            try:
                snapshot = self._build_snapshot(dataset)
            except Exception as e:
                logger.error(f"Failed to load flight data: {e}")
                raise
            self._snapshot = snapshot
            self._loaded = True

        logger.info(
            f"Loaded {len(snapshot.flights)} flights between {len(snapshot.airports)} airports"
        )

    def _build_snapshot(self, dataset: FlightDataset) -> _Snapshot:
        airports: Dict[str, Airport] = {}
        for airport in dataset.airports:
            if airport.code in airports:
                raise MalformedDataset(f"Duplicate airport code in dataset: {airport.code}")
            airports[airport.code] = airport

        flights = tuple(enrich_flight(flight, airports) for flight in dataset.flights)

        by_origin: Dict[str, List[EnrichedFlight]] = defaultdict(list)
        by_destination: Dict[str, List[EnrichedFlight]] = defaultdict(list)
        by_origin_date: Dict[Tuple[str, date], List[EnrichedFlight]] = defaultdict(list)

        for flight in flights:
            by_origin[flight.origin].append(flight)
            by_destination[flight.destination].append(flight)
            by_origin_date[(flight.origin, flight.departure_date)].append(flight)

        logger.debug(
            f"Built indices: {len(by_origin)} origins, {len(by_destination)} destinations, "
            f"{len(by_origin_date)} origin/date buckets"
        )

        return _Snapshot(
            airports=MappingProxyType(airports),
            flights=flights,
            by_origin=_freeze(by_origin),
            by_destination=_freeze(by_destination),
            by_origin_date=_freeze(by_origin_date),
        )

    @property
    def is_loaded(self) -> bool:
        """Whether a dataset has been loaded"""
        return self._loaded

    def __len__(self) -> int:
        return len(self._snapshot.flights)

    def airport(self, code: str) -> Optional[Airport]:
        """Get airport by code, or None if unknown"""
        return self._snapshot.airports.get(code)

    def all_airports(self) -> List[Airport]:
        """All airports sorted by code"""
        return sorted(self._snapshot.airports.values(), key=lambda airport: airport.code)

    def flights_departing_origin_on_date(self, origin: str, departure_date: Union[date, str]) -> FlightBucket:
        """
        Flights leaving an airport on a local calendar date

        Args:
            origin: Origin airport code
            departure_date: Date in the origin's local time (date or YYYY-MM-DD)
        """
        if isinstance(departure_date, str):
            departure_date = parse_search_date(departure_date)
        return self._snapshot.by_origin_date.get((origin, departure_date), ())

    def flights_departing_from(self, code: str) -> FlightBucket:
        """All flights leaving an airport, on any date"""
        return self._snapshot.by_origin.get(code, ())

    def flights_arriving_at(self, code: str) -> FlightBucket:
        """All flights landing at an airport, on any date"""
        return self._snapshot.by_destination.get(code, ())

    def direct_flights(self, origin: str, destination: str, departure_date: Union[date, str]) -> FlightBucket:
        """Non-stop flights between two airports on a local departure date"""
        return tuple(
            flight for flight in self.flights_departing_origin_on_date(origin, departure_date)
            if flight.destination == destination
        )

    def stats(self) -> dict:
        """Counts of loaded airports and flights"""
        snapshot = self._snapshot
        return {
            'total_airports': len(snapshot.airports),
            'total_flights': len(snapshot.flights),
            'airports': sorted(snapshot.airports),
        }
