"""Shared fixtures: airport table and builders for flights, legs and stores"""
import json

import pytest

from flightfinder.models.airport import Airport
from flightfinder.models.flight import Flight, FlightDataset
from flightfinder.processing.enrichment import enrich_flight
from flightfinder.services.flight_store import FlightStore

AIRPORTS = [
    {"code": "JFK", "name": "John F. Kennedy International", "city": "New York", "country": "US", "timezone": "America/New_York"},
    {"code": "BOS", "name": "Logan International", "city": "Boston", "country": "US", "timezone": "America/New_York"},
    {"code": "ORD", "name": "O'Hare International", "city": "Chicago", "country": "US", "timezone": "America/Chicago"},
    {"code": "DEN", "name": "Denver International", "city": "Denver", "country": "US", "timezone": "America/Denver"},
    {"code": "SEA", "name": "Seattle-Tacoma International", "city": "Seattle", "country": "US", "timezone": "America/Los_Angeles"},
    {"code": "LAX", "name": "Los Angeles International", "city": "Los Angeles", "country": "US", "timezone": "America/Los_Angeles"},
    {"code": "HNL", "name": "Daniel K. Inouye International", "city": "Honolulu", "country": "US", "timezone": "Pacific/Honolulu"},
    {"code": "LHR", "name": "Heathrow", "city": "London", "country": "GB", "timezone": "Europe/London"},
    {"code": "CDG", "name": "Charles de Gaulle", "city": "Paris", "country": "FR", "timezone": "Europe/Paris"},
    {"code": "SYD", "name": "Kingsford Smith", "city": "Sydney", "country": "AU", "timezone": "Australia/Sydney"},
]


@pytest.fixture
def airports_data():
    """Airport records in dataset (JSON) form"""
    return [dict(airport) for airport in AIRPORTS]


@pytest.fixture
def airport_table(airports_data):
    """Airport table keyed by code"""
    return {data["code"]: Airport.model_validate(data) for data in airports_data}


@pytest.fixture
def make_flight():
    """Build a dataset flight record with local departure/arrival times"""
    def _make(number, origin, destination, departure, arrival, price=100.0,
              airline="SkyPath Airways", aircraft="A320"):
        return {
            "flightNumber": number,
            "airline": airline,
            "origin": origin,
            "destination": destination,
            "departureTime": departure,
            "arrivalTime": arrival,
            "price": price,
            "aircraft": aircraft
        }
    return _make


@pytest.fixture
def make_leg(make_flight, airport_table):
    """Build an enriched flight directly, without a store"""
    def _make(number, origin, destination, departure, arrival, price=100.0):
        flight = Flight.model_validate(make_flight(number, origin, destination, departure, arrival, price))
        return enrich_flight(flight, airport_table)
    return _make


@pytest.fixture
def make_dataset(airports_data):
    """Build a validated dataset from flight records"""
    def _make(flights, airports=None):
        return FlightDataset.model_validate({
            "airports": airports if airports is not None else airports_data,
            "flights": flights
        })
    return _make


@pytest.fixture
def make_store(make_dataset):
    """Build a loaded FlightStore from flight records"""
    def _make(flights, airports=None):
        return FlightStore.from_dataset(make_dataset(flights, airports))
    return _make


@pytest.fixture
def network_flights(make_flight):
    """
    Small US network around BOS -> SEA on 2024-03-15

    Valid itineraries BOS -> SEA (total minutes):
      SP207 direct (375), SP100 direct (390), SP200+SP201 (510),
      SP205+SP203 (570), SP200+SP202+SP203 (630).
    SP204 leaves too late after SP200 (405 min layover), SP206 returns to BOS,
    and SP300 departs on the following day.
    """
    return [
        make_flight("SP100", "BOS", "SEA", "2024-03-15T07:00:00", "2024-03-15T10:30:00", 420.0),
        make_flight("SP200", "BOS", "ORD", "2024-03-15T08:00:00", "2024-03-15T10:15:00", 150.0),
        make_flight("SP201", "ORD", "SEA", "2024-03-15T11:00:00", "2024-03-15T13:30:00", 180.0),
        make_flight("SP202", "ORD", "DEN", "2024-03-15T11:15:00", "2024-03-15T12:45:00", 90.0),
        make_flight("SP203", "DEN", "SEA", "2024-03-15T14:00:00", "2024-03-15T15:30:00", 110.0),
        make_flight("SP204", "ORD", "SEA", "2024-03-15T17:00:00", "2024-03-15T19:30:00", 160.0),
        make_flight("SP205", "BOS", "DEN", "2024-03-15T09:00:00", "2024-03-15T11:30:00", 210.0),
        make_flight("SP206", "ORD", "BOS", "2024-03-15T11:30:00", "2024-03-15T14:30:00", 140.0),
        make_flight("SP207", "BOS", "SEA", "2024-03-15T16:00:00", "2024-03-15T19:15:00", 380.0),
        make_flight("SP300", "BOS", "ORD", "2024-03-16T08:00:00", "2024-03-16T10:15:00", 150.0),
    ]


@pytest.fixture
def dataset_file(tmp_path, airports_data, network_flights):
    """Network dataset written to a JSON file"""
    path = tmp_path / "flights.json"
    with open(path, 'w', encoding='utf-8') as f:
        json.dump({"airports": airports_data, "flights": network_flights}, f)
    return str(path)
