"""Data models for flights and the dataset document"""
from datetime import date, datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field

from flightfinder.models.airport import Airport


class Flight(BaseModel):
    """Scheduled flight exactly as it appears in the dataset"""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    flight_number: str = Field(..., alias="flightNumber")
    airline: str
    origin: str = Field(..., description="IATA code of origin airport")
    destination: str = Field(..., description="IATA code of destination airport")
    departure_time: str = Field(..., alias="departureTime",
                                description="Local departure date-time without offset")
    arrival_time: str = Field(..., alias="arrivalTime",
                              description="Local arrival date-time without offset")
    price: float = Field(..., ge=0)
    aircraft: str


class FlightDataset(BaseModel):
    """Dataset document: airports and flights"""
    airports: List[Airport]
    flights: List[Flight]


class EnrichedFlight(BaseModel):
    """
    Flight with resolved airports and absolute (UTC) times.

    Built once when the store loads and shared read-only by every search.
    """
    model_config = ConfigDict(frozen=True)

    flight: Flight
    origin_airport: Airport
    destination_airport: Airport
    departure_utc: datetime
    arrival_utc: datetime
    duration_minutes: int
    departure_date: date = Field(..., description="Departure date in the origin's local time")

    @property
    def flight_number(self) -> str:
        """Flight number of the underlying flight"""
        return self.flight.flight_number

    @property
    def airline(self) -> str:
        """Operating airline"""
        return self.flight.airline

    @property
    def origin(self) -> str:
        """Origin airport code"""
        return self.flight.origin

    @property
    def destination(self) -> str:
        """Destination airport code"""
        return self.flight.destination

    @property
    def price(self) -> float:
        """Fare of this leg"""
        return self.flight.price
