"""Search request and result models"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchRequest(BaseModel):
    """Search input: two airport codes and a local departure date"""
    origin: str
    destination: str
    date: str = Field(..., description="Departure date, YYYY-MM-DD")

    @field_validator('origin', 'destination', mode='before')
    @classmethod
    def normalize_code(cls, v):
        """Strip and upper-case airport codes"""
        if isinstance(v, str):
            return v.strip().upper()
        return v


class FlightSegment(BaseModel):
    """One leg of an itinerary, with times in the airports' local zones"""
    model_config = ConfigDict(populate_by_name=True)

    flight_number: str = Field(..., alias="flightNumber")
    airline: str
    aircraft: str
    origin: str
    origin_city: str = Field(..., alias="originCity")
    origin_country: str = Field(..., alias="originCountry")
    destination: str
    destination_city: str = Field(..., alias="destinationCity")
    destination_country: str = Field(..., alias="destinationCountry")
    departure_time: str = Field(..., alias="departureTime", description="ISO-8601 with offset")
    arrival_time: str = Field(..., alias="arrivalTime", description="ISO-8601 with offset")
    duration: int = Field(..., description="Minutes in the air")
    price: float


class Layover(BaseModel):
    """Wait at a connecting airport between two segments"""
    model_config = ConfigDict(populate_by_name=True)

    airport: str
    airport_city: str = Field(..., alias="airportCity")
    airport_country: str = Field(..., alias="airportCountry")
    duration: int = Field(..., description="Minutes on the ground")
    is_domestic: bool = Field(..., alias="isDomestic")


class Itinerary(BaseModel):
    """Presentable route from search origin to search destination"""
    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "6f1c8a52-0d0e-4a8e-9f0b-2a0c4d6a1f10",
                "segments": [],
                "layovers": [],
                "totalDuration": 315,
                "totalPrice": 299.0,
                "stops": 0
            }
        }
    )

    id: str
    segments: List[FlightSegment]
    layovers: List[Layover]
    total_duration: int = Field(..., alias="totalDuration")
    total_price: float = Field(..., alias="totalPrice")
    stops: int


class SearchResult(BaseModel):
    """Itineraries sorted by total duration"""
    model_config = ConfigDict(populate_by_name=True)

    itineraries: List[Itinerary]
    search_params: SearchRequest = Field(..., alias="searchParams")
    total_results: int = Field(..., alias="totalResults")
