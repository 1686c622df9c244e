"""Typed failures raised by the flight search core"""
from typing import Optional


class FlightFinderError(Exception):
    """Base class for all flight search errors"""


class MalformedDataset(FlightFinderError):
    """Dataset document is missing fields, has bad values or is not valid JSON"""


class InconsistentFlight(MalformedDataset):
    """Flight whose absolute arrival precedes its absolute departure"""

    def __init__(self, flight_number: str, duration_minutes: int):
        self.flight_number = flight_number
        self.duration_minutes = duration_minutes
        super().__init__(
            f"Flight {flight_number} arrives before it departs (duration {duration_minutes} minutes)"
        )


class UnknownAirport(FlightFinderError):
    """Airport code not present in the airport table"""

    def __init__(self, code: str, context: Optional[str] = None):
        self.code = code
        message = f"Unknown airport code: {code}"
        if context:
            message = f"{message} ({context})"
        super().__init__(message)


class SameAirport(FlightFinderError):
    """Origin and destination are the same airport"""

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Origin and destination must be different (both {code})")


class InvalidDate(FlightFinderError):
    """Search date is not a calendar-valid YYYY-MM-DD string"""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid date {value!r}. Expected YYYY-MM-DD")


class InvalidTimezone(FlightFinderError):
    """Timezone identifier is not a known IANA zone"""

    def __init__(self, timezone_id: str):
        self.timezone_id = timezone_id
        super().__init__(f"Unknown timezone: {timezone_id}")


class InvalidTimestamp(FlightFinderError):
    """Local timestamp cannot be parsed as a naive ISO-8601 date-time"""

    def __init__(self, value: str, reason: str = "not an ISO-8601 local date-time"):
        self.value = value
        super().__init__(f"Invalid timestamp {value!r}: {reason}")
