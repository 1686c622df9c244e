"""Airport data model"""
from pydantic import BaseModel, ConfigDict, Field


class Airport(BaseModel):
    """Airport information"""
    model_config = ConfigDict(frozen=True)

    code: str = Field(..., min_length=3, max_length=3, description="3-letter IATA code")
    name: str
    city: str
    country: str = Field(..., description="Country code used for domestic/international checks")
    timezone: str = Field(..., description="Timezone in IANA (Olson) format")
