"""Configuration models"""
from typing import Optional
from pydantic import BaseModel, Field, field_validator


class Config(BaseModel):
    """Application configuration"""
    dataset_input: str = Field(..., description="Path to the flights JSON dataset")
    output_path: Optional[str] = Field(None, description="Optional output file (CSV or JSON based on extension)")
    origin: str = Field(..., description="Origin airport code")
    destination: str = Field(..., description="Destination airport code")
    date: str = Field(..., description="Local departure date (YYYY-MM-DD)")

    @field_validator('origin', 'destination', mode='before')
    @classmethod
    def normalize_code(cls, v):
        """Strip and upper-case airport codes"""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator('output_path')
    @classmethod
    def validate_output_extension(cls, v):
        """Only JSON and CSV reports can be written"""
        if v is not None and not v.lower().endswith(('.json', '.csv')):
            raise ValueError("output path must end with .json or .csv")
        return v

    @property
    def output_format(self) -> Optional[str]:
        """Output format derived from the output path extension"""
        if self.output_path is None:
            return None
        return 'json' if self.output_path.lower().endswith('.json') else 'csv'
