"""
Configuration models for CommuteCalc
Supports YAML/JSON configuration files for estimate runs
"""

from enum import Enum
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, Field, field_validator

from commutecalc.core.models import DurationStrategy
from commutecalc.core.schedule import DEFAULT_TIMEZONE


class ConfigFormat(str, Enum):
    """Supported configuration file formats"""

    YAML = "yaml"
    JSON = "json"


class EstimateConfig(BaseModel):
    """Settings for one estimate run"""

    home: Optional[str] = Field(
        None,
        description="Home address (defaults to the demo address)"
    )
    cities: List[str] = Field(
        default_factory=list,
        description="Destinations in report order (defaults to the demo list)"
    )
    timezone: str = Field(
        DEFAULT_TIMEZONE,
        description="IANA timezone for the 9:00am/5:00pm reference instants"
    )
    strategy: DurationStrategy = Field(
        DurationStrategy.SUM,
        description="How base and traffic-adjusted durations combine"
    )
    strict: bool = Field(
        False,
        description="Fail when a response carries no duration instead of counting 0"
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v):
        """Reject unknown timezone names"""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError):
            raise ValueError(f"Unknown timezone: {v}")
        return v

    @field_validator("cities")
    @classmethod
    def validate_cities(cls, v):
        """Drop blank entries"""
        return [city.strip() for city in v if city and city.strip()]
