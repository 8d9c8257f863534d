"""
Core data models for commute estimation
"""

import re
from datetime import time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

QUERY_DELIMITER = "+"

_WHITESPACE = re.compile(r"\s+")


class DurationStrategy(str, Enum):
    """How base and traffic-adjusted durations combine into one figure"""

    SUM = "sum"  # base + traffic-adjusted
    PREFER_TRAFFIC = "prefer_traffic"  # traffic-adjusted when present, else base


def normalize_place(text: str) -> str:
    """Replace internal whitespace with the query delimiter"""
    return _WHITESPACE.sub(QUERY_DELIMITER, text.strip())


def display_place(query_value: str) -> str:
    """Revert a normalized place back to its display form"""
    return query_value.replace(QUERY_DELIMITER, " ")


class CommuteRecord(BaseModel):
    """Estimated worst-case commute for one destination"""

    model_config = ConfigDict(frozen=True)

    city: str = Field(description="Destination display name")
    minutes_to_arrive: int = Field(ge=0, description="Minutes to arrive by 9:00am Monday")
    depart_house_at: time = Field(description="Clock time to leave home")
    minutes_to_return: int = Field(ge=0, description="Minutes to get home leaving 5:00pm Friday")
    arrive_home_at: time = Field(description="Clock time of arrival home")
