"""
Core commute estimation logic
"""

from .durations import DurationParseError, MissingDurationError, parse_duration_text
from .estimator import CommuteEstimator
from .models import CommuteRecord, DurationStrategy
from .schedule import TargetTimes

__all__ = [
    "CommuteEstimator",
    "CommuteRecord",
    "DurationParseError",
    "DurationStrategy",
    "MissingDurationError",
    "TargetTimes",
    "parse_duration_text",
]
