"""
CommuteCalc: Worst-case commute estimation

A small CLI tool that estimates Monday-morning and Friday-evening driving
commutes between a home address and a list of destinations using the
Google Distance Matrix API.
"""

__version__ = "0.1.0"

from .core.estimator import CommuteEstimator
from .core.models import CommuteRecord, DurationStrategy

__all__ = [
    "CommuteEstimator",
    "CommuteRecord",
    "DurationStrategy",
]
