"""
Distance Matrix API integration for driving-time lookups
"""

from .client import DistanceMatrixClient, DistanceMatrixError
from .models import TravelEstimate, TravelQuery

__all__ = ["DistanceMatrixClient", "DistanceMatrixError", "TravelEstimate", "TravelQuery"]
