"""
Google Distance Matrix API client for driving-time lookups
"""

import logging
import os
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

from .models import TravelEstimate, TravelQuery


class DistanceMatrixError(Exception):
    """The API answered, but not with a usable travel time"""
    pass


class DistanceMatrixClient:
    """
    Async client for the Distance Matrix API
    Issues one origin/destination query per call
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        timeout: int = 30
    ):
        self.api_key = api_key or os.getenv("GOOGLE_MAPS_API_KEY")
        self.base_url = "https://maps.googleapis.com/maps/api/distancematrix/json"
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

        if not self.api_key:
            raise ValueError(
                "Distance Matrix API key required. Pass --api-key or set GOOGLE_MAPS_API_KEY"
            )

    def build_query(
        self,
        origin: str,
        destination: str,
        arrival_time: Optional[int] = None,
        departure_time: Optional[int] = None,
        traffic_model: Optional[str] = None
    ) -> TravelQuery:
        """Build a driving, imperial-units query carrying this client's key"""
        return TravelQuery(
            origin=origin,
            destination=destination,
            arrival_time=arrival_time,
            departure_time=departure_time,
            traffic_model=traffic_model,
            api_key=self.api_key,
        )

    def build_url(self, query: TravelQuery) -> str:
        """Full request URL; the '+' place delimiter is sent unescaped"""
        return f"{self.base_url}?{urlencode(query.to_params(), safe='+')}"

    async def fetch_estimate(self, query: TravelQuery) -> TravelEstimate:
        """
        Fetch the travel estimate for a single query

        Args:
            query: Query to send

        Returns:
            TravelEstimate read from the first row/element

        Raises:
            httpx.HTTPError: On network or HTTP status failure
            DistanceMatrixError: If the payload reports an error
        """
        self.logger.debug(
            "Querying %s -> %s (%s)",
            query.origin,
            query.destination,
            f"arrive {query.arrival_time}" if query.arrival_time is not None
            else f"depart {query.departure_time}",
        )

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.get(self.build_url(query))
            response.raise_for_status()
            data = response.json()

        return self._parse_estimate(data, query)

    def _parse_estimate(self, api_response: Dict[str, Any], query: TravelQuery) -> TravelEstimate:
        """Read the duration texts from the first row/element"""
        status = api_response.get("status")
        if status != "OK":
            message = api_response.get("error_message") or "no error message"
            raise DistanceMatrixError(f"Distance Matrix request failed: {status} ({message})")

        try:
            element = api_response["rows"][0]["elements"][0]
        except (KeyError, IndexError, TypeError):
            raise DistanceMatrixError(
                f"Malformed Distance Matrix response for {query.origin} -> {query.destination}"
            )

        element_status = element.get("status", "OK")
        if element_status != "OK":
            raise DistanceMatrixError(
                f"No route from {query.origin} to {query.destination}: {element_status}"
            )

        estimate = TravelEstimate(
            duration_text=(element.get("duration") or {}).get("text"),
            duration_in_traffic_text=(element.get("duration_in_traffic") or {}).get("text"),
        )
        self.logger.debug(
            "Got duration=%r in_traffic=%r",
            estimate.duration_text,
            estimate.duration_in_traffic_text,
        )
        return estimate
