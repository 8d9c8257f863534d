"""
Distance Matrix API data models
"""

from typing import Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

PESSIMISTIC = "pessimistic"


class TravelQuery(BaseModel):
    """One origin/destination request for the Distance Matrix API"""

    model_config = ConfigDict(frozen=True)

    origin: str = Field(description="Origin place, query-delimited")
    destination: str = Field(description="Destination place, query-delimited")
    arrival_time: Optional[int] = Field(None, ge=0, description="Target arrival, epoch seconds")
    departure_time: Optional[int] = Field(None, ge=0, description="Target departure, epoch seconds")
    units: str = Field("imperial", description="Unit system")
    mode: str = Field("driving", description="Travel mode")
    traffic_model: Optional[str] = Field(None, description="Traffic model (e.g. pessimistic)")
    api_key: str = Field(repr=False, description="Google Maps API key")

    @model_validator(mode="after")
    def check_time_constraint(self) -> "TravelQuery":
        """Exactly one time constraint; traffic models need a departure time"""
        if (self.arrival_time is None) == (self.departure_time is None):
            raise ValueError("Exactly one of arrival_time or departure_time is required")
        if self.traffic_model and self.arrival_time is not None:
            raise ValueError("traffic_model cannot be combined with arrival_time")
        return self

    def to_params(self) -> Dict[str, Union[str, int]]:
        """Query string parameters for the request"""
        params: Dict[str, Union[str, int]] = {
            "origins": self.origin,
            "destinations": self.destination,
            "units": self.units,
            "mode": self.mode,
        }
        if self.arrival_time is not None:
            params["arrival_time"] = self.arrival_time
        else:
            params["departure_time"] = self.departure_time
        if self.traffic_model:
            params["traffic_model"] = self.traffic_model
        params["key"] = self.api_key
        return params


class TravelEstimate(BaseModel):
    """Duration texts read from the first row/element of a response"""

    duration_text: Optional[str] = Field(None, description="e.g. '25 mins'")
    duration_in_traffic_text: Optional[str] = Field(
        None, description="Traffic-adjusted duration, absent without traffic data"
    )
