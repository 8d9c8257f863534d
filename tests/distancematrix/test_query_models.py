"""
Tests for Distance Matrix models
"""

import pytest
from pydantic import ValidationError

from commutecalc.distancematrix.models import TravelEstimate, TravelQuery


class TestTravelQuery:
    """Test TravelQuery model"""

    def test_arrival_query_params(self):
        """Test params for an arrival-constrained query"""
        query = TravelQuery(origin="A", destination="B", arrival_time=100, api_key="k")

        assert query.to_params() == {
            "origins": "A",
            "destinations": "B",
            "units": "imperial",
            "mode": "driving",
            "arrival_time": 100,
            "key": "k",
        }

    def test_departure_query_params(self):
        """Test params for a departure-constrained traffic query"""
        query = TravelQuery(
            origin="A", destination="B", departure_time=200,
            traffic_model="pessimistic", api_key="k",
        )
        params = query.to_params()

        assert params["departure_time"] == 200
        assert params["traffic_model"] == "pessimistic"
        assert "arrival_time" not in params

    def test_requires_one_time_constraint(self):
        with pytest.raises(ValidationError, match="Exactly one"):
            TravelQuery(origin="A", destination="B", api_key="k")

    def test_rejects_both_time_constraints(self):
        with pytest.raises(ValidationError, match="Exactly one"):
            TravelQuery(origin="A", destination="B", arrival_time=1, departure_time=2, api_key="k")

    def test_rejects_traffic_model_with_arrival(self):
        """Test traffic models need a departure time"""
        with pytest.raises(ValidationError, match="traffic_model"):
            TravelQuery(
                origin="A", destination="B", arrival_time=1,
                traffic_model="pessimistic", api_key="k",
            )

    def test_query_is_immutable(self):
        query = TravelQuery(origin="A", destination="B", arrival_time=1, api_key="k")
        with pytest.raises(ValidationError):
            query.origin = "C"

    def test_key_hidden_from_repr(self):
        query = TravelQuery(origin="A", destination="B", arrival_time=1, api_key="secret")
        assert "secret" not in repr(query)


class TestTravelEstimate:
    """Test TravelEstimate model"""

    def test_defaults(self):
        estimate = TravelEstimate()
        assert estimate.duration_text is None
        assert estimate.duration_in_traffic_text is None
