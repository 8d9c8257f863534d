"""
Tests for duration text parsing
"""

import logging
from unittest.mock import patch

import pytest

from commutecalc.core.durations import (
    DurationParseError,
    MissingDurationError,
    combine_durations,
    parse_duration_text,
)
from commutecalc.core.models import DurationStrategy
from commutecalc.distancematrix.models import TravelEstimate


class TestParseDurationText:
    """Test parse_duration_text"""

    @pytest.mark.parametrize("text,expected", [
        ("1 hour 5 mins", 65),
        ("2 hours 30 mins", 150),
        ("1 hour 1 min", 61),
        ("45 mins", 45),
        ("1 min", 1),
        ("3 hours", 180),
    ])
    def test_known_formats(self, text, expected):
        """Test the formats the API returns"""
        assert parse_duration_text(text) == expected

    @pytest.mark.parametrize("text", [None, "", "   "])
    def test_absent_text_is_zero(self, text):
        """Test that missing text contributes nothing"""
        assert parse_duration_text(text) == 0

    @pytest.mark.parametrize("text", ["1 day 2 hours", "about 5 mins", "mins", "5"])
    def test_malformed_text_raises(self, text):
        """Test that unexpected tokens fail loudly"""
        with pytest.raises(DurationParseError, match="Unrecognized duration text"):
            parse_duration_text(text)


class TestCombineDurations:
    """Test combine_durations"""

    def test_sum_adds_traffic(self):
        """Test the default strategy adds base and traffic minutes"""
        estimate = TravelEstimate(duration_text="30 mins", duration_in_traffic_text="1 hour 2 mins")
        assert combine_durations(estimate) == 92

    def test_sum_without_traffic(self):
        """Test missing traffic data counts as zero"""
        estimate = TravelEstimate(duration_text="25 mins")
        assert combine_durations(estimate, DurationStrategy.SUM) == 25

    def test_prefer_traffic(self):
        """Test the traffic figure replaces the base when present"""
        estimate = TravelEstimate(duration_text="30 mins", duration_in_traffic_text="42 mins")
        assert combine_durations(estimate, DurationStrategy.PREFER_TRAFFIC) == 42

    def test_prefer_traffic_falls_back_to_base(self):
        """Test the base figure is used when traffic data is absent"""
        estimate = TravelEstimate(duration_text="30 mins")
        assert combine_durations(estimate, DurationStrategy.PREFER_TRAFFIC) == 30

    def test_missing_duration_warns(self):
        """Test a response without a duration is flagged on the module logger by default"""
        with patch("commutecalc.core.durations.logger") as module_logger:
            assert combine_durations(TravelEstimate()) == 0

        module_logger.warning.assert_called_once()
        assert "no duration" in module_logger.warning.call_args[0][0]

    def test_missing_duration_warns_given_logger(self, caplog):
        """Test the warning goes to the logger passed in"""
        sink = logging.getLogger("tests.durations.sink")

        with caplog.at_level(logging.WARNING, logger="tests.durations.sink"):
            assert combine_durations(TravelEstimate(), log=sink) == 0

        assert [r.name for r in caplog.records] == ["tests.durations.sink"]
        assert "no duration" in caplog.records[0].getMessage()

    def test_blank_duration_warns(self):
        """Test whitespace-only duration text counts as missing"""
        with patch("commutecalc.core.durations.logger") as module_logger:
            assert combine_durations(TravelEstimate(duration_text="  ")) == 0

        module_logger.warning.assert_called_once()

    def test_blank_duration_strict(self):
        with pytest.raises(MissingDurationError):
            combine_durations(TravelEstimate(duration_text="  "), strict=True)

    def test_prefer_traffic_blank_traffic_falls_back(self):
        """Test whitespace-only traffic text falls back to the base"""
        estimate = TravelEstimate(duration_text="30 mins", duration_in_traffic_text="  ")
        assert combine_durations(estimate, DurationStrategy.PREFER_TRAFFIC) == 30

    def test_missing_duration_strict(self):
        """Test strict mode rejects a response without a duration"""
        with pytest.raises(MissingDurationError):
            combine_durations(TravelEstimate(), strict=True)
