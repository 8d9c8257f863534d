"""
Parsing of human-readable duration text ("1 hour 5 mins") into minutes
"""

import logging
import re
from typing import Optional

from commutecalc.distancematrix.models import TravelEstimate

from .models import DurationStrategy

logger = logging.getLogger(__name__)

_DURATION_PATTERN = re.compile(
    r"^(?:(?P<hours>\d+)\s+hours?)?\s*(?:(?P<minutes>\d+)\s+mins?)?$",
    re.IGNORECASE,
)


class DurationParseError(ValueError):
    """Duration text did not match any known format"""
    pass


class MissingDurationError(ValueError):
    """Response carried no base duration at all"""
    pass


def _present(text: Optional[str]) -> bool:
    return bool(text and text.strip())


def parse_duration_text(text: Optional[str]) -> int:
    """
    Convert duration text to whole minutes

    Accepts "<N> hour(s) <M> min(s)", "<N> hour(s)" and "<M> min(s)".
    Absent or blank text counts as zero minutes.

    Raises:
        DurationParseError: If the text is present but unrecognized
    """
    if not _present(text):
        return 0

    match = _DURATION_PATTERN.match(text.strip())
    if not match or not (match.group("hours") or match.group("minutes")):
        raise DurationParseError(f"Unrecognized duration text: {text!r}")

    hours = int(match.group("hours") or 0)
    minutes = int(match.group("minutes") or 0)
    return hours * 60 + minutes


def combine_durations(
    estimate: TravelEstimate,
    strategy: DurationStrategy = DurationStrategy.SUM,
    strict: bool = False,
    log: Optional[logging.Logger] = None,
) -> int:
    """
    Reduce a TravelEstimate to a single minutes figure

    Args:
        estimate: Parsed response texts
        strategy: SUM adds base and traffic-adjusted minutes;
            PREFER_TRAFFIC uses the traffic-adjusted figure when present
        strict: Raise instead of warning when the base duration is missing
        log: Diagnostic sink (defaults to this module's logger)

    Returns:
        Total minutes
    """
    log = log or logger
    has_base = _present(estimate.duration_text)
    has_traffic = _present(estimate.duration_in_traffic_text)

    if not has_base:
        if strict:
            raise MissingDurationError("Response contained no duration")
        log.warning("Response contained no duration; counting it as 0 minutes")

    base = parse_duration_text(estimate.duration_text)
    traffic = parse_duration_text(estimate.duration_in_traffic_text)

    if strategy == DurationStrategy.PREFER_TRAFFIC:
        return traffic if has_traffic else base
    return base + traffic
