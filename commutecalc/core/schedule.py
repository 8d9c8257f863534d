"""
Target-day computation for the Monday-morning and Friday-evening commutes
"""

from datetime import date, datetime, time, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from pydantic import BaseModel, ConfigDict

DEFAULT_TIMEZONE = "America/New_York"

ARRIVE_BY = time(9, 0)
LEAVE_AT = time(17, 0)

# Days to add to today's weekday (Monday=0) to reach the target weekday.
# Landing on the same weekday always means next week.
DAYS_UNTIL_MONDAY = {0: 7, 1: 6, 2: 5, 3: 4, 4: 3, 5: 2, 6: 1}
DAYS_UNTIL_FRIDAY = {0: 4, 1: 3, 2: 2, 3: 1, 4: 7, 5: 6, 6: 5}

# Any fixed day; only the clock time of the result is kept.
_CLOCK_DAY = date(2000, 1, 3)


def days_until_monday(weekday: int) -> int:
    """Days from a weekday (Monday=0) to the next Monday"""
    return DAYS_UNTIL_MONDAY[weekday]


def days_until_friday(weekday: int) -> int:
    """Days from a weekday (Monday=0) to the next Friday"""
    return DAYS_UNTIL_FRIDAY[weekday]


def next_monday_morning(today: date, tz: ZoneInfo) -> datetime:
    day = today + timedelta(days=days_until_monday(today.weekday()))
    return datetime.combine(day, ARRIVE_BY, tzinfo=tz)


def next_friday_evening(today: date, tz: ZoneInfo) -> datetime:
    day = today + timedelta(days=days_until_friday(today.weekday()))
    return datetime.combine(day, LEAVE_AT, tzinfo=tz)


def depart_house_at(minutes_to_arrive: int) -> time:
    """Clock time to leave home to arrive by 9:00am"""
    start = datetime.combine(_CLOCK_DAY, ARRIVE_BY)
    return (start - timedelta(minutes=minutes_to_arrive)).time()


def arrive_home_at(minutes_to_return: int) -> time:
    """Clock time of arrival home after leaving at 5:00pm"""
    start = datetime.combine(_CLOCK_DAY, LEAVE_AT)
    return (start + timedelta(minutes=minutes_to_return)).time()


class TargetTimes(BaseModel):
    """The two reference instants used for every query in a run"""

    model_config = ConfigDict(frozen=True)

    monday_morning: datetime
    friday_evening: datetime

    @classmethod
    def for_date(cls, today: Optional[date] = None, timezone: str = DEFAULT_TIMEZONE) -> "TargetTimes":
        """
        Compute next Monday 9:00am and next Friday 5:00pm

        Args:
            today: Reference date (defaults to today in the given timezone)
            timezone: IANA timezone name for the reference instants
        """
        tz = ZoneInfo(timezone)
        if today is None:
            today = datetime.now(tz).date()
        return cls(
            monday_morning=next_monday_morning(today, tz),
            friday_evening=next_friday_evening(today, tz),
        )

    @property
    def arrival_epoch(self) -> int:
        return int(self.monday_morning.timestamp())

    @property
    def return_epoch(self) -> int:
        return int(self.friday_evening.timestamp())

    def departure_epoch_for(self, minutes_to_arrive: int) -> int:
        """Epoch seconds to leave home so as to arrive by Monday 9:00am"""
        return self.arrival_epoch - minutes_to_arrive * 60
