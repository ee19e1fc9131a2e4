"""
Clock sampling and hour symbols for the lunar calendar page
Reads wall-clock time once per frame into an immutable snapshot
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

# Zodiac animals in race order, one per hour of a 12-hour dial
HOUR_SYMBOLS = ("🐀", "🐂", "🐅", "🐇", "🐉", "🐍", "🐎", "🐐", "🐒", "🐓", "🐕", "🐖")


@dataclass(frozen=True)
class TimeSnapshot:
    """Time fields read once per frame and shared by every drawn element"""
    hour12: int
    minute: int
    second: int
    year: int
    month: int
    weekday: str

    @classmethod
    def from_datetime(cls, moment: datetime) -> 'TimeSnapshot':
        """Build a snapshot from a datetime (weekday comes from the date itself)"""
        return cls(
            hour12=moment.hour % 12,
            minute=moment.minute,
            second=moment.second,
            year=moment.year,
            month=moment.month,
            weekday=WEEKDAYS[moment.isoweekday() % 7],
        )

    def header_text(self) -> str:
        return f"Year {self.year} - Month {self.month} - {self.weekday}"

    def to_dict(self) -> dict:
        return {
            "hour12": self.hour12,
            "minute": self.minute,
            "second": self.second,
            "year": self.year,
            "month": self.month,
            "weekday": self.weekday,
        }


def sample_time(now: Optional[datetime] = None) -> TimeSnapshot:
    """Read the wall clock (or the given moment) into a TimeSnapshot"""
    return TimeSnapshot.from_datetime(now or datetime.now())


def normalize_hour(hour: int) -> int:
    """Map a 0-23 hour onto the 1-12 dial (0 and 12 both become 12)"""
    if hour == 0:
        return 12
    if hour > 12:
        return hour - 12
    return hour


def hour_symbol(hour: int) -> str:
    """Get the zodiac symbol for an hour given in 0-23 form"""
    return HOUR_SYMBOLS[(normalize_hour(hour) - 1) % 12]
