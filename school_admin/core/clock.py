"""
Wall clock used by services for "current month" and "today" decisions.

Services receive a `Clock` rather than calling `datetime.now()` so tests can
pin the date through the `get_clock` dependency.
"""

from datetime import date, datetime, tzinfo
from typing import Optional

from school_admin.config.settings import settings


class Clock:
    """Current time in the configured school timezone."""

    def __init__(self, tz: Optional[tzinfo] = None):
        self.tz = tz or settings.tzinfo

    def now(self) -> datetime:
        return datetime.now(self.tz)

    def today(self) -> date:
        return self.now().date()


class FixedClock(Clock):
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime, tz: Optional[tzinfo] = None):
        super().__init__(tz or instant.tzinfo)
        self._instant = instant if instant.tzinfo else instant.replace(tzinfo=self.tz)

    def now(self) -> datetime:
        return self._instant.astimezone(self.tz)
