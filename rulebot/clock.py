"""Clock providers used to render time-dependent responses"""

from datetime import datetime, timedelta


class Clock:
    """Source of the current wall-clock time"""

    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock(Clock):
    """Reads the local wall clock"""

    def now(self) -> datetime:
        return datetime.now()


class FixedClock(Clock):
    """
    Clock frozen at a given moment.
    Call advance() to move it forward between readings.
    """

    def __init__(self, moment: datetime):
        self.moment = moment

    def now(self) -> datetime:
        return self.moment

    def advance(self, **kwargs) -> datetime:
        """Move the clock forward by timedelta(**kwargs)"""
        self.moment = self.moment + timedelta(**kwargs)
        return self.moment
