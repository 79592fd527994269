from datetime import datetime

from ...application.ports.clock import SystemClock
from ...utils.time import utc_now


class UtcSystemClock(SystemClock):
    def utc_now(self) -> datetime:
        return utc_now()
