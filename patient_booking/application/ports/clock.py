from typing import Protocol
from datetime import datetime


class SystemClock(Protocol):
    def utc_now(self) -> datetime:
        """Current time as an aware UTC datetime."""
        ...
