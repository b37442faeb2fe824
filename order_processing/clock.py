"""
Time sources

Business code never reads the system clock directly; it receives a
TimeProvider so that discount and log timestamps are deterministic in tests.
"""
from abc import ABC, abstractmethod
from datetime import datetime


class TimeProvider(ABC):
    """Source of the current time"""
    
    @abstractmethod
    def now(self) -> datetime:
        raise NotImplementedError


class SystemTimeProvider(TimeProvider):
    """Local wall-clock time"""
    
    def now(self) -> datetime:
        return datetime.now()


class FixedTimeProvider(TimeProvider):
    """Always returns the same instant"""
    
    def __init__(self, fixed_now: datetime):
        self._fixed_now = fixed_now
    
    def now(self) -> datetime:
        return self._fixed_now
    
    def __repr__(self):
        return f"<FixedTimeProvider({self._fixed_now.isoformat()})>"
