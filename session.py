# session.py
import datetime
import time
from dataclasses import dataclass, field
from typing import List, Optional


class SystemClock:
    """Wall clock for time-of-day replies, monotonic clock for uptime."""

    def now(self) -> datetime.datetime:
        return datetime.datetime.now()

    def monotonic(self) -> float:
        return time.monotonic()


def format_duration(seconds: float) -> str:
    total = max(0, int(seconds))
    hours, rest = divmod(total, 3600)
    minutes, secs = divmod(rest, 60)
    return f"{hours}h {minutes}m {secs}s"


@dataclass
class SessionState:
    started_at: float
    running: bool = True
    history: List[str] = field(default_factory=list)
    # CalculatorSession while the calculator sub-mode is active
    calculator: Optional[object] = None

    @classmethod
    def start(cls, clock) -> "SessionState":
        return cls(started_at=clock.monotonic())

    def record(self, line: str):
        self.history.append(line)

    def elapsed(self, clock) -> float:
        return max(0.0, clock.monotonic() - self.started_at)

    @property
    def in_calculator(self) -> bool:
        return self.calculator is not None and self.calculator.active

    def summary(self, clock) -> str:
        return f"Session lasted: {format_duration(self.elapsed(clock))} | Messages: {len(self.history)}"
