# graph/models.py
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from enum import Enum, auto
from typing import Optional

# 基準労働時間（固定）
WORKDAY = timedelta(hours=8)


class ClockAction(Enum):
    """打刻種別"""

    CLOCK_IN = auto()
    CLOCK_OUT = auto()

    def __str__(self):
        return self.name.lower().replace("_", "-")


@dataclass(frozen=True)
class RawLine:
    line_number: int  # 1始まり
    text: str


@dataclass(frozen=True)
class ClockEvent:
    action: ClockAction
    at: datetime
    line_number: int

    def __str__(self):
        return f"{self.action} at {self.at.isoformat(sep=' ')}"


@dataclass(frozen=True)
class Session:
    """出勤とそれに対応する退勤の組。退勤がなければ継続中"""

    date: date
    clock_in: datetime
    clock_out: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.clock_out is None

    def duration_until(self, now: datetime) -> timedelta:
        """勤務時間を返す。継続中は当日に限りnowまでを数え、負値は0に丸める"""
        if self.clock_out is not None:
            return self.clock_out - self.clock_in
        if now.date() != self.date or now < self.clock_in:
            return timedelta(0)
        return now - self.clock_in


@dataclass(frozen=True)
class DaySummary:
    date: date
    worked_duration: timedelta
    is_open: bool
    first_clock_in: datetime
    open_since: Optional[datetime] = None


@dataclass(frozen=True)
class OverallSummary:
    days_worked: int
    total_duration: timedelta
    average_duration: timedelta
    cumulative_overtime: timedelta
    today_first_clock_in: Optional[datetime]
    today_worked: timedelta
    remaining_with_overtime: timedelta
    remaining_plain: timedelta
    leave_time_with_overtime: Optional[datetime]
    leave_time_plain: Optional[datetime]
    clock_skew: bool = False
