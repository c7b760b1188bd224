# graph/nodes/overtime_node.py
import logging
from datetime import datetime, timedelta

from graph.models import WORKDAY, DaySummary, OverallSummary
from graph.state import TimelogState

logger = logging.getLogger(__name__)

ZERO = timedelta(0)


def calculate_summary(days: list[DaySummary], now: datetime) -> OverallSummary:
    """日別集計から残業累計と本日の残り時間・退勤予定時刻を算出する

    残業累計は最終日（ログ上の「本日」）を除いた各日の (勤務時間 - 8時間) の合計。
    最終日がnowと同じ日付でなければ本日分の項目は0/Noneとなる。
    """
    total = sum((d.worked_duration for d in days), ZERO)
    average = total / len(days)
    overtime = sum((d.worked_duration - WORKDAY for d in days[:-1]), ZERO)

    last = days[-1]
    # 最終出勤がnowより後なら日付に関係なく時計のずれとして扱う
    clock_skew = last.is_open and now < last.open_since
    if clock_skew:
        logger.warning(
            "現在時刻 %s が最終出勤 %s より前です。勤務中の時間は0として扱います",
            now, last.open_since,
        )

    if last.date != now.date():
        return OverallSummary(
            days_worked=len(days),
            total_duration=total,
            average_duration=average,
            cumulative_overtime=overtime,
            today_first_clock_in=None,
            today_worked=ZERO,
            remaining_with_overtime=ZERO,
            remaining_plain=ZERO,
            leave_time_with_overtime=None,
            leave_time_plain=None,
            clock_skew=clock_skew,
        )

    today_worked = last.worked_duration
    remaining_plain = max(ZERO, WORKDAY - today_worked)
    remaining_with_overtime = max(ZERO, WORKDAY - today_worked - overtime)

    return OverallSummary(
        days_worked=len(days),
        total_duration=total,
        average_duration=average,
        cumulative_overtime=overtime,
        today_first_clock_in=last.first_clock_in,
        today_worked=today_worked,
        remaining_with_overtime=remaining_with_overtime,
        remaining_plain=remaining_plain,
        leave_time_with_overtime=now + remaining_with_overtime,
        leave_time_plain=now + remaining_plain,
        clock_skew=clock_skew,
    )


def overtime_node(state: TimelogState) -> dict:
    """残業累計と本日の見込みを算出し、サマリを生成するノード"""
    return {"summary": calculate_summary(state["days"], state["now"])}
