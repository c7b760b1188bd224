# graph/nodes/aggregate_node.py
import logging
from datetime import date, datetime, timedelta

from graph.models import DaySummary, Session
from graph.state import TimelogState

logger = logging.getLogger(__name__)


def aggregate_sessions(sessions: list[Session], now: datetime) -> list[DaySummary]:
    """セッションを出勤日ごとに集計する

    日付を跨ぐセッションは出勤日にすべて計上する。
    """
    by_date: dict[date, list[Session]] = {}
    for session in sessions:
        by_date.setdefault(session.date, []).append(session)

    days = []
    for day, day_sessions in by_date.items():
        last = day_sessions[-1]
        worked = sum(
            (s.duration_until(now) for s in day_sessions), timedelta(0)
        )
        days.append(
            DaySummary(
                date=day,
                worked_duration=worked,
                is_open=last.is_open,
                first_clock_in=day_sessions[0].clock_in,
                open_since=last.clock_in if last.is_open else None,
            )
        )
    return days


def aggregate_node(state: TimelogState) -> dict:
    """日別の勤務時間を集計するノード"""
    days = aggregate_sessions(state["sessions"], state["now"])
    logger.debug("%d日分の勤務を集計しました", len(days))
    return {"days": days}
