from graph.state import TimelogState
from graph.models import ClockAction, ClockEvent, Session
from datetime import datetime


def test_timelog_state_creation():
    """TimelogStateが正しいキーで生成できること"""
    now = datetime(2024, 1, 2, 9, 0)
    state: TimelogState = {
        "now": now,
        "lines": [],
        "events": [],
        "sessions": [],
        "days": [],
        "summary": None,
    }
    assert state["now"] == now
    assert state["events"] == []
    assert state["summary"] is None


def test_timelog_state_with_data():
    """イベント・セッション付きのStateが正しく動作すること"""
    at = datetime(2024, 1, 2, 9, 0)
    event = ClockEvent(action=ClockAction.CLOCK_IN, at=at, line_number=1)
    state: TimelogState = {
        "now": at,
        "lines": ["i 2024-01-02 09:00:00"],
        "events": [event],
        "sessions": [Session(date=at.date(), clock_in=at)],
        "days": [],
        "summary": None,
    }
    assert state["events"][0].action is ClockAction.CLOCK_IN
    assert state["sessions"][0].is_open is True
    assert str(event) == "clock-in at 2024-01-02 09:00:00"
