# graph/nodes/sequence_node.py
import logging
from enum import Enum, auto

from graph.errors import EmptyLogError, MalformedSequenceError, OutOfOrderError
from graph.models import ClockAction, ClockEvent, Session
from graph.state import TimelogState

logger = logging.getLogger(__name__)


class SequencerState(Enum):
    AWAITING_CLOCK_IN = auto()
    AWAITING_CLOCK_OUT = auto()


def _check_chronology(events: list[ClockEvent]):
    """時系列順（同時刻は可）になっていることを確認する"""
    for previous, current in zip(events, events[1:]):
        if current.at < previous.at:
            raise OutOfOrderError(
                current.line_number,
                f"{previous.line_number}行目より前の時刻です",
            )


def sequence_events(events: list[ClockEvent]) -> list[Session]:
    """打刻イベントを検証し、出勤・退勤の組に変換する

    最後のイベントが出勤の場合のみ、継続中のセッションとして残す。
    """
    if not events:
        raise EmptyLogError()

    _check_chronology(events)

    state = SequencerState.AWAITING_CLOCK_IN
    pending = None
    sessions = []

    for event in events:
        if state is SequencerState.AWAITING_CLOCK_IN:
            if event.action is ClockAction.CLOCK_OUT:
                raise MalformedSequenceError(
                    event.line_number, "対応する出勤のない退勤です"
                )
            pending = event
            state = SequencerState.AWAITING_CLOCK_OUT
        else:
            if event.action is ClockAction.CLOCK_IN:
                raise MalformedSequenceError(
                    event.line_number,
                    f"{pending.line_number}行目の出勤に対する退勤がありません",
                )
            sessions.append(
                Session(
                    date=pending.at.date(),
                    clock_in=pending.at,
                    clock_out=event.at,
                )
            )
            pending = None
            state = SequencerState.AWAITING_CLOCK_IN

    # 末尾の出勤は勤務継続中
    if state is SequencerState.AWAITING_CLOCK_OUT:
        sessions.append(Session(date=pending.at.date(), clock_in=pending.at))

    return sessions


def sequence_node(state: TimelogState) -> dict:
    """打刻イベント列を検証してセッションに変換するノード"""
    sessions = sequence_events(state["events"])
    logger.debug("%d件のセッションを構成しました", len(sessions))
    return {"sessions": sessions}
