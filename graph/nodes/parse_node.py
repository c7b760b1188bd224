# graph/nodes/parse_node.py
import logging
from datetime import datetime
from typing import Optional

from graph.errors import ParseError
from graph.models import ClockAction, ClockEvent, RawLine
from graph.state import TimelogState

logger = logging.getLogger(__name__)

DEFAULT_TIMESTAMP_FORMATS = ["%Y/%m/%d %H:%M:%S", "%Y-%m-%d %H:%M:%S"]

MARKERS = {
    "i": ClockAction.CLOCK_IN,
    "o": ClockAction.CLOCK_OUT,
}


def _parse_timestamp(value: str, formats: list[str]) -> Optional[datetime]:
    """登録済みの書式を順に試し、最初に一致したものを返す"""
    for fmt in formats:
        try:
            return datetime.strptime(value, fmt)
        except ValueError:
            continue
    return None


def parse_line(
    raw: RawLine,
    timestamp_formats: list[str] = None,
    comment_prefix: str = "#",
) -> Optional[ClockEvent]:
    """1行を打刻イベントに変換する。空行・コメント行はNoneを返す

    書式: <i|o> <日付> <時刻> [任意の文字列]
    """
    formats = timestamp_formats or DEFAULT_TIMESTAMP_FORMATS
    text = raw.text.strip()
    if not text:
        return None
    if comment_prefix and text.startswith(comment_prefix):
        return None

    parts = text.split(None, 3)
    marker = parts[0]
    if len(marker) != 1 or marker.lower() not in MARKERS:
        raise ParseError(raw.line_number, f"不明な打刻種別です [{marker}]")

    if len(parts) < 3:
        raise ParseError(raw.line_number, "日時を解析できません")
    stamp = f"{parts[1]} {parts[2]}"
    at = _parse_timestamp(stamp, formats)
    if at is None:
        raise ParseError(raw.line_number, f"日時を解析できません [{stamp}]")

    return ClockEvent(action=MARKERS[marker.lower()], at=at, line_number=raw.line_number)


def parse_node(state: TimelogState, app_config: dict = None) -> dict:
    """タイムログの各行を打刻イベントに変換するノード

    引数名configはLangGraphがRunnableConfigの注入に使うため、app_configとする。
    """
    if app_config is None:
        app_config = {
            "timelog": {"comment_prefix": "#"},
            "format": {"timestamp_formats": DEFAULT_TIMESTAMP_FORMATS},
        }

    formats = app_config["format"]["timestamp_formats"]
    comment_prefix = app_config["timelog"]["comment_prefix"]

    events = []
    for number, text in enumerate(state["lines"], start=1):
        event = parse_line(RawLine(number, text), formats, comment_prefix)
        if event is not None:
            events.append(event)

    logger.debug("%d行から%d件の打刻を読み込みました", len(state["lines"]), len(events))
    return {"events": events}
