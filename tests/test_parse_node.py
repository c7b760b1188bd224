# tests/test_parse_node.py
from datetime import datetime

import pytest

from graph.errors import ParseError
from graph.models import ClockAction, RawLine
from graph.nodes.parse_node import parse_line, parse_node


def _make_state(**overrides):
    base = {
        "now": datetime(2024, 1, 2, 10, 0, 0),
        "lines": [],
    }
    base.update(overrides)
    return base


def test_parse_clock_in_line():
    """出勤行を解析でき、末尾の文字列は無視されること"""
    event = parse_line(RawLine(1, "i 2022/04/22 21:33:23 e:fc:fred"))
    assert event.action is ClockAction.CLOCK_IN
    assert event.at == datetime(2022, 4, 22, 21, 33, 23)
    assert event.line_number == 1


def test_parse_clock_out_line():
    """退勤行を解析できること"""
    event = parse_line(RawLine(7, "o 2022/04/22 21:33:33"))
    assert event.action is ClockAction.CLOCK_OUT
    assert event.at == datetime(2022, 4, 22, 21, 33, 33)
    assert event.line_number == 7


def test_parse_iso_date():
    """ハイフン区切りの日付も解析できること"""
    event = parse_line(RawLine(1, "i 2024-01-01 09:00:00"))
    assert event.at == datetime(2024, 1, 1, 9, 0, 0)


def test_parse_upper_case_marker():
    """大文字の打刻種別も受け付けること"""
    assert parse_line(RawLine(1, "I 2024-01-01 09:00:00")).action is ClockAction.CLOCK_IN
    assert parse_line(RawLine(2, "O 2024-01-01 17:00:00")).action is ClockAction.CLOCK_OUT


def test_blank_and_comment_lines_skipped():
    """空行・コメント行はNoneを返すこと"""
    assert parse_line(RawLine(1, "")) is None
    assert parse_line(RawLine(2, "   \t")) is None
    assert parse_line(RawLine(3, "# 2024年のログ")) is None


def test_unknown_marker():
    """不明な打刻種別はParseErrorになること"""
    with pytest.raises(ParseError) as exc_info:
        parse_line(RawLine(4, "x 2024-01-01 09:00:00"))
    assert exc_info.value.line_number == 4


def test_multi_char_marker():
    """1文字でない打刻種別はParseErrorになること"""
    with pytest.raises(ParseError):
        parse_line(RawLine(1, "in 2024-01-01 09:00:00"))


def test_invalid_timestamp():
    """存在しない日付はParseErrorになること"""
    with pytest.raises(ParseError) as exc_info:
        parse_line(RawLine(2, "i 2024-13-01 09:00:00"))
    assert exc_info.value.line_number == 2
    assert "2行目" in str(exc_info.value)


def test_missing_time():
    """時刻が欠けている行はParseErrorになること"""
    with pytest.raises(ParseError):
        parse_line(RawLine(1, "i 2024-01-01"))
    with pytest.raises(ParseError):
        parse_line(RawLine(1, "o"))


def test_parse_node_keeps_file_line_numbers():
    """空行を含めたファイル上の行番号がイベントに残ること"""
    state = _make_state(lines=[
        "i 2024-01-01 09:00:00",
        "",
        "# 昼休み",
        "o 2024-01-01 17:00:00",
    ])
    result = parse_node(state)
    events = result["events"]
    assert [e.line_number for e in events] == [1, 4]
    assert [e.action for e in events] == [ClockAction.CLOCK_IN, ClockAction.CLOCK_OUT]


def test_parse_node_fails_on_first_bad_line():
    """最初の不正行でParseErrorになること"""
    state = _make_state(lines=[
        "i 2024-01-01 09:00:00",
        "o 2024-01-01 xx:00:00",
        "z broken",
    ])
    with pytest.raises(ParseError) as exc_info:
        parse_node(state)
    assert exc_info.value.line_number == 2


def test_parse_node_custom_format():
    """設定のタイムスタンプ書式とコメント記号が使われること"""
    config = {
        "timelog": {"comment_prefix": ";"},
        "format": {"timestamp_formats": ["%d.%m.%Y %H:%M"]},
    }
    state = _make_state(lines=["; メモ", "i 01.02.2024 08:30"])
    result = parse_node(state, app_config=config)
    assert result["events"][0].at == datetime(2024, 2, 1, 8, 30)
