# services/summary_formatter.py
from datetime import datetime, timedelta
from typing import Optional

from graph.models import OverallSummary

LABELS = {
    "average_duration": "1日あたりの平均勤務時間:",
    "days_worked": "勤務日数:",
    "total_duration": "総勤務時間:",
    "cumulative_overtime": "前日までの残業累計:",
    "today_first_clock_in": "本日の最初の出勤:",
    "today_worked": "本日の勤務時間:",
    "remaining_plain": "残り勤務時間(8時間):",
    "remaining_with_overtime": "残り勤務時間:",
    "leave_time_plain": "退勤予定時刻(8時間):",
    "leave_time_with_overtime": "退勤予定時刻:",
}

CLOCK_SKEW_WARNING = "⚠️ 現在時刻が最終出勤より前です。時計のずれを確認してください"
MISSING = "-"


def format_duration(duration: timedelta) -> str:
    """経過時間を「H時間M分」形式に変換する（負値は先頭に-）"""
    minutes = int(abs(duration).total_seconds()) // 60
    sign = "-" if duration < timedelta(0) else ""
    return f"{sign}{minutes // 60}時間{minutes % 60}分"


def format_time(value: Optional[datetime], time_format: str = "%H:%M") -> str:
    """時刻を表示用文字列に変換する"""
    if value is None:
        return MISSING
    return value.strftime(time_format)


def render_summary(summary: OverallSummary, config: dict = None) -> str:
    """サマリを表示用テキストに整形する"""
    if config is None:
        config = {"format": {"time_format": "%H:%M", "label_width": 24}}

    fmt = config["format"]
    time_format = fmt["time_format"]
    width = fmt["label_width"]

    values = {
        "average_duration": format_duration(summary.average_duration),
        "days_worked": str(summary.days_worked),
        "total_duration": format_duration(summary.total_duration),
        "cumulative_overtime": format_duration(summary.cumulative_overtime),
        "today_first_clock_in": format_time(summary.today_first_clock_in, time_format),
        "today_worked": format_duration(summary.today_worked),
        "remaining_plain": format_duration(summary.remaining_plain),
        "remaining_with_overtime": format_duration(summary.remaining_with_overtime),
        "leave_time_plain": format_time(summary.leave_time_plain, time_format),
        "leave_time_with_overtime": format_time(
            summary.leave_time_with_overtime, time_format
        ),
    }

    lines = [f"{LABELS[key]:<{width}}{value}" for key, value in values.items()]
    if summary.clock_skew:
        lines.append(CLOCK_SKEW_WARNING)
    return "\n".join(lines)
