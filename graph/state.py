from typing import TypedDict, Optional
from datetime import datetime

from graph.models import ClockEvent, Session, DaySummary, OverallSummary


class TimelogState(TypedDict):
    now: datetime                       # 集計基準時刻（1回だけ取得）
    lines: list[str]                    # タイムログの生行
    events: list[ClockEvent]            # 解析済み打刻イベント
    sessions: list[Session]             # 出勤・退勤の組
    days: list[DaySummary]              # 日別集計（日付順）
    summary: Optional[OverallSummary]   # 最終結果
