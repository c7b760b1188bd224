# graph/graph.py
from datetime import datetime

from langgraph.graph import StateGraph, END
from graph.models import OverallSummary
from graph.state import TimelogState


def build_graph(config=None):
    """LangGraphのグラフを構築して返す

    解析 → 検証 → 日別集計 → 残業算出 の一方向パイプライン。
    設定に依存するノードはfunctools.partialでラップして
    LangGraphが期待する (state) -> dict シグネチャに合わせる。
    """
    from functools import partial
    from graph.nodes.parse_node import parse_node
    from graph.nodes.sequence_node import sequence_node
    from graph.nodes.aggregate_node import aggregate_node
    from graph.nodes.overtime_node import overtime_node

    parse_wrapped = partial(parse_node, app_config=config)

    workflow = StateGraph(TimelogState)

    workflow.add_node("parse", parse_wrapped)
    workflow.add_node("sequence", sequence_node)
    workflow.add_node("aggregate", aggregate_node)
    workflow.add_node("overtime", overtime_node)

    workflow.set_entry_point("parse")

    workflow.add_edge("parse", "sequence")
    workflow.add_edge("sequence", "aggregate")
    workflow.add_edge("aggregate", "overtime")
    workflow.add_edge("overtime", END)

    return workflow.compile()


def summarize(lines: list[str], now: datetime, config: dict = None) -> OverallSummary:
    """タイムログの行から勤務サマリを算出する

    nowは呼び出し側で1回だけ取得した時刻を渡すこと。
    """
    graph = build_graph(config)
    result = graph.invoke({"now": now, "lines": lines})
    return result["summary"]
