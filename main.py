"""タイムログ集計 - エントリーポイント"""
import logging
import sys
from datetime import datetime

from dotenv import load_dotenv

from graph.errors import TimelogError
from graph.graph import summarize
from services.config_loader import load_config
from services.console_notifier import ConsoleNotifier
from services.summary_formatter import render_summary
from services.timelog_reader import read_lines, timelog_path


def _now() -> datetime:
    """テスト時にモック可能な現在時刻取得"""
    return datetime.now()


def _setup_logging(config: dict):
    level = config["logging"]["level"]
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def main(config_path: str = "config.yaml") -> int:
    """メイン処理。終了コードを返す"""
    notifier = ConsoleNotifier()
    load_dotenv()

    # 集計の基準時刻はここで1回だけ取得する
    now = _now()

    try:
        config = load_config(config_path)
        _setup_logging(config)
        path = timelog_path(config)
        lines = read_lines(path, encoding=config["timelog"]["encoding"])
        summary = summarize(lines, now=now, config=config)
    except TimelogError as e:
        notifier.send_error(str(e))
        return 1

    notifier.send(render_summary(summary, config))
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
