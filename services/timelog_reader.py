# services/timelog_reader.py
import os
from pathlib import Path

from graph.errors import TimelogNotFoundError, TimelogReadError


def timelog_path(config: dict) -> Path:
    """環境変数（未設定ならデフォルトパス）からタイムログのパスを決定する

    デフォルトパスが相対パスの場合はホームディレクトリ基準で解決する。
    """
    tl_config = config["timelog"]
    value = os.getenv(tl_config["env_var"])
    if value:
        path = Path(value).expanduser()
    else:
        path = Path(tl_config["default_path"]).expanduser()
        if not path.is_absolute():
            path = Path.home() / path

    if not path.exists():
        raise TimelogNotFoundError(path)
    return path


def read_lines(path: Path, encoding: str = "utf-8") -> list[str]:
    """タイムログを1行ずつのリストとして読み込む"""
    try:
        with open(path, "r", encoding=encoding) as f:
            return f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise TimelogReadError(path) from e
