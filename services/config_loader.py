import copy
import yaml
from pathlib import Path

from graph.errors import ConfigError

DEFAULT_CONFIG = {
    "timelog": {
        "env_var": "TIMELOG",
        "default_path": ".emacs.d/.local/etc/timelog",
        "encoding": "utf-8",
        "comment_prefix": "#",
    },
    "format": {
        "timestamp_formats": ["%Y/%m/%d %H:%M:%S", "%Y-%m-%d %H:%M:%S"],
        "time_format": "%H:%M",
        "label_width": 24,
    },
    "logging": {
        "level": "WARNING",
    },
}


def _deep_merge(base: dict, override: dict) -> dict:
    """ベース設定にオーバーライドをマージする（ベースは変更しない）"""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def load_config(path: str = "config.yaml") -> dict:
    """YAML設定ファイルをロードし、デフォルト設定とマージして返す

    戻り値はDEFAULT_CONFIGと共有しない複製。
    """
    config_path = Path(path)
    if not config_path.exists():
        return copy.deepcopy(DEFAULT_CONFIG)

    with open(config_path, "r", encoding="utf-8") as f:
        try:
            user_config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(config_path, "YAMLを解析できません") from e

    if not isinstance(user_config, dict):
        raise ConfigError(config_path, "トップレベルがマッピングではありません")
    return _deep_merge(DEFAULT_CONFIG, user_config)
