# graph/errors.py
from pathlib import Path


class TimelogError(Exception):
    """タイムログ処理に関する例外の基底クラス"""

    pass


class LogLineError(TimelogError):
    """特定の行に起因するエラーの基底クラス"""

    def __init__(self, line_number: int, reason: str):
        self.line_number = line_number
        self.reason = reason
        super().__init__(f"{line_number}行目: {reason}")


class ParseError(LogLineError):
    """行の書式またはタイムスタンプが不正"""

    pass


class MalformedSequenceError(LogLineError):
    """出勤・退勤の交互性が崩れている"""

    pass


class OutOfOrderError(LogLineError):
    """タイムスタンプが時系列順になっていない"""

    pass


class EmptyLogError(TimelogError):
    """打刻イベントが1件も存在しない"""

    def __init__(self, message: str = "打刻イベントがありません"):
        super().__init__(message)


class ConfigError(TimelogError):
    """設定ファイルの内容が不正"""

    def __init__(self, path: Path, detail: str):
        self.path = path
        super().__init__(f"設定ファイルが不正です: {path} ({detail})")


class TimelogNotFoundError(TimelogError):
    """タイムログファイルが見つからない"""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"タイムログファイルが存在しません: {path}")


class TimelogReadError(TimelogError):
    """タイムログファイルを読み込めない"""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"タイムログファイルを読み込めません: {path}")
