import sys


class ConsoleNotifier:
    """コンソール出力による通知"""

    def send(self, message: str) -> bool:
        print(message, file=sys.stdout)
        return True

    def send_error(self, error: str) -> bool:
        print(f"[タイムログ エラー] {error}", file=sys.stderr)
        return True
