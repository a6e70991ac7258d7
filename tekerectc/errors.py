"""Error types raised while collecting test cases, and their reporting."""

from __future__ import annotations

import sys

INTERNAL_ERROR_MESSAGE = "内部エラーが発生しました。開発者に連絡して下さい。"


class TekerectcError(Exception):
    """Base class for errors raised by this package."""


class SelectorError(TekerectcError):
    """The HTML selector could not be parsed or applied."""

    def __init__(self, detail: object = "") -> None:
        self.detail = detail
        super().__init__(f"Seletor parse error: {detail}")


class RegexCaptureError(TekerectcError):
    """A test case line did not have the expected shape."""

    def __init__(self, message: str = "Regex capture failed") -> None:
        super().__init__(message)


class InternalError(TekerectcError):
    """An unexpected internal failure."""

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE) -> None:
        super().__init__(message)


def handle_error(error: BaseException) -> None:
    """Print a user-facing description of ``error`` to standard error."""
    if isinstance(error, RegexCaptureError):
        message = "期待されたテストケースの書式が見つかりませんでした。"
    elif isinstance(error, SelectorError):
        message = (
            "テストケースのキャプチャに失敗しました。"
            "ログインに失敗しているか、取得ページが正しくない可能性があります: "
            f"{error.detail}"
        )
    elif isinstance(error, OSError):
        message = f"ファイルの読み書き中にエラーが発生しました: {error}"
    elif isinstance(error, InternalError):
        message = INTERNAL_ERROR_MESSAGE
    else:
        message = "予期せぬエラーが発生しました。"
    print(message, file=sys.stderr)