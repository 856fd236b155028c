"""営業時間・定休日パースのエラー

いずれも書き換えテーブル/文法の不足を示すもので、リトライしても解決しない。
人がテーブルを拡張して直す。
"""


class ScheduleParseError(ValueError):
    """パース失敗の基底。text=正規化後の文字列, raw=元の文字列"""

    def __init__(self, message: str, text: str, raw: str = None):
        super().__init__(f"{message}: {text!r}")
        self.text = text
        self.raw = raw if raw is not None else text


class UnrecognizedLineGrammar(ScheduleParseError):
    """営業時間の行が文法に一致しない"""


class UnrecognizedHolidayToken(ScheduleParseError):
    """定休日に未知の表記が含まれる"""


class IntegrityViolation(ScheduleParseError):
    """「無休」と定休日が同時に指定されている"""
