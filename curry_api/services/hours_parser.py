"""営業時間テキストのパース

    月〜金 11:00～21:00（LO23：00）
    土日祝 11:00〜17:00

1行ずつ正規化 → 文法に一致させてテンプレート化 → 曜日ごとのWindowに展開する。
1行でも一致しなければその店舗の営業時間は丸ごと捨てる（部分的な結果は返さない）。
"""
import logging
import re
from typing import List, NamedTuple, Optional

from pydantic import ValidationError

from .errors import UnrecognizedLineGrammar
from .normalizer import DAY_CHARS, MEAL_LABELS, normalize_hours_line, prepare_text
from .schedule import DayTag, Time, Window

logger = logging.getLogger(__name__)

NOTE_MARK = "※"

# 時刻らしき部分を含まない行は注記として読み飛ばす
TIME_LIKE_RE = re.compile(r"\d[:：]\d")

LINE_RE = re.compile(
    rf"^(?:(?P<meal>{'|'.join(MEAL_LABELS)}) *)?"
    rf"(?:(?P<days>[{DAY_CHARS}]+) *)?"
    r"(?P<open_hour>\d{1,2}):(?P<open_min>[0-5]\d)"
    r" *〜 *"
    r"(?P<close_hour>\d{1,2}):(?P<close_min>[0-5]\d)"
    r" *(?:\((?P<lo>LO) *(?:(?P<lo_hour>\d{1,2}):(?P<lo_min>[0-5]\d))? *\))?$"
)


class WindowTemplate(NamedTuple):
    """1行分のパース結果。days が空なら毎日"""
    days: str
    open: Time
    close: Time
    last_order: Optional[Time] = None
    meal: Optional[str] = None


def parse_line(normalized: str) -> Optional[WindowTemplate]:
    """正規化済みの1行をテンプレートに。一致しなければNone"""
    m = LINE_RE.match(normalized)
    if not m:
        return None

    def get_time(hour_key, min_key):
        return Time(hour=int(m.group(hour_key)), minute=int(m.group(min_key)))

    open_ = get_time("open_hour", "open_min")
    close = get_time("close_hour", "close_min")

    if m.group("lo_hour"):
        last_order = get_time("lo_hour", "lo_min")
    elif m.group("lo"):
        # 時刻のないLOは閉店時刻
        last_order = close
    else:
        last_order = None

    return WindowTemplate(
        days=m.group("days") or "",
        open=open_,
        close=close,
        last_order=last_order,
        meal=m.group("meal"),
    )


def correct_overnight(open_: Time, close: Time, last_order: Optional[Time] = None):
    """日付をまたぐ時刻に+24時間する。(close, last_order) を返す"""
    if close <= open_:
        close = close.add_hours(24)
    if last_order is not None and last_order < open_:
        last_order = last_order.add_hours(24)
    return close, last_order


def expand(template: WindowTemplate) -> List[Window]:
    """曜日の並びを1曜日1Windowに展開する"""
    days = [DayTag(c) for c in template.days] or [DayTag.EVERY_DAY]

    windows = []
    for day in days:
        close, last_order = correct_overnight(template.open, template.close, template.last_order)
        windows.append(Window(
            day=day,
            open=template.open,
            close=close,
            last_order=last_order,
            meal=template.meal,
        ))
    return windows


def parse_line_break_separated(text: str) -> List[Window]:
    """営業時間テキスト全体をWindowのリストに。

    ※で始まる行、時刻を含まない行は読み飛ばす。
    文法に一致しない行があれば UnrecognizedLineGrammar。
    """
    windows = []
    for raw_line in prepare_text(text).split("\n"):
        line = raw_line.strip()
        if not line:
            continue
        if line.startswith(NOTE_MARK) or not TIME_LIKE_RE.search(line):
            logger.debug(f"skip annotation line: {line!r}")
            continue

        normalized = normalize_hours_line(line)
        template = parse_line(normalized)
        if template is None:
            raise UnrecognizedLineGrammar("unrecognized business hours line", normalized, raw_line)
        try:
            windows.extend(expand(template))
        except ValidationError as e:
            # 30:00〜5:00 のように+24時間しても閉店が開店以前になる行
            raise UnrecognizedLineGrammar(f"invalid business hours window: {e}", normalized, raw_line) from e

    return windows
