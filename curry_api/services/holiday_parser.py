"""定休日テキストのパース

    月・火      → {月, 火}
    なし        → {}
    日曜・祝日  → {日, 祝}
"""
import logging
import re
from typing import FrozenSet

from .errors import IntegrityViolation, UnrecognizedHolidayToken
from .normalizer import DAY_CHARS, normalize_holiday_text, prepare_text
from .schedule import ClosedDay

logger = logging.getLogger(__name__)

YEAR_END = "年末年始"
NEVER_CLOSED = "無休"
IRREGULAR = "不定休"

_TOKEN = rf"[{DAY_CHARS}]|{YEAR_END}|{NEVER_CLOSED}|{IRREGULAR}"

# 空文字列（定休日の記載なし）も許す
VALID_RE = re.compile(rf"^(?:{_TOKEN})*$")
TOKEN_RE = re.compile(
    rf"(?P<days>[{DAY_CHARS}]+)|(?P<year_end>{YEAR_END})|(?P<never>{NEVER_CLOSED})|(?P<irregular>{IRREGULAR})"
)


def parse_holidays(raw: str) -> FrozenSet[ClosedDay]:
    """定休日テキスト → ClosedDayの集合

    未知の表記は UnrecognizedHolidayToken、
    「無休」と定休日が両方ある場合は IntegrityViolation。
    """
    normalized = normalize_holiday_text(prepare_text(raw))

    if not VALID_RE.match(normalized):
        raise UnrecognizedHolidayToken("unrecognized regular holiday text", normalized, raw)

    closed = set()
    never_closed = False

    for m in TOKEN_RE.finditer(normalized):
        if m.group("never"):
            never_closed = True
        elif m.group("days"):
            closed.update(ClosedDay(c) for c in m.group("days"))
        elif m.group("year_end"):
            closed.add(ClosedDay.YEAR_END)
        elif m.group("irregular"):
            closed.add(ClosedDay.IRREGULAR)

    if never_closed and closed:
        raise IntegrityViolation("never-closed marker with closing days", normalized, raw)

    if not normalized:
        logger.debug(f"no regular holiday in {raw!r}")

    return frozenset(closed)
