"""生データ（スクレイピング結果）をパースしてDBに取り込む"""
import json
import logging
from typing import Iterable, Optional, Tuple

from sqlalchemy.orm import Session

from ..models import Restaurant
from .errors import ScheduleParseError
from .holiday_parser import parse_holidays
from .hours_parser import parse_line_break_separated
from .schedule import ClosedDay, RestaurantSchedule, Window

logger = logging.getLogger(__name__)


def build_schedule(business_hours_text: str, regular_holiday_text: str) -> RestaurantSchedule:
    """営業時間・定休日テキストから RestaurantSchedule を作る。失敗時は ScheduleParseError"""
    return RestaurantSchedule(
        windows=tuple(parse_line_break_separated(business_hours_text)),
        closed=parse_holidays(regular_holiday_text),
    )


def schedule_to_json(schedule: RestaurantSchedule) -> Tuple[list, list]:
    windows = [w.model_dump(mode="json") for w in schedule.windows]
    closed = [c.value for c in ClosedDay if c in schedule.closed]
    return windows, closed


def _load_json(value):
    return json.loads(value) if isinstance(value, str) else value


def schedule_from_row(row: Restaurant) -> Optional[RestaurantSchedule]:
    """DBの行からスケジュールを復元。パースに失敗した店舗はNone"""
    if row.business_hours is None or row.regular_holiday is None:
        return None
    return RestaurantSchedule(
        windows=tuple(Window.model_validate(w) for w in _load_json(row.business_hours)),
        closed=frozenset(ClosedDay(c) for c in _load_json(row.regular_holiday)),
    )


def load_records(session: Session, records: Iterable[dict]) -> Tuple[int, int]:
    """生データのリストを取り込む。(取り込み件数, パース失敗件数) を返す

    record: {code, name, course, url, tn_url, address, business_hours, regular_holiday}
    パースに失敗した店舗も行は作り、parse_error に失敗箇所を残す。
    """
    count = 0
    failed = 0

    for rec in records:
        row = Restaurant(
            code=int(rec["code"]),
            name=rec["name"],
            course=rec["course"],
            url=rec.get("url"),
            tn_url=rec.get("tn_url"),
            address=rec.get("address"),
            business_hours_raw=rec.get("business_hours", ""),
            regular_holiday_raw=rec.get("regular_holiday", ""),
        )

        try:
            schedule = build_schedule(row.business_hours_raw, row.regular_holiday_raw)
        except ScheduleParseError as e:
            logger.warning(f"parse failed: {row.code} {row.name}: {e}")
            row.business_hours = None
            row.regular_holiday = None
            row.parse_error = e.text
            failed += 1
        else:
            row.business_hours, row.regular_holiday = schedule_to_json(schedule)
            row.parse_error = None

        session.merge(row)
        count += 1

    session.commit()
    logger.info(f"loaded {count} restaurants ({failed} failed to parse)")
    return count, failed
