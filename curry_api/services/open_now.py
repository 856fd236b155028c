"""open_now 判定 — 指定時刻に営業中か、閉店まで何分かを求める

DB非依存のロジック。パース済みの RestaurantSchedule だけを見る。
時計は読まないので、呼び出し側が UTC オフセット付きの datetime を渡す。
"""
from datetime import date, datetime, time, timedelta
from typing import AbstractSet, Tuple

from .holidays import is_holiday
from .schedule import (
    Availability, ClosedDay, DayTag, RestaurantSchedule, Time, Window, WEEKDAY_TAGS,
)

# これより前の時刻は前日の営業時間として扱う（深夜営業の店）
DAY_START = time(5, 0)


def business_day(at: datetime) -> Tuple[date, Time]:
    """(営業日, 営業日基準の時刻) を返す。早朝は前日の24時以降になる"""
    if at.tzinfo is None:
        raise ValueError(f"datetime without UTC offset: {at!r}")

    day = at.date()
    tm = Time(hour=at.hour, minute=at.minute)
    if at.time() < DAY_START:
        return day - timedelta(days=1), tm.add_hours(24)
    return day, tm


def is_closed_day(closed: AbstractSet[ClosedDay], weekday: DayTag, holiday: bool) -> bool:
    """定休日判定。年末年始・不定休はここでは見ない"""
    if ClosedDay(weekday.value) in closed:
        return True
    return holiday and ClosedDay.HOLIDAY in closed


def minutes_to_close(window: Window, weekday: DayTag, holiday: bool, tm: Time) -> int:
    """このWindowで営業中なら閉店（LO）までの分数、そうでなければ0"""
    if not window.applies_to(weekday, holiday):
        return 0

    close = window.effective_close
    if window.open <= tm < close:
        return close.to_minutes() - tm.to_minutes()
    return 0


def evaluate(schedule: RestaurantSchedule, at: datetime) -> Availability:
    day, tm = business_day(at)
    weekday = WEEKDAY_TAGS[day.weekday()]
    holiday = is_holiday(day)

    # 定休日はWindowより優先
    if is_closed_day(schedule.closed, weekday, holiday):
        return Availability.from_minutes(0)

    # ランチ・ディナーのように複数のWindowがあれば一番長いもの
    minutes = max(
        (minutes_to_close(w, weekday, holiday, tm) for w in schedule.windows),
        default=0,
    )
    return Availability.from_minutes(minutes)


def is_open_now(schedule: RestaurantSchedule, at: datetime) -> bool:
    return evaluate(schedule, at).is_open
