"""店舗エンドポイント"""
from datetime import datetime
from typing import Optional, List
from fastapi import APIRouter, Depends, Query, HTTPException
from sqlalchemy.orm import Session

from ..config import CLOSING_SOON_MINUTES
from ..database import get_db
from ..schemas import (
    AvailabilityOut, RestaurantListOut, RestaurantDetailOut, RestaurantListResponse,
    CourseSummaryOut, ProgressIn, ProgressOut, ParseIn, ParseOut, ParseErrorOut,
)
from ..services.errors import ScheduleParseError
from ..services.loader import build_schedule, schedule_from_row
from ..services.schedule import Availability, ClosedDay
from ..services.search import (
    search_restaurants, get_restaurant, check_availability,
    course_summary, get_progress, resolve_instant,
)

router = APIRouter(prefix="/api/v1", tags=["restaurants"])


def _availability_out(availability: Availability) -> AvailabilityOut:
    minutes = availability.minutes_to_close
    return AvailabilityOut(
        is_open=availability.is_open,
        minutes_to_close=minutes,
        closing_soon=0 < minutes <= CLOSING_SOON_MINUTES,
    )


def _restaurant_fields(r) -> dict:
    return dict(
        code=r.code,
        name=r.name,
        course=r.course,
        url=r.url,
        tn_url=r.tn_url,
        address=r.address,
        business_hours_raw=r.business_hours_raw,
        regular_holiday_raw=r.regular_holiday_raw,
        parse_error=r.parse_error,
    )


def _closed_days(closed) -> List[ClosedDay]:
    """月火水…の定義順に並べる"""
    return [c for c in ClosedDay if c in closed]


@router.get("/restaurants", response_model=RestaurantListResponse)
def list_restaurants(
    course: Optional[List[str]] = Query(None, description="コース (A-E)"),
    exclude: Optional[List[int]] = Query(None, description="除外する店舗コード（訪問済みなど）"),
    open_now: bool = Query(False, description="営業中の店舗のみ"),
    at: Optional[datetime] = Query(None, description="判定日時（省略時は現在時刻、オフセットなしはJST）"),
    db: Session = Depends(get_db),
):
    instant = resolve_instant(at)
    restaurants = search_restaurants(db, courses=course, exclude=exclude)
    results = check_availability(restaurants, instant)

    if open_now:
        results = [(r, a) for r, a in results if a.is_open]

    return RestaurantListResponse(
        at=instant,
        open_count=sum(1 for _, a in results if a.is_open),
        data=[
            RestaurantListOut(**_restaurant_fields(r), availability=_availability_out(a))
            for r, a in results
        ],
    )


@router.get("/restaurants/{code}", response_model=RestaurantDetailOut)
def restaurant_detail(
    code: int,
    at: Optional[datetime] = Query(None, description="判定日時"),
    db: Session = Depends(get_db),
):
    r = get_restaurant(db, code)
    if not r:
        raise HTTPException(status_code=404, detail="店舗が見つかりません")

    _, availability = check_availability([r], resolve_instant(at))[0]
    schedule = schedule_from_row(r)

    return RestaurantDetailOut(
        **_restaurant_fields(r),
        availability=_availability_out(availability),
        business_hours=list(schedule.windows) if schedule else None,
        regular_holiday=_closed_days(schedule.closed) if schedule else None,
    )


@router.get("/courses", response_model=CourseSummaryOut)
def courses(db: Session = Depends(get_db)):
    return course_summary(db)


@router.post("/progress", response_model=ProgressOut)
def progress(body: ProgressIn, db: Session = Depends(get_db)):
    return get_progress(db, body.visited)


@router.post("/parse", response_model=ParseOut)
def parse(body: ParseIn):
    """営業時間・定休日テキストの試しパース（書き換えテーブル拡張用）"""
    try:
        schedule = build_schedule(body.business_hours, body.regular_holiday)
    except ScheduleParseError as e:
        raise HTTPException(
            status_code=422,
            detail=ParseErrorOut(kind=type(e).__name__, text=e.text, raw=e.raw).model_dump(),
        )
    return ParseOut(
        business_hours=list(schedule.windows),
        regular_holiday=_closed_days(schedule.closed),
    )


@router.get("/health")
def health():
    return {"status": "ok"}
