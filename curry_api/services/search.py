"""検索サービス"""
from datetime import datetime, timedelta, timezone
from typing import Iterable, List, Optional, Tuple
from sqlalchemy.orm import Session
from sqlalchemy import func

from ..config import UTC_OFFSET_HOURS
from ..models import Restaurant
from .loader import schedule_from_row
from .open_now import evaluate
from .progress import course_progress
from .schedule import Availability

LOCAL_TZ = timezone(timedelta(hours=UTC_OFFSET_HOURS))


def resolve_instant(at: Optional[datetime] = None) -> datetime:
    """指定がなければ現在時刻。オフセットなしはローカル時刻とみなす"""
    if at is None:
        return datetime.now(LOCAL_TZ)
    if at.tzinfo is None:
        return at.replace(tzinfo=LOCAL_TZ)
    return at


def search_restaurants(
    db: Session,
    courses: Optional[List[str]] = None,
    exclude: Optional[List[int]] = None,
) -> List[Restaurant]:
    """店舗一覧（コード順）"""
    query = db.query(Restaurant)

    # コース
    if courses:
        query = query.filter(Restaurant.course.in_(courses))

    # 訪問済みなど除外する店舗
    if exclude:
        query = query.filter(Restaurant.code.notin_(exclude))

    return query.order_by(Restaurant.code).all()


def get_restaurant(db: Session, code: int) -> Optional[Restaurant]:
    return db.query(Restaurant).filter(Restaurant.code == code).first()


def check_availability(
    restaurants: Iterable[Restaurant], at: datetime
) -> List[Tuple[Restaurant, Availability]]:
    """各店舗の営業状況。営業中の店舗を先に並べる

    営業時間をパースできなかった店舗は営業時間外扱い。
    """
    results = []
    for r in restaurants:
        schedule = schedule_from_row(r)
        if schedule is None:
            results.append((r, Availability.from_minutes(0)))
        else:
            results.append((r, evaluate(schedule, at)))

    # 安定ソートなので元の順序は保たれる
    results.sort(key=lambda x: not x[1].is_open)
    return results


def course_summary(db: Session) -> dict:
    """コース別店舗数"""
    rows = (
        db.query(Restaurant.course, func.count(Restaurant.code))
        .group_by(Restaurant.course)
        .order_by(Restaurant.course)
        .all()
    )
    parse_errors = db.query(func.count(Restaurant.code)).filter(
        Restaurant.parse_error.isnot(None)
    ).scalar()

    return {
        "total": sum(n for _, n in rows),
        "by_course": {course: n for course, n in rows},
        "parse_errors": parse_errors,
    }


def get_progress(db: Session, visited: Iterable[int]) -> dict:
    rows = db.query(Restaurant.code, Restaurant.course).all()
    return course_progress(rows, visited)
