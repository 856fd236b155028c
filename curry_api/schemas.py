"""Pydantic スキーマ定義"""
from datetime import datetime
from typing import Optional, List, Dict
from pydantic import BaseModel

from .services.schedule import ClosedDay, Window


# === リクエスト ===

class ProgressIn(BaseModel):
    visited: List[int] = []


class ParseIn(BaseModel):
    business_hours: str = ""
    regular_holiday: str = ""


# === レスポンス ===

class AvailabilityOut(BaseModel):
    is_open: bool
    minutes_to_close: int
    closing_soon: bool = False  # まもなく営業終了


class RestaurantListOut(BaseModel):
    """一覧用"""
    code: int
    name: str
    course: str
    url: Optional[str] = None
    tn_url: Optional[str] = None
    address: Optional[str] = None
    business_hours_raw: Optional[str] = None
    regular_holiday_raw: Optional[str] = None
    parse_error: Optional[str] = None
    availability: AvailabilityOut
    class Config:
        from_attributes = True


class RestaurantDetailOut(RestaurantListOut):
    """詳細用（パース結果つき）"""
    business_hours: Optional[List[Window]] = None
    regular_holiday: Optional[List[ClosedDay]] = None


class RestaurantListResponse(BaseModel):
    at: datetime
    open_count: int
    data: List[RestaurantListOut]


class CourseSummaryOut(BaseModel):
    total: int
    by_course: Dict[str, int]
    parse_errors: int


class CourseStatusOut(BaseModel):
    course: str
    visited: int
    total: int
    cleared: bool


class FreeCourseOut(BaseModel):
    visited: int
    total: int
    cleared: bool


class ProgressOut(BaseModel):
    courses: List[CourseStatusOut]
    free_course: FreeCourseOut
    cleared_courses: int
    title: str


class ParseOut(BaseModel):
    business_hours: List[Window]
    regular_holiday: List[ClosedDay]


class ParseErrorOut(BaseModel):
    kind: str
    text: str
    raw: str
