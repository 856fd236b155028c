"""営業時間モデル — DB非依存

Time.hour は24を超えてよい（26:00 = 翌2:00）。閉店・ラストオーダーが
日付をまたぐ場合はパース時に+24時間して表す。
"""
from enum import Enum
from functools import total_ordering
from typing import Optional, Tuple, FrozenSet

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DayTag(str, Enum):
    """Windowの適用日"""
    MON = "月"
    TUE = "火"
    WED = "水"
    THU = "木"
    FRI = "金"
    SAT = "土"
    SUN = "日"
    HOLIDAY = "祝"
    EVERY_DAY = "毎日"


# date.weekday() → DayTag
WEEKDAY_TAGS = (
    DayTag.MON, DayTag.TUE, DayTag.WED, DayTag.THU,
    DayTag.FRI, DayTag.SAT, DayTag.SUN,
)


class ClosedDay(str, Enum):
    """定休日トークン"""
    MON = "月"
    TUE = "火"
    WED = "水"
    THU = "木"
    FRI = "金"
    SAT = "土"
    SUN = "日"
    HOLIDAY = "祝"
    YEAR_END = "年末年始"
    IRREGULAR = "不定休"


@total_ordering
class Time(BaseModel):
    """時刻 (hour, minute)。辞書順で比較する"""
    model_config = ConfigDict(frozen=True)

    hour: int = Field(ge=0)
    minute: int = Field(ge=0, le=59)

    @classmethod
    def parse(cls, s: str) -> "Time":
        """'11:00' → Time(11, 0)"""
        hour, minute = s.split(":")
        return cls(hour=int(hour), minute=int(minute))

    def __lt__(self, other):
        if not isinstance(other, Time):
            return NotImplemented
        return (self.hour, self.minute) < (other.hour, other.minute)

    def to_minutes(self) -> int:
        return self.hour * 60 + self.minute

    def add_hours(self, hours: int) -> "Time":
        return Time(hour=self.hour + hours, minute=self.minute)

    def __str__(self):
        return f"{self.hour:02d}:{self.minute:02d}"


class Window(BaseModel):
    """1つの営業時間帯"""
    model_config = ConfigDict(frozen=True)

    day: DayTag = DayTag.EVERY_DAY
    open: Time
    close: Time
    last_order: Optional[Time] = None
    meal: Optional[str] = None  # ランチ/ディナー等（表示用）

    @model_validator(mode="after")
    def _check_order(self):
        if self.close <= self.open:
            raise ValueError(f"close {self.close} must be after open {self.open}")
        if self.last_order is not None and self.last_order < self.open:
            raise ValueError(f"last order {self.last_order} is before open {self.open}")
        return self

    @property
    def effective_close(self) -> Time:
        """ラストオーダーがあればそれ、なければ閉店時刻"""
        return self.last_order if self.last_order is not None else self.close

    def applies_to(self, weekday: DayTag, holiday: bool) -> bool:
        if self.day is DayTag.EVERY_DAY:
            return True
        if self.day is DayTag.HOLIDAY:
            return holiday
        return self.day is weekday


class RestaurantSchedule(BaseModel):
    """1店舗分の営業時間帯と定休日"""
    model_config = ConfigDict(frozen=True)

    windows: Tuple[Window, ...] = ()
    closed: FrozenSet[ClosedDay] = frozenset()


class Availability(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_open: bool
    minutes_to_close: int = Field(ge=0)

    @classmethod
    def from_minutes(cls, minutes: int) -> "Availability":
        return cls(is_open=minutes > 0, minutes_to_close=minutes)
