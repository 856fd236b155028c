"""SQLAlchemy モデル定義"""
from datetime import datetime
from sqlalchemy import Column, String, Text, Integer, DateTime, JSON, Index

from .database import Base


class Restaurant(Base):
    """スタンプラリー参加店舗"""
    __tablename__ = "restaurants"

    code = Column(Integer, primary_key=True)  # カレーグランプリ店舗コード
    name = Column(Text, nullable=False)
    course = Column(String(1), nullable=False)  # A-E
    url = Column(Text)
    tn_url = Column(Text)                       # サムネイル
    address = Column(Text)
    business_hours_raw = Column(Text)           # スクレイピングしたままの営業時間
    regular_holiday_raw = Column(Text)          # 同 定休日
    business_hours = Column(JSON)               # [Window, ...] パース失敗時はNULL
    regular_holiday = Column(JSON)              # ["月", "祝", ...] パース失敗時はNULL
    parse_error = Column(Text)                  # 失敗した行（手で直す用）
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __table_args__ = (
        Index("idx_restaurants_course", "course"),
    )
