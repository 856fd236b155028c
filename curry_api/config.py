"""アプリケーション設定"""
import os
from pathlib import Path

BASE_DIR = Path(__file__).parent.parent

DATABASE_URL = os.getenv(
    "DATABASE_URL",
    f"sqlite:///{BASE_DIR / 'data' / 'curry.db'}"
)

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))

# スクレイピング
RAW_DIR = Path(os.getenv("RAW_DIR", str(BASE_DIR / "data" / "raw")))
STAMP_RALLY_URL = os.getenv("STAMP_RALLY_URL", "https://kanda-curry.com/?page_id=12180")
FETCH_INTERVAL = float(os.getenv("FETCH_INTERVAL", "1.0"))

# 判定
UTC_OFFSET_HOURS = int(os.getenv("UTC_OFFSET_HOURS", "9"))
CLOSING_SOON_MINUTES = int(os.getenv("CLOSING_SOON_MINUTES", "30"))
