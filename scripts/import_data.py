#!/usr/bin/env python3
"""スクレイピング結果(info.json)をパースしてDBにインポート"""

import json
import logging
import sys
from pathlib import Path

# プロジェクトルートをパスに追加
sys.path.insert(0, str(Path(__file__).parent.parent))

from curry_api.config import RAW_DIR
from curry_api.database import engine, SessionLocal, Base
from curry_api.models import Restaurant
from curry_api.services.loader import load_records


def main(path=None):
    path = Path(path) if path else RAW_DIR / "info.json"

    print("🗄️  テーブル作成...")
    Base.metadata.create_all(engine)

    with open(path, encoding="utf-8") as f:
        records = json.load(f)

    session = SessionLocal()
    try:
        print(f"🍛 店舗 ({path.name})...")
        n, failed = load_records(session, records)
        print(f"   ✅ {n:,}件 (パース失敗 {failed}件)")

        # 失敗した行は書き換えテーブルを直して再インポートする
        errors = (
            session.query(Restaurant)
            .filter(Restaurant.parse_error.isnot(None))
            .order_by(Restaurant.code)
            .all()
        )
        for r in errors:
            print(f"   ⚠️ {r.code} {r.name}: {r.parse_error}")

        print("\n🎉 インポート完了!")

    finally:
        session.close()


if __name__ == "__main__":
    logging.basicConfig(level=logging.WARNING)
    main(sys.argv[1] if len(sys.argv) > 1 else None)
