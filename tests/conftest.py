"""テスト用DB — アプリのimportより前に DATABASE_URL を一時ファイルへ向ける"""
import os
import tempfile

import pytest

_tmpdir = tempfile.mkdtemp(prefix="curry_api_test_")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_tmpdir, 'test.db')}"

SAMPLE_RECORDS = [
    {
        "code": 1,
        "name": "カレーの店 一番",
        "course": "A",
        "url": "https://example.com/1",
        "tn_url": "https://example.com/1.jpg",
        "address": "東京都千代田区神田1-1",
        "business_hours": "月〜金 11:00～21:00（LO20：30）<br>土日祝 11:00〜17:00",
        "regular_holiday": "なし",
    },
    {
        "code": 2,
        "name": "欧風カレー 二番",
        "course": "A",
        "url": "https://example.com/2",
        "tn_url": None,
        "address": "東京都千代田区神田2-2",
        "business_hours": "ランチ 11:30〜14:30<br>ディナー 17:30〜23:00 (L.O. 22:30)<br>※売り切れ次第終了",
        "regular_holiday": "日曜・祝日",
    },
    {
        "code": 3,
        "name": "深夜カレー 三番",
        "course": "B",
        "url": "https://example.com/3",
        "tn_url": None,
        "address": "東京都千代田区神田3-3",
        "business_hours": "18:00〜2:00",
        "regular_holiday": "月・火",
    },
    {
        "code": 4,
        "name": "スパイス 四番",
        "course": "B",
        "url": "https://example.com/4",
        "tn_url": None,
        "address": "東京都千代田区神田4-4",
        "business_hours": "11:00頃〜売り切れまで",
        "regular_holiday": "不定休",
    },
    {
        "code": 5,
        "name": "カレー食堂 五番",
        "course": "C",
        "url": "https://example.com/5",
        "tn_url": None,
        "address": "東京都千代田区神田5-5",
        "business_hours": "11:00〜15:00",
        "regular_holiday": "不定休",
    },
]


@pytest.fixture(scope="session")
def client():
    from fastapi.testclient import TestClient
    from curry_api.main import app
    from curry_api.database import SessionLocal
    from curry_api.services.loader import load_records

    # lifespan でテーブルが作られる
    with TestClient(app) as c:
        db = SessionLocal()
        try:
            load_records(db, SAMPLE_RECORDS)
        finally:
            db.close()
        yield c
