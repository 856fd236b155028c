#!/usr/bin/env python3
"""スタンプラリー参加店舗のスクレイピング

一覧ページから店舗ページのURLを集め、各店舗ページの情報表を
data/raw/info.json に保存する。営業時間・定休日は<br>を残したまま保存する。
"""

import json
import re
import sys
import time
from pathlib import Path

import requests
from bs4 import BeautifulSoup

# プロジェクトルートをパスに追加
sys.path.insert(0, str(Path(__file__).parent.parent))

from curry_api.config import RAW_DIR, STAMP_RALLY_URL, FETCH_INTERVAL

# <div class="container Aline"> → A
COURSE_CLASS_RE = re.compile(r"^([A-E])line$")

# 情報表の見出し → キー
TABLE_KEYS = {
    "店名": "name",
    "住所": "address",
    "営業時間": "business_hours",
    "定休日": "regular_holiday",
    "カレーグランプリ店舗コード": "code",
}

# <br> を残すカラム
HTML_KEYS = {"address", "business_hours", "regular_holiday"}


def fetch_index(session: requests.Session) -> list:
    """一覧ページ → [{name, course, url, tn_url}, ...]"""
    r = session.get(STAMP_RALLY_URL, timeout=30)
    r.raise_for_status()
    soup = BeautifulSoup(r.text, "html.parser")

    index = []
    for container in soup.select("div.container"):
        course = None
        for cls in container.get("class", []):
            m = COURSE_CLASS_RE.match(cls)
            if m:
                course = m.group(1)
        if not course:
            continue

        for card in container.select("div.card"):
            link = card.select_one("p.cardtxt a")
            img = card.select_one("figure img")
            # 準備中の店舗は href="#..."
            if not link or link.get("href", "#").startswith("#"):
                continue
            index.append({
                "name": link.get_text(strip=True),
                "course": course,
                "url": link["href"],
                "tn_url": img.get("src") if img else None,
            })

    return index


def fetch_detail(session: requests.Session, entry: dict) -> dict:
    """店舗ページの情報表を読む"""
    r = session.get(entry["url"], timeout=30)
    r.raise_for_status()
    soup = BeautifulSoup(r.text, "html.parser")

    table = soup.select_one("table.hyou")
    if table is None:
        raise ValueError(f"info table not found: {entry['url']}")

    info = dict(entry)
    for tr in table.select("tr"):
        th, td = tr.find("th"), tr.find("td")
        if not th or not td:
            continue
        key = TABLE_KEYS.get(th.get_text(strip=True))
        if key in HTML_KEYS:
            info[key] = td.decode_contents().strip()
        elif key:
            info[key] = td.get_text(strip=True)

    info["code"] = int(info["code"])
    return info


def fetch_all():
    RAW_DIR.mkdir(parents=True, exist_ok=True)
    session = requests.Session()

    print(f"⬇️  Index: {STAMP_RALLY_URL}")
    index = fetch_index(session)
    with open(RAW_DIR / "index.json", "w", encoding="utf-8") as f:
        json.dump(index, f, ensure_ascii=False, indent=1)
    print(f"   {len(index)}店舗")

    infos = []
    failed = []
    for i, entry in enumerate(index):
        print(f"[{i + 1}/{len(index)}] ⬇️  {entry['url']}")
        try:
            info = fetch_detail(session, entry)
        except (requests.RequestException, ValueError, KeyError) as e:
            print(f"   ❌ Error: {e}")
            failed.append((entry["url"], str(e)))
            continue

        dest = RAW_DIR / f"{info['code']}.json"
        with open(dest, "w", encoding="utf-8") as f:
            json.dump(info, f, ensure_ascii=False)
        print(f"   saved to {dest.name}")

        infos.append(info)
        time.sleep(FETCH_INTERVAL)

    with open(RAW_DIR / "info.json", "w", encoding="utf-8") as f:
        json.dump(infos, f, ensure_ascii=False, indent=1)

    print(f"\n📊 結果: {len(infos)}件成功, {len(failed)}件失敗")
    for url, reason in failed:
        print(f"  {url}: {reason}")


if __name__ == "__main__":
    fetch_all()
