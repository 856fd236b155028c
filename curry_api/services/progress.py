"""スタンプラリーのコース制覇状況"""
from typing import Iterable, Tuple

# フリーコースは任意の店舗をこの数だけ回れば制覇
FREE_COURSE_GOAL = 25

TITLES = [
    "未獲得",
    "神田カレーマイスター",
    "神田カレーブロンズマイスター",
    "神田カレーシルバーマイスター",
    "神田カレーゴールドマイスター",
    "神田カレーグランドマイスター",
]


def course_progress(restaurants: Iterable[Tuple[int, str]], visited: Iterable[int]) -> dict:
    """restaurants: (店舗コード, コース) の列、visited: 訪問済み店舗コード"""
    visited = set(visited)

    status = {}
    for code, course in restaurants:
        done, total = status.get(course, (0, 0))
        status[course] = (done + (1 if code in visited else 0), total + 1)

    free = sum(done for done, _ in status.values())
    regular = sum(1 for done, total in status.values() if done >= total)
    # フリーコースだけ制覇した場合も称号1つ分
    cleared = min(max(regular, 1 if free >= FREE_COURSE_GOAL else 0), len(TITLES) - 1)

    return {
        "courses": [
            {"course": course, "visited": done, "total": total, "cleared": done >= total}
            for course, (done, total) in sorted(status.items())
        ],
        "free_course": {
            "visited": min(free, FREE_COURSE_GOAL),
            "total": FREE_COURSE_GOAL,
            "cleared": free >= FREE_COURSE_GOAL,
        },
        "cleared_courses": cleared,
        "title": TITLES[cleared],
    }
