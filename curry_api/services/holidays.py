"""祝日カレンダー

毎年同じ月日を祝日として扱う近似。年によって動く祝日（成人の日、春分の日など）は
2020年の日付で固定している。
https://www8.cao.go.jp/chosei/shukujitsu/gaiyou.html
"""
from datetime import date

JAPANESE_HOLIDAYS = frozenset([
    (1, 1),
    (1, 13),
    (2, 11),
    (2, 23),
    (2, 24),
    (3, 20),
    (4, 29),
    (5, 3),
    (5, 4),
    (5, 5),
    (5, 6),
    (7, 23),
    (7, 24),
    (8, 10),
    (9, 21),
    (9, 22),
    (11, 3),
    (11, 23),
])


def is_holiday(d: date) -> bool:
    return (d.month, d.day) in JAPANESE_HOLIDAYS
