"""正規化ルールのテスト"""
import pytest

from curry_api.services.normalizer import (
    HOURS_REWRITES, HOLIDAY_REWRITES, apply_rewrites,
    normalize_hours_line, normalize_holiday_text, prepare_text,
)


class TestPrepareText:
    def test_br_to_newline(self):
        assert prepare_text("a<br>b<BR />c") == "a\nb\nc"

    def test_whitespace_to_space(self):
        assert prepare_text("月　11:00\t〜") == "月 11:00 〜"

    def test_none(self):
        assert prepare_text(None) == ""


class TestHoursRewrites:
    @pytest.mark.parametrize("raw, expected", [
        ("月〜金 11:00～21:00（LO23：00）", "月火水木金 11:00〜21:00(LO23:00)"),
        ("平日 11:00〜15:00", "月火水木金 11:00〜15:00"),
        ("金〜月 18:00〜24:00", "金土日月 18:00〜24:00"),
        ("月曜日・水曜日・金曜日 11:00〜14:00", "月水金 11:00〜14:00"),
        ("月・火・水・木・金 11:00〜14:00", "月火水木金 11:00〜14:00"),
        ("土日 ランチ 11:00〜15:00", "ランチ 土日 11:00〜15:00"),
        ("ランチタイム：11:30～14:00", "ランチ11:30〜14:00"),
        ("(土日祝) 11:00〜17:00", "土日祝 11:00〜17:00"),
        ("土日祝日 11:00〜17:00", "土日祝 11:00〜17:00"),
        ("11:00-15:00", "11:00〜15:00"),
        ("月-金 11:00-15:00", "月火水木金 11:00〜15:00"),
        ("土 − 月 18:00〜23:00", "土日月 18:00〜23:00"),
        ("11時00分から", "11時00分〜"),
        ("デイナー 17:00〜22:00", "ディナー 17:00〜22:00"),
        ("17:00〜22:00 (L.O. 21:30)", "17:00〜22:00 (LO 21:30)"),
        ("17:00〜22:00(ラストオーダー21:30)", "17:00〜22:00(LO21:30)"),
        ("11:00〜15:00、", "11:00〜15:00"),
        ("  11:00〜15:00  ", "11:00〜15:00"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_hours_line(raw) == expected

    @pytest.mark.parametrize("raw", [
        "月〜金 11:00～21:00（LO23：00）",
        "土日 ランチ 11:00〜15:00",
        "ランチタイム：11:30～14:00",
        "月・火・水 18:00-2:00(L.O.1:00)",
    ])
    def test_idempotent(self, raw):
        once = normalize_hours_line(raw)
        assert normalize_hours_line(once) == once

    def test_rule_order(self):
        names = [r.name for r in HOURS_REWRITES]
        assert names[0] == "nfkc"
        assert names.index("weekday name") < names.index("day range")
        assert names.index("weekdays") < names.index("day range")
        assert names.index("day range") < names.index("join days")
        assert names.index("join days") < names.index("join days again")
        assert names.index("join days again") < names.index("label first")
        assert names[-1] == "trim"

    def test_single_rule(self):
        rule = next(r for r in HOURS_REWRITES if r.name == "day range")
        assert apply_rewrites([rule], "火〜木") == "火水木"
        assert apply_rewrites([rule], "日〜日") == "日"


class TestHolidayRewrites:
    @pytest.mark.parametrize("raw, expected", [
        ("月曜日・火曜日", "月火"),
        ("日曜、祝日", "日祝"),
        ("なし", "無休"),
        ("年中無休", "無休"),
        ("定休日なし", "無休"),
        ("年末・年始", "年末年始"),
        ("年始年始", "年末年始"),
        ("定休日：毎週水曜日", "水"),
        ("不定休日", "不定休"),
        ("ディナー 月曜", "月"),
        ("土・日・祝祭日", "土日祝"),
    ])
    def test_normalize(self, raw, expected):
        assert normalize_holiday_text(raw) == expected

    def test_idempotent(self):
        for raw in ["月・火", "なし", "年末年始、日曜", "不定休"]:
            once = normalize_holiday_text(raw)
            assert normalize_holiday_text(once) == once

    def test_starts_with_width_normalization(self):
        assert HOLIDAY_REWRITES[0].name == "nfkc"
