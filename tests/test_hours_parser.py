"""営業時間パースのテスト"""
import pytest

from curry_api.services.errors import UnrecognizedLineGrammar
from curry_api.services.hours_parser import (
    WindowTemplate, correct_overnight, expand, parse_line, parse_line_break_separated,
)
from curry_api.services.schedule import DayTag, Time


def t(s):
    return Time.parse(s)


class TestParseLine:
    def test_days_and_last_order(self):
        tpl = parse_line("月火水木金 11:00〜21:00(LO23:00)")
        assert tpl == WindowTemplate(days="月火水木金", open=t("11:00"), close=t("21:00"), last_order=t("23:00"))

    def test_meal_label(self):
        tpl = parse_line("ランチ 土日 11:00〜15:00")
        assert tpl.meal == "ランチ"
        assert tpl.days == "土日"

    def test_last_order_without_time_is_close(self):
        tpl = parse_line("11:00〜21:00(LO)")
        assert tpl.last_order == t("21:00")

    def test_no_match(self):
        assert parse_line("11:00頃〜売り切れまで") is None
        assert parse_line("11:75〜15:00") is None


class TestExpand:
    def test_one_window_per_day(self):
        tpl = WindowTemplate(days="土日祝", open=t("11:00"), close=t("17:00"))
        windows = expand(tpl)
        assert [w.day for w in windows] == [DayTag.SAT, DayTag.SUN, DayTag.HOLIDAY]

    def test_every_day(self):
        windows = expand(WindowTemplate(days="", open=t("11:00"), close=t("15:00")))
        assert len(windows) == 1
        assert windows[0].day is DayTag.EVERY_DAY

    def test_overnight(self):
        close, lo = correct_overnight(t("18:00"), t("02:00"), t("01:30"))
        assert close == t("26:00")
        assert lo == t("25:30")

    def test_same_day_unchanged(self):
        close, lo = correct_overnight(t("11:00"), t("21:00"), t("20:30"))
        assert close == t("21:00")
        assert lo == t("20:30")

    def test_close_equal_open_is_24h(self):
        close, _ = correct_overnight(t("05:00"), t("05:00"))
        assert close == t("29:00")


class TestParseText:
    def test_example_weekdays(self):
        windows = parse_line_break_separated("月〜金 11:00～21:00（LO23：00）")
        assert [w.day for w in windows] == [DayTag.MON, DayTag.TUE, DayTag.WED, DayTag.THU, DayTag.FRI]
        for w in windows:
            assert w.open == t("11:00")
            assert w.close == t("21:00")
            assert w.last_order == t("23:00")

    def test_example_weekend(self):
        windows = parse_line_break_separated("土日祝 11:00〜17:00")
        assert [w.day for w in windows] == [DayTag.SAT, DayTag.SUN, DayTag.HOLIDAY]
        for w in windows:
            assert (w.open, w.close, w.last_order) == (t("11:00"), t("17:00"), None)

    def test_multiline(self):
        text = "ランチ 11:30〜14:30<br>ディナー 17:30〜23:00 (L.O. 22:30)"
        windows = parse_line_break_separated(text)
        assert [w.meal for w in windows] == ["ランチ", "ディナー"]
        assert windows[1].last_order == t("22:30")
        assert windows[1].effective_close == t("22:30")

    def test_skips_notes(self):
        text = "11:00〜15:00<br>※ 売り切れ次第終了 14:00頃<br>ランチ営業あり<br><br>"
        windows = parse_line_break_separated(text)
        assert len(windows) == 1

    def test_overnight_window(self):
        (w,) = parse_line_break_separated("18:00〜2:00(LO1:30)")
        assert w.close == t("26:00")
        assert w.last_order == t("25:30")

    def test_unrecognized_line_aborts(self):
        text = "月〜金 11:00〜21:00<br>土 11:00頃〜売り切れまで"
        with pytest.raises(UnrecognizedLineGrammar) as exc:
            parse_line_break_separated(text)
        assert exc.value.text == "土 11:00頃〜売り切れまで"
        assert exc.value.raw == "土 11:00頃〜売り切れまで"

    def test_empty(self):
        assert parse_line_break_separated("") == []

    @pytest.mark.parametrize("text", [
        "月〜金 11:00～21:00（LO20：30）<br>土日祝 11:00〜17:00",
        "18:00〜2:00(LO1:30)",
        "ディナー 17:00〜5:00 (LO)",
        "月・水・金 10:00〜10:00",
    ])
    def test_window_invariants(self, text):
        for w in parse_line_break_separated(text):
            assert w.close.to_minutes() > w.open.to_minutes()
            if w.last_order is not None:
                assert w.open <= w.last_order

    def test_hyphenated_day_range(self):
        windows = parse_line_break_separated("月-金 11:00-15:00")
        assert [w.day for w in windows] == [DayTag.MON, DayTag.TUE, DayTag.WED, DayTag.THU, DayTag.FRI]

    def test_close_before_open_after_wrap(self):
        # +24時間しても閉店が開店以前
        with pytest.raises(UnrecognizedLineGrammar) as exc:
            parse_line_break_separated("30:00〜5:00")
        assert exc.value.text == "30:00〜5:00"
        assert exc.value.raw == "30:00〜5:00"
