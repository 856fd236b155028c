"""営業時間・定休日テキストの正規化

表記ゆれ（全角記号、曜日の範囲表記、L.O.表記、ランチ/ディナー表記など）を
順序付きの書き換えルールで1つの表記に寄せる。後のルールは前のルールの
出力を前提にしているので、順番を入れ替えないこと。
"""
import re
import unicodedata
from typing import Callable, List, NamedTuple, Sequence

WEEKDAYS = "月火水木金土日"
DAY_CHARS = WEEKDAYS + "祝"
MEAL_LABELS = ("ランチ", "ディナー", "カフェ", "バー", "モーニング", "ティー")

_MEAL = "|".join(MEAL_LABELS)
_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)
_SPACE_RE = re.compile(r"[^\S\n]")


class Rewrite(NamedTuple):
    """名前付きの書き換えルール（str → str）"""
    name: str
    apply: Callable[[str], str]


def literal(name: str, old: str, new: str) -> Rewrite:
    return Rewrite(name, lambda s: s.replace(old, new))


def regex(name: str, pattern: str, repl) -> Rewrite:
    compiled = re.compile(pattern)
    return Rewrite(name, lambda s: compiled.sub(repl, s))


def _nfkc(s: str) -> str:
    """全角英数・記号→半角（～→~, （→(, ：→:, ＬＯ→LO）"""
    return unicodedata.normalize("NFKC", s)


def _expand_day_range(m: re.Match) -> str:
    """月〜金 → 月火水木金（日曜をまたぐ範囲も可: 金〜月 → 金土日月）"""
    start = WEEKDAYS.index(m.group(1))
    end = WEEKDAYS.index(m.group(2))
    if end < start:
        end += 7
    return "".join(WEEKDAYS[i % 7] for i in range(start, end + 1))


HOURS_REWRITES: List[Rewrite] = [
    # 1. 文字幅・記号
    Rewrite("nfkc", _nfkc),
    literal("tilde", "~", "〜"),
    regex("hyphen range", r"(\d)\s*[-−–]\s*(\d)", r"\1〜\2"),
    # 2. 略記
    regex("last order", r"ラストオーダー|L\.?O\.?", "LO"),
    regex("weekday name", rf"([{WEEKDAYS}])曜日?", r"\1"),
    literal("national holiday long", "祝祭日", "祝"),
    literal("national holiday", "祝日", "祝"),
    literal("kara", "から", "〜"),
    # 3. 曜日の範囲
    literal("weekdays", "平日", "月火水木金"),
    regex("day range", rf"([{WEEKDAYS}]) *[〜\-−–] *([{WEEKDAYS}])", _expand_day_range),
    # 4. 時間帯ラベル
    literal("dinner typo", "デイナー", "ディナー"),
    regex("meal time suffix", rf"({_MEAL})タイム", r"\1"),
    # 5. 区切りで並んだ曜日をつなげる（月・水・金 のような連鎖があるので2回）
    regex("join days", rf"([{DAY_CHARS}])[・、,/]([{DAY_CHARS}])", r"\1\2"),
    regex("join days again", rf"([{DAY_CHARS}])[・、,/]([{DAY_CHARS}])", r"\1\2"),
    # 6. (土日) → 土日
    regex("unwrap days", rf"\(([{DAY_CHARS}]+)\)", r"\1"),
    # 7. 時刻のコロン
    regex("time colon", r"(\d)\s*:\s*(\d)", r"\1:\2"),
    # 8. 曜日 ランチ → ランチ 曜日
    regex("label first", rf"([{DAY_CHARS}]+) *({_MEAL})", r"\2 \1"),
    # 9. 末尾の読点、ラベル後のコロン
    regex("trailing comma", r"、$", ""),
    regex("stray colon", r"(?<!\d):|:(?!\d)", ""),
    # 10.
    Rewrite("trim", str.strip),
]

HOLIDAY_REWRITES: List[Rewrite] = [
    Rewrite("nfkc", _nfkc),
    regex("closed label", r"(?<!不)定休日?", ""),
    literal("national holiday long", "祝祭日", "祝"),
    literal("national holiday", "祝日", "祝"),
    regex("weekday name", rf"([{WEEKDAYS}])曜日?", r"\1"),
    literal("every week", "毎週", ""),
    # 無休
    literal("all year", "年中無休", "無休"),
    regex("none", r"なし|無し", "無休"),
    literal("irregular", "不定休日", "不定休"),
    # データ誤りで紛れ込むラベル
    regex("meal label", rf"デイナー|{_MEAL}", ""),
    regex("separators", r"[・、,/:\s]", ""),
    literal("new year typo", "年始年始", "年末年始"),
    Rewrite("trim", str.strip),
]


def apply_rewrites(rules: Sequence[Rewrite], s: str) -> str:
    for rule in rules:
        s = rule.apply(s)
    return s


def prepare_text(raw: str) -> str:
    """<br>を改行に、改行以外の空白文字を半角スペースに"""
    s = _BR_RE.sub("\n", raw or "")
    return _SPACE_RE.sub(" ", s)


def normalize_hours_line(line: str) -> str:
    return apply_rewrites(HOURS_REWRITES, line)


def normalize_holiday_text(text: str) -> str:
    return apply_rewrites(HOLIDAY_REWRITES, text)
