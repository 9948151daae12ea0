# utils/parse_utils.py
from shift_scheduler.models.shift import Shift, DEFAULT_RANKING


def parse_shift(text) -> Shift:
    """
    'm' / 'Morning' / ' A ' / 'e' -> Shift
    첫 글자(m/a/e, 대소문자 무시)만 본다. 그 외('-', 빈값 등)는 Shift.NONE
    한글 '오전/오후/저녁'도 허용.
    """
    if text is None:
        return Shift.NONE
    t = str(text).strip().lower()
    if t.startswith("m") or t.startswith("오전"):
        return Shift.MORNING
    if t.startswith("a") or t.startswith("오후"):
        return Shift.AFTERNOON
    if t.startswith("e") or t.startswith("저녁"):
        return Shift.EVENING
    return Shift.NONE


def parse_ranking(text) -> list[Shift]:
    """
    'morning,evening,afternoon' -> [M, E, A]
    정확히 서로 다른 근무 시프트 3개가 아니면 기본 순위(M, A, E)
    """
    if isinstance(text, str):
        tokens = text.split(",")
    else:
        tokens = list(text or [])
    parts = [parse_shift(tok) for tok in tokens]
    if len(parts) != 3 or len(set(parts)) != 3 or Shift.NONE in parts:
        return list(DEFAULT_RANKING)
    return parts


def parse_seed(text):
    """' 42 ' -> 42, 빈값/숫자 아님 -> None (무작위)"""
    try:
        return int(str(text).strip())
    except (TypeError, ValueError):
        return None


def parse_positive_int(text, default: int = 0) -> int:
    """숫자 아니거나 음수면 default."""
    try:
        n = int(str(text).strip())
    except (TypeError, ValueError):
        return default
    return n if n >= 0 else default
