# models/shift.py
from enum import IntEnum


class Shift(IntEnum):
    MORNING = 0
    AFTERNOON = 1
    EVENING = 2
    NONE = 3        # 선호 없음 (스케줄 칸에는 절대 들어가지 않음)

    @property
    def code(self) -> str:
        return SHIFT_CODES[self]

    @property
    def is_work(self) -> bool:
        return self is not Shift.NONE


WORK_SHIFTS = (Shift.MORNING, Shift.AFTERNOON, Shift.EVENING)
DEFAULT_RANKING = (Shift.MORNING, Shift.AFTERNOON, Shift.EVENING)

SHIFT_CODES = {
    Shift.MORNING: "M",
    Shift.AFTERNOON: "A",
    Shift.EVENING: "E",
    Shift.NONE: "-",
}
SHIFT_LABELS = {
    Shift.MORNING: "오전",
    Shift.AFTERNOON: "오후",
    Shift.EVENING: "저녁",
    Shift.NONE: "선호없음",
}

# 0=일 ~ 6=토
DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")
DAY_LABELS = ("일", "월", "화", "수", "목", "금", "토")
DAYS_PER_WEEK = len(DAY_NAMES)
