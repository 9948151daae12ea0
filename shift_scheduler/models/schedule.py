# models/schedule.py
from dataclasses import dataclass
from typing import List

from shift_scheduler.models.shift import Shift, WORK_SHIFTS, DAY_NAMES, DAYS_PER_WEEK

MAX_DAYS_PER_WEEK = 5
DEFAULT_SHIFT_CAPACITY = 100


@dataclass(frozen=True)
class CoverageGap:
    day: int
    shift: Shift
    staffed: int
    required: int

    def __str__(self):
        return f"{DAY_NAMES[self.day]} {self.shift.code}: {self.staffed}/{self.required}"


class WeeklySchedule:
    """
    7(요일) x 3(시프트) 주간 스케줄.
    - 각 칸에는 직원 객체가 아니라 roster 인덱스를 저장한다.
    - 칸/배정 일수 변경은 assign()을 통해서만 한다.
    """

    def __init__(self, employees, max_days_per_week: int = MAX_DAYS_PER_WEEK,
                 shift_capacity: int = DEFAULT_SHIFT_CAPACITY):
        self.employees = list(employees)
        self.max_days_per_week = max_days_per_week
        self.shift_capacity = shift_capacity        # 선호 배정(1단계)에서만 보는 칸 상한
        self.grid: List[List[List[int]]] = [[[] for _ in WORK_SHIFTS] for _ in range(DAYS_PER_WEEK)]
        # 새 주간 시작: 배정 일수 초기화
        for e in self.employees:
            e.assigned_days = 0

    # ---------- 변경 ----------
    def assign(self, emp_idx: int, day: int, shift) -> bool:
        """
        emp_idx 직원을 day 요일 shift 시프트에 배정.
        이미 그날 근무 중이거나 주간 상한에 도달했으면 아무것도 하지 않고 False.
        """
        shift = Shift(shift)
        if not shift.is_work:
            return False
        emp = self.employees[emp_idx]
        if emp.assigned_days >= self.max_days_per_week:
            return False
        if self.is_assigned_on_day(emp_idx, day):
            return False
        self.grid[day][shift].append(emp_idx)
        emp.assigned_days += 1
        return True

    # ---------- 조회 ----------
    def cell(self, day: int, shift) -> List[int]:
        return list(self.grid[day][Shift(shift)])

    def is_assigned_on_day(self, emp_idx: int, day: int) -> bool:
        return any(emp_idx in cell for cell in self.grid[day])

    def is_assigned_to_shift(self, emp_idx: int, day: int, shift) -> bool:
        shift = Shift(shift)
        if not shift.is_work:
            return False
        return emp_idx in self.grid[day][shift]

    def shift_on_day(self, emp_idx: int, day: int) -> Shift:
        for s in WORK_SHIFTS:
            if emp_idx in self.grid[day][s]:
                return s
        return Shift.NONE

    def can_work(self, emp_idx: int, day: int) -> bool:
        return (self.employees[emp_idx].assigned_days < self.max_days_per_week
                and not self.is_assigned_on_day(emp_idx, day))

    def eligible_pool(self, day: int) -> List[int]:
        """그날 아직 근무가 없고 주간 상한 미만인 직원 인덱스(roster 순)."""
        return [i for i in range(len(self.employees)) if self.can_work(i, day)]

    def names(self, day: int, shift) -> List[str]:
        return [self.employees[i].name for i in self.grid[day][Shift(shift)]]

    def coverage_gaps(self, min_staff: int) -> List[CoverageGap]:
        gaps = []
        for day in range(DAYS_PER_WEEK):
            for s in WORK_SHIFTS:
                staffed = len(self.grid[day][s])
                if staffed < min_staff:
                    gaps.append(CoverageGap(day, s, staffed, min_staff))
        return gaps

    def totals(self):
        """스케줄에 한 번이라도 들어간 직원의 (이름, 배정 일수) - 이름순."""
        placed = {i for day in self.grid for cell in day for i in cell}
        rows = [(self.employees[i].name, self.employees[i].assigned_days) for i in placed]
        return sorted(rows, key=lambda r: r[0])

    def to_dict(self):
        return {
            "days": [
                {
                    "day": DAY_NAMES[day],
                    "shifts": {s.code: self.names(day, s) for s in WORK_SHIFTS},
                }
                for day in range(DAYS_PER_WEEK)
            ],
            "totals": {name: days for name, days in self.totals()},
        }
