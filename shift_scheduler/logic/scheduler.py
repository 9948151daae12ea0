# logic/scheduler.py
import logging
import random
from typing import List, Optional, Sequence

from shift_scheduler.config import SchedulerConfig
from shift_scheduler.models.employee import Employee
from shift_scheduler.models.schedule import WeeklySchedule, CoverageGap
from shift_scheduler.models.shift import Shift, WORK_SHIFTS, DAY_NAMES, DAYS_PER_WEEK

logger = logging.getLogger(__name__)


def apply_preferences(schedule: WeeklySchedule) -> int:
    """
    1단계: 직원 순서대로, 요일별 선호 시프트에 배정. 배정 건수 반환.
    선호 칸이 이미 shift_capacity 명이면 그날은 건너뛴다 (2단계에서 재시도).
    """
    placed = 0
    for idx, emp in enumerate(schedule.employees):
        for day in range(DAYS_PER_WEEK):
            if emp.assigned_days >= schedule.max_days_per_week:
                break
            pref = emp.preference_on(day)
            if pref is Shift.NONE:
                continue
            if len(schedule.grid[day][pref]) >= schedule.shift_capacity:
                continue
            if schedule.assign(idx, day, pref):
                placed += 1
    return placed


def _assign_by_ranking(schedule: WeeklySchedule, idx: int, day: int) -> bool:
    # 개인 순위대로 첫 번째로 들어가지는 시프트에 배정
    emp = schedule.employees[idx]
    for s in emp.global_ranking:
        if emp.assigned_days >= schedule.max_days_per_week:
            return False
        if schedule.is_assigned_on_day(idx, day):
            return False
        if schedule.assign(idx, day, s):
            return True
    return False


def resolve_conflicts(schedule: WeeklySchedule) -> int:
    """
    2단계: 선호가 있었는데 그날 배정되지 못한 직원 재시도
    - 같은 날, 개인 순위(global_ranking) 순서로
    - 그래도 안 되면 다음 날, 같은 순위 순서로
    1단계 칸 상한(shift_capacity)에 막힌 경우에만 여기서 배정된다.
    같은 날은 상한과 무관하게 순위 첫 시프트에 들어간다.
    """
    placed = 0
    for idx, emp in enumerate(schedule.employees):
        for day in range(DAYS_PER_WEEK):
            if emp.assigned_days >= schedule.max_days_per_week:
                break
            if emp.preference_on(day) is Shift.NONE:
                continue
            if schedule.is_assigned_on_day(idx, day):
                continue

            if _assign_by_ranking(schedule, idx, day):
                logger.info("%s: %s 선호 불가 → 순위로 %s 배정", emp.name, DAY_NAMES[day],
                            schedule.shift_on_day(idx, day).code)
                placed += 1
                continue

            nxt = day + 1
            if nxt < DAYS_PER_WEEK and _assign_by_ranking(schedule, idx, nxt):
                logger.info("%s: %s 배정 불가 → 다음 날 %s %s 배정", emp.name, DAY_NAMES[day],
                            DAY_NAMES[nxt], schedule.shift_on_day(idx, nxt).code)
                placed += 1
    return placed


def fill_coverage(schedule: WeeklySchedule, min_staff: int, rng: random.Random) -> List[CoverageGap]:
    """
    3단계: 최소 인원 미달 칸을 가용 인원 중 무작위로 채움
    - 가용: 주간 상한 미만 + 그날 근무 없음
    - 가용 인원이 없으면 그 칸은 미달로 남기고 다음 칸으로
    미달로 남은 칸 목록 반환.
    """
    for day in range(DAYS_PER_WEEK):
        for s in WORK_SHIFTS:
            while len(schedule.grid[day][s]) < min_staff:
                pool = schedule.eligible_pool(day)
                if not pool:
                    break
                pick = rng.choice(pool)
                schedule.assign(pick, day, s)
                logger.debug("보충 배정: %s %s ← %s", DAY_NAMES[day], s.code,
                             schedule.employees[pick].name)

    gaps = schedule.coverage_gaps(min_staff)
    for gap in gaps:
        logger.warning("최소 인원 미달: %s", gap)
    return gaps


def auto_assign(employees: Sequence[Employee], config: Optional[SchedulerConfig] = None,
                rng: Optional[random.Random] = None) -> WeeklySchedule:
    """
    자동 배정 (선호 → 순위/다음 날 → 최소 인원 보충 순서 고정)
    - rng 를 주지 않으면 config.seed 로 생성 (seed None → 매번 다름)
    - 인원이 부족해도 예외 없이, 미달 칸이 있는 스케줄을 반환
    """
    if not employees:
        raise ValueError("직원 명단이 비어 있습니다.")
    config = config or SchedulerConfig()
    rng = rng or random.Random(config.seed)

    schedule = WeeklySchedule(employees, max_days_per_week=config.max_days_per_week,
                              shift_capacity=config.shift_capacity)

    n_pref = apply_preferences(schedule)
    logger.info("선호 배정 %d건", n_pref)
    n_fallback = resolve_conflicts(schedule)
    logger.info("순위/다음 날 재배정 %d건", n_fallback)
    gaps = fill_coverage(schedule, config.min_staff, rng)
    logger.info("최소 인원 보충 완료 (미달 %d칸)", len(gaps))
    return schedule
