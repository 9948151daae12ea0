from __future__ import annotations

import random

import pytest

from shift_scheduler.config import SchedulerConfig
from shift_scheduler.data.data_manager import sample_employees
from shift_scheduler.logic.scheduler import (
    _assign_by_ranking,
    apply_preferences,
    auto_assign,
    fill_coverage,
    resolve_conflicts,
)
from shift_scheduler.models.employee import Employee
from shift_scheduler.models.schedule import WeeklySchedule
from shift_scheduler.models.shift import Shift, WORK_SHIFTS

M, A, E, N = Shift.MORNING, Shift.AFTERNOON, Shift.EVENING, Shift.NONE


def _assert_invariants(sch: WeeklySchedule) -> None:
    for idx, emp in enumerate(sch.employees):
        appearances = 0
        for day in range(7):
            on_day = sum(1 for s in WORK_SHIFTS if idx in sch.grid[day][s])
            assert on_day <= 1, f"{emp.name} double-booked on day {day}"
            appearances += on_day
        assert appearances == emp.assigned_days
        assert emp.assigned_days <= sch.max_days_per_week


def test_single_all_morning_employee_capped_at_five_days() -> None:
    sch = WeeklySchedule([Employee("Solo", [M] * 7)])

    apply_preferences(sch)

    assert [sch.is_assigned_to_shift(0, d, M) for d in range(7)] == [True] * 5 + [False] * 2
    assert sch.employees[0].assigned_days == 5

    resolve_conflicts(sch)
    gaps = fill_coverage(sch, 2, random.Random(0))

    assert len(gaps) == 21
    assert sch.employees[0].assigned_days == 5
    _assert_invariants(sch)


def test_shared_sunday_morning_preference_fills_cell_without_backfill() -> None:
    sch = WeeklySchedule([Employee("A", [M]), Employee("B", [M])])

    apply_preferences(sch)

    assert sch.cell(0, M) == [0, 1]
    fill_coverage(sch, 2, random.Random(3))
    assert sch.cell(0, M) == [0, 1]
    _assert_invariants(sch)


def test_lone_employee_without_sunday_preference_covers_one_sunday_shift() -> None:
    sch = auto_assign([Employee("Solo")], SchedulerConfig(seed=1))

    assert sch.cell(0, M) == [0]
    assert sch.cell(0, A) == []
    assert sch.cell(0, E) == []
    assert sch.employees[0].assigned_days == 5
    _assert_invariants(sch)


def test_conflict_pass_is_inert_without_capacity_limit() -> None:
    employees = sample_employees()
    sch = WeeklySchedule(employees)
    apply_preferences(sch)
    before = [[sch.cell(d, s) for s in WORK_SHIFTS] for d in range(7)]

    assert resolve_conflicts(sch) == 0
    assert [[sch.cell(d, s) for s in WORK_SHIFTS] for d in range(7)] == before


def test_preference_pass_skips_full_cell() -> None:
    sch = WeeklySchedule([Employee("First", [M]), Employee("Second", [M])], shift_capacity=1)

    assert apply_preferences(sch) == 1
    assert sch.cell(0, M) == [0]
    assert not sch.is_assigned_on_day(1, 0)


def test_conflict_pass_places_blocked_preference_on_first_ranked_shift() -> None:
    first = Employee("First", [M])
    second = Employee("Second", [M], [M, E, A])
    sch = WeeklySchedule([first, second], shift_capacity=1)

    apply_preferences(sch)

    assert resolve_conflicts(sch) == 1
    assert sch.cell(0, M) == [0, 1]
    assert sch.cell(0, E) == []
    _assert_invariants(sch)


def test_conflict_pass_follows_ranking_over_preference() -> None:
    first = Employee("First", [A])
    second = Employee("Second", [A], [E, A, M])
    sch = WeeklySchedule([first, second], shift_capacity=1)

    apply_preferences(sch)
    resolve_conflicts(sch)

    assert sch.cell(0, A) == [0]
    assert sch.cell(0, E) == [1]
    _assert_invariants(sch)


def test_ranking_search_skips_day_already_worked() -> None:
    sch = WeeklySchedule([Employee("Late", global_ranking=[E, A, M])])
    sch.assign(0, 0, M)

    assert _assign_by_ranking(sch, 0, 0) is False
    assert sch.cell(0, E) == []
    assert _assign_by_ranking(sch, 0, 1) is True
    assert sch.cell(1, E) == [0]
    _assert_invariants(sch)


def test_ranking_search_stops_at_weekly_cap() -> None:
    sch = WeeklySchedule([Employee("Busy")], max_days_per_week=1)
    sch.assign(0, 0, M)

    assert _assign_by_ranking(sch, 0, 1) is False
    assert not sch.is_assigned_on_day(0, 1)


def test_conflict_pass_stops_at_weekly_cap() -> None:
    blocker = Employee("Blocker", [M] * 7)
    capped = Employee("Capped", [M, M, M])
    sch = WeeklySchedule([blocker, capped], shift_capacity=1, max_days_per_week=2)

    apply_preferences(sch)
    assert sch.cell(2, M) == [1]

    assert resolve_conflicts(sch) == 1
    assert capped.assigned_days == 2
    assert sch.cell(0, M) == [0, 1]
    assert not sch.is_assigned_on_day(1, 1)
    _assert_invariants(sch)


def test_backfill_picks_from_eligible_pool_only() -> None:
    employees = [Employee(f"E{i}") for i in range(6)]
    sch = WeeklySchedule(employees)

    gaps = fill_coverage(sch, 2, random.Random(42))

    for day in range(7):
        for s in WORK_SHIFTS:
            assert len(sch.cell(day, s)) >= 2 or not sch.eligible_pool(day)
    assert sum(e.assigned_days for e in employees) == 30
    assert all(e.assigned_days == 5 for e in employees)
    assert gaps == sch.coverage_gaps(2)
    _assert_invariants(sch)


def test_backfill_ignores_shift_capacity() -> None:
    sch = WeeklySchedule([Employee("A"), Employee("B")], shift_capacity=1)

    fill_coverage(sch, 2, random.Random(0))

    assert sorted(sch.cell(0, M)) == [0, 1]
    _assert_invariants(sch)


def test_sample_roster_respects_all_invariants() -> None:
    config = SchedulerConfig(seed=2024)
    sch = auto_assign(sample_employees(), config)

    _assert_invariants(sch)
    for day in range(7):
        for s in WORK_SHIFTS:
            assert len(sch.cell(day, s)) >= config.min_staff or not sch.eligible_pool(day)


def test_sample_roster_preferences_come_first() -> None:
    sch = auto_assign(sample_employees(), SchedulerConfig(seed=0))
    names = [e.name for e in sch.employees]
    alan = names.index("Alan")

    assert [sch.is_assigned_to_shift(alan, d, M) for d in range(5)] == [True] * 5
    assert sch.employees[alan].assigned_days == 5


@pytest.mark.parametrize("seed", [0, 7, 12345])
def test_same_seed_gives_same_schedule(seed: int) -> None:
    first = auto_assign(sample_employees(), SchedulerConfig(seed=seed))
    second = auto_assign(sample_employees(), rng=random.Random(seed))

    assert first.to_dict() == second.to_dict()


def test_auto_assign_rejects_empty_roster() -> None:
    with pytest.raises(ValueError):
        auto_assign([])


def test_auto_assign_never_raises_when_understaffed() -> None:
    sch = auto_assign([Employee("Only", [N, E, N, E, N, E, N])], SchedulerConfig(seed=5, min_staff=3))

    assert sch.coverage_gaps(3)
    _assert_invariants(sch)
