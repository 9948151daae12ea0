from __future__ import annotations

import pytest

from shift_scheduler.models.employee import Employee
from shift_scheduler.models.schedule import WeeklySchedule, CoverageGap
from shift_scheduler.models.shift import Shift, DEFAULT_RANKING

M, A, E, N = Shift.MORNING, Shift.AFTERNOON, Shift.EVENING, Shift.NONE


def _schedule(*names: str, **kwargs) -> WeeklySchedule:
    return WeeklySchedule([Employee(n) for n in names], **kwargs)


def test_employee_defaults_and_padding() -> None:
    emp = Employee("Alan", [M, A])

    assert emp.preferred_per_day == [M, A, N, N, N, N, N]
    assert emp.global_ranking == list(DEFAULT_RANKING)
    assert emp.assigned_days == 0


@pytest.mark.parametrize("ranking", [[M, A], [M, M, E], [M, A, N]])
def test_employee_invalid_ranking_falls_back_to_default(ranking) -> None:
    assert Employee("Bob", global_ranking=ranking).global_ranking == [M, A, E]


def test_new_schedule_resets_assigned_days() -> None:
    emp = Employee("Carol", assigned_days=4)
    WeeklySchedule([emp])

    assert emp.assigned_days == 0


def test_assign_adds_to_cell_and_counts_day() -> None:
    sch = _schedule("Alan")

    assert sch.assign(0, 2, A) is True
    assert sch.cell(2, A) == [0]
    assert sch.employees[0].assigned_days == 1
    assert sch.is_assigned_on_day(0, 2)
    assert sch.is_assigned_to_shift(0, 2, A)
    assert not sch.is_assigned_to_shift(0, 2, M)
    assert sch.shift_on_day(0, 2) is A
    assert sch.shift_on_day(0, 3) is N


def test_assign_same_day_twice_is_noop() -> None:
    sch = _schedule("Alan")
    sch.assign(0, 0, M)

    assert sch.assign(0, 0, E) is False
    assert sch.assign(0, 0, M) is False
    assert sch.cell(0, M) == [0]
    assert sch.cell(0, E) == []
    assert sch.employees[0].assigned_days == 1


def test_assign_at_weekly_cap_is_noop() -> None:
    sch = _schedule("Alan")
    for day in range(5):
        assert sch.assign(0, day, M)

    assert sch.assign(0, 5, M) is False
    assert sch.cell(5, M) == []
    assert sch.employees[0].assigned_days == 5
    assert sch.eligible_pool(5) == []


def test_assign_rejects_no_preference_shift() -> None:
    sch = _schedule("Alan")

    assert sch.assign(0, 0, N) is False
    assert sch.employees[0].assigned_days == 0
    assert not sch.is_assigned_on_day(0, 0)


def test_assign_ignores_shift_capacity() -> None:
    sch = _schedule("Alan", "Bob", shift_capacity=1)

    assert sch.assign(0, 0, M)
    assert sch.assign(1, 0, M)
    assert sch.cell(0, M) == [0, 1]
    assert sch.employees[1].assigned_days == 1


def test_eligible_pool_excludes_working_and_capped() -> None:
    sch = _schedule("Alan", "Bob", "Carol", max_days_per_week=1)
    sch.assign(0, 0, M)
    sch.assign(1, 1, M)

    assert sch.eligible_pool(0) == [2]
    assert sch.eligible_pool(3) == [2]


def test_coverage_gaps_and_totals() -> None:
    sch = _schedule("Zed", "Amy")
    sch.assign(0, 0, M)
    sch.assign(1, 0, M)
    sch.assign(0, 1, E)

    gaps = sch.coverage_gaps(2)

    assert len(gaps) == 20
    assert CoverageGap(1, E, 1, 2) in gaps
    assert all(not (g.day == 0 and g.shift is M) for g in gaps)
    assert str(CoverageGap(1, E, 1, 2)) == "Mon E: 1/2"
    assert sch.totals() == [("Amy", 1), ("Zed", 2)]


def test_totals_skip_unplaced_employees() -> None:
    sch = _schedule("Alan", "Bob")
    sch.assign(1, 3, A)

    assert sch.totals() == [("Bob", 1)]


def test_to_dict_lists_names_per_shift() -> None:
    sch = _schedule("Alan", "Bob")
    sch.assign(0, 0, M)
    sch.assign(1, 0, M)

    data = sch.to_dict()

    assert data["days"][0] == {"day": "Sun", "shifts": {"M": ["Alan", "Bob"], "A": [], "E": []}}
    assert len(data["days"]) == 7
    assert data["totals"] == {"Alan": 1, "Bob": 1}
