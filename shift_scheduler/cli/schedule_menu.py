# cli/schedule_menu.py
from shift_scheduler.models.schedule import WeeklySchedule
from shift_scheduler.models.shift import WORK_SHIFTS, DAY_NAMES, DAYS_PER_WEEK


def schedule_lines(schedule: WeeklySchedule) -> list[str]:
    """요일/시프트별 한 줄: 'Sun\\tM\\tAlan,Frank' (빈 칸은 '-')"""
    lines = ["Day\tShift\tEmployees", "-" * 38]
    for day in range(DAYS_PER_WEEK):
        for s in WORK_SHIFTS:
            names = schedule.names(day, s)
            lines.append(f"{DAY_NAMES[day]}\t{s.code}\t{','.join(names) if names else '-'}")
    return lines


def totals_lines(schedule: WeeklySchedule) -> list[str]:
    return [f"{name}: {days} days" for name, days in schedule.totals()]


def show_schedule(schedule: WeeklySchedule, min_staff: int):
    print("\n[주간 스케줄] (시프트별 'Name1,Name2')\n")
    for line in schedule_lines(schedule):
        print(line)

    print("\n[직원별 배정 일수]")
    for line in totals_lines(schedule):
        print(line)

    gaps = schedule.coverage_gaps(min_staff)
    if gaps:
        print(f"\n[최소 인원({min_staff}명) 미달 {len(gaps)}칸]")
        print(", ".join(str(g) for g in gaps))
