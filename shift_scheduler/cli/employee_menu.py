# cli/employee_menu.py
from shift_scheduler.models.employee import Employee
from shift_scheduler.models.shift import DAY_NAMES
from shift_scheduler.utils.input_handler import get_input
from shift_scheduler.utils.parse_utils import parse_shift, parse_ranking, parse_positive_int


def show_employees(employees):
    print("\n[직원 목록]")
    if not employees:
        print("직원이 없습니다.")
        return
    print("이름 | " + " ".join(DAY_NAMES) + " | 순위")
    for e in employees:
        prefs = "   ".join(s.code for s in e.preferred_per_day)
        rank = ",".join(s.code for s in e.global_ranking)
        print(f"{e.name} | {prefs} | {rank}")


def input_employee(no: int) -> Employee:
    name = get_input(f"\n{no}번 직원 이름")
    print("요일별 선호 시프트를 입력하세요 (m/a/e, 선호 없음은 '-').")
    prefs = []
    for day_name in DAY_NAMES:
        prefs.append(parse_shift(get_input(day_name, default="-")))
    print("전체 선호 순위를 높은 순으로 쉼표로 입력 (예: morning,evening,afternoon)")
    ranking = parse_ranking(get_input("순위", default="m,a,e"))
    return Employee(name, prefs, ranking)


def input_employees() -> list[Employee]:
    n = parse_positive_int(get_input("직원 수"), default=0)
    if n == 0:
        print("직원 수는 1 이상이어야 합니다.")
        return []
    return [input_employee(i + 1) for i in range(n)]
