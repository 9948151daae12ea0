# cli/menu.py
from shift_scheduler.cli.employee_menu import input_employees, show_employees
from shift_scheduler.cli.schedule_menu import show_schedule
from shift_scheduler.config import SchedulerConfig
from shift_scheduler.data.data_manager import (
    load_employees, save_employees, sample_employees, export_schedule, EMP_FILE,
)
from shift_scheduler.exceptions import CancelAction, GoBackAction, RosterFormatError
from shift_scheduler.logic.scheduler import auto_assign
from shift_scheduler.utils.input_handler import get_input


def _run(employees, config: SchedulerConfig):
    if not employees:
        print("직원 데이터가 없습니다. 먼저 직원을 등록해주세요.")
        return None
    schedule = auto_assign(employees, config)
    show_schedule(schedule, config.min_staff)
    return schedule


def main_menu(config: SchedulerConfig | None = None):
    config = config or SchedulerConfig()
    employees = []
    schedule = None

    while True:
        print("\n[주간 시프트 스케줄러]")
        print("1. 샘플 데이터로 자동 배정")
        print("2. 직원 직접 입력 후 자동 배정")
        print("3. 명단 파일(JSON) 불러와 자동 배정")
        print("4. 직원 목록 보기")
        print("5. 마지막 스케줄 보기")
        print("6. 마지막 스케줄 내보내기(JSON)")
        print("7. 현재 명단 저장")
        print("0. 종료")

        try:
            choice = get_input("선택")
            if choice == "1":
                employees = sample_employees()
                schedule = _run(employees, config)
            elif choice == "2":
                employees = input_employees()
                schedule = _run(employees, config)
            elif choice == "3":
                path = get_input("파일 경로", default=str(EMP_FILE))
                try:
                    employees = load_employees(path)
                except RosterFormatError as e:
                    print(f"명단을 읽지 못했습니다: {e}")
                    continue
                schedule = _run(employees, config)
            elif choice == "4":
                show_employees(employees)
            elif choice == "5":
                if schedule is None:
                    print("아직 생성된 스케줄이 없습니다.")
                else:
                    show_schedule(schedule, config.min_staff)
            elif choice == "6":
                if schedule is None:
                    print("아직 생성된 스케줄이 없습니다.")
                else:
                    out = export_schedule(schedule, config.min_staff)
                    print(f"내보내기 완료: {out}")
            elif choice == "7":
                if not employees:
                    print("저장할 직원이 없습니다.")
                else:
                    save_employees(employees)
                    print(f"명단 저장 완료: {EMP_FILE}")
            elif choice == "0":
                print("프로그램을 종료합니다.")
                break
            else:
                print("잘못된 선택.")
        except GoBackAction:
            print("이전 메뉴로 이동")
        except CancelAction:
            print("메인 메뉴로 이동")
