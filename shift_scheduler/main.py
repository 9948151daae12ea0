# main.py
import argparse
import logging
import sys

from shift_scheduler.cli.menu import main_menu
from shift_scheduler.cli.schedule_menu import show_schedule
from shift_scheduler.data.data_manager import load_config, load_employees, sample_employees
from shift_scheduler.exceptions import RosterFormatError
from shift_scheduler.logic.scheduler import auto_assign


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="shift-scheduler", description="주간 3교대 시프트 자동 배정")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--sample", action="store_true", help="샘플 명단으로 바로 배정 후 출력")
    src.add_argument("--roster", metavar="JSON", help="명단 파일로 바로 배정 후 출력")
    p.add_argument("--gui", action="store_true", help="창(PySide6)으로 실행")
    p.add_argument("--config", metavar="JSON", help="설정 파일 (기본: data/config.json)")
    p.add_argument("--seed", type=int, help="보충 배정 난수 시드")
    p.add_argument("--min-staff", type=int, help="시프트당 최소 인원")
    p.add_argument("--capacity", type=int, help="선호 배정 시 시프트당 상한")
    p.add_argument("-v", "--verbose", action="count", default=0, help="로그 자세히 (-v, -vv)")
    return p


def _setup_logging(verbose: int):
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    _setup_logging(args.verbose)

    config = load_config(args.config).with_overrides(
        seed=args.seed, min_staff=args.min_staff, shift_capacity=args.capacity,
    )

    if args.gui:
        from shift_scheduler.gui.main_window import run_gui
        return run_gui(config)

    if args.sample or args.roster:
        try:
            employees = sample_employees() if args.sample else load_employees(args.roster)
        except RosterFormatError as e:
            print(f"명단을 읽지 못했습니다: {e}", file=sys.stderr)
            return 2
        if not employees:
            print("직원 데이터가 없습니다.", file=sys.stderr)
            return 2
        schedule = auto_assign(employees, config)
        show_schedule(schedule, config.min_staff)
        return 0

    main_menu(config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
