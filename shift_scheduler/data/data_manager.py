# data/data_manager.py
from __future__ import annotations
import json
from pathlib import Path
from typing import List, Dict, Any

from shift_scheduler.config import SchedulerConfig, config_from_dict
from shift_scheduler.exceptions import RosterFormatError
from shift_scheduler.models.employee import Employee
from shift_scheduler.models.schedule import WeeklySchedule
from shift_scheduler.models.shift import Shift, DAYS_PER_WEEK
from shift_scheduler.utils.parse_utils import parse_shift, parse_ranking

# 프로젝트 루트 = .../shift_scheduler
BASE_DIR = Path(__file__).resolve().parents[1]
DATA_DIR = BASE_DIR / "data"
EMP_FILE = DATA_DIR / "employees.json"
CONFIG_FILE = DATA_DIR / "config.json"
EXPORT_FILE = DATA_DIR / "schedule_export.json"


def _ensure_dir(path: Path):
    path.parent.mkdir(parents=True, exist_ok=True)


def _safe_json_load(path: Path, default):
    if not path.exists():
        return default
    try:
        raw = path.read_text(encoding="utf-8").strip()
        if not raw:
            return default
        return json.loads(raw)
    except (OSError, ValueError):
        return default


def _safe_json_save(path: Path, data):
    _ensure_dir(path)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    tmp.replace(path)


# ---------- 직원 ----------
def _emp_to_dict(e: Employee) -> Dict[str, Any]:
    return {
        "name": e.name,
        "preferred_per_day": [s.code for s in e.preferred_per_day],
        "global_ranking": [s.code for s in e.global_ranking],
    }


def _emp_from_dict(item, pos: int) -> Employee:
    if not isinstance(item, dict):
        raise RosterFormatError(f"{pos}번째 항목이 객체가 아닙니다: {item!r}")
    name = str(item.get("name") or "").strip()
    if not name:
        raise RosterFormatError(f"{pos}번째 항목에 이름이 없습니다.")
    prefs = [parse_shift(v) for v in (item.get("preferred_per_day") or [])]
    ranking = item.get("global_ranking")
    return Employee(
        name,
        preferred_per_day=prefs,
        global_ranking=parse_ranking(ranking) if ranking else None,
    )


def load_employees(path: Path | None = None) -> List[Employee]:
    """
    JSON 명단 -> Employee 리스트 (배정 일수는 0부터)
    파일이 없거나 비어 있으면 [].
    """
    path = Path(path) if path else EMP_FILE
    if not path.exists():
        return []
    raw = path.read_text(encoding="utf-8").strip()
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except ValueError as e:
        raise RosterFormatError(f"JSON 형식 오류: {path} ({e})") from e
    if not isinstance(data, list):
        raise RosterFormatError("직원 명단은 리스트여야 합니다.")
    return [_emp_from_dict(item, i + 1) for i, item in enumerate(data)]


def save_employees(employees: List[Employee], path: Path | None = None):
    payload = [_emp_to_dict(e) for e in employees]
    _safe_json_save(Path(path) if path else EMP_FILE, payload)


# ---------- 설정 ----------
def load_config(path: Path | None = None) -> SchedulerConfig:
    data = _safe_json_load(Path(path) if path else CONFIG_FILE, default={})
    return config_from_dict(data)


# ---------- 스케줄 내보내기 ----------
def export_schedule(schedule: WeeklySchedule, min_staff: int, path: Path | None = None) -> Path:
    """결과 스케줄을 JSON 으로 저장 (다시 읽어 들이지는 않음)."""
    path = Path(path) if path else EXPORT_FILE
    payload = schedule.to_dict()
    payload["gaps"] = [
        {"day": g.day, "shift": g.shift.code, "staffed": g.staffed, "required": g.required}
        for g in schedule.coverage_gaps(min_staff)
    ]
    _safe_json_save(path, payload)
    return path


# ---------- 샘플 ----------
def sample_employees() -> List[Employee]:
    M, A, E, N = Shift.MORNING, Shift.AFTERNOON, Shift.EVENING, Shift.NONE
    every = lambda s: [s] * DAYS_PER_WEEK  # noqa: E731
    return [
        Employee("Alan", every(M), [M, A, E]),
        Employee("Bob", every(A), [A, E, M]),
        Employee("Carol", [E if d <= 4 else M for d in range(DAYS_PER_WEEK)], [E, M, A]),
        Employee("Dan", [M, A, E, M, A, E, M]),
        Employee("Eve", [A, A, M, M, E, A, E]),
        Employee("Frank", every(M)),
        Employee("Grace", every(E)),
        Employee("Heidi", [N, A, A, A, N, M, M]),
    ]
