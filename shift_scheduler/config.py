# config.py
from __future__ import annotations
from dataclasses import dataclass, fields, replace
from typing import Optional, Dict, Any

from shift_scheduler.models.schedule import MAX_DAYS_PER_WEEK, DEFAULT_SHIFT_CAPACITY

MIN_STAFF_PER_SHIFT = 2


@dataclass(frozen=True)
class SchedulerConfig:
    min_staff: int = MIN_STAFF_PER_SHIFT              # 시프트당 최소 인원
    max_days_per_week: int = MAX_DAYS_PER_WEEK        # 직원별 주간 최대 근무일
    shift_capacity: int = DEFAULT_SHIFT_CAPACITY      # 선호 배정 시 칸 상한(사실상 무제한)
    seed: Optional[int] = None                        # None이면 시스템 엔트로피

    def with_overrides(self, **kwargs) -> "SchedulerConfig":
        """None 이 아닌 값만 덮어쓴다 (명령행 옵션용)."""
        changes = {k: v for k, v in kwargs.items() if v is not None}
        return replace(self, **changes)


def config_from_dict(data: Dict[str, Any]) -> SchedulerConfig:
    """
    dict -> SchedulerConfig
    - 모르는 키는 무시
    - 정수로 못 바꾸는 값, 1 미만 값은 기본값 유지 (seed 제외)
    """
    if not isinstance(data, dict):
        return SchedulerConfig()
    defaults = SchedulerConfig()
    values = {}
    for f in fields(SchedulerConfig):
        if f.name not in data:
            continue
        raw = data[f.name]
        if f.name == "seed":
            if raw is None:
                values["seed"] = None
                continue
        try:
            n = int(raw)
        except (TypeError, ValueError):
            continue
        if f.name != "seed" and n < 1:
            continue
        values[f.name] = n
    return replace(defaults, **values)
