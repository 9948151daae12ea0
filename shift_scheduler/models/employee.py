# models/employee.py
from shift_scheduler.models.shift import Shift, DEFAULT_RANKING, DAYS_PER_WEEK


def _normalize_ranking(ranking):
    """3개 근무 시프트의 순열이 아니면 기본 순위(M, A, E)로 대체."""
    if ranking is None:
        return list(DEFAULT_RANKING)
    ranking = [Shift(s) for s in ranking]
    if len(ranking) != 3 or len(set(ranking)) != 3 or Shift.NONE in ranking:
        return list(DEFAULT_RANKING)
    return ranking


class Employee:
    def __init__(self, name, preferred_per_day=None, global_ranking=None, assigned_days=0):
        self.name = name
        prefs = [Shift(s) for s in (preferred_per_day or [])][:DAYS_PER_WEEK]
        prefs += [Shift.NONE] * (DAYS_PER_WEEK - len(prefs))
        self.preferred_per_day = prefs              # 요일별 선호 (0=일 ~ 6=토)
        self.global_ranking = _normalize_ranking(global_ranking)  # 대체 순위 (높은 순)
        self.assigned_days = assigned_days          # WeeklySchedule.assign 만 변경

    def preference_on(self, day: int) -> Shift:
        return self.preferred_per_day[day]

    def __repr__(self):
        prefs = "".join(s.code for s in self.preferred_per_day)
        rank = "".join(s.code for s in self.global_ranking)
        return f"Employee({self.name!r}, prefs={prefs}, ranking={rank}, days={self.assigned_days})"
