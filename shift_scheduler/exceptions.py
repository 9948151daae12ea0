# exceptions.py

class CancelAction(Exception):
    """'취소/cancel' 입력 → 메인 메뉴로."""


class GoBackAction(Exception):
    """'뒤로/back' 입력 → 이전 메뉴로."""


class RosterFormatError(ValueError):
    """직원 명단 파일 구조가 잘못됨 (리스트 아님, 이름 누락 등)."""
