# gui/employee_editor.py
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit, QComboBox,
    QPushButton, QMessageBox, QGroupBox, QGridLayout,
)

from shift_scheduler.models.employee import Employee
from shift_scheduler.models.shift import Shift, WORK_SHIFTS, SHIFT_LABELS, DAY_LABELS, DAYS_PER_WEEK

PREF_OPTIONS = [Shift.NONE, *WORK_SHIFTS]    # 콤보 순서


def open_employee_editor(parent, employee: Employee | None = None) -> Employee | None:
    """저장하면 Employee(신규 또는 수정된 기존 객체), 취소하면 None"""
    dlg = EmployeeEditorDialog(parent, employee)
    if dlg.exec():
        return dlg.result_employee
    return None


class EmployeeEditorDialog(QDialog):
    def __init__(self, parent, employee: Employee | None = None):
        super().__init__(parent)
        self.setWindowTitle("직원 추가" if employee is None else f"{employee.name} 편집")
        self.employee = employee
        self.result_employee = None

        v = QVBoxLayout(self)

        name_row = QHBoxLayout()
        name_row.addWidget(QLabel("이름*"))
        self.txt_name = QLineEdit(employee.name if employee else "")
        name_row.addWidget(self.txt_name)
        v.addLayout(name_row)

        # 요일별 선호
        pref_box = QGroupBox("요일별 선호 시프트")
        grid = QGridLayout(pref_box)
        self.cmb_days = []
        for d in range(DAYS_PER_WEEK):
            grid.addWidget(QLabel(DAY_LABELS[d]), 0, d)
            cmb = self._shift_combo(PREF_OPTIONS)
            cur = employee.preferred_per_day[d] if employee else Shift.NONE
            cmb.setCurrentIndex(PREF_OPTIONS.index(cur))
            grid.addWidget(cmb, 1, d)
            self.cmb_days.append(cmb)
        v.addWidget(pref_box)

        # 전체 순위 (1~3순위)
        rank_box = QGroupBox("전체 선호 순위 (높은 순)")
        rank_row = QHBoxLayout(rank_box)
        self.cmb_rank = []
        ranking = employee.global_ranking if employee else list(WORK_SHIFTS)
        for i in range(3):
            rank_row.addWidget(QLabel(f"{i + 1}순위"))
            cmb = self._shift_combo(WORK_SHIFTS)
            cmb.setCurrentIndex(WORK_SHIFTS.index(ranking[i]))
            rank_row.addWidget(cmb)
            self.cmb_rank.append(cmb)
        v.addWidget(rank_box)

        btns = QHBoxLayout()
        cancel_btn = QPushButton("취소")
        save_btn = QPushButton("저장")
        btns.addStretch(1)
        btns.addWidget(cancel_btn)
        btns.addWidget(save_btn)
        v.addLayout(btns)

        cancel_btn.clicked.connect(self.reject)
        save_btn.clicked.connect(self.on_save)

    def _shift_combo(self, options):
        cmb = QComboBox()
        for s in options:
            cmb.addItem(f"{s.code} {SHIFT_LABELS[s]}", userData=int(s))
        return cmb

    def on_save(self):
        name = self.txt_name.text().strip()
        if not name:
            QMessageBox.warning(self, "확인", "이름을 입력해주세요.")
            self.txt_name.setFocus()
            return

        ranking = [Shift(c.currentData()) for c in self.cmb_rank]
        if len(set(ranking)) != 3:
            QMessageBox.warning(self, "확인", "순위에 같은 시프트를 두 번 넣을 수 없습니다.")
            return
        prefs = [Shift(c.currentData()) for c in self.cmb_days]

        if self.employee is None:
            self.result_employee = Employee(name, prefs, ranking)
        else:
            self.employee.name = name
            self.employee.preferred_per_day = prefs
            self.employee.global_ranking = ranking
            self.result_employee = self.employee
        self.accept()
