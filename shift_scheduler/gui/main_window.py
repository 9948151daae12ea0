# gui/main_window.py
import sys
import random

from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QToolBar, QPushButton,
    QLabel, QTableWidget, QTableWidgetItem, QSizePolicy, QMessageBox, QLineEdit,
    QHeaderView, QAbstractItemView, QSplitter, QFileDialog, QSpinBox,
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QColor

from shift_scheduler.config import SchedulerConfig
from shift_scheduler.data.data_manager import (
    load_employees, save_employees, sample_employees, export_schedule, EMP_FILE, EXPORT_FILE,
)
from shift_scheduler.exceptions import RosterFormatError
from shift_scheduler.gui.employee_editor import open_employee_editor
from shift_scheduler.logic.scheduler import auto_assign
from shift_scheduler.models.shift import WORK_SHIFTS, SHIFT_LABELS, DAY_LABELS, DAYS_PER_WEEK
from shift_scheduler.utils.parse_utils import parse_seed

SHORT_CELL_COLOR = QColor("#ffd6d6")   # 최소 인원 미달 칸


class MainWindow(QMainWindow):
    def __init__(self, config: SchedulerConfig | None = None):
        super().__init__()
        self.setWindowTitle("주간 시프트 스케줄러")
        self.resize(1280, 760)

        self.config = config or SchedulerConfig()
        try:
            self.employees = load_employees() or sample_employees()
        except RosterFormatError:
            # 저장된 명단이 깨졌으면 샘플로 시작
            self.employees = sample_employees()
        self.schedule = None

        self._build_ui()
        self.refresh()

    # ---------------- UI ----------------
    def _build_ui(self):
        tb = QToolBar()
        self.addToolBar(tb)

        btn_sample = QPushButton("샘플 명단")
        btn_sample.clicked.connect(self.load_sample)
        tb.addWidget(btn_sample)

        btn_open = QPushButton("명단 열기")
        btn_open.clicked.connect(self.open_roster)
        tb.addWidget(btn_open)

        btn_save = QPushButton("명단 저장")
        btn_save.clicked.connect(self.save_roster)
        tb.addWidget(btn_save)

        tb.addSeparator()

        tb.addWidget(QLabel(" 최소 인원 "))
        self.spin_min = QSpinBox()
        self.spin_min.setRange(1, 20)
        self.spin_min.setValue(self.config.min_staff)
        tb.addWidget(self.spin_min)

        tb.addWidget(QLabel(" 시드 "))
        self.txt_seed = QLineEdit("" if self.config.seed is None else str(self.config.seed))
        self.txt_seed.setPlaceholderText("비우면 무작위")
        self.txt_seed.setMaximumWidth(100)
        tb.addWidget(self.txt_seed)

        btn_auto = QPushButton("자동 배정")
        btn_auto.setToolTip("선호 → 순위/다음 날 → 최소 인원 보충 순서로 배정")
        btn_auto.clicked.connect(self.run_auto_assign)
        tb.addWidget(btn_auto)

        btn_export = QPushButton("내보내기")
        btn_export.clicked.connect(self.export_current)
        tb.addWidget(btn_export)

        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)

        splitter = QSplitter(Qt.Horizontal)
        root.addWidget(splitter)

        # ----- 좌측: 직원 명단 -----
        left_container = QWidget()
        left = QVBoxLayout(left_container)
        left.addWidget(QLabel("직원 명단 (더블클릭: 편집)"))

        self.emp_table = QTableWidget(0, DAYS_PER_WEEK + 2)
        self.emp_table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.emp_table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.emp_table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.emp_table.setHorizontalHeaderLabels(["이름", *DAY_LABELS, "순위"])
        self.emp_table.setSizePolicy(QSizePolicy.Preferred, QSizePolicy.Expanding)
        header = self.emp_table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.ResizeToContents)
        left.addWidget(self.emp_table)

        btn_bar = QHBoxLayout()
        self.btn_add_emp = QPushButton("추가")
        self.btn_edit_emp = QPushButton("편집")
        self.btn_del_emp = QPushButton("삭제")
        btn_bar.addWidget(self.btn_add_emp)
        btn_bar.addWidget(self.btn_edit_emp)
        btn_bar.addWidget(self.btn_del_emp)
        left.addLayout(btn_bar)

        # ----- 우측: 주간 스케줄 + 합계 -----
        right_container = QWidget()
        right = QVBoxLayout(right_container)
        right.addWidget(QLabel("주간 스케줄"))

        self.week_table = QTableWidget(len(WORK_SHIFTS), DAYS_PER_WEEK)
        self.week_table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.week_table.setHorizontalHeaderLabels(list(DAY_LABELS))
        self.week_table.setVerticalHeaderLabels([SHIFT_LABELS[s] for s in WORK_SHIFTS])
        self.week_table.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.week_table.verticalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.week_table.setWordWrap(True)
        right.addWidget(self.week_table, 3)

        right.addWidget(QLabel("직원별 배정 일수"))
        self.totals_table = QTableWidget(0, 2)
        self.totals_table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.totals_table.setHorizontalHeaderLabels(["이름", "일수"])
        self.totals_table.horizontalHeader().setStretchLastSection(True)
        right.addWidget(self.totals_table, 1)

        splitter.addWidget(left_container)
        splitter.addWidget(right_container)
        splitter.setStretchFactor(0, 0)
        splitter.setStretchFactor(1, 1)

        # 시그널
        self.emp_table.cellDoubleClicked.connect(self._on_emp_double)
        self.btn_add_emp.clicked.connect(self.add_employee)
        self.btn_edit_emp.clicked.connect(self.edit_selected_employee)
        self.btn_del_emp.clicked.connect(self.delete_selected_employee)

        self.status = self.statusBar()

    # ---------------- 데이터/바인딩 ----------------
    def _fill_emp_table(self):
        self.emp_table.setRowCount(0)
        for e in self.employees:
            r = self.emp_table.rowCount()
            self.emp_table.insertRow(r)
            self.emp_table.setItem(r, 0, QTableWidgetItem(e.name))
            for d, s in enumerate(e.preferred_per_day):
                item = QTableWidgetItem(s.code)
                item.setTextAlignment(Qt.AlignCenter)
                self.emp_table.setItem(r, d + 1, item)
            self.emp_table.setItem(r, DAYS_PER_WEEK + 1,
                                   QTableWidgetItem(",".join(s.code for s in e.global_ranking)))

    def _fill_week_table(self):
        self.week_table.clearContents()
        self.totals_table.setRowCount(0)
        if self.schedule is None:
            return
        min_staff = self.spin_min.value()
        for day in range(DAYS_PER_WEEK):
            for s in WORK_SHIFTS:
                names = self.schedule.names(day, s)
                item = QTableWidgetItem("\n".join(names) if names else "-")
                item.setTextAlignment(Qt.AlignCenter)
                if len(names) < min_staff:
                    item.setBackground(SHORT_CELL_COLOR)
                    item.setToolTip(f"최소 {min_staff}명 미달 ({len(names)}명)")
                self.week_table.setItem(int(s), day, item)

        for name, days in self.schedule.totals():
            r = self.totals_table.rowCount()
            self.totals_table.insertRow(r)
            self.totals_table.setItem(r, 0, QTableWidgetItem(name))
            self.totals_table.setItem(r, 1, QTableWidgetItem(str(days)))

    def refresh(self):
        self._fill_emp_table()
        self._fill_week_table()
        msg = f"직원 {len(self.employees)}명"
        if self.schedule is not None:
            gaps = self.schedule.coverage_gaps(self.spin_min.value())
            msg += f", 미달 {len(gaps)}칸"
        self.status.showMessage(msg)

    def _current_config(self) -> SchedulerConfig:
        seed = parse_seed(self.txt_seed.text())
        return SchedulerConfig(
            min_staff=self.spin_min.value(),
            max_days_per_week=self.config.max_days_per_week,
            shift_capacity=self.config.shift_capacity,
            seed=seed,
        )

    # ---------------- 동작 ----------------
    def run_auto_assign(self):
        if not self.employees:
            QMessageBox.information(self, "안내", "직원 데이터가 없습니다. 먼저 직원을 추가해주세요.")
            return
        config = self._current_config()
        self.schedule = auto_assign(self.employees, config, rng=random.Random(config.seed))
        self.refresh()
        gaps = self.schedule.coverage_gaps(config.min_staff)
        if gaps:
            QMessageBox.warning(
                self, "인원 부족",
                f"가용 인원이 부족해 {len(gaps)}칸이 최소 인원({config.min_staff}명)에 못 미칩니다.\n"
                + ", ".join(str(g) for g in gaps),
            )

    def load_sample(self):
        self.employees = sample_employees()
        self.schedule = None
        self.refresh()

    def open_roster(self):
        path, _ = QFileDialog.getOpenFileName(self, "명단 열기", str(EMP_FILE.parent), "JSON (*.json)")
        if not path:
            return
        try:
            employees = load_employees(path)
        except RosterFormatError as e:
            QMessageBox.warning(self, "오류", f"명단을 읽지 못했습니다.\n{e}")
            return
        self.employees = employees
        self.schedule = None
        self.refresh()

    def save_roster(self):
        path, _ = QFileDialog.getSaveFileName(self, "명단 저장", str(EMP_FILE), "JSON (*.json)")
        if not path:
            return
        save_employees(self.employees, path)
        self.status.showMessage(f"명단 저장 완료: {path}", 3000)

    def export_current(self):
        if self.schedule is None:
            QMessageBox.information(self, "안내", "먼저 자동 배정을 실행해주세요.")
            return
        path, _ = QFileDialog.getSaveFileName(self, "스케줄 내보내기", str(EXPORT_FILE), "JSON (*.json)")
        if not path:
            return
        export_schedule(self.schedule, self.spin_min.value(), path)
        self.status.showMessage(f"내보내기 완료: {path}", 3000)

    def add_employee(self):
        emp = open_employee_editor(self)
        if emp is None:
            return
        self.employees.append(emp)
        self.schedule = None
        self.refresh()

    def _on_emp_double(self, row, _col):
        self._edit_row(row)

    def edit_selected_employee(self):
        row = self.emp_table.currentRow()
        if row < 0:
            QMessageBox.information(self, "안내", "편집할 직원을 선택해주세요.")
            return
        self._edit_row(row)

    def _edit_row(self, row: int):
        if not 0 <= row < len(self.employees):
            return
        if open_employee_editor(self, self.employees[row]) is not None:
            self.schedule = None
            self.refresh()

    def delete_selected_employee(self):
        row = self.emp_table.currentRow()
        if row < 0:
            QMessageBox.information(self, "안내", "삭제할 직원을 선택해주세요.")
            return
        name = self.employees[row].name
        if QMessageBox.question(self, "확인", f"[{name}]을(를) 삭제하시겠습니까?") != QMessageBox.Yes:
            return
        del self.employees[row]
        self.schedule = None
        self.refresh()


def run_gui(config: SchedulerConfig | None = None) -> int:
    app = QApplication.instance() or QApplication(sys.argv)
    win = MainWindow(config)
    win.show()
    return app.exec()
