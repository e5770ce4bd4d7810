"""PyQt6 GUI frontend.

A single window: the 3×3 tile grid, Shuffle and Solve (Hint) buttons and
a progress bar. Shuffles are animated with a ``QTimer`` that applies one
random step per tick.
"""

from __future__ import annotations

import sys

from PyQt6.QtCore import Qt, QTimer
from PyQt6.QtGui import QFont, QKeyEvent
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from backend.engine.gameplay import GamePlay
from backend.models.board import Direction
from backend.models.config import GameConfig

# ---------------------------------------------------------------------------
# Catppuccin Mocha CSS colours
# ---------------------------------------------------------------------------
_BASE = "#1e1e2e"
_MANTLE = "#181825"
_SURFACE0 = "#313244"
_SURFACE1 = "#45475a"
_OVERLAY0 = "#6c7086"
_TEXT = "#cdd6f4"
_BLUE = "#89b4fa"
_BLUE_H = "#a4c4fc"
_GREEN = "#a6e3a1"
_GREEN_H = "#b8ecb4"
_YELLOW = "#f9e2af"
_LAVENDER = "#b4befe"

_GLOBAL_CSS = f"""
    QMainWindow, QWidget#page {{ background: {_BASE}; }}
    QLabel {{ color: {_TEXT}; }}
    QProgressBar {{
        background: {_SURFACE0}; color: {_TEXT};
        border: none; border-radius: 6px; text-align: center;
    }}
    QProgressBar::chunk {{ background: {_YELLOW}; border-radius: 6px; }}
"""

_TILE_PX = 96

_KEY_DIRECTIONS: dict[Qt.Key, Direction] = {
    Qt.Key.Key_Up: Direction.UP,
    Qt.Key.Key_W: Direction.UP,
    Qt.Key.Key_Down: Direction.DOWN,
    Qt.Key.Key_S: Direction.DOWN,
    Qt.Key.Key_Left: Direction.LEFT,
    Qt.Key.Key_A: Direction.LEFT,
    Qt.Key.Key_Right: Direction.RIGHT,
    Qt.Key.Key_D: Direction.RIGHT,
}


def _styled_btn(
    text: str,
    *,
    bg: str = _SURFACE0,
    hover: str = _SURFACE1,
    fg: str = _TEXT,
    font_size: int = 13,
    min_w: int = 0,
    min_h: int = 40,
) -> QPushButton:
    btn = QPushButton(text)
    btn.setFont(QFont("Helvetica", font_size, QFont.Weight.Bold))
    btn.setMinimumHeight(min_h)
    if min_w:
        btn.setMinimumWidth(min_w)
    btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
    btn.setCursor(Qt.CursorShape.PointingHandCursor)
    btn.setStyleSheet(
        f"QPushButton {{ background:{bg}; color:{fg};"
        f" border:none; border-radius:8px; padding:6px 18px; }}"
        f" QPushButton:hover {{ background:{hover}; }}"
    )
    return btn


class _MainWindow(QMainWindow):
    def __init__(self, config: GameConfig) -> None:
        super().__init__()
        self.game = GamePlay(config)

        self.setWindowTitle("Eight Puzzle")
        self.setStyleSheet(_GLOBAL_CSS)
        self.setMinimumSize(420, 480)

        page = QWidget()
        page.setObjectName("page")
        self.setCentralWidget(page)

        root = QVBoxLayout(page)
        root.setSpacing(10)
        root.setContentsMargins(16, 12, 16, 12)

        title = QLabel("EIGHT  PUZZLE")
        title.setFont(QFont("Helvetica", 20, QFont.Weight.Bold))
        title.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(title)

        # board
        frame = QFrame()
        frame.setStyleSheet(f"background:{_MANTLE}; border-radius:10px;")
        grid = QGridLayout(frame)
        grid.setSpacing(4)
        grid.setContentsMargins(8, 8, 8, 8)
        root.addWidget(frame, alignment=Qt.AlignmentFlag.AlignCenter)

        self._btns: list[list[QPushButton]] = []
        for r, row in enumerate(self.game.state.grid):
            btn_row: list[QPushButton] = []
            for c, _ in enumerate(row):
                b = QPushButton()
                b.setFixedSize(_TILE_PX, _TILE_PX)
                b.setFont(QFont("Helvetica", 22, QFont.Weight.Bold))
                b.setFocusPolicy(Qt.FocusPolicy.NoFocus)
                b.clicked.connect(lambda _, rr=r, cc=c: self._click(rr, cc))
                grid.addWidget(b, r, c)
                btn_row.append(b)
            self._btns.append(btn_row)

        # controls
        controls = QHBoxLayout()
        controls.setSpacing(10)
        self._shuffle_btn = _styled_btn(
            "Shuffle", bg=_BLUE, hover=_LAVENDER, fg=_BASE
        )
        self._shuffle_btn.clicked.connect(self._shuffle)
        controls.addWidget(self._shuffle_btn)

        self._hint_btn = _styled_btn(
            "Solve (Hint)", bg=_GREEN, hover=_GREEN_H, fg=_BASE
        )
        self._hint_btn.clicked.connect(self._show_hint)
        controls.addWidget(self._hint_btn)
        root.addLayout(controls)

        self._progress = QProgressBar()
        self._progress.setRange(0, 100)
        self._progress.setTextVisible(True)
        self._progress.setMinimumHeight(24)
        root.addWidget(self._progress)

        self._footer = QLabel(
            "Click a tile next to the gap  ·  Arrows / WASD  move  ·  Esc  quit"
        )
        self._footer.setFont(QFont("Helvetica", 11))
        self._footer.setStyleSheet(f"color:{_OVERLAY0};")
        self._footer.setAlignment(Qt.AlignmentFlag.AlignCenter)
        root.addWidget(self._footer)

        self._timer = QTimer(self)
        self._timer.timeout.connect(self._tick_shuffle)

        self._sync()

    # -- rendering --

    def _sync(self) -> None:
        board = self.game.state.board
        for r, row in enumerate(board.tiles):
            for c, v in enumerate(row):
                b = self._btns[r][c]
                if v == 0:
                    b.setText("")
                    b.setStyleSheet(
                        f"QPushButton{{background:{_MANTLE};border:none;border-radius:8px;}}"
                    )
                else:
                    correct = board.is_tile_correct(r, c)
                    bg = _GREEN if correct else _BLUE
                    hv = _GREEN_H if correct else _BLUE_H
                    b.setText(str(v))
                    b.setStyleSheet(
                        f"QPushButton{{background:{bg};color:{_BASE};"
                        f"border:none;border-radius:8px;font-weight:bold;}}"
                        f"QPushButton:hover{{background:{hv};}}"
                    )
        progress = self.game.progress
        self._progress.setValue(max(0, min(100, progress)))
        self._progress.setFormat(f"Progress: {progress}%")

    # -- actions --

    def _click(self, r: int, c: int) -> None:
        if self.game.move_tile(r, c):
            self._sync()
            self._check_win()

    def move(self, d: Direction) -> None:
        if self.game.move(d):
            self._sync()
            self._check_win()

    def _shuffle(self) -> None:
        interval = self.game.config.step_interval_ms
        if interval == 0:
            self.game.shuffle_now()
            self._sync()
            return
        self.game.start_shuffle()
        self._sync()
        self._shuffle_btn.setEnabled(False)
        self._timer.start(interval)

    def _tick_shuffle(self) -> None:
        if not self.game.is_shuffling:
            self._timer.stop()
            self._shuffle_btn.setEnabled(True)
            return
        if self.game.step_shuffle():
            self._sync()

    def _show_hint(self) -> None:
        QMessageBox.information(self, "Hint", self.game.hint())

    def _check_win(self) -> None:
        if self.game.is_won:
            QMessageBox.information(self, "Victory", "Puzzle Solved!")

    # -- keyboard --

    def keyPressEvent(self, event: QKeyEvent | None) -> None:  # noqa: N802
        if event is None:
            return
        key = event.key()
        if key in _KEY_DIRECTIONS:
            self.move(_KEY_DIRECTIONS[key])
        elif key == Qt.Key.Key_X:
            self._shuffle()
        elif key == Qt.Key.Key_H:
            self._show_hint()
        elif key in (Qt.Key.Key_Q, Qt.Key.Key_Escape):
            self.close()
        else:
            super().keyPressEvent(event)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(config: GameConfig) -> None:
    """Launch the PyQt6 GUI."""
    qapp = QApplication.instance() or QApplication(sys.argv)
    window = _MainWindow(config)
    window.show()
    qapp.exec()
