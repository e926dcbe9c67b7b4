from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont, QKeyEvent, QShowEvent
from PySide6.QtWidgets import (
    QFrame,
    QGridLayout,
    QLabel,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from hakasha.core.engine import ProgressionEngine
from hakasha.core.keys import key_from_event
from hakasha.core.levels import LevelConfig
from hakasha.ui.colors import HomeColors, markup_stylesheet
from hakasha.ui.models import LevelInfo, level_infos

logger = logging.getLogger(__name__)

_SHORTCUT_MODIFIERS = (
    Qt.KeyboardModifier.ControlModifier
    | Qt.KeyboardModifier.AltModifier
    | Qt.KeyboardModifier.MetaModifier
)


class MainWindow(QMainWindow):
    """Practice window: level table on top, highlighted target below.

    Every key press is consumed here; letter attempts go to the engine and the
    view is redrawn after each one.
    """

    def __init__(self, config: LevelConfig, rng=None) -> None:
        super().__init__()
        self._engine = ProgressionEngine(
            config.table,
            block_size=config.block_size,
            rng=rng,
            schedule=self._defer,
        )
        self._level_labels: list[tuple[QLabel, QLabel]] = []
        self._target_label: Optional[QLabel] = None
        self._stylesheet = markup_stylesheet()

        self.setWindowTitle("Hakasha")
        logger.info("Starting practice at %s", self._engine.current_level_name)
        self._build_ui()
        self._render()

    @property
    def engine(self) -> ProgressionEngine:
        return self._engine

    def _build_ui(self) -> None:
        central = QWidget()
        central.setStyleSheet(
            f"""
            QWidget {{
                background: qlineargradient(x1:0, y1:0, x2:0, y2:1,
                    stop:0 {HomeColors.BG_TOP}, stop:1 {HomeColors.BG_BOTTOM});
                color: {HomeColors.TEXT_PRIMARY};
            }}
            QFrame#card {{
                background: {HomeColors.CARD_BG};
                border: 1px solid {HomeColors.CARD_BORDER};
                border-radius: 16px;
            }}
            QLabel {{ background: transparent; }}
            """
        )
        layout = QVBoxLayout(central)
        layout.setContentsMargins(32, 32, 32, 32)
        layout.setSpacing(24)

        levels_card = QFrame()
        levels_card.setObjectName("card")
        grid = QGridLayout(levels_card)
        grid.setContentsMargins(20, 16, 20, 16)
        for column, info in enumerate(level_infos(self._engine)):
            heading = QLabel(info.heading)
            heading.setAlignment(Qt.AlignCenter)
            heading.setStyleSheet(f"color: {HomeColors.TEXT_MUTED}; font-weight: 600;")
            name = QLabel()
            name.setAlignment(Qt.AlignCenter)
            name.setStyleSheet(f"color: {HomeColors.TEXT_SECONDARY};")
            characters = QLabel()
            characters.setAlignment(Qt.AlignCenter)
            characters.setStyleSheet(f"color: {HomeColors.PRIMARY}; font-size: 22px; font-weight: 700;")
            grid.addWidget(heading, 0, column)
            grid.addWidget(name, 1, column)
            grid.addWidget(characters, 2, column)
            self._level_labels.append((name, characters))
        layout.addWidget(levels_card)

        target_card = QFrame()
        target_card.setObjectName("card")
        target_layout = QVBoxLayout(target_card)
        target_layout.setContentsMargins(24, 24, 24, 24)
        self._target_label = QLabel()
        self._target_label.setTextFormat(Qt.RichText)
        self._target_label.setAlignment(Qt.AlignCenter)
        self._target_label.setWordWrap(True)
        font = QFont(self._target_label.font())
        font.setPointSize(28)
        self._target_label.setFont(font)
        target_layout.addWidget(self._target_label)
        layout.addWidget(target_card, 1)

        self.setCentralWidget(central)
        self.setFocusPolicy(Qt.StrongFocus)

    def _render(self) -> None:
        """Redraw the level table and the highlighted target."""
        self._render_level_table(level_infos(self._engine))
        if self._target_label is not None:
            self._target_label.setText(self._stylesheet + self._engine.markup())

    def _render_level_table(self, infos: list[LevelInfo]) -> None:
        for (name, characters), info in zip(self._level_labels, infos):
            name.setText(info.name)
            characters.setText(info.characters)

    def _defer(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` on the next event-loop turn, then redraw."""

        def _run() -> None:
            callback()
            self._render()

        QTimer.singleShot(0, _run)

    def showEvent(self, event: QShowEvent) -> None:
        super().showEvent(event)
        QTimer.singleShot(0, self.setFocus)

    def keyPressEvent(self, event: QKeyEvent) -> None:
        """Forward letter attempts to the engine and swallow everything else."""
        modifiers_held = bool(event.modifiers() & _SHORTCUT_MODIFIERS)
        key = key_from_event(event.text(), modifiers_held)
        event.accept()
        if key is None:
            return
        if self._engine.handle_key_press(key):
            self._render()
