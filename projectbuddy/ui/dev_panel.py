"""
Dev Panel — timer lengths, glow, online mode, apply and reset-all.
Opened from the main window with Ctrl+D.
"""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Signal, Slot
from PySide6.QtWidgets import (
    QCheckBox, QDialog, QFormLayout, QHBoxLayout, QLabel,
    QPushButton, QSpinBox, QVBoxLayout, QWidget,
)

from projectbuddy import config
from projectbuddy.services.buddy_session import BuddySession

logger = logging.getLogger(__name__)


class DevPanel(QDialog):
    """Edits BuddySession.settings in place."""

    settings_changed = Signal()
    applied = Signal()
    reset_all = Signal()

    def __init__(self, session: BuddySession, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.session = session
        self.setWindowTitle("Dev Panel")
        self.setMinimumSize(520, 320)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setSpacing(14)
        layout.setContentsMargins(18, 18, 18, 18)

        title = QLabel("🛠 DEV PANEL")
        title.setObjectName("chat_title")
        layout.addWidget(title)

        hint = QLabel("Ctrl+D opens this panel")
        hint.setObjectName("hint")
        layout.addWidget(hint)

        form = QFormLayout()
        settings = self.session.settings

        self.focus_spin = QSpinBox()
        self.focus_spin.setRange(*config.FOCUS_MINUTES_RANGE)
        self.focus_spin.setValue(settings.focus_minutes)
        self.focus_spin.valueChanged.connect(
            lambda v: self._update("focus_minutes", v)
        )
        form.addRow("Focus Minutes:", self.focus_spin)

        self.break_spin = QSpinBox()
        self.break_spin.setRange(*config.BREAK_MINUTES_RANGE)
        self.break_spin.setValue(settings.break_minutes)
        self.break_spin.valueChanged.connect(
            lambda v: self._update("break_minutes", v)
        )
        form.addRow("Break Minutes:", self.break_spin)

        self.cb_glow = QCheckBox("Hacker Glow")
        self.cb_glow.setChecked(settings.glow_enabled)
        self.cb_glow.toggled.connect(lambda v: self._update("glow_enabled", v))
        form.addRow(self.cb_glow)

        self.cb_online = QCheckBox("Online Mode (uses backend)")
        self.cb_online.setChecked(settings.online_mode)
        self.cb_online.toggled.connect(lambda v: self._update("online_mode", v))
        form.addRow(self.cb_online)

        layout.addLayout(form)

        btn_row = QHBoxLayout()
        btn_row.setSpacing(10)

        apply_btn = QPushButton("APPLY")
        apply_btn.clicked.connect(self._on_apply)
        btn_row.addWidget(apply_btn)

        reset_btn = QPushButton("RESET ALL")
        reset_btn.setObjectName("danger")
        reset_btn.clicked.connect(self._on_reset_all)
        btn_row.addWidget(reset_btn)

        btn_row.addStretch()

        close_btn = QPushButton("CLOSE")
        close_btn.setObjectName("secondary")
        close_btn.clicked.connect(self.accept)
        btn_row.addWidget(close_btn)

        layout.addLayout(btn_row)
        layout.addStretch()

    def sync_from_session(self) -> None:
        """Refresh the controls after something outside changed the settings."""
        s = self.session.settings
        for widget, value in (
            (self.focus_spin, s.focus_minutes),
            (self.break_spin, s.break_minutes),
        ):
            widget.blockSignals(True)
            widget.setValue(value)
            widget.blockSignals(False)
        for box, checked in ((self.cb_glow, s.glow_enabled), (self.cb_online, s.online_mode)):
            box.blockSignals(True)
            box.setChecked(checked)
            box.blockSignals(False)

    def _update(self, key: str, value) -> None:
        self.session.update_setting(key, value)
        self.settings_changed.emit()

    @Slot()
    def _on_apply(self) -> None:
        self.session.apply_settings()
        self.applied.emit()

    @Slot()
    def _on_reset_all(self) -> None:
        self.session.reset_all()
        self.sync_from_session()
        self.reset_all.emit()
