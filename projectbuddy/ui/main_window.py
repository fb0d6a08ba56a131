"""
Main Window — the single ProjectBuddy window.

Contains:
  - Buddy tab: focus timer, checklist, notes
  - Chat tab: transcript, input, online/local mode indicator
  - Dev Panel dialog (Ctrl+D)
"""

from __future__ import annotations

import html
import logging
from functools import partial
from typing import List, Optional

from PySide6.QtCore import Qt, QThreadPool, QTimer, Slot
from PySide6.QtGui import QColor, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QGraphicsDropShadowEffect, QGroupBox, QHBoxLayout, QLabel, QLineEdit,
    QMainWindow, QPlainTextEdit, QPushButton, QTabWidget, QTextBrowser,
    QVBoxLayout, QWidget,
)

from projectbuddy import config
from projectbuddy.data.models import ChatResult, Role
from projectbuddy.errors import ChatBusyError
from projectbuddy.services.buddy_session import BuddySession
from projectbuddy.ui import styles
from projectbuddy.ui.chat_worker import ChatWorker
from projectbuddy.ui.dev_panel import DevPanel

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """The main application window."""

    def __init__(self, session: Optional[BuddySession] = None) -> None:
        super().__init__()
        self.setWindowTitle("Project Buddy")
        self.setMinimumSize(560, 680)

        # ── Core state ──────────────────────────────────────────────────
        self.session = session or BuddySession()
        self.thread_pool = QThreadPool()
        self._glow_effects: List[QGraphicsDropShadowEffect] = []

        # ── One-second tick ─────────────────────────────────────────────
        self._tick_timer = QTimer(self)
        self._tick_timer.setInterval(config.TICK_INTERVAL_MS)
        self._tick_timer.timeout.connect(self._on_tick)

        # ── Build UI ────────────────────────────────────────────────────
        self._build_ui()
        self.dev_panel = DevPanel(self.session, self)
        self.dev_panel.settings_changed.connect(self._on_settings_changed)
        self.dev_panel.applied.connect(self._refresh_timer)
        self.dev_panel.reset_all.connect(self._on_reset_all)

        shortcut = QShortcut(QKeySequence("Ctrl+D"), self)
        shortcut.activated.connect(self._open_dev_panel)

        self._refresh_all()
        self._tick_timer.start()

    # ── UI Construction ─────────────────────────────────────────────────

    def _build_ui(self) -> None:
        self.tabs = QTabWidget()
        self.setCentralWidget(self.tabs)
        self.tabs.addTab(self._build_buddy_tab(), "Buddy")
        self.tabs.addTab(self._build_chat_tab(), "Chat")

    def _build_buddy_tab(self) -> QWidget:
        widget = QWidget()
        layout = QVBoxLayout(widget)
        layout.setSpacing(14)
        layout.setContentsMargins(16, 16, 16, 16)

        # ── Header ──────────────────────────────────────────────────
        title = QLabel("PROJECT BUDDY")
        title.setObjectName("title")
        layout.addWidget(title)
        self._add_glow(title, styles.NEON)

        subtitle = QLabel("Hacker Mode: ON")
        subtitle.setObjectName("subtitle")
        layout.addWidget(subtitle)

        # ── Timer ───────────────────────────────────────────────────
        timer_group = QGroupBox("⏱️ FOCUS TIMER")
        timer_layout = QVBoxLayout(timer_group)

        row = QHBoxLayout()
        self.timer_label = QLabel("00:00")
        self.timer_label.setObjectName("timer")
        row.addWidget(self.timer_label)
        row.addStretch()

        self.btn_start = QPushButton("START")
        self.btn_start.clicked.connect(self._on_toggle_timer)
        row.addWidget(self.btn_start)

        btn_reset = QPushButton("RESET")
        btn_reset.setObjectName("secondary")
        btn_reset.clicked.connect(self._on_reset_timer)
        row.addWidget(btn_reset)
        timer_layout.addLayout(row)

        self.status_label = QLabel("")
        self.status_label.setObjectName("subtitle")
        timer_layout.addWidget(self.status_label)

        sys_row = QHBoxLayout()
        sys_name = QLabel("SYS")
        sys_name.setObjectName("subtitle")
        sys_row.addWidget(sys_name)
        sys_row.addStretch()
        self.sys_label = QLabel("")
        self.sys_label.setObjectName("subtitle")
        sys_row.addWidget(self.sys_label)
        timer_layout.addLayout(sys_row)

        layout.addWidget(timer_group)
        self._add_glow(timer_group, styles.NEON)

        # ── Checklist ───────────────────────────────────────────────
        checklist_group = QGroupBox("✅ CHECKLIST")
        checklist_layout = QVBoxLayout(checklist_group)

        self.task_rows = QVBoxLayout()
        checklist_layout.addLayout(self.task_rows)

        add_row = QHBoxLayout()
        self.task_input = QLineEdit()
        self.task_input.setPlaceholderText("Add new mission…")
        self.task_input.returnPressed.connect(self._on_add_task)
        add_row.addWidget(self.task_input)

        btn_add = QPushButton("ADD")
        btn_add.clicked.connect(self._on_add_task)
        add_row.addWidget(btn_add)
        checklist_layout.addLayout(add_row)

        layout.addWidget(checklist_group)
        self._add_glow(checklist_group, styles.NEON_2)

        # ── Notes ───────────────────────────────────────────────────
        notes_group = QGroupBox("📝 NOTES")
        notes_layout = QVBoxLayout(notes_group)
        self.notes_edit = QPlainTextEdit()
        self.notes_edit.setMinimumHeight(140)
        self.notes_edit.textChanged.connect(self._on_notes_changed)
        notes_layout.addWidget(self.notes_edit)

        layout.addWidget(notes_group)
        self._add_glow(notes_group, styles.NEON)

        layout.addStretch()

        tip = QLabel("Tip: Press Ctrl+D for Dev Panel")
        tip.setObjectName("hint")
        layout.addWidget(tip)
        return widget

    def _build_chat_tab(self) -> QWidget:
        widget = QWidget()
        layout = QVBoxLayout(widget)
        layout.setSpacing(12)
        layout.setContentsMargins(16, 16, 16, 16)

        self.chat_title = QLabel("")
        self.chat_title.setObjectName("chat_title")
        layout.addWidget(self.chat_title)
        self._add_glow(self.chat_title, styles.NEON)

        self.mode_label = QLabel("")
        self.mode_label.setObjectName("subtitle")
        layout.addWidget(self.mode_label)

        self.error_label = QLabel("")
        self.error_label.setObjectName("error")
        self.error_label.setWordWrap(True)
        layout.addWidget(self.error_label)

        self.transcript_view = QTextBrowser()
        layout.addWidget(self.transcript_view, 1)

        input_row = QHBoxLayout()
        self.chat_input = QLineEdit()
        self.chat_input.setPlaceholderText("Ask for help…")
        self.chat_input.returnPressed.connect(self._on_send)
        input_row.addWidget(self.chat_input)

        self.btn_send = QPushButton("SEND")
        self.btn_send.clicked.connect(self._on_send)
        input_row.addWidget(self.btn_send)
        layout.addLayout(input_row)

        self.backend_label = QLabel("")
        self.backend_label.setObjectName("hint")
        layout.addWidget(self.backend_label)
        return widget

    def _add_glow(self, widget: QWidget, color: str) -> None:
        effect = QGraphicsDropShadowEffect(widget)
        effect.setBlurRadius(12)
        effect.setOffset(0, 0)
        effect.setColor(QColor(color))
        widget.setGraphicsEffect(effect)
        self._glow_effects.append(effect)

    # ── Timer ───────────────────────────────────────────────────────────

    @Slot()
    def _on_tick(self) -> None:
        if self.session.tick():
            logger.info("Now in %s phase.", self.session.timer.phase)
        self._refresh_timer()

    @Slot()
    def _on_toggle_timer(self) -> None:
        self.session.toggle_timer()
        self._refresh_timer()

    @Slot()
    def _on_reset_timer(self) -> None:
        self.session.reset_timer()
        self._refresh_timer()

    def _refresh_timer(self) -> None:
        timer = self.session.timer
        self.timer_label.setText(timer.time_string())
        self.btn_start.setText("PAUSE" if timer.state.is_running else "START")
        self.status_label.setText(timer.status_text())
        self.sys_label.setText(timer.sys_text())

    # ── Checklist ───────────────────────────────────────────────────────

    @Slot()
    def _on_add_task(self) -> None:
        if self.session.add_task(self.task_input.text()):
            self.task_input.clear()
            self._refresh_checklist()

    def _on_toggle_task(self, index: int) -> None:
        self.session.toggle_task(index)
        self._refresh_checklist()

    def _on_remove_task(self, index: int) -> None:
        self.session.remove_task(index)
        self._refresh_checklist()

    def _refresh_checklist(self) -> None:
        while self.task_rows.count():
            item = self.task_rows.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()

        checklist = self.session.checklist
        for i, text in enumerate(checklist.tasks):
            done = checklist.is_done(i)
            row = QWidget()
            row_layout = QHBoxLayout(row)
            row_layout.setContentsMargins(0, 0, 0, 0)

            check = QPushButton("●" if done else "○")
            check.setObjectName("plain")
            check.setCheckable(True)
            check.setChecked(done)
            check.clicked.connect(partial(self._on_toggle_task, i))
            row_layout.addWidget(check)

            label = QLabel(text)
            if done:
                label.setObjectName("task_done")
            row_layout.addWidget(label, 1)

            delete = QPushButton("🗑")
            delete.setObjectName("plain")
            delete.clicked.connect(partial(self._on_remove_task, i))
            row_layout.addWidget(delete)

            self.task_rows.addWidget(row)

    # ── Notes ───────────────────────────────────────────────────────────

    @Slot()
    def _on_notes_changed(self) -> None:
        self.session.notes = self.notes_edit.toPlainText()

    # ── Chat ────────────────────────────────────────────────────────────

    @Slot()
    def _on_send(self) -> None:
        try:
            request = self.session.begin_chat(self.chat_input.text())
        except ChatBusyError:
            return
        if request is None:
            return

        self.chat_input.clear()
        self._refresh_chat()

        worker = ChatWorker(self.session.chat, request)
        worker.signals.finished.connect(self._on_chat_finished)
        self.thread_pool.start(worker)

    @Slot(object)
    def _on_chat_finished(self, result: ChatResult) -> None:
        # Replies from before a RESET ALL are dropped by finish().
        self.session.finish_chat(result)
        self._refresh_chat()

    def _refresh_chat(self) -> None:
        chat = self.session.chat
        online = self.session.settings.online_mode

        self.chat_title.setText(f"CHAT // {'ONLINE' if online else 'LOCAL'}")
        self.mode_label.setText(
            "MODE: ONLINE (backend)" if online else "MODE: LOCAL (offline)"
        )
        self.error_label.setText(f"ERR: {chat.error}" if chat.error else "")
        self.error_label.setVisible(chat.error is not None)
        self.backend_label.setText(
            f"Backend: {chat.client.url}" if online else "Local AI only (no internet)"
        )
        self.btn_send.setText("..." if chat.sending else "SEND")
        self.btn_send.setEnabled(not chat.sending)

        parts = []
        for msg in chat.messages:
            mine = msg.role == Role.USER
            color = styles.NEON_2 if mine else styles.NEON
            align = "right" if mine else "left"
            body = html.escape(msg.text).replace("\n", "<br>")
            parts.append(
                f'<p align="{align}" style="margin: 10px 0;">'
                f'<span style="border: 1px solid {color}; padding: 10px 12px;">{body}</span>'
                f"</p>"
            )
        self.transcript_view.setHtml("".join(parts))
        bar = self.transcript_view.verticalScrollBar()
        bar.setValue(bar.maximum())

    # ── Settings ────────────────────────────────────────────────────────

    @Slot()
    def _open_dev_panel(self) -> None:
        self.dev_panel.sync_from_session()
        if self.dev_panel.isVisible():
            self.dev_panel.hide()
        else:
            self.dev_panel.show()
            self.dev_panel.raise_()

    @Slot()
    def _on_settings_changed(self) -> None:
        glow = self.session.settings.glow_enabled
        for effect in self._glow_effects:
            effect.setEnabled(glow)
        self._refresh_chat()

    @Slot()
    def _on_reset_all(self) -> None:
        self.chat_input.clear()
        self.task_input.clear()
        self._refresh_all()

    def _refresh_all(self) -> None:
        self.notes_edit.blockSignals(True)
        self.notes_edit.setPlainText(self.session.notes)
        self.notes_edit.blockSignals(False)
        self._refresh_timer()
        self._refresh_checklist()
        self._on_settings_changed()


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   Draws the session and forwards every click to BuddySession. It owns the
#   two things that need Qt: the one-second QTimer and the thread pool.
#
# Data flow:
#   QTimer fires → session.tick() → label refresh.
#   SEND → session.begin_chat() → ChatWorker on QThreadPool →
#   finished signal → session.finish_chat() → transcript refresh.
#
# Interviewer-friendly talking points:
#   1. The window holds no business rules; it only renders session state,
#      which is why the services are testable without a QApplication.
#   2. The SEND button is disabled while a request is in flight, and the
#      chat service also refuses a second begin(), so there's never more
#      than one request out.
#   3. Checklist rows are rebuilt from scratch on every change. With a
#      handful of tasks that is simpler than diffing and never stale.
