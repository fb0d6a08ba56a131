"""
Buddy Session — the one object the window talks to.

Owns the settings, checklist, timer, chat and notes, and exposes every user
intent as a method. Nothing here is persisted; reset_all() returns the whole
session to its first-launch state.
"""

from __future__ import annotations

import logging
from dataclasses import fields
from typing import Any, Optional

from projectbuddy import config
from projectbuddy.data.models import ChatMessage, ChatRequest, ChatResult, Settings
from projectbuddy.services.chat_service import ChatService
from projectbuddy.services.checklist_service import ChecklistService
from projectbuddy.services.timer_service import TimerService

logger = logging.getLogger(__name__)

_MINUTE_RANGES = {
    "focus_minutes": config.FOCUS_MINUTES_RANGE,
    "break_minutes": config.BREAK_MINUTES_RANGE,
}


class BuddySession:
    """In-memory state for one run of the app."""

    def __init__(self, chat: Optional[ChatService] = None) -> None:
        self.settings = Settings()
        self.checklist = ChecklistService()
        self.timer = TimerService(self.settings)
        self.chat = chat or ChatService()
        self.notes: str = config.DEFAULT_NOTES

    # ── Chat ────────────────────────────────────────────────────────────────

    def submit_chat(self, text: str) -> Optional[ChatMessage]:
        """Blocking chat round-trip using the current online mode."""
        return self.chat.submit(text, self.settings.online_mode)

    def begin_chat(self, text: str) -> Optional[ChatRequest]:
        return self.chat.begin(text, self.settings.online_mode)

    def finish_chat(self, result: ChatResult) -> Optional[ChatMessage]:
        return self.chat.finish(result)

    # ── Timer ───────────────────────────────────────────────────────────────

    def toggle_timer(self) -> bool:
        return self.timer.toggle()

    def reset_timer(self) -> None:
        self.timer.reset()

    def tick(self) -> bool:
        return self.timer.tick()

    def apply_settings(self) -> None:
        self.timer.apply_settings()

    # ── Checklist ───────────────────────────────────────────────────────────

    def add_task(self, text: str) -> bool:
        return self.checklist.add(text)

    def remove_task(self, index: int) -> str:
        return self.checklist.remove(index)

    def toggle_task(self, index: int) -> bool:
        return self.checklist.toggle(index)

    # ── Settings ────────────────────────────────────────────────────────────

    def update_setting(self, key: str, value: Any) -> Any:
        """Set one Settings field. Minutes are clamped; returns the stored value."""
        names = {f.name for f in fields(Settings)}
        if key not in names:
            raise KeyError(f"Unknown setting '{key}'.")
        if key in _MINUTE_RANGES:
            low, high = _MINUTE_RANGES[key]
            value = max(low, min(high, int(value)))
        else:
            value = bool(value)
        setattr(self.settings, key, value)
        logger.info("Setting %s = %s", key, value)
        return value

    # ── Reset ───────────────────────────────────────────────────────────────

    def reset_all(self) -> None:
        """Back to first-launch state: defaults, fresh timer, checklist, notes, chat."""
        defaults = Settings()
        for f in fields(Settings):
            setattr(self.settings, f.name, getattr(defaults, f.name))
        self.timer.reset()
        self.checklist.reset()
        self.notes = config.DEFAULT_NOTES
        self.chat.reset()
        logger.info("Session reset to defaults.")


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   Groups all of the app's state behind one object with one method per
#   button. The window never pokes at lists or flags directly.
#
# Key design decisions:
#   - Settings is a single shared instance: TimerService holds the same
#     object, so reset_all() updates it in place rather than replacing it.
#   - The chat service is injectable so tests can pass a fake backend.
#
# Interviewer-friendly talking points:
#   1. Facade pattern: the UI depends on one class, which keeps the widget
#      code free of business rules.
#   2. Everything is in memory; a restart is a clean slate by design of the
#      product, not an accident.
