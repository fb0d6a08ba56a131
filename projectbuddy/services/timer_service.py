"""
Timer Service — the focus/break countdown state machine.

States:
    idle-focus ⇄ running-focus
        │ (hits 0 while running)
        ▼
    running-break ⇄ idle-break   … and back to focus at 0, forever.

The service is pure Python; the UI drives tick() from a one-second QTimer.
"""

from __future__ import annotations

import logging

from projectbuddy.data.models import Settings, TimerState

logger = logging.getLogger(__name__)


class TimerPhase:
    FOCUS = "focus"
    BREAK = "break"


class TimerService:
    """Counts down the current phase and swaps focus ↔ break at zero."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.state = TimerState(seconds_left=settings.focus_minutes * 60)

    @property
    def phase(self) -> str:
        return TimerPhase.BREAK if self.state.is_break else TimerPhase.FOCUS

    # ── Actions ─────────────────────────────────────────────────────────────

    def toggle(self) -> bool:
        """Start or pause. Returns the new running flag."""
        self.state.is_running = not self.state.is_running
        return self.state.is_running

    def tick(self) -> bool:
        """Advance one second. Returns True if the phase flipped."""
        if not self.state.is_running:
            return False
        self.state.seconds_left -= 1
        if self.state.seconds_left <= 0:
            self._swap_phase()
            return True
        return False

    def reset(self) -> None:
        """Stop and go back to a fresh focus block."""
        self.state.is_running = False
        self.state.is_break = False
        self.state.seconds_left = self.settings.focus_minutes * 60
        logger.info("Timer reset to %d min focus.", self.settings.focus_minutes)

    def apply_settings(self) -> None:
        """Stop and reload the current phase's duration from settings."""
        self.state.is_running = False
        self.state.seconds_left = self._phase_minutes(self.state.is_break) * 60
        logger.info("Timer settings applied (%s phase).", self.phase)

    # ── Display helpers ─────────────────────────────────────────────────────

    def time_string(self) -> str:
        s = max(0, self.state.seconds_left)
        return f"{s // 60:02d}:{s % 60:02d}"

    def status_text(self) -> str:
        if self.state.is_break:
            return "STATUS: BREAK MODE  // chill 😄"
        return "STATUS: FOCUS MODE  // go 💪"

    def sys_text(self) -> str:
        """Decorative load readout; busier while the clock runs."""
        if self.state.is_running:
            return "CPU: 42%  RAM: 1.7GB"
        return "CPU: 3%  RAM: 1.2GB"

    # ── Internals ───────────────────────────────────────────────────────────

    def _phase_minutes(self, is_break: bool) -> int:
        return self.settings.break_minutes if is_break else self.settings.focus_minutes

    def _swap_phase(self) -> None:
        self.state.is_break = not self.state.is_break
        self.state.seconds_left = self._phase_minutes(self.state.is_break) * 60
        logger.info("Timer phase switched to %s.", self.phase)


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   Models the Pomodoro-style countdown: focus for N minutes, break for M,
#   repeat. Start/pause only flips the running flag; the clock itself only
#   moves when tick() is called.
#
# Key design decisions:
#   - No QTimer in here. The window owns the QTimer and calls tick(), so
#     tests can step the clock one call at a time.
#   - Settings are read live, but a running countdown keeps its current
#     seconds until apply_settings() or reset() is called.
