"""
Data models for ProjectBuddy.

Plain dataclasses for everything the services layer owns, so the UI and the
services speak the same "language" without any Qt types leaking in.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import List, Optional

from projectbuddy import config


class Role:
    """Who wrote a chat message."""
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    """One line of the chat transcript. Never mutated after creation."""
    role: str
    text: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def to_history(self) -> dict:
        return {"role": self.role, "text": self.text}


@dataclass(frozen=True)
class ChatRequest:
    """
    Snapshot taken when a submit begins.

    Carries everything the blocking part of a chat needs, so it can run on a
    worker thread without touching the live session.
    """
    text: str
    history: List[dict]
    online: bool
    generation: int = 0


@dataclass(frozen=True)
class ChatResult:
    """
    Outcome of a chat request, ready to be applied to the transcript.

    ``generation`` is copied from the request; a result from before the
    last reset is stale and gets dropped.
    """
    reply: str
    error: Optional[str] = None
    generation: int = 0


@dataclass
class TimerState:
    seconds_left: int = config.DEFAULT_FOCUS_MINUTES * 60
    is_running: bool = False
    is_break: bool = False


@dataclass
class Settings:
    """Dev Panel tunables. Minutes are clamped to their ranges on update."""
    focus_minutes: int = config.DEFAULT_FOCUS_MINUTES
    break_minutes: int = config.DEFAULT_BREAK_MINUTES
    online_mode: bool = config.DEFAULT_ONLINE_MODE
    glow_enabled: bool = config.DEFAULT_GLOW_ENABLED


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   Defines the "shape" of every piece of state as Python dataclasses.
#
# Key classes and why they exist:
#   - ChatMessage: frozen so a transcript entry can never be edited after the
#     fact. The uuid id gives the UI a stable key per row.
#   - ChatRequest / ChatResult: the two halves of a chat round-trip. The
#     request is a snapshot, so the worker thread never reads live state.
#   - TimerState: countdown seconds + running flag + focus/break phase.
#   - Settings: the Dev Panel knobs (minutes, online mode, glow).
#
# Interviewer-friendly talking points:
#   1. Immutable messages make the transcript append-only by construction.
#   2. Snapshot-in / result-out keeps threading simple: only the GUI thread
#      ever mutates the session.
