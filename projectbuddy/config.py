"""
Defaults and tunables for ProjectBuddy.

Nothing here is persisted — every value is either a module constant or read
from the environment at import time. Runtime changes go through the Settings
dataclass owned by BuddySession.
"""

from __future__ import annotations

import os
from typing import List

# ── Timer ────────────────────────────────────────────────────────────────────
DEFAULT_FOCUS_MINUTES = 10
DEFAULT_BREAK_MINUTES = 2
FOCUS_MINUTES_RANGE = (1, 60)
BREAK_MINUTES_RANGE = (1, 30)
TICK_INTERVAL_MS = 1000

# ── Chat ─────────────────────────────────────────────────────────────────────
DEFAULT_BACKEND_URL = "http://127.0.0.1:8787/chat"
BACKEND_URL = os.environ.get("PROJECT_BUDDY_BACKEND_URL", DEFAULT_BACKEND_URL)

# Artificial "thinking" delay before a local reply (seconds)
LOCAL_REPLY_DELAY_SEC = 0.35

WELCOME_MESSAGE = (
    "Ready. Toggle Online Mode in Dev Panel (Ctrl+D) if your backend is running."
)
NO_REPLY_TEXT = "(No reply)"
ONLINE_FAILED_PREFIX = "(Online failed, using local)"

# ── Buddy tab ────────────────────────────────────────────────────────────────
DEFAULT_TASKS: List[str] = [
    "Pick a topic",
    "Find 3 facts",
    "Make a poster",
    "Practice talking",
]
DEFAULT_NOTES = "Type your project ideas here..."

DEFAULT_ONLINE_MODE = False
DEFAULT_GLOW_ENABLED = True

LOG_FILE = "project_buddy.log"
