"""ProjectBuddy — checklist, focus timer, notes and a chat helper for school projects."""

__version__ = "0.1.0"
