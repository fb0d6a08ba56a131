from .buddy_session import BuddySession
from .chat_service import ChatService
from .checklist_service import ChecklistService
from .timer_service import TimerService

__all__ = ["BuddySession", "ChatService", "ChecklistService", "TimerService"]
