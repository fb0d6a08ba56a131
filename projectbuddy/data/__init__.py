from .models import ChatMessage, ChatRequest, ChatResult, Role, Settings, TimerState

__all__ = ["ChatMessage", "ChatRequest", "ChatResult", "Role", "Settings", "TimerState"]
