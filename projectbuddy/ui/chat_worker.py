"""
Chat Worker — runs the blocking half of a chat request on a QThreadPool.

The worker only calls ChatService.resolve(), which never touches session
state and never raises. The result comes back to the GUI thread through a
Qt signal.
"""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QRunnable, Signal

from projectbuddy.data.models import ChatRequest, ChatResult
from projectbuddy.services.chat_service import ChatService

logger = logging.getLogger(__name__)


class ChatWorkerSignals(QObject):
    # QRunnable can't own signals, so they live on a QObject.
    finished = Signal(object)  # ChatResult


class ChatWorker(QRunnable):
    def __init__(self, chat: ChatService, request: ChatRequest) -> None:
        super().__init__()
        self.chat = chat
        self.request = request
        self.signals = ChatWorkerSignals()

    def run(self) -> None:
        result: ChatResult = self.chat.resolve(self.request)
        logger.debug("Chat worker done (generation %d).", result.generation)
        self.signals.finished.emit(result)
