"""
Chat Service — owns the chat transcript and decides online vs local replies.

A submit is split in three so the slow middle part can run off the GUI
thread:

    begin(raw)      -> ChatRequest   (append user message, sending = True)
    resolve(req)    -> ChatResult    (HTTP call or local delay, no mutation)
    finish(result)                   (append reply, set error, sending = False)

submit() runs the three back to back for callers that can block.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

from projectbuddy import config
from projectbuddy.data.models import ChatMessage, ChatRequest, ChatResult, Role
from projectbuddy.errors import BackendError, ChatBusyError
from projectbuddy.services.backend_client import BackendClient
from projectbuddy.services.local_reply import generate_local_reply

logger = logging.getLogger(__name__)


class ChatService:
    """
    Manages the chat transcript.

    Only ONE request may be in flight: begin() raises ChatBusyError while
    ``sending`` is True.
    """

    def __init__(
        self,
        client: Optional[BackendClient] = None,
        sleep: Callable[[float], None] = time.sleep,
        local_delay: float = config.LOCAL_REPLY_DELAY_SEC,
    ) -> None:
        self.client = client or BackendClient()
        self._sleep = sleep
        self.local_delay = local_delay
        self.messages: List[ChatMessage] = []
        self.sending: bool = False
        self.error: Optional[str] = None
        self.generation: int = 0
        self.reset()

    # ── Submit phases ───────────────────────────────────────────────────────

    def begin(self, raw_input: str, online: bool) -> Optional[ChatRequest]:
        """Record the user's message. Returns None for blank input."""
        text = raw_input.strip()
        if not text:
            return None
        if self.sending:
            raise ChatBusyError("A chat request is already in flight.")

        self.error = None
        self.messages.append(ChatMessage(Role.USER, text))
        self.sending = True
        logger.info("Chat submit (%s, %d chars)", "online" if online else "local", len(text))
        return ChatRequest(
            text=text,
            history=[m.to_history() for m in self.messages],
            online=online,
            generation=self.generation,
        )

    def resolve(self, request: ChatRequest) -> ChatResult:
        """
        Produce the assistant reply. Blocking; touches no session state.

        Never raises: any failure becomes a local fallback reply, so the
        blocking submit() and the GUI worker behave the same way.
        """
        try:
            if not request.online:
                self._sleep(self.local_delay)
                return ChatResult(
                    reply=generate_local_reply(request.text),
                    generation=request.generation,
                )
            reply = self.client.call(request.text, request.history)
        except BackendError as exc:
            logger.warning("Backend call failed, falling back to local: %s", exc)
            return self.fallback(request, str(exc))
        except Exception as exc:
            logger.exception("Chat request crashed, falling back to local.")
            return self.fallback(request, str(exc) or exc.__class__.__name__)
        return ChatResult(reply=reply or config.NO_REPLY_TEXT, generation=request.generation)

    @staticmethod
    def fallback(request: ChatRequest, error: str) -> ChatResult:
        """Local reply flagged as a failed online attempt."""
        local = generate_local_reply(request.text)
        return ChatResult(
            reply=f"{config.ONLINE_FAILED_PREFIX}\n\n{local}",
            error=error,
            generation=request.generation,
        )

    def finish(self, result: ChatResult) -> Optional[ChatMessage]:
        """Append the reply and clear the sending flag. Stale results are dropped."""
        if result.generation != self.generation:
            logger.info("Dropping chat reply from before the last reset.")
            return None
        if result.error is not None:
            self.error = result.error
        message = ChatMessage(Role.ASSISTANT, result.reply)
        self.messages.append(message)
        self.sending = False
        return message

    def submit(self, raw_input: str, online: bool) -> Optional[ChatMessage]:
        """Blocking submit. Returns the assistant message, or None if ignored."""
        request = self.begin(raw_input, online)
        if request is None:
            return None
        return self.finish(self.resolve(request))

    # ── Reset ───────────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Welcome transcript again. Any request still in flight goes stale."""
        self.generation += 1
        self.messages = [ChatMessage(Role.ASSISTANT, config.WELCOME_MESSAGE)]
        self.sending = False
        self.error = None


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   The brain of the Chat tab. Every submit appends the user's line, gets a
#   reply (backend or local), and appends that reply. A backend failure is
#   never fatal: the error is shown and a local reply is used instead.
#
# Data flow (GUI):
#   SEND clicked → begin() on the GUI thread → ChatWorker runs resolve() on
#   a QThreadPool thread → result signal → finish() on the GUI thread.
#
# Interviewer-friendly talking points:
#   1. Splitting begin/resolve/finish keeps every mutation on one thread
#      without needing locks.
#   2. The busy guard lives here, not only in the UI, so the service can be
#      tested on its own and can't be double-submitted.
#   3. sleep is injected so tests don't wait 350 ms per message.
#   4. reset() bumps a generation number. A reply that was already on its
#      way comes back tagged with the old number and is ignored, so it can't
#      land in the fresh transcript or clear the flag of a newer request.
