"""
Backend Client — one JSON POST to the local chat server per call.

Request body:
    {"prompt": "...", "history": [{"role": "user", "text": "..."}, ...]}

Reply decoding tries, in order: a {"text": str} envelope, any JSON object
with a "text" or "reply" string, the raw body as UTF-8, and finally "".
"""

from __future__ import annotations

import json
import logging
from typing import Callable, List, Optional

import httpx

from projectbuddy import config
from projectbuddy.errors import BackendHTTPError, BackendTransportError

logger = logging.getLogger(__name__)


def _decode_text_envelope(body: bytes) -> Optional[str]:
    try:
        obj = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return None
    if isinstance(obj, dict) and isinstance(obj.get("text"), str):
        return obj["text"]
    return None


def _decode_generic_object(body: bytes) -> Optional[str]:
    try:
        obj = json.loads(body)
    except (ValueError, UnicodeDecodeError):
        return None
    if not isinstance(obj, dict):
        return None
    for key in ("text", "reply"):
        if isinstance(obj.get(key), str):
            return obj[key]
    return None


def _decode_raw_text(body: bytes) -> Optional[str]:
    try:
        return body.decode("utf-8")
    except UnicodeDecodeError:
        return None


DECODERS: List[Callable[[bytes], Optional[str]]] = [
    _decode_text_envelope,
    _decode_generic_object,
    _decode_raw_text,
]


def decode_reply(body: bytes) -> str:
    """Return the first successful interpretation of ``body``, else ""."""
    for decoder in DECODERS:
        text = decoder(body)
        if text is not None:
            return text
    logger.info("Backend reply could not be decoded (%d bytes).", len(body))
    return ""


class BackendClient:
    """
    Talks to the chat backend.

    A fresh httpx.Client is opened per call, so there is no pooling or
    shared state between requests. Pass ``transport`` to swap the network
    for an httpx.MockTransport in tests.
    """

    def __init__(
        self,
        url: str = config.BACKEND_URL,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.url = url
        self.timeout = timeout
        self.transport = transport

    def call(self, prompt: str, history: List[dict]) -> str:
        """POST ``prompt`` + ``history``; return the decoded reply text."""
        try:
            content = json.dumps({"prompt": prompt, "history": history})
        except (TypeError, ValueError) as exc:
            raise BackendTransportError(f"Could not encode request: {exc}") from exc

        client_kwargs = {"transport": self.transport}
        if self.timeout is not None:
            client_kwargs["timeout"] = self.timeout

        try:
            with httpx.Client(**client_kwargs) as client:
                response = client.post(
                    self.url,
                    content=content,
                    headers={"Content-Type": "application/json"},
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise BackendTransportError(str(exc) or exc.__class__.__name__) from exc

        if not 200 <= response.status_code <= 299:
            raise BackendHTTPError(response.status_code)

        logger.debug("Backend replied %d (%d bytes)", response.status_code, len(response.content))
        return decode_reply(response.content)


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   Sends the chat prompt and the transcript so far to a local HTTP server
#   and turns whatever comes back into a plain string.
#
# Key design decisions:
#   - Decoding is an ordered list of small functions. Each returns None when
#     it doesn't apply, so adding a new response shape is one more entry.
#   - Errors are typed: BackendHTTPError carries the status code, and
#     BackendTransportError wraps connection/timeout problems. The chat
#     service catches both and falls back to the local reply generator.
#   - The transport is injectable, which is how the tests fake the server
#     with httpx.MockTransport instead of opening sockets.
