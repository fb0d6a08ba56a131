"""Unit tests for the chat layer (local replies, backend client, chat service)."""

import json
import pytest
from pathlib import Path
import sys

import httpx

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from projectbuddy import config
from projectbuddy.data.models import Role
from projectbuddy.errors import BackendHTTPError, BackendTransportError, ChatBusyError
from projectbuddy.services.backend_client import BackendClient, decode_reply
from projectbuddy.services.chat_service import ChatService
from projectbuddy.services.local_reply import (
    CHECKLIST_REPLY, DEFAULT_REPLY, IDEAS_REPLY, PLAN_REPLY,
    PRACTICE_REPLY, WRITING_REPLY, generate_local_reply,
)


def _client(handler):
    return BackendClient(url="http://buddy.test/chat", transport=httpx.MockTransport(handler))


def _json_reply(payload, status=200):
    return lambda request: httpx.Response(status, json=payload)


class TestLocalReply:
    @pytest.mark.parametrize("text, expected", [
        ("Any IDEAS?", IDEAS_REPLY),
        ("pick a topic", IDEAS_REPLY),
        ("what are the steps", PLAN_REPLY),
        ("make a checklist", CHECKLIST_REPLY),
        ("help me write", WRITING_REPLY),
        ("quiz me with questions", PRACTICE_REPLY),
        ("hello", DEFAULT_REPLY),
        ("", DEFAULT_REPLY),
    ])
    def test_keyword_rules(self, text, expected):
        assert generate_local_reply(text) == expected

    def test_earlier_rule_wins(self):
        assert generate_local_reply("plan my topic") == IDEAS_REPLY
        assert generate_local_reply("checklist for my plan") == PLAN_REPLY
        assert generate_local_reply("practice how to write a paragraph") == WRITING_REPLY


class TestDecodeReply:
    def test_text_envelope(self):
        assert decode_reply(b'{"text": "hi"}') == "hi"

    def test_reply_key(self):
        assert decode_reply(b'{"reply": "yo", "extra": 1}') == "yo"

    def test_text_preferred_over_reply(self):
        assert decode_reply(b'{"reply": "b", "text": "a"}') == "a"

    def test_non_string_text_falls_through(self):
        assert decode_reply(b'{"text": 5, "reply": "ok"}') == "ok"

    def test_raw_text(self):
        assert decode_reply(b"plain words") == "plain words"
        assert decode_reply(b"[1, 2]") == "[1, 2]"

    def test_undecodable(self):
        assert decode_reply(b"\x80\x81\xfa") == ""


class TestBackendClient:
    def test_request_shape(self):
        seen = {}

        def handler(request):
            seen["method"] = request.method
            seen["content_type"] = request.headers["content-type"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={"text": "sure"})

        history = [{"role": "user", "text": "help"}]
        assert _client(handler).call("help", history) == "sure"
        assert seen["method"] == "POST"
        assert seen["content_type"] == "application/json"
        assert seen["body"] == {"prompt": "help", "history": history}

    def test_non_2xx_raises_with_code(self):
        with pytest.raises(BackendHTTPError) as info:
            _client(_json_reply({"text": "nope"}, status=503)).call("x", [])
        assert info.value.code == 503
        assert "503" in str(info.value)

    def test_connection_error(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(BackendTransportError):
            _client(handler).call("x", [])


class FakeClient:
    """Stands in for BackendClient; records calls."""

    url = "http://buddy.test/chat"

    def __init__(self, reply="", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def call(self, prompt, history):
        self.calls.append((prompt, list(history)))
        if self.error:
            raise self.error
        return self.reply


@pytest.fixture
def sleeps():
    return []


def _service(client, sleeps):
    return ChatService(client=client, sleep=sleeps.append)


class TestChatService:
    def test_starts_with_welcome(self, sleeps):
        svc = _service(FakeClient(), sleeps)
        assert len(svc.messages) == 1
        assert svc.messages[0].role == Role.ASSISTANT

    def test_blank_submit_is_noop(self, sleeps):
        svc = _service(FakeClient(), sleeps)
        svc.error = "old error"
        before = list(svc.messages)
        assert svc.submit("   ", online=True) is None
        assert svc.messages == before
        assert svc.sending is False
        assert svc.error == "old error"

    def test_offline_submit(self, sleeps):
        client = FakeClient()
        svc = _service(client, sleeps)
        svc.submit("  hello ", online=False)
        user, assistant = svc.messages[-2:]
        assert (user.role, user.text) == (Role.USER, "hello")
        assert (assistant.role, assistant.text) == (Role.ASSISTANT, DEFAULT_REPLY)
        assert svc.sending is False
        assert sleeps == [config.LOCAL_REPLY_DELAY_SEC]
        assert client.calls == []

    def test_online_success_sends_history_with_new_message(self, sleeps):
        client = FakeClient(reply="Here's a plan")
        svc = _service(client, sleeps)
        svc.submit("plan please", online=True)
        prompt, history = client.calls[0]
        assert prompt == "plan please"
        assert history[-1] == {"role": "user", "text": "plan please"}
        assert history[0]["text"] == config.WELCOME_MESSAGE
        assert svc.messages[-1].text == "Here's a plan"
        assert sleeps == []

    def test_online_empty_reply(self, sleeps):
        svc = _service(FakeClient(reply=""), sleeps)
        svc.submit("hi", online=True)
        assert svc.messages[-1].text == "(No reply)"
        assert svc.error is None

    def test_online_failure_falls_back(self, sleeps):
        svc = _service(FakeClient(error=BackendHTTPError(500)), sleeps)
        svc.submit("topic help", online=True)
        assert "500" in svc.error
        assert len(svc.messages) == 3
        reply = svc.messages[-1].text
        assert reply.startswith("(Online failed, using local)")
        assert reply.endswith(IDEAS_REPLY)
        assert svc.sending is False

    def test_real_client_http_500(self, sleeps):
        svc = _service(_client(_json_reply({"error": "boom"}, status=500)), sleeps)
        svc.submit("hi", online=True)
        assert "500" in svc.error
        assert svc.messages[-1].text.startswith(config.ONLINE_FAILED_PREFIX)

    def test_real_client_empty_text(self, sleeps):
        svc = _service(_client(_json_reply({"text": ""})), sleeps)
        svc.submit("hi", online=True)
        assert svc.messages[-1].text == "(No reply)"

    def test_next_submit_clears_error(self, sleeps):
        client = FakeClient(error=BackendTransportError("refused"))
        svc = _service(client, sleeps)
        svc.submit("a", online=True)
        assert svc.error == "refused"
        client.error = None
        client.reply = "ok"
        svc.submit("b", online=True)
        assert svc.error is None

    def test_busy_guard(self, sleeps):
        svc = _service(FakeClient(), sleeps)
        request = svc.begin("first", online=False)
        assert svc.sending is True
        with pytest.raises(ChatBusyError):
            svc.begin("second", online=False)
        svc.finish(svc.resolve(request))
        assert svc.sending is False
        assert [m.text for m in svc.messages[1:]] == ["first", DEFAULT_REPLY]

    def test_request_snapshot_is_detached(self, sleeps):
        svc = _service(FakeClient(), sleeps)
        request = svc.begin("first", online=True)
        svc.messages.append(svc.messages[0])
        assert len(request.history) == 2

    def test_message_ids_unique(self, sleeps):
        svc = _service(FakeClient(), sleeps)
        svc.submit("a", online=False)
        svc.submit("b", online=False)
        ids = [m.id for m in svc.messages]
        assert len(set(ids)) == len(ids)

    def test_reset(self, sleeps):
        svc = _service(FakeClient(error=BackendHTTPError(404)), sleeps)
        svc.submit("x", online=True)
        svc.reset()
        assert [m.text for m in svc.messages] == [config.WELCOME_MESSAGE]
        assert svc.error is None
        assert svc.sending is False

    def test_reply_from_before_reset_is_dropped(self, sleeps):
        svc = _service(FakeClient(), sleeps)
        first = svc.begin("first", online=False)
        svc.reset()
        second = svc.begin("second", online=False)

        assert svc.finish(svc.resolve(first)) is None
        assert svc.sending is True
        assert [m.text for m in svc.messages] == [config.WELCOME_MESSAGE, "second"]
        with pytest.raises(ChatBusyError):
            svc.begin("third", online=False)

        svc.finish(svc.resolve(second))
        assert svc.sending is False
        assert [m.text for m in svc.messages[1:]] == ["second", DEFAULT_REPLY]

    def test_stale_failure_leaves_error_alone(self, sleeps):
        svc = _service(FakeClient(error=BackendHTTPError(502)), sleeps)
        request = svc.begin("hi", online=True)
        svc.reset()
        svc.finish(svc.resolve(request))
        assert svc.error is None
        assert [m.text for m in svc.messages] == [config.WELCOME_MESSAGE]

    def test_unexpected_error_falls_back(self, sleeps):
        svc = _service(FakeClient(error=ValueError("bad history")), sleeps)
        reply = svc.submit("any ideas", online=True)
        assert reply.text == f"{config.ONLINE_FAILED_PREFIX}\n\n{IDEAS_REPLY}"
        assert svc.error == "bad history"
        assert svc.sending is False
