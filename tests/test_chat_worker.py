"""Unit tests for the QThreadPool chat worker (run synchronously)."""

import pytest
from pathlib import Path
import sys

from PySide6.QtCore import QCoreApplication

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from projectbuddy import config
from projectbuddy.errors import BackendTransportError
from projectbuddy.services.chat_service import ChatService
from projectbuddy.services.local_reply import PLAN_REPLY

from projectbuddy.ui.chat_worker import ChatWorker


@pytest.fixture(scope="module", autouse=True)
def qt_app():
    return QCoreApplication.instance() or QCoreApplication([])


class ExplodingClient:
    url = "http://buddy.test/chat"

    def __init__(self, error):
        self.error = error

    def call(self, prompt, history):
        raise self.error


def _run(chat, request):
    results = []
    worker = ChatWorker(chat, request)
    worker.signals.finished.connect(results.append)
    worker.run()
    return results


class TestChatWorker:
    @pytest.mark.parametrize("error", [
        BackendTransportError("refused"),
        RuntimeError("worker blew up"),
    ])
    def test_failure_still_emits_fallback(self, error):
        chat = ChatService(client=ExplodingClient(error), sleep=lambda s: None)
        request = chat.begin("make a plan", online=True)

        results = _run(chat, request)

        assert len(results) == 1
        assert results[0].reply == f"{config.ONLINE_FAILED_PREFIX}\n\n{PLAN_REPLY}"
        assert results[0].error == str(error)
        chat.finish(results[0])
        assert chat.sending is False

    def test_result_carries_generation(self):
        chat = ChatService(sleep=lambda s: None)
        request = chat.begin("hello", online=False)
        chat.reset()

        results = _run(chat, request)

        assert results[0].generation == request.generation
        assert chat.finish(results[0]) is None
