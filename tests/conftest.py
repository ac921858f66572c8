# Shared fixtures: every test starts outside test mode with a fresh alias registry.
import pytest

from brokerbot import aliases, config


@pytest.fixture(autouse=True)
def _reset_test_mode():
    saved = config.get_settings().test_prefix
    config.get_settings().test_prefix = None
    yield
    config.get_settings().test_prefix = saved


@pytest.fixture(autouse=True)
def _reset_default_registry(monkeypatch):
    monkeypatch.setattr(aliases, "_DEFAULT_REGISTRY", None)
    monkeypatch.setattr(config.get_settings(), "aliases_file", "")
    yield


class FakeSender:
    """In-memory ChannelSender that records what was sent."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent = []

    def send_text(self, channel_id, text):
        if self.fail:
            raise RuntimeError("boom")
        self.sent.append(("text", channel_id, text))
        return {"id": str(len(self.sent)), "channel_id": channel_id, "content": text}

    def send_embed(self, channel_id, embed):
        if self.fail:
            raise RuntimeError("boom")
        self.sent.append(("embed", channel_id, embed))
        return {"id": str(len(self.sent)), "channel_id": channel_id, "embeds": [embed]}


@pytest.fixture
def sender():
    return FakeSender()


@pytest.fixture
def failing_sender():
    return FakeSender(fail=True)
