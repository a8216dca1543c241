import os

import pytest

from fastapi.testclient import TestClient

os.environ.setdefault("PUSHOVER_USER_KEY", "test-user-key")
os.environ.setdefault("PUSHOVER_API_TOKEN", "test-api-token")

from contact_relay.core.config import Settings
from contact_relay.core.exceptions import NotificationDeliveryError
from contact_relay.core.notifier import PushoverReceipt
from contact_relay.factory import create_app


class FakeNotifier:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent = []
        self.closed = False

    @property
    def configured(self) -> bool:
        return True

    async def send(self, name, message, phone=None):
        self.sent.append((name, message, phone))
        if self.fail:
            raise NotificationDeliveryError("Pushover rejected the message: ['user key is invalid']", status_code=400)
        return PushoverReceipt(status=1, request=f"req-{len(self.sent)}")

    async def aclose(self):
        self.closed = True


def make_settings(**overrides) -> Settings:
    values = {
        "pushover_user_key": "test-user-key",
        "pushover_api_token": "test-api-token",
        "allowed_origins": None,
        "strict_override": None,
        "deployment_mode": "server",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def notifier():
    return FakeNotifier()


@pytest.fixture
def strict_client(notifier):
    app = create_app(make_settings(deployment_mode="serverless"), notifier=notifier)
    return TestClient(app)


@pytest.fixture
def permissive_client(notifier):
    app = create_app(make_settings(deployment_mode="server"), notifier=notifier)
    return TestClient(app)
