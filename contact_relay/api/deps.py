from fastapi import Request

from contact_relay.core.config import Settings
from contact_relay.core.notifier import PushoverNotifier


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_notifier(request: Request) -> PushoverNotifier:
    """The notifier built once in create_app and shared by all requests"""
    return request.app.state.notifier
