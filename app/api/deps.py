from fastapi import Request

from app.core.config import Settings
from app.services.payments.base import PaymentsProvider


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_payments(request: Request) -> PaymentsProvider:
    # built once in create_app, shared by every request
    return request.app.state.payments
