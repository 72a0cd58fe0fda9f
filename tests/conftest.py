"""Pytest fixtures for the store API tests."""

from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services.payments.base import PaymentsProvider

TEST_SECRET = "s3cr3t"


class RecordingPayments(PaymentsProvider):
    """Fake provider that records every order it is asked to create."""

    name = "recording"

    def __init__(self, fail: bool = False):
        self.calls: List[Dict[str, Any]] = []
        self.fail = fail

    def create_order(self, order: Dict[str, Any]) -> Dict[str, Any]:
        self.calls.append(order)
        if self.fail:
            raise RuntimeError("gateway unreachable")
        return {"id": f"order_test_{len(self.calls)}", "entity": "order", "status": "created", **order}

    def health_check(self) -> Dict[str, str]:
        return {"status": "configured", "provider": self.name}


@pytest.fixture
def settings():
    s = Settings()
    s.APP_ENV = "test"
    s.PAYMENTS_PROVIDER = "mock"
    s.RAZORPAY_KEY_ID = "rzp_test_publishable"
    s.RAZORPAY_KEY_SECRET = TEST_SECRET
    s.ORDER_CURRENCY = "INR"
    s.ORDER_AMOUNT_SOURCE = "catalog"
    s.PAYMENT_SIGNATURE_CONSTANT_TIME = True
    return s


@pytest.fixture
def payments():
    return RecordingPayments()


@pytest.fixture
def client(settings, payments):
    app = create_app(settings)
    app.state.payments = payments
    return TestClient(app)
