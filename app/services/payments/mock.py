import time
from typing import Any, Dict
from uuid import uuid4

from .base import PaymentsProvider


class MockPayments(PaymentsProvider):
    """razorpay-shaped orders without any network access, for local development."""

    name = "mock"

    def create_order(self, order: Dict[str, Any]) -> Dict[str, Any]:
        amount = order["amount"]
        return {
            "id": f"order_mock_{uuid4().hex[:14]}",
            "entity": "order",
            "amount": amount,
            "amount_paid": 0,
            "amount_due": amount,
            "currency": order["currency"],
            "receipt": order["receipt"],
            "offer_id": None,
            "status": "created",
            "attempts": 0,
            "notes": dict(order.get("notes") or {}),
            "created_at": int(time.time()),
        }

    def health_check(self) -> Dict[str, str]:
        return {"status": "configured", "provider": self.name}
