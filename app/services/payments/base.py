from typing import Any, Dict
import hmac
import hashlib


def compute_signature(secret: str, order_id: str, payment_id: str) -> str:
    """hex HMAC-SHA256 of "order_id|payment_id", the way the checkout signs its callback."""
    message = f"{order_id}|{payment_id}".encode()
    return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()


def verify_signature(
    secret: str,
    order_id: str,
    payment_id: str,
    signature: str,
    constant_time: bool = True,
) -> bool:
    if not secret:
        raise ValueError("payment secret is not configured")
    expected = compute_signature(secret, order_id, payment_id)
    if constant_time:
        return hmac.compare_digest(expected.encode(), signature.encode())
    return expected == signature


class PaymentsProvider:
    """base payments provider interface."""

    name = "base"

    def create_order(self, order: Dict[str, Any]) -> Dict[str, Any]:  # pragma: no cover
        raise NotImplementedError

    def health_check(self) -> Dict[str, str]:  # pragma: no cover
        return {"status": "skipped", "reason": "not_implemented"}
