import logging
from typing import Any, Dict, Optional

import httpx

from app.core.errors import UpstreamError
from .base import PaymentsProvider

logger = logging.getLogger(__name__)


class RazorpayPayments(PaymentsProvider):
    """
    Razorpay orders API over plain HTTPS.

    Equivalent to:
    curl -X POST https://api.razorpay.com/v1/orders \
    -u $RAZORPAY_KEY_ID:$RAZORPAY_KEY_SECRET \
    -H "Content-Type: application/json" \
    -d '{"amount": 50000, "currency": "INR", "receipt": "receipt_1", "notes": {...}}'
    """

    name = "razorpay"

    def __init__(
        self,
        key_id: Optional[str],
        key_secret: Optional[str],
        api_base: str = "https://api.razorpay.com/v1",
        timeout: float = 10.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.key_id = key_id
        self.key_secret = key_secret
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    def _client(self) -> httpx.Client:
        return httpx.Client(
            base_url=self.api_base,
            auth=(self.key_id or "", self.key_secret or ""),
            timeout=self.timeout,
            transport=self._transport,
        )

    def create_order(self, order: Dict[str, Any]) -> Dict[str, Any]:
        if not self.key_id or not self.key_secret:
            logger.error("Razorpay credentials are not configured")
            raise UpstreamError("Failed to create order")

        try:
            with self._client() as client:
                r = client.post("/orders", json=order)
                r.raise_for_status()
                return r.json()
        except httpx.HTTPStatusError as e:
            # razorpay puts a description in error.description, never echo it to the browser
            logger.error(f"Razorpay order create returned {e.response.status_code}: {e.response.text[:300]}")
            raise UpstreamError("Failed to create order") from e
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Razorpay order create failed: {str(e)}")
            raise UpstreamError("Failed to create order") from e

    def health_check(self) -> Dict[str, str]:
        """check razorpay config status without exposing the secret."""
        if not self.key_id:
            return {"status": "misconfigured", "reason": "missing_key_id"}
        if not self.key_secret:
            return {"status": "misconfigured", "reason": "missing_key_secret"}
        return {"status": "configured", "provider": self.name, "key_id": self.key_id[:8] + "..."}
