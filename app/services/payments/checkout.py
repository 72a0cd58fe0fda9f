"""
Checkout flow: order creation and payment signature verification.

Both functions are stateless. Everything they need (provider, settings) is
passed in, so each request is independent of every other one.
"""

import logging
import time
from typing import Any, Dict, Optional

from app.core.config import Settings
from app.core.errors import StoreError, UpstreamError, ValidationError, VerificationMismatch
from app.schemas.payments import OrderCreateRequest, OrderNotes, PaymentVerifyRequest, ProviderOrderRequest
from app.services import catalog
from .base import PaymentsProvider, verify_signature

logger = logging.getLogger(__name__)

AMOUNT_SOURCE_CLIENT = "client"


def to_minor_units(amount: float) -> int:
    """rupees -> paise."""
    return int(round(amount * 100))


def new_receipt(now: Optional[float] = None) -> str:
    ts = time.time() if now is None else now
    return f"receipt_{int(ts * 1000)}"


def _order_amount(payload: OrderCreateRequest, settings: Settings) -> int:
    if settings.ORDER_AMOUNT_SOURCE == AMOUNT_SOURCE_CLIENT:
        return to_minor_units(payload.amount)

    product = catalog.get_product(payload.productId)
    if not product:
        raise ValidationError("Unknown product")

    total = product.price * payload.quantity
    if payload.amount != total:
        logger.warning(
            f"Client amount {payload.amount} for {payload.productId} x{payload.quantity} "
            f"does not match catalog total {total}, using catalog total"
        )
    return to_minor_units(total)


def build_order_request(
    payload: OrderCreateRequest,
    settings: Settings,
    now: Optional[float] = None,
) -> ProviderOrderRequest:
    missing = payload.missing_fields()
    if missing:
        raise ValidationError("Missing required fields")
    if payload.amount < 0:
        raise ValidationError("Amount must be positive")
    if payload.quantity < 1:
        raise ValidationError("Quantity must be at least 1")

    amount = _order_amount(payload, settings)
    if amount < 1:
        raise ValidationError("Amount must be positive")

    return ProviderOrderRequest(
        amount=amount,
        currency=settings.ORDER_CURRENCY,
        receipt=new_receipt(now),
        notes=OrderNotes(productId=payload.productId, quantity=str(payload.quantity)),
    )


def create_order(provider: PaymentsProvider, payload: OrderCreateRequest, settings: Settings) -> Dict[str, Any]:
    order_request = build_order_request(payload, settings)

    try:
        order = provider.create_order(order_request.model_dump())
    except StoreError:
        raise
    except Exception as e:
        logger.error(f"Error creating {provider.name} order: {str(e)}")
        raise UpstreamError("Failed to create order") from e

    logger.info(f"Created {provider.name} order {order.get('id')} for {payload.productId} x{payload.quantity}")
    return order


def verify_payment(payload: PaymentVerifyRequest, settings: Settings) -> Dict[str, Any]:
    """
    Decide whether a checkout callback is authentic.

    The verdict comes only from recomputing the HMAC with the server-side
    secret. Nothing the client says about the payment status is trusted.
    """
    if payload.missing_fields():
        raise ValidationError("Missing required fields", {"error": "Missing required fields", "success": False})

    try:
        valid = verify_signature(
            settings.RAZORPAY_KEY_SECRET or "",
            payload.razorpay_order_id,
            payload.razorpay_payment_id,
            payload.razorpay_signature,
            constant_time=settings.PAYMENT_SIGNATURE_CONSTANT_TIME,
        )
    except Exception as e:
        logger.error(f"Error verifying payment: {str(e)}")
        raise StoreError("Payment verification failed", {"error": "Payment verification failed", "success": False}) from e

    if not valid:
        logger.warning(f"Signature mismatch for order {payload.razorpay_order_id}")
        raise VerificationMismatch()

    logger.info(f"Payment {payload.razorpay_payment_id} verified for order {payload.razorpay_order_id}")
    return {"success": True, "message": "Payment verified successfully"}
