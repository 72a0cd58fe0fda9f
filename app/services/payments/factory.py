import logging

from app.core.config import Settings
from .base import PaymentsProvider
from .mock import MockPayments
from .razorpay import RazorpayPayments

logger = logging.getLogger(__name__)


def get_payments_provider(settings: Settings) -> PaymentsProvider:
    provider = (settings.PAYMENTS_PROVIDER or "mock").lower()
    if provider == "razorpay":
        return RazorpayPayments(
            key_id=settings.RAZORPAY_KEY_ID,
            key_secret=settings.RAZORPAY_KEY_SECRET,
            api_base=settings.RAZORPAY_API_BASE,
            timeout=settings.RAZORPAY_TIMEOUT_SECONDS,
        )
    if provider != "mock":
        logger.warning(f"Unknown PAYMENTS_PROVIDER '{provider}', falling back to mock")
    return MockPayments()
