from fastapi import APIRouter, Depends

from app.api.deps import get_payments, get_settings
from app.core.config import Settings
from app.schemas.payments import CheckoutConfigOut, PaymentVerifyRequest, PaymentVerifyResponse
from app.services.payments import checkout
from app.services.payments.base import PaymentsProvider

router = APIRouter(tags=["payments"])


@router.post("/payment/verify", response_model=PaymentVerifyResponse)
@router.post("/razorpay/verify-payment", response_model=PaymentVerifyResponse)
def verify_payment(payload: PaymentVerifyRequest, settings: Settings = Depends(get_settings)):
    return checkout.verify_payment(payload, settings)


@router.get("/checkout/config", response_model=CheckoutConfigOut)
def checkout_config(
    provider: PaymentsProvider = Depends(get_payments),
    settings: Settings = Depends(get_settings),
):
    """browser-safe checkout settings. only the publishable key id goes out."""
    return CheckoutConfigOut(
        key=settings.RAZORPAY_KEY_ID,
        provider=provider.name,
        store_name=settings.STORE_NAME,
        currency=settings.ORDER_CURRENCY,
        checkout_script=settings.RAZORPAY_CHECKOUT_SCRIPT,
    )
