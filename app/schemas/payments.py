from typing import List, Optional
from pydantic import BaseModel, Field


class OrderCreateRequest(BaseModel):
    # all optional so a missing field reaches our own check and comes back as a 400
    amount: Optional[float] = None
    productId: Optional[str] = None
    quantity: Optional[int] = None

    def missing_fields(self) -> List[str]:
        return [name for name in ("amount", "productId", "quantity") if not getattr(self, name)]


class OrderNotes(BaseModel):
    productId: str
    quantity: str


class ProviderOrderRequest(BaseModel):
    """body sent to the provider's order API. amount is in minor units (paise)."""
    amount: int = Field(..., gt=0)
    currency: str
    receipt: str
    notes: OrderNotes


class PaymentVerifyRequest(BaseModel):
    """the three fields the hosted checkout hands to its success callback."""
    razorpay_order_id: Optional[str] = None
    razorpay_payment_id: Optional[str] = None
    razorpay_signature: Optional[str] = None

    def missing_fields(self) -> List[str]:
        return [
            name
            for name in ("razorpay_order_id", "razorpay_payment_id", "razorpay_signature")
            if not getattr(self, name)
        ]


class PaymentVerifyResponse(BaseModel):
    success: bool
    message: str


class CheckoutConfigOut(BaseModel):
    key: Optional[str] = None
    provider: str
    store_name: str
    currency: str
    checkout_script: str

