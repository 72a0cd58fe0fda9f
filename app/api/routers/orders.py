from typing import Any, Dict

from fastapi import APIRouter, Depends

from app.api.deps import get_payments, get_settings
from app.core.config import Settings
from app.schemas.payments import OrderCreateRequest
from app.services.payments.base import PaymentsProvider
from app.services.payments import checkout

router = APIRouter(tags=["orders"])


@router.post("/order/create")
@router.post("/razorpay/create-order")
def create_order(
    payload: OrderCreateRequest,
    provider: PaymentsProvider = Depends(get_payments),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """create a provider order, returned as the provider sent it"""
    return checkout.create_order(provider, payload, settings)
