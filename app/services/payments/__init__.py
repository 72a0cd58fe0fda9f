"""
Payments services package.

This package contains:
- Provider adapters (Razorpay over HTTPS, an offline mock)
- Checkout signature computation and verification
- Order creation and payment verification flows
"""

from .base import PaymentsProvider, compute_signature, verify_signature
from .factory import get_payments_provider
from .mock import MockPayments
from .razorpay import RazorpayPayments

__all__ = [
    'PaymentsProvider',
    'compute_signature',
    'verify_signature',
    'get_payments_provider',
    'MockPayments',
    'RazorpayPayments',
]
