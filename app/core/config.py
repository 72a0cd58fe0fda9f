import os
from typing import List
from dotenv import load_dotenv

# grab env vars from .env file
load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    # app settings
    APP_ENV: str = os.getenv("APP_ENV", "dev")
    APP_HOST: str = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT: int = int(os.getenv("APP_PORT", "8000"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()
    STORE_NAME: str = os.getenv("STORE_NAME", "Pickle Store")

    # CORS stuff
    _origins_raw: str = os.getenv("ALLOWED_ORIGINS", "*")
    ALLOWED_ORIGINS: List[str] = [o.strip() for o in _origins_raw.split(",") if o.strip()] if _origins_raw else ["*"]

    # payment provider: "razorpay" talks to the real API, "mock" never leaves the process
    PAYMENTS_PROVIDER: str = os.getenv("PAYMENTS_PROVIDER", "mock")

    # Razorpay credentials, the secret never leaves the server
    RAZORPAY_KEY_ID: str | None = os.getenv("RAZORPAY_KEY_ID")
    RAZORPAY_KEY_SECRET: str | None = os.getenv("RAZORPAY_KEY_SECRET")
    RAZORPAY_API_BASE: str = os.getenv("RAZORPAY_API_BASE", "https://api.razorpay.com/v1")
    RAZORPAY_TIMEOUT_SECONDS: float = float(os.getenv("RAZORPAY_TIMEOUT_SECONDS", "10"))
    RAZORPAY_CHECKOUT_SCRIPT: str = os.getenv("RAZORPAY_CHECKOUT_SCRIPT", "https://checkout.razorpay.com/v1/checkout.js")

    # orders
    ORDER_CURRENCY: str = os.getenv("ORDER_CURRENCY", "INR")
    # "catalog" recomputes the amount from the product list, "client" trusts the posted amount
    ORDER_AMOUNT_SOURCE: str = os.getenv("ORDER_AMOUNT_SOURCE", "catalog").strip().lower()

    # signature check uses hmac.compare_digest unless switched off
    PAYMENT_SIGNATURE_CONSTANT_TIME: bool = _env_bool("PAYMENT_SIGNATURE_CONSTANT_TIME", "true")


settings = Settings()
