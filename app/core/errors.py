from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

# verify answers always carry a success flag, even for unparseable bodies
VERIFY_PATHS = {"/api/payment/verify", "/api/razorpay/verify-payment"}


class StoreError(Exception):
    """base error for the store API, carries its own http status and json body."""

    status_code: int = 500

    def __init__(self, message: str, body: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.body = body if body is not None else {"error": message}


class ValidationError(StoreError):
    """missing or invalid input."""

    status_code = 400


class UpstreamError(StoreError):
    """the payment provider call failed. internals stay in the logs."""

    status_code = 500


class VerificationMismatch(StoreError):
    """the recomputed signature disagrees with the one the client sent."""

    status_code = 400

    def __init__(self, message: str = "Invalid signature"):
        super().__init__(message, {"success": False, "message": message})


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.body)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # bodies with the wrong shape are a client error like any other missing field
    content: Dict[str, Any] = {"error": "Invalid request body"}
    if request.url.path.rstrip("/") in VERIFY_PATHS:
        content["success"] = False
    return JSONResponse(status_code=400, content=content)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
