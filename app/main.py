import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from app.core.config import Settings, settings as default_settings
from app.core.errors import register_error_handlers
from app.api.api import router as api_router
from app.services.payments.factory import get_payments_provider

STATIC_DIR = Path(__file__).resolve().parent / "static"

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="Pickle Store API", version="0.1.0")

    # one provider per process, built from startup config and shared by handlers
    app.state.settings = settings
    app.state.payments = get_payments_provider(settings)
    logger.info(f"Payments provider: {app.state.payments.name}")

    # set up CORS so the frontend can talk to us
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS or ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # mount our API routes
    app.include_router(api_router, prefix="/api")
    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    @app.get("/", include_in_schema=False)
    def storefront():
        return FileResponse(STATIC_DIR / "index.html", media_type="text/html")

    @app.get("/health")
    def health():
        return {
            "status": "ok",
            "env": settings.APP_ENV,
            "payments": app.state.payments.health_check(),
        }

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=default_settings.APP_HOST, port=default_settings.APP_PORT)
