#main.py
from __future__ import annotations

import logging

from fastapi import FastAPI

from middleware import RequestContextMiddleware
from routes.health import router as health_router
from server import serve
from settings import Settings, listen_config_from_settings, validate_env_settings

logger = logging.getLogger("listenport")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    # raises ValueError for an unknown level name
    logger.setLevel((level or "INFO").upper())


def create_app(app_settings: Settings | None = None) -> FastAPI:
    if app_settings is None:
        app_settings = Settings()
    app = FastAPI(title="listenport", version="1.0.0")

    app.state.settings = app_settings
    app.state.listen_address = listen_config_from_settings(app_settings).resolve()

    app.add_middleware(RequestContextMiddleware)

    # -----------------------------
    # ROUTERS
    # -----------------------------
    app.include_router(health_router)

    return app


def main() -> None:
    # pydantic ValidationError, InvalidPortError and a bad LOG_LEVEL are all ValueErrors
    try:
        app_settings = Settings()
        configure_logging(app_settings.LOG_LEVEL)
        validate_env_settings(app_settings)
        app = create_app(app_settings)
    except (ValueError, RuntimeError) as exc:
        logger.error("startup_failed error=%s", exc)
        raise SystemExit(1) from exc

    serve(app, app.state.listen_address, log_level=app_settings.LOG_LEVEL)


if __name__ == "__main__":
    main()
