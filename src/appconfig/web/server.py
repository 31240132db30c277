"""appconfig web application: health and configuration endpoints."""

from __future__ import annotations

import sys
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

import appconfig
from appconfig.config.schema import Environment
from appconfig.config.service import ConfigService
from appconfig.core.exceptions import AppError
from appconfig.core.structured_logger import get_logger

logger = get_logger("WebServer")


def get_config_service(request: Request) -> ConfigService:
    """FastAPI dependency returning the ConfigService attached at app creation."""
    return request.app.state.config_service


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        return JSONResponse(
            status_code=500,
            content={"error": {"message": str(exc), "type": "server_error", "code": "internal_error"}},
        )


def _register_routes(app: FastAPI) -> None:
    @app.get("/health")
    async def health(config: ConfigService = Depends(get_config_service)):
        return {
            "status": "ok",
            "version": appconfig.__version__,
            "environment": config.get("env").value,
            "python_version": sys.version.split()[0],
        }

    @app.get("/config")
    async def show_config(config: ConfigService = Depends(get_config_service)):
        # Only exposed while developing; production hides the endpoint entirely
        if config.get("env") is not Environment.DEVELOPMENT:
            raise HTTPException(status_code=404, detail="Not Found")
        return config.redacted()


def create_app(config_service: ConfigService) -> FastAPI:
    """
    Build the FastAPI application around an already validated configuration.

    Args:
        config_service: Service wrapping the AppConfig loaded at startup

    Returns:
        Configured FastAPI instance
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(
            "Application started",
            environment=config_service.get("env").value,
            port=config_service.get("port"),
        )
        yield
        logger.info("Application stopped")

    app = FastAPI(title="appconfig", version=appconfig.__version__, lifespan=lifespan)
    app.state.config_service = config_service
    _register_exception_handlers(app)
    _register_routes(app)
    return app
