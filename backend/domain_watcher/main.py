from __future__ import annotations

import logging
import os
from typing import AsyncIterator

import httpx
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from .config import Settings, get_settings
from .exceptions import ConfigurationError
from .logging_config import configure_logging
from .responses import build_check_response, build_error_response
from .services import batch_service

logger = logging.getLogger(__name__)

app = FastAPI(title="Domain Watcher API", version="0.1.0")


@app.on_event("startup")
async def startup() -> None:
    try:
        settings = get_settings()
    except ConfigurationError as exc:
        # Requests report the same error through configuration_error_handler.
        configure_logging(os.environ.get("LOG_LEVEL", "INFO"))
        logger.error("Starting with invalid configuration: %s", exc)
        return
    configure_logging(settings.log_level)


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient() as client:
        yield client


def _error_reply(message: str) -> JSONResponse:
    status_code, body = build_error_response(message)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error("Configuration error: %s", exc)
    return _error_reply(str(exc))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error during %s %s", request.method, request.url.path)
    return _error_reply(str(exc) or "Unknown error")


@app.api_route("/", methods=["GET", "POST"], include_in_schema=False)
@app.get("/api/check")
async def check_domains(
    settings: Settings = Depends(get_settings),
    client: httpx.AsyncClient = Depends(get_http_client),
) -> JSONResponse:
    config = settings.to_watch_config()
    report = await batch_service.run_domain_check(config, client)
    status_code, body = build_check_response(report)
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json", exclude_none=True))
