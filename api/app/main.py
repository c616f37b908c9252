import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from rate_providers import BaseRateProvider, RateProviderException, get_provider

from .config import Settings, configure_logging, load_settings
from .models import ErrorResponse, HealthCheck, RateResponse

logger = logging.getLogger(__name__)


def get_rate_provider(request: Request) -> BaseRateProvider:
    return request.app.state.rate_provider


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


def create_app(settings: Optional[Settings] = None, provider: Optional[BaseRateProvider] = None) -> FastAPI:
    """Build the proxy application.

    Settings default to the process environment; the provider defaults to the
    one named by ``settings.rate_provider``. Both can be injected for tests.
    """
    settings = settings or load_settings()
    configure_logging(settings.log_level)
    provider = provider or get_provider(
        settings.rate_provider,
        api_key=settings.exchange_rate_api_key,
        timeout=settings.upstream_timeout,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("===========================================")
        logger.info("Currency Converter Backend Server")
        logger.info("===========================================")
        logger.info(f"Server running on http://localhost:{settings.port}")
        logger.info(f"API endpoint: http://localhost:{settings.port}/api/rates/:baseCurrency")
        logger.info(f"Health check: http://localhost:{settings.port}/api/health")
        logger.info(f"Rate provider: {provider.provider_name}")
        if settings.has_api_key:
            logger.info("API key is configured")
        elif provider.requires_api_key:
            logger.warning(f"API key not set but {provider.provider_name} requires one; rate requests will fail")
        else:
            logger.warning("API key not set; EXCHANGE_RATE_API_KEY is only needed for keyed providers")
        yield

    app = FastAPI(
        title="Currency Converter API",
        description="Proxy for live exchange rates that keeps the upstream API key server-side",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.rate_provider = provider

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    @app.exception_handler(RateProviderException)
    async def rate_provider_exception_handler(request: Request, exc: RateProviderException):
        return _error(exc.status_code, str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return _error(404, "Endpoint not found")
        return _error(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}: {exc}")
        return _error(500, "Internal server error")

    @app.get(
        "/api/rates/{base_currency}",
        response_model=RateResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    def get_rates(base_currency: str, rate_provider: BaseRateProvider = Depends(get_rate_provider)):
        """Latest exchange rates for a base currency"""
        logger.info(f"Fetching exchange rates for base currency: {base_currency}")
        snapshot = rate_provider.get_latest_rates(base_currency)
        return RateResponse(base=snapshot.base, date=snapshot.date, rates=snapshot.rates)

    @app.get("/api/health", response_model=HealthCheck)
    async def health_check():
        """Health check endpoint"""
        return HealthCheck(
            message="Currency converter API is running",
            timestamp=datetime.now(timezone.utc),
        )

    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app


app = create_app()


def run() -> None:
    settings = app.state.settings
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
