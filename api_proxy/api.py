"""FastAPI application factory for API-proxy services."""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import ValidationError

from .config import settings
from .models import ErrorResponse, HealthResponse
from .processor import BaseProcessor, ProxyAction
from .rendering import render
from .upstream import UpstreamClient, UpstreamError

logger = logging.getLogger(__name__)


@dataclass
class ServiceConfig:
    """
    Configuration for building a proxy service application.

    Args:
        name: Override service name (defaults to processor.name)
        version: Override service version (defaults to processor.version)
        description: Short description for generated docs
    """

    name: str | None = None
    version: str | None = None
    description: str | None = None


def create_app(
    processor: BaseProcessor,
    config: ServiceConfig | None = None,
    upstream: UpstreamClient | None = None,
) -> FastAPI:
    """
    Create a FastAPI application for a proxy processor.

    Args:
        processor: The processor instance describing the proxied routes
        config: Optional service configuration
        upstream: Optional UpstreamClient; the app reopens it on startup and closes it on shutdown
    """

    config = config or ServiceConfig()
    upstream = upstream or UpstreamClient(timeout=settings.upstream_timeout)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    service_name = config.name or processor.name
    service_version = config.version or processor.version
    service_description = config.description or f"{service_name} proxy API"

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Manage application lifecycle."""
        logger.info("Starting %s %s", service_name, service_version)
        upstream.open()
        yield
        await upstream.close()
        logger.info("Stopped %s", service_name)

    app = FastAPI(
        title=f"{service_name.title()} Proxy API",
        description=service_description,
        version=service_version,
        lifespan=lifespan,
    )

    app.state.processor = processor
    app.state.service_config = config
    app.state.upstream = upstream

    @app.exception_handler(ValidationError)
    async def validation_exception_handler(request: Request, exc: ValidationError):
        """Handle Pydantic validation errors (e.g., query parameter validation)."""
        return JSONResponse(
            status_code=400,
            content={"error": "Validation error", "detail": str(exc)},
        )

    actions = processor.get_proxy_actions()
    if not actions:
        logger.warning(
            "Processor %s registered with proxy service but get_proxy_actions() returned nothing.",
            processor.name,
        )

    paths = [action.path for action in actions]
    duplicates = sorted({path for path in paths if paths.count(path) > 1})
    if duplicates:
        raise ValueError(f"Processor {processor.name} declares duplicate action paths: {duplicates}")

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        return HealthResponse(status="healthy", version=service_version)

    if "/" not in paths:
        @app.get("/", response_model=HealthResponse)
        async def root():
            return HealthResponse(status="healthy", version=service_version)

    def make_endpoint(action: ProxyAction):
        QueryModel = action.query_model

        async def endpoint(request: Request):
            query = QueryModel(**request.query_params)
            url = action.build_url(query)

            try:
                payload = await upstream.fetch(url, action.payload_model)
            except UpstreamError as exc:
                logger.error("%s failed: %s", action.name, exc)
                return PlainTextResponse(action.error_message, status_code=500)

            value = action.extract(payload)
            return render(request, action.template, action.context_key, value)

        return endpoint

    for action in actions:
        logger.info("Registering proxy action '%s' at %s", action.name, action.path)

        route_kwargs = {
            "methods": ["GET"],
            "summary": action.summary,
            "description": action.description,
            "tags": list(action.tags) if action.tags else None,
            "responses": {
                400: {"model": ErrorResponse},
                500: {"description": "Upstream failure", "content": {"text/plain": {}}},
            },
        }
        route_kwargs = {k: v for k, v in route_kwargs.items() if v is not None}

        app.api_route(action.path, **route_kwargs)(make_endpoint(action))

    return app
