"""Card SOAP Gateway.

This service exposes card and statement lookups as REST/JSON and relays
them to the legacy card-management SOAP backend.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from card_gateway.api.routes import api_router
from card_gateway.core.config import AppEnvironment, Settings, get_settings
from card_gateway.core.errors import UPSTREAM_ERRORS, GatewayError, get_status_code
from card_gateway.core.logging import setup_logging

logger = logging.getLogger(__name__)

# Public path prefix, kept stable for existing clients
API_PREFIX = "/api"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Application lifespan context manager."""
    settings = get_settings()

    app.state.settings = settings
    setup_logging(settings)

    logger.info(
        "Starting Card SOAP Gateway",
        extra={
            "app": settings.app.name,
            "env": settings.app.env,
            "version": settings.app.version,
            "backend": settings.soap.endpoint_url,
        },
    )
    if not settings.soap.verify_tls:
        logger.warning(
            "TLS certificate validation is disabled for the SOAP backend",
            extra={"backend": settings.soap.endpoint_url},
        )

    yield

    logger.info("Card SOAP Gateway stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Card SOAP Gateway API",
        description=(
            "REST/JSON gateway for card and statement lookups, backed by the "
            "legacy card-management SOAP service."
        ),
        version=settings.app.version,
        lifespan=lifespan,
        docs_url="/docs" if settings.app.env != AppEnvironment.PROD else None,
        redoc_url="/redoc" if settings.app.env != AppEnvironment.PROD else None,
        openapi_url="/openapi.json" if settings.app.env != AppEnvironment.PROD else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.security.cors_allowed_origins,
        allow_credentials=settings.security.cors_allow_credentials,
        allow_methods=settings.security.cors_allow_methods,
        allow_headers=settings.security.cors_allow_headers,
    )

    app.include_router(api_router, prefix=API_PREFIX)

    setup_telemetry(app, settings)

    @app.exception_handler(GatewayError)
    async def domain_error_handler(  # type: ignore[reportUnusedFunction]
        request: Request, exc: GatewayError
    ) -> JSONResponse:
        """Handle gateway errors and return appropriate HTTP responses."""
        status_code = get_status_code(exc)
        hide_details = settings.security.sanitize_errors and isinstance(exc, UPSTREAM_ERRORS)
        content: dict = {"detail": exc.message}
        if exc.details and not hide_details:
            content["errors"] = exc.details
        return JSONResponse(status_code=status_code, content=content)

    @app.exception_handler(Exception)
    async def global_exception_handler(  # type: ignore[reportUnusedFunction]
        request: Request, exc: Exception
    ) -> JSONResponse:
        """Handle unexpected exceptions and return 500 error responses."""
        logger.exception(
            "Unhandled exception",
            extra={
                "path": request.url.path,
                "method": request.method,
                "error": str(exc),
            },
        )
        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
        )

    return app


def setup_telemetry(app: FastAPI, settings: Settings) -> None:
    """Setup OpenTelemetry instrumentation."""
    if not settings.observability.otlp_endpoint:
        return

    resource = Resource(
        attributes={
            SERVICE_NAME: settings.observability.service_name,
        }
    )

    provider = TracerProvider(resource=resource)
    exporter = OTLPSpanExporter(
        endpoint=settings.observability.otlp_endpoint,
        insecure=settings.observability.otlp_insecure,
    )
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    FastAPIInstrumentor.instrument_app(app)


def run() -> None:
    """Run the application using uvicorn."""
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "card_gateway.main:create_app",
        host=settings.server.host,
        port=settings.server.port,
        reload=settings.app.env == AppEnvironment.LOCAL,
        factory=True,
        workers=1 if settings.app.env == AppEnvironment.LOCAL else settings.server.workers,
        log_level=settings.app.log_level.value.lower(),
    )


if __name__ == "__main__":
    run()
