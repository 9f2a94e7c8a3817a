"""FastAPI server for the Notion Gateway."""

import logging
from contextlib import asynccontextmanager
from datetime import UTC, datetime

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from . import __version__
from .api import openapi as openapi_api
from .api import rest as rest_api
from .config import Settings, settings as default_settings
from .engine import BackendExecutor
from .errors import ConfigurationError
from .mcp.dispatcher import McpDispatcher
from .mcp.tool_defs import ToolRegistry, build_registry
from .mcp_transport import MESSAGE_PATH
from .mcp_transport import router as mcp_router
from .middleware import SecurityHeadersMiddleware
from .models import HealthResponse

logger = logging.getLogger(__name__)


# ============ SENTRY INITIALIZATION ============


def _filter_sentry_event(event: dict) -> dict:
    """Remove sensitive data from Sentry events."""
    if "request" in event and "headers" in event["request"]:
        headers = event["request"]["headers"]
        for key in ["authorization", "notion-key"]:
            if key in headers:
                headers[key] = "[REDACTED]"
    return event


def _init_sentry(settings: Settings) -> None:
    if not settings.sentry_dsn:
        logger.debug("Sentry DSN not configured - error tracking disabled")
        return
    try:
        import sentry_sdk
        from sentry_sdk.integrations.fastapi import FastApiIntegration
        from sentry_sdk.integrations.starlette import StarletteIntegration
    except ImportError:
        logger.warning("Sentry DSN configured but sentry-sdk not installed")
        return

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        environment=settings.environment,
        traces_sample_rate=0.1 if settings.environment == "production" else 1.0,
        integrations=[
            FastApiIntegration(),
            StarletteIntegration(),
        ],
        before_send=lambda event, hint: _filter_sentry_event(event),
    )
    logger.info("Sentry error tracking initialized")


# ============ EXCEPTION HANDLERS ============


async def configuration_error_handler(request: Request, exc: ConfigurationError):
    """Missing configuration: fail the request before any backend call."""
    return JSONResponse(status_code=500, content={"error": str(exc)})


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report invalid REST bodies in the same shape as backend failures."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        problems.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return JSONResponse(
        status_code=500,
        content={"error": "Invalid request body: " + "; ".join(problems)},
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions with consistent response format."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions with a generic message."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "An internal server error occurred. Please try again."},
    )


# ============ APPLICATION FACTORY ============


def create_app(
    settings: Settings | None = None,
    registry: ToolRegistry | None = None,
    executor: BackendExecutor | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Gateway settings (defaults to the environment-loaded settings)
        registry: Tool registry (defaults to all tools bound to ``executor``)
        executor: Backend executor (defaults to a Notion executor from settings)

    Returns:
        Configured FastAPI app. The registry is built once here and shared
        read-only by every request.
    """
    if settings is None:
        settings = default_settings
    if executor is None:
        executor = BackendExecutor.from_settings(settings)
    if registry is None:
        registry = build_registry(executor)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan handler for startup/shutdown."""
        logger.info(f"Starting Notion Gateway v{__version__} with {len(registry)} tools")
        if not settings.has_credential:
            logger.warning("NOTION_KEY is not configured - tool calls will fail with HTTP 500")
        if not settings.debug and settings.cors_origins_list == ["*"]:
            logger.warning(
                "CORS is configured to allow all origins ('*'). "
                "Set CORS_ALLOWED_ORIGINS to restrict access."
            )
        yield
        logger.info("Notion Gateway shutting down")

    _init_sentry(settings)

    app = FastAPI(
        title="Notion Gateway",
        description="MCP (SSE) and REST access to a Notion workspace",
        version=__version__,
        lifespan=lifespan,
        # /openapi.json serves the hand-built REST document instead
        openapi_url=None,
        docs_url=None,
        redoc_url=None,
    )

    app.state.settings = settings
    app.state.executor = executor
    app.state.registry = registry
    app.state.dispatcher = McpDispatcher(registry)

    # Security headers middleware
    app.add_middleware(SecurityHeadersMiddleware, hsts=not settings.debug)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ConfigurationError, configuration_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(mcp_router)
    app.include_router(rest_api.router)
    app.include_router(openapi_api.router)

    # ============ HEALTH ENDPOINTS ============

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint (lightweight liveness check)."""
        return HealthResponse(
            status="healthy",
            version=__version__,
            timestamp=datetime.now(UTC),
        )

    @app.get("/", tags=["Health"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Notion Gateway",
            "version": __version__,
            "openapi": "/openapi.json",
            "sse": "/sse",
            "messages": MESSAGE_PATH,
            "health": "/health",
            "tools": list(registry.names()),
        }

    return app


app = create_app()


# ============ MAIN ============


def main():
    """Run the server with uvicorn."""
    import uvicorn

    logging.basicConfig(
        level=default_settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "notion_gateway.server:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.debug,
        log_level=default_settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
