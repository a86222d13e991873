"""Main FastAPI application for the chat history service.

Entry point for the application. Configures:
- FastAPI app with settings
- Message store lifecycle (opened at startup, closed at shutdown)
- CORS middleware
- Exception handlers
- Route registration
"""

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import get_app_config, get_cors_config, get_settings, setup_logging
from dependencies import get_message_store
from responses import ResponseCode, error_dict
from router import router as api_router

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Management
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown."""
    # Startup
    logger.info("Starting chat history service...")

    settings = get_settings()
    logging.getLogger().setLevel(settings.log_level)
    logger.info("Environment: %s", settings.environment)

    # Open the same store instance that request handlers resolve
    store_provider = app.dependency_overrides.get(get_message_store, get_message_store)
    message_store = store_provider()

    try:
        await message_store.connect()

        store_health = await message_store.health_check()
        if store_health.get("status") != "healthy":
            logger.error("Message store unhealthy: %s", store_health)
            raise RuntimeError(f"Message store health check failed: {store_health}")
        logger.info(
            "✓ Message store connected (latency: %sms)", store_health.get("latency_ms")
        )

        logger.info("Chat history service started successfully")

    except Exception as e:
        logger.error("Startup validation failed: %s", e)
        await message_store.close()
        raise

    yield

    # Shutdown
    logger.info("Shutting down chat history service...")
    await message_store.close()


# Create FastAPI app with lifespan
app_config = get_app_config()
app = FastAPI(lifespan=lifespan, **app_config)

# Add CORS middleware
cors_config = get_cors_config()
app.add_middleware(CORSMiddleware, **cors_config)


# =============================================================================
# Middleware
# =============================================================================


@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add request ID to all requests for tracing."""
    request_id = str(uuid.uuid4())[:8]
    request.state.request_id = request_id

    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id

    return response


# =============================================================================
# Exception Handlers
# =============================================================================


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Handle Pydantic validation errors."""
    request_id = getattr(request.state, "request_id", None)

    first_error = exc.errors()[0] if exc.errors() else {}
    field_name = first_error.get("loc", ["unknown"])[-1]

    error_response = error_dict(
        code=ResponseCode.VALIDATION_ERROR,
        custom_message=f"Validation failed for field '{field_name}'",
        error_details={"validation_errors": exc.errors()},
        request_id=request_id,
    )

    return JSONResponse(status_code=422, content=error_response)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Handle HTTP exceptions."""
    request_id = getattr(request.state, "request_id", None)

    code_map = {
        404: ResponseCode.NOT_FOUND,
        405: ResponseCode.METHOD_NOT_ALLOWED,
        422: ResponseCode.VALIDATION_ERROR,
    }

    response_code = code_map.get(exc.status_code, ResponseCode.INTERNAL_ERROR)

    error_response = error_dict(
        code=response_code,
        custom_message=str(exc.detail),
        request_id=request_id,
    )

    return JSONResponse(
        status_code=exc.status_code, content=error_response, headers=exc.headers
    )


@app.exception_handler(Exception)
async def general_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Handle unhandled exceptions."""
    request_id = getattr(request.state, "request_id", None)

    logger.exception("Unhandled exception: %s", exc)

    error_response = error_dict(
        code=ResponseCode.INTERNAL_ERROR,
        custom_message="An unexpected error occurred",
        error_details={"exception_type": type(exc).__name__},
        request_id=request_id,
    )

    return JSONResponse(status_code=500, content=error_response)


# =============================================================================
# Routes
# =============================================================================

# Include API routes
app.include_router(api_router, prefix="/api")


@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint - shows API info."""
    return {
        "name": app_config["title"],
        "description": app_config["description"],
        "docs": "/api/docs",
        "health": "/api/health",
    }


# =============================================================================
# Development Server
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
