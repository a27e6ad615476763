from fastapi import FastAPI

from .core import errors
from .core.config import Settings, get_settings
from .core.logging import init_logging, request_context_middleware
from .routers import rates


def create_app(settings_override: Settings | None = None) -> FastAPI:
    """Application factory for the optional rates gateway.

    settings_override: pass an already constructed Settings instance for tests;
    falls back to cached get_settings(). The client itself is resolved lazily
    through the rates.get_client dependency, so tests can override it.
    """
    settings = settings_override or get_settings()
    init_logging(debug=settings.debug)

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(errors.ValidationError, errors.bad_request_handler)
    app.add_exception_handler(errors.ConversionError, errors.bad_request_handler)
    app.add_exception_handler(errors.RemoteError, errors.remote_error_handler)
    app.add_exception_handler(
        errors.ConfigurationError, errors.configuration_error_handler
    )
    app.add_exception_handler(Exception, errors.server_error_handler)

    app.include_router(rates.router)

    @app.get("/")
    async def root():
        return {"message": settings.app_name, "version": settings.version}

    return app
