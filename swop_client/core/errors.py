from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette import status

"""Exception taxonomy for the client plus JSON handlers used by the gateway.

All client errors are raised synchronously where they are detected and are
never retried or wrapped; RemoteError only attaches the raw response.
"""

logger = logging.getLogger("swop_client.errors")


class SwopError(Exception):
    """Base class for every error raised by swop_client."""


class ConfigurationError(SwopError):
    """Client constructed without an API key or transport."""


class ValidationError(SwopError, ValueError):
    """A required call parameter (e.g. a date) is missing or malformed."""


class RemoteError(SwopError):
    """The GraphQL response lacks the expected top-level field."""

    def __init__(self, message: str, response: Any = None):
        super().__init__(message)
        self.response = response


class ConversionError(SwopError, ValueError):
    """Offline cross-rate conversion could not be computed."""


class InvalidQuotesError(ConversionError):
    pass


class CurrencyNotFoundError(ConversionError):
    def __init__(self, currency: str, side: str):
        super().__init__(f"no quote found for {side} currency '{currency}'")
        self.currency = currency
        self.side = side


class BaseCurrencyMismatchError(ConversionError):
    def __init__(self, from_base: str, to_base: str):
        super().__init__(
            f"quotes have different base currencies ({from_base} != {to_base})"
        )
        self.from_base = from_base
        self.to_base = to_base


def bad_request_handler(request: Request, exc: SwopError):  # type: ignore
    code = "conversion_error" if isinstance(exc, ConversionError) else "validation_error"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": code, "detail": str(exc)},
    )


def remote_error_handler(request: Request, exc: RemoteError):  # type: ignore
    logger.warning("remote error on %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={
            "error": "remote_error",
            "detail": str(exc),
            "response": exc.response,
        },
    )


def configuration_error_handler(request: Request, exc: ConfigurationError):  # type: ignore
    logger.error("gateway misconfigured: %s", exc)
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"error": "not_configured", "detail": str(exc)},
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )
