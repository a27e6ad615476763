import json
import logging
import sys
import time
import uuid
from contextvars import ContextVar
from typing import Any, Dict

PACKAGE_LOGGER = "swop_client"
# Attributes passed via ``extra=`` that are copied into the JSON line
CONTEXT_FIELDS = ("digest", "from_cache", "url", "status", "ttl")

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        record.request_id = request_id_ctx.get() or "-"
        return True


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        line: Dict[str, Any] = {
            "time": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
        }
        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                line[field] = getattr(record, field)
        if record.exc_info:
            line["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(line, ensure_ascii=False, default=str)


def init_logging(debug: bool = False) -> logging.Logger:
    """Attach a JSON stdout handler to the swop_client logger tree.

    Only the package logger is touched, so host applications keep their own
    root configuration. Calling this again replaces the previous handler.
    """
    level = logging.DEBUG if debug else logging.INFO
    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if getattr(handler, "_swop_json", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler._swop_json = True  # type: ignore[attr-defined]
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    return logger


async def request_context_middleware(request, call_next):  # type: ignore
    rid = request.headers.get("x-request-id") or uuid.uuid4().hex
    token = request_id_ctx.set(rid)
    logger = logging.getLogger("swop_client.request")
    started = time.perf_counter()
    try:
        response = await call_next(request)
        response.headers["x-request-id"] = rid
        logger.info(
            "%s %s %s in %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
            extra={"status": response.status_code},
        )
        return response
    finally:
        request_id_ctx.reset(token)
