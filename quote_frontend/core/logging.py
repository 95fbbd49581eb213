import json
import logging
import sys
import time
import uuid
from contextvars import ContextVar
from typing import Any, Dict, Optional

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)


class RequestIdFilter(logging.Filter):
    """Stamp the current request id unless the caller passed one via `extra`."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        if getattr(record, "request_id", None) is None:
            record.request_id = request_id_ctx.get() or "-"
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line, tagged with the frontend variant serving it."""

    def __init__(self, frontend: Optional[str] = None):
        super().__init__()
        self.frontend = frontend

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        base: Dict[str, Any] = {
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "time": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created)),
            "request_id": getattr(record, "request_id", None) or "-",
        }
        if self.frontend:
            base["frontend"] = self.frontend
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False)


def init_logging(debug: bool = False, frontend: Optional[str] = None) -> None:
    root = logging.getLogger()
    # Only replace handlers installed by a previous init_logging call
    for h in [h for h in root.handlers if isinstance(h.formatter, JsonFormatter)]:
        root.removeHandler(h)
    level = logging.DEBUG if debug else logging.INFO
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(RequestIdFilter())
    handler.setFormatter(JsonFormatter(frontend=frontend))
    root.addHandler(handler)


async def request_context_middleware(request, call_next):  # type: ignore
    # Reuse an upstream id (ingress / sidecar) when one is forwarded
    rid = request.headers.get("x-request-id") or str(uuid.uuid4())
    token = request_id_ctx.set(rid)
    # Error handlers run after the context is reset; they read it from state
    request.state.request_id = rid
    logger = logging.getLogger("frontend.request")
    started = time.perf_counter()
    logger.debug("request start %s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
        response.headers["X-Request-ID"] = rid
        logger.debug(
            "request end %s %s -> %s in %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response
    finally:
        request_id_ctx.reset(token)
