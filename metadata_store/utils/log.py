"""
Logging helpers.

Every module asks for its logger through `get_logger(__name__)`. Backend
operations receive an optional `RequestContext` and log through
`context_logger(ctx)` so that messages of one request share its id.
"""
import logging
import os
import uuid
from dataclasses import dataclass, field
from typing import Optional

PREFIX = "metadata_store"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def level_from_env() -> int:
    level = logging.getLevelName((os.getenv("LOG_LEVEL") or "INFO").upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    if name.startswith(PREFIX + "."):
        name = name[len(PREFIX) + 1:]
    logger = logging.getLogger(f"{PREFIX}.{name}")

    root = logging.getLogger(PREFIX)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(level_from_env())
        root.propagate = False

    if level is not None:
        logger.setLevel(level)
    return logger


class _RequestAdapter(logging.LoggerAdapter):
    def process(self, msg, kwargs):
        return f"[{self.extra['request_id']}] {msg}", kwargs


@dataclass
class RequestContext:
    """Request-scoped data threaded through backend calls for log correlation."""
    request_id: str = field(default_factory=lambda: uuid.uuid4().hex[:16])
    logger_name: str = "request"

    @property
    def logger(self) -> logging.LoggerAdapter:
        return _RequestAdapter(get_logger(self.logger_name), {"request_id": self.request_id})


def context_logger(ctx: Optional[RequestContext], default: logging.Logger):
    if ctx is None:
        return default
    return ctx.logger
