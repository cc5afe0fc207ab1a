"""Logging helpers for the screening service."""
from __future__ import annotations

import logging
import re
import time
from typing import Callable, Mapping

from fastapi import FastAPI, Request

_RE_EMAIL = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")
_RE_PHONE = re.compile(r"(\+?\d[\d\s().-]{8,}\d)")


def redact(text: str) -> str:
    text = _RE_EMAIL.sub("[REDACTED]", text)
    return _RE_PHONE.sub("[REDACTED]", text)


def _redact_value(value):
    return redact(value) if isinstance(value, str) else value


class PHIRedactor(logging.Filter):
    """Filter that redacts e-mail addresses and phone numbers from log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: D401
        if isinstance(record.msg, str):
            record.msg = redact(record.msg)
        if isinstance(record.args, Mapping):
            record.args = {key: _redact_value(value) for key, value in record.args.items()}
        elif record.args:
            args = record.args if isinstance(record.args, tuple) else (record.args,)
            record.args = tuple(_redact_value(arg) for arg in args)
        return True


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configure global logging handlers."""

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    redactor = PHIRedactor()
    logging.getLogger("uvicorn.access").addFilter(redactor)
    for handler in logging.getLogger().handlers:
        handler.addFilter(redactor)


async def timing_middleware(request: Request, call_next: Callable):
    """Log HTTP request duration."""

    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logging.getLogger("sleepscreen.request").info(
        "%s %s -> %s in %.2f ms", request.method, request.url.path, response.status_code, duration_ms
    )
    return response


def register_middleware(app: FastAPI) -> None:
    app.middleware("http")(timing_middleware)
