"""Opt-in tracing of upstream API traffic (OEBB_LOG_REQUESTS=true)."""

import json
import logging
import os
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

_SENSITIVE_HEADERS = frozenset({"authorization", "cookie", "x-api-key"})
_BODY_PREVIEW_CHARS = 300


def should_log_requests() -> bool:
    """Check whether OEBB_LOG_REQUESTS is set to "true" (any case)."""
    return os.getenv("OEBB_LOG_REQUESTS", "").lower() == "true"


def _full_url(url: str, params: dict[str, Any] | None) -> str:
    if not params:
        return url
    query = urlencode(sorted(params.items()), safe=":")
    return f"{url}{'&' if '?' in url else '?'}{query}"


def _redact(headers: dict[str, str]) -> dict[str, str]:
    return {
        name: "***REDACTED***" if name.lower() in _SENSITIVE_HEADERS else value
        for name, value in headers.items()
    }


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log an outgoing request with its full query string.

    Args:
        method: HTTP method.
        url: Request URL without query string parameters from params.
        params: Query parameters, logged sorted by name.
        headers: Request headers; credentials are redacted.
    """
    if not should_log_requests():
        return

    lines = [f"{method} {_full_url(url, params)}"]
    if headers:
        lines.append(f"Headers: {json.dumps(_redact(headers), indent=2)}")
    logger.info("API Request:\n" + "\n".join(lines))


def log_api_response(url: str, status: int, body: str | None = None) -> None:
    """Log the status and a short body preview of an upstream response."""
    if not should_log_requests():
        return

    preview = (body or "")[:_BODY_PREVIEW_CHARS]
    logger.info(f"API Response: {status} from {url}" + (f"\n{preview}" if preview else ""))
