"""
HTTP request layer, event logging, and security helpers for zentao-mcp.
"""

import json
import re
import sys
import time
import urllib.error
import urllib.parse
import urllib.request
from datetime import datetime, timezone

from zentao_mcp import config
from zentao_mcp.exceptions import HTTPError, ZenTaoError

_RETRYABLE_HTTP_CODES = frozenset({429, 502, 503, 504})

_LEVEL_ORDER = {"debug": 0, "info": 1, "warn": 2, "error": 3}

_SECRET_QUERY_KEYS = frozenset({"token", "key", "password", "zentaosid"})


# ---------------------------------------------------------------------------
# Event logging (stderr only; stdout carries the MCP stdio transport)
# ---------------------------------------------------------------------------


def _log_enabled(level):
    threshold = _LEVEL_ORDER.get(config.LOG_LEVEL, 1)
    return _LEVEL_ORDER.get(level, 1) >= threshold


def _log_event(level, component, message, **fields):
    """Emit one structured log line to stderr when the level is enabled."""
    if not _log_enabled(level):
        return
    if config.LOG_JSON:
        entry = {
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ"),
            "level": level.upper(),
            "component": component,
            "message": message,
        }
        if fields:
            entry["fields"] = fields
        print(json.dumps(entry, ensure_ascii=False, default=str), file=sys.stderr)
        return
    line = f"[{level.upper()}] {component}: {message}"
    if fields:
        line += " [" + ", ".join(f"{k}={v}" for k, v in sorted(fields.items())) + "]"
    print(line, file=sys.stderr)


# ---------------------------------------------------------------------------
# Security helpers
# ---------------------------------------------------------------------------


def _mask_token(token):
    """Show only first 8 chars of a token for safe logging."""
    return token[:8] + "..." if len(token) > 8 else token


def _sanitize_error(body, max_len=500):
    """Truncate and clean error body for safe display."""
    if not body:
        return ""
    cleaned = re.sub(r"<[^>]+>", "", body)
    cleaned = re.sub(r"\s+", " ", cleaned).strip()
    if len(cleaned) > max_len:
        return cleaned[:max_len] + "... [truncated]"
    return cleaned


def _sanitize_url_for_log(url, secret_keys=()):
    """Mask credential query params in URLs before logging."""
    parsed = urllib.parse.urlsplit(url)
    if not parsed.query:
        return url
    hidden = _SECRET_QUERY_KEYS | {k.lower() for k in secret_keys}
    pairs = urllib.parse.parse_qsl(parsed.query, keep_blank_values=True)
    masked = []
    for key, value in pairs:
        if key.lower() in hidden:
            masked.append((key, "***"))
        else:
            masked.append((key, value))
    safe_query = urllib.parse.urlencode(masked, doseq=True)
    return urllib.parse.urlunsplit(
        (parsed.scheme, parsed.netloc, parsed.path, safe_query, parsed.fragment)
    )


def _error_envelope(message, status=None, retryable=None, detail=None):
    """Build a consistent, human-readable HTTP error message."""
    meta = []
    if status is not None:
        meta.append(f"status={status}")
    if retryable is not None:
        meta.append(f"retryable={'yes' if retryable else 'no'}")
    suffix = f" ({', '.join(meta)})" if meta else ""
    body = f"{message}{suffix}"
    if detail:
        body += f": {detail}"
    return body


def _parse_retry_after(headers):
    """Return Retry-After seconds from response headers, or None."""
    if not headers:
        return None
    value = headers.get("Retry-After")
    if value is None:
        return None
    try:
        secs = int(str(value).strip())
    except ValueError:
        return None
    return max(0, secs)


# ---------------------------------------------------------------------------
# HTTP request layer
# ---------------------------------------------------------------------------


def _http_request(url, data=None, headers=None, method="GET", idempotent=False, log_url=None):
    """Make one HTTP exchange with standard error handling.
    Returns the raw response body (bytes) on success.
    Raises HTTPError for HTTP errors (caller handles specific codes).
    Raises ZenTaoError for network, timeout and size errors."""
    body = json.dumps(data).encode("utf-8") if data is not None else None
    request_headers = {"Content-Type": "application/json"}
    request_headers.update(headers or {})
    safe_url = log_url or _sanitize_url_for_log(url)
    max_attempts = 1 + max(0, config.HTTP_MAX_RETRIES if idempotent else 0)
    timeout = max(1, config.HTTP_TIMEOUT_SECONDS)
    last_error = None

    for attempt in range(max_attempts):
        start = time.perf_counter()
        req = urllib.request.Request(url, data=body, headers=request_headers, method=method)
        _log_event(
            "debug",
            "http",
            "Making HTTP request",
            method=method,
            url=safe_url,
            attempt=attempt + 1,
            max_attempts=max_attempts,
            body_bytes=len(body) if body else 0,
        )
        try:
            with urllib.request.urlopen(req, timeout=timeout) as resp:
                raw = resp.read(config.HTTP_MAX_RESPONSE_BYTES + 1)
                if len(raw) > config.HTTP_MAX_RESPONSE_BYTES:
                    raise ZenTaoError(
                        "Response too large from ZenTao API "
                        f"(>{config.HTTP_MAX_RESPONSE_BYTES} bytes)."
                    )
                _log_event(
                    "debug",
                    "http",
                    "Received HTTP response",
                    method=method,
                    url=safe_url,
                    status=getattr(resp, "status", 200),
                    bytes=len(raw),
                    latency_ms=round((time.perf_counter() - start) * 1000, 2),
                )
                return raw
        except urllib.error.HTTPError as e:
            error_body = (
                e.read(config.HTTP_MAX_RESPONSE_BYTES).decode("utf-8", errors="replace")
                if e.fp
                else ""
            )
            retryable = e.code in _RETRYABLE_HTTP_CODES
            can_retry = idempotent and attempt < max_attempts - 1 and retryable
            _log_event(
                "warn",
                "http",
                "HTTP error response",
                method=method,
                url=safe_url,
                status=e.code,
                will_retry=can_retry,
            )
            if can_retry:
                retry_after = _parse_retry_after(getattr(e, "headers", None))
                if retry_after is None:
                    retry_after = config.HTTP_RETRY_DELAY_SECONDS * (2**attempt)
                time.sleep(retry_after)
                continue
            raise HTTPError(e.code, e.reason, error_body, headers=e.headers) from e
        except TimeoutError as e:
            last_error = f"Request timed out after {timeout} seconds. Is ZenTao reachable?"
            _log_event("warn", "http", "Request timed out", method=method, url=safe_url)
            if idempotent and attempt < max_attempts - 1:
                time.sleep(config.HTTP_RETRY_DELAY_SECONDS * (2**attempt))
                continue
            raise ZenTaoError(_error_envelope(last_error, retryable=False)) from e
        except urllib.error.URLError as e:
            last_error = f"Connection failed: {e.reason}"
            _log_event(
                "warn", "http", "Connection failed", method=method, url=safe_url, error=e.reason
            )
            if idempotent and attempt < max_attempts - 1:
                time.sleep(config.HTTP_RETRY_DELAY_SECONDS * (2**attempt))
                continue
            raise ZenTaoError(_error_envelope(last_error, retryable=False)) from e

    raise ZenTaoError(_error_envelope(last_error or "Request failed."))


def request(url, data=None, method="GET", idempotent=False, log_url=None):
    """Make a request and convert HTTP failures into ZenTaoError."""
    try:
        return _http_request(url, data, method=method, idempotent=idempotent, log_url=log_url)
    except HTTPError as e:
        raise ZenTaoError(
            _error_envelope(
                f"HTTP {e.code}: {e.reason}",
                status=e.code,
                retryable=e.code in _RETRYABLE_HTTP_CODES,
                detail=_sanitize_error(e.body),
            )
        ) from e
