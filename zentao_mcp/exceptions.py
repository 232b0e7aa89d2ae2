"""
zentao-mcp exception hierarchy.

All custom exceptions live here to avoid circular imports.
"""


class ZenTaoError(Exception):
    """Exit code 1: transport, backend, parse and validation errors."""

    exit_code = 1


class SetupError(ZenTaoError):
    """Exit code 2: missing credentials or unusable configuration."""

    exit_code = 2


class ArgumentError(ZenTaoError):
    """A tool was invoked without a required argument, or with the wrong type."""


class HTTPError(Exception):
    """Raised by _http_request for HTTP errors that callers want to handle."""

    def __init__(self, code, reason, body, headers=None):
        super().__init__(f"HTTP {code}: {reason}")
        self.code = code
        self.reason = reason
        self.body = body
        self.headers = headers or {}
