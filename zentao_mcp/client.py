"""
ZenTaoClient: the shared HTTP client every tool adapter calls.

Owns the authentication context (app code/key or a login session),
translates REST-style paths into ZenTao's ``index.php?m=<module>&f=<function>``
query convention, and exposes the four verbs the adapters use:
``get``, ``post``, ``put`` and ``delete``. Each returns the raw response
body as bytes or raises ZenTaoError.
"""

from __future__ import annotations

import hashlib
import json
import threading
import time
import urllib.parse
from dataclasses import dataclass

from zentao_mcp import api, config
from zentao_mcp.api import _log_event, _mask_token, _sanitize_url_for_log
from zentao_mcp.exceptions import SetupError, ZenTaoError

AUTH_NONE = "none"
AUTH_APP = "app"
AUTH_SESSION = "session"

_WRITE_METHODS = frozenset({"POST", "PUT", "DELETE"})

# Plural and singular resource names -> ZenTao module.
_RESOURCE_MODULES = {
    "products": "product",
    "product": "product",
    "projects": "project",
    "project": "project",
    "programs": "program",
    "program": "program",
    "executions": "execution",
    "execution": "execution",
    "stories": "story",
    "story": "story",
    "tasks": "task",
    "task": "task",
    "bugs": "bug",
    "bug": "bug",
    "testcases": "testcase",
    "testcase": "testcase",
    "productplans": "productplan",
    "productplan": "productplan",
    "plans": "productplan",
    "plan": "productplan",
    "builds": "build",
    "build": "build",
    "users": "user",
    "user": "user",
    "feedbacks": "feedback",
    "feedback": "feedback",
    "tickets": "ticket",
    "ticket": "ticket",
    "testtasks": "testtask",
    "testtask": "testtask",
    "releases": "release",
    "release": "release",
}

# Collection sub-resources: /<parent>/<id>/<sub> -> (module, parent query key).
_SUB_COLLECTIONS = {
    "executions": ("execution", "project"),
    "tasks": ("task", "execution"),
    "builds": ("build", "project"),
    "bugs": ("bug", "product"),
    "testcases": ("testcase", "product"),
    "plans": ("productplan", "product"),
    "testtasks": ("testtask", "project"),
}

# Sub-resources scoped by either a product or a project parent.
_SCOPED_SUB_COLLECTIONS = {"stories": "story", "releases": "release"}

# Action sub-resources: /<resource>/<id>/<action> -> ZenTao function.
_SUB_ACTIONS = {
    "linkstories": "linkstories",
    "unlinkstories": "unlinkstory",
    "linkbugs": "linkbug",
    "unlinkbugs": "unlinkbug",
    "assign": "assign",
    "close": "close",
    "change": "change",
}

_SINGLE_FUNCTIONS = {"GET": "view", "PUT": "edit", "DELETE": "delete", "POST": "create"}


@dataclass(frozen=True)
class Credentials:
    """App credentials; swapped as a whole so readers never see a half update."""

    code: str = ""
    key: str = ""

    @property
    def complete(self) -> bool:
        return bool(self.code and self.key)


def convert_rest_path(method: str, path: str) -> list[tuple[str, str]]:
    """Translate a request path into ordered ZenTao query pairs.

    ``/index.php?m=...`` paths pass through unchanged. REST paths map to a
    module/function pair plus identifying parameters, e.g.
    ``GET /products/3`` -> ``m=product&f=view&id=3`` and
    ``POST /products/3/bugs`` -> ``m=bug&f=create&product=3``.
    A query string on a REST path is carried over after the mapped pairs.
    """
    method = method.upper()
    raw_path, _, raw_query = path.lstrip("/").partition("?")
    extra = urllib.parse.parse_qsl(raw_query, keep_blank_values=True)

    if raw_path == "index.php":
        return extra

    parts = [p for p in raw_path.split("/") if p]
    if not parts:
        if extra:
            return extra
        raise ZenTaoError(f"empty request path: {path!r}")
    resource = parts[0]
    ident = parts[1] if len(parts) > 1 else ""
    sub = parts[2] if len(parts) > 2 else ""

    if resource == "tokens":
        return [("m", "tokens"), ("f", "create")] + extra

    module = _RESOURCE_MODULES.get(resource, resource)
    params: list[tuple[str, str]] = []

    if sub:
        collection_function = "create" if method == "POST" else "browse"
        if sub in _SUB_COLLECTIONS:
            module, parent_key = _SUB_COLLECTIONS[sub]
            function = collection_function
            params.append((parent_key, ident))
        elif sub in _SCOPED_SUB_COLLECTIONS:
            parent_key = "project" if module == "project" else "product"
            module = _SCOPED_SUB_COLLECTIONS[sub]
            function = collection_function
            params.append((parent_key, ident))
        else:
            function = _SUB_ACTIONS.get(sub.lower(), sub)
            params.append(("id", ident))
    elif ident:
        function = _SINGLE_FUNCTIONS.get(method, "view")
        if function != "create":
            params.append(("id", ident))
    else:
        function = "create" if method == "POST" else "browse"

    return [("m", module), ("f", function)] + params + extra


def _is_token_expired(raw: bytes) -> bool:
    """Detect ZenTao's "token expired" replies (errcode 405 or a token message)."""
    try:
        payload = json.loads(raw.decode("utf-8"))
    except (json.JSONDecodeError, UnicodeDecodeError):
        return False
    if not isinstance(payload, dict):
        return False
    errcode = payload.get("errcode")
    if isinstance(errcode, (int, float)) and not isinstance(errcode, bool) and errcode == 405:
        return True
    for field in ("errmsg", "message", "error"):
        msg = payload.get(field)
        if isinstance(msg, str):
            lowered = msg.lower()
            if "token" in lowered or "expired" in lowered:
                return True
    return False


class ZenTaoClient:
    """Thread-safe ZenTao API client shared by every tool handler.

    The authentication context is written by the login tools and read by
    every request. Credentials are held as an immutable snapshot behind a
    lock, so a concurrent login never leaks a mixed code/key pair into a
    request.
    """

    def __init__(self, base_url=None, code=None, key=None, auth_method=None):
        self.base_url = (base_url or config.BASE_URL).rstrip("/")
        self._lock = threading.Lock()
        self._token_lock = threading.Lock()
        self._credentials = Credentials(
            code=config.APP_CODE if code is None else code,
            key=config.APP_KEY if key is None else key,
        )
        self._auth_method = auth_method or config.AUTH_METHOD
        self._session_name = ""
        self._session_id = ""
        self._last_timestamp = 0
        self._cached_token = ""
        self._cached_timestamp = 0
        _log_event(
            "info",
            "client",
            "Creating ZenTao client",
            base_url=self.base_url,
            auth_method=self._auth_method,
            has_code=bool(self._credentials.code),
            has_key=bool(self._credentials.key),
        )

    # -- authentication context ---------------------------------------------

    @property
    def auth_method(self) -> str:
        return self._auth_method

    @property
    def credentials(self) -> Credentials:
        with self._lock:
            return self._credentials

    @property
    def code(self) -> str:
        return self.credentials.code

    @property
    def key(self) -> str:
        return self.credentials.key

    def set_app_credentials(self, code: str, key: str) -> None:
        """Install app credentials for every subsequent request."""
        _log_event(
            "info", "client", "Setting app credentials", has_code=bool(code), has_key=bool(key)
        )
        with self._lock:
            self._credentials = Credentials(code=code, key=key)
            self._auth_method = AUTH_APP
        self._force_token_refresh()

    def set_session_credentials(self, session_name: str, session_id: str) -> None:
        """Install a pre-established session (name/id pair)."""
        with self._lock:
            self._session_name = session_name
            self._session_id = session_id
            self._auth_method = AUTH_SESSION
        _log_event(
            "debug",
            "client",
            "Session credentials set",
            session_name=session_name,
            session_id_length=len(session_id),
        )

    def is_authenticated(self) -> bool:
        with self._lock:
            method = self._auth_method
            has_session = bool(self._session_name and self._session_id)
        if method == AUTH_APP:
            with self._token_lock:
                return bool(self._cached_token and self._cached_timestamp > 0)
        if method == AUTH_SESSION:
            return has_session
        return False

    def get_session_id(self) -> None:
        """Open a ZenTao session and remember its name/id pair."""
        raw = self._send("GET", "/index.php?m=api&f=getSessionID&t=json", None, auth=False)
        try:
            payload = json.loads(raw.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ZenTaoError(f"failed to parse session response: {e}") from e
        data = payload.get("data") if isinstance(payload, dict) else None
        # Older ZenTao releases return ``data`` as a JSON-encoded string.
        if isinstance(data, str):
            try:
                data = json.loads(data)
            except json.JSONDecodeError:
                data = None
        if not isinstance(data, dict):
            raise ZenTaoError("invalid session response format")
        session_name = data.get("sessionName")
        session_id = data.get("sessionID")
        if not isinstance(session_name, str) or not session_name:
            raise ZenTaoError("sessionName not found in response")
        if not isinstance(session_id, str) or not session_id:
            raise ZenTaoError("sessionID not found in response")
        with self._lock:
            self._session_name = session_name
            self._session_id = session_id
        _log_event(
            "info",
            "client",
            "Session obtained",
            session_name=session_name,
            session_id_length=len(session_id),
        )

    def login(self, account: str, password: str) -> None:
        """Authenticate the current session with a user account."""
        with self._lock:
            has_session = bool(self._session_name and self._session_id)
        if not has_session:
            raise SetupError("session not initialized, call get_session_id first")
        raw = self._send(
            "POST",
            "/index.php?m=user&f=login",
            {"account": account, "password": password},
            auth=True,
            method_override=AUTH_SESSION,
        )
        try:
            payload = json.loads(raw.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ZenTaoError(f"failed to parse login response: {e}") from e
        status = payload.get("status") if isinstance(payload, dict) else None
        if status != "success":
            detail = api._sanitize_error(raw.decode("utf-8", "replace"))
            raise ZenTaoError(f"login failed: {detail}")
        with self._lock:
            self._auth_method = AUTH_SESSION
        _log_event("info", "client", "Login successful", account=account)

    # -- app token handling -------------------------------------------------

    def _next_timestamp(self) -> int:
        """Unix time, bumped so two tokens never share a timestamp."""
        now = int(time.time())
        if now <= self._last_timestamp:
            _log_event(
                "warn",
                "client",
                "Timestamp collision detected, incrementing",
                original=now,
                last=self._last_timestamp,
            )
            now = self._last_timestamp + 1
        self._last_timestamp = now
        return now

    @staticmethod
    def generate_token(code: str, key: str, timestamp: int) -> str:
        """ZenTao app token: md5(code + key + timestamp)."""
        return hashlib.md5(f"{code}{key}{timestamp}".encode()).hexdigest()

    def _current_token(self, creds: Credentials) -> tuple[str, int]:
        with self._token_lock:
            now = int(time.time())
            if self._cached_token and now - self._cached_timestamp < config.TOKEN_CACHE_SECONDS:
                return self._cached_token, self._cached_timestamp
            timestamp = self._next_timestamp()
            token = self.generate_token(creds.code, creds.key, timestamp)
            self._cached_token = token
            self._cached_timestamp = timestamp
            _log_event("debug", "client", "Generated app token", token=_mask_token(token))
            return token, timestamp

    def _force_token_refresh(self) -> None:
        with self._token_lock:
            self._cached_token = ""
            self._cached_timestamp = 0

    def _token_close_to_expiry(self) -> bool:
        with self._token_lock:
            if not self._cached_token:
                return True
            age = int(time.time()) - self._cached_timestamp
            return age > config.TOKEN_CACHE_SECONDS * 0.8

    # -- URL building -------------------------------------------------------

    def _auth_pairs(self, method_override=None) -> tuple[list[tuple[str, str]], tuple[str, ...]]:
        """Return (auth query pairs, secret keys to mask in logs)."""
        with self._lock:
            method = method_override or self._auth_method
            creds = self._credentials
            session_name, session_id = self._session_name, self._session_id
        if method == AUTH_APP and creds.complete:
            token, timestamp = self._current_token(creds)
            return [("code", creds.code), ("time", str(timestamp)), ("token", token)], ()
        if method == AUTH_SESSION and session_name and session_id:
            return [(session_name, session_id)], (session_name,)
        return [], ()

    def build_url(self, method: str, path: str, auth=True, method_override=None):
        """Return (url, url safe for logging) for a request path."""
        pairs = convert_rest_path(method, path)
        if not any(k == "t" for k, _ in pairs):
            pairs.append(("t", "json"))
        secret_keys: tuple[str, ...] = ()
        if auth:
            auth_pairs, secret_keys = self._auth_pairs(method_override)
            pairs.extend(auth_pairs)
        url = f"{self.base_url}/index.php?{urllib.parse.urlencode(pairs)}"
        return url, _sanitize_url_for_log(url, secret_keys)

    # -- requests -----------------------------------------------------------

    def _send(self, method, path, body, auth=True, method_override=None) -> bytes:
        url, safe_url = self.build_url(method, path, auth=auth, method_override=method_override)
        _log_event("info", "client", "Sending request", method=method, url=safe_url)
        return api.request(url, body, method=method, idempotent=method == "GET", log_url=safe_url)

    def request(self, method: str, path: str, body=None) -> bytes:
        """Send one logical request, refreshing the app token if ZenTao rejects it."""
        method = method.upper()
        if method in _WRITE_METHODS or self._token_close_to_expiry():
            self._force_token_refresh()
        for attempt in range(config.TOKEN_MAX_ATTEMPTS):
            if attempt > 0:
                _log_event(
                    "info",
                    "client",
                    "Retrying request with a fresh token",
                    attempt=attempt,
                    method=method,
                    path=path,
                )
                self._force_token_refresh()
                time.sleep(config.HTTP_RETRY_DELAY_SECONDS)
            raw = self._send(method, path, body)
            if not _is_token_expired(raw):
                return raw
            _log_event("warn", "client", "Token expired", attempt=attempt + 1, method=method)
        raise ZenTaoError(f"token expired after {config.TOKEN_MAX_ATTEMPTS} attempts")

    def get(self, path: str) -> bytes:
        return self.request("GET", path)

    def post(self, path: str, body=None) -> bytes:
        return self.request("POST", path, body)

    def put(self, path: str, body=None) -> bytes:
        return self.request("PUT", path, body)

    def delete(self, path: str) -> bytes:
        return self.request("DELETE", path)
