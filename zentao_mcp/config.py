"""
zentao-mcp shared configuration, constants, and module-level state.
Imports nothing from the rest of the package.

Values come from a project-local .env file; ZENTAO_* variables in the
process environment take precedence over it.
"""

import os
import tempfile

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.environ.get("ZENTAO_ENV_FILE") or os.path.join(_PROJECT_ROOT, ".env")


def load_env():
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key, val in os.environ.items():
        if key.startswith("ZENTAO_"):
            env[key] = val
    return env


def save_env_value(key, value):
    """Update or add a key in the .env file (atomic write-then-rename)."""
    lines = []
    found = False
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            lines = f.readlines()
    for i, line in enumerate(lines):
        if line.strip().startswith(f"{key}="):
            lines[i] = f"{key}={value}\n"
            found = True
            break
    if not found:
        lines.append(f"{key}={value}\n")
    env_dir = os.path.dirname(ENV_PATH) or "."
    fd, tmp_path = tempfile.mkstemp(dir=env_dir, prefix=".env_tmp_")
    try:
        with os.fdopen(fd, "w") as f:
            f.writelines(lines)
        os.replace(tmp_path, ENV_PATH)
    except Exception:
        try:
            os.remove(tmp_path)
        except OSError:
            pass
        raise
    # Restrict to owner-only on Unix/Mac. No-op on Windows.
    try:
        os.chmod(ENV_PATH, 0o600)
    except (OSError, NotImplementedError):
        pass


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(key, default):
    """Parse float env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _env_choice(key, choices, default):
    """Parse an env value restricted to a fixed set (case-insensitive)."""
    raw = (env.get(key) or "").strip().lower()
    return raw if raw in choices else default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "1.0.0"
SERVER_NAME = "zentao"

AUTH_METHODS = ("none", "app", "session")
LOG_LEVELS = ("debug", "info", "warn", "error")

DEFAULT_BASE_URL = "http://localhost:8080"

# ZenTao app tokens are valid for 30 seconds; reuse one for half of that.
TOKEN_CACHE_SECONDS = 15

# Attempts per request when ZenTao reports an expired token.
TOKEN_MAX_ATTEMPTS = 3

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env / environment)
# ---------------------------------------------------------------------------

env = load_env()

BASE_URL = (env.get("ZENTAO_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
AUTH_METHOD = _env_choice("ZENTAO_AUTH_METHOD", AUTH_METHODS, "app")
APP_CODE = env.get("ZENTAO_APP_CODE", "")
APP_KEY = env.get("ZENTAO_APP_KEY", "")
HTTP_TIMEOUT_SECONDS = _env_int("ZENTAO_HTTP_TIMEOUT_SECONDS", 30)
HTTP_MAX_RETRIES = _env_int("ZENTAO_HTTP_MAX_RETRIES", 2)
HTTP_RETRY_DELAY_SECONDS = _env_float("ZENTAO_HTTP_RETRY_DELAY_SECONDS", 0.1)
HTTP_MAX_RESPONSE_BYTES = _env_int("ZENTAO_HTTP_MAX_RESPONSE_BYTES", 10_000_000)
LOG_LEVEL = _env_choice("ZENTAO_LOG_LEVEL", LOG_LEVELS, "info")
LOG_JSON = _env_bool("ZENTAO_LOG_JSON", False)
