"""
asyncevents – Django Settings (Test Project Only)
===================================================
Django serves as the host container when asyncevents runs inside a
project. The library itself reads only ASYNC_EVENTS.

No database: asyncevents is in-memory.
"""

from pathlib import Path

# ── Paths ─────────────────────────────────────────────────────
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Security ──────────────────────────────────────────────────
SECRET_KEY = "asyncevents-test-key"

DEBUG = True

ALLOWED_HOSTS = []

# ── Installed Apps ────────────────────────────────────────────
INSTALLED_APPS = [
    "asyncevents",
]

DATABASES = {}

# ── Dispatch ──────────────────────────────────────────────────
ASYNC_EVENTS = {
    "DEFAULT_POLICY": "PROPAGATE_FIRST_FAILURE",
    "SWALLOWED_FAILURE_LOG_LEVEL": "ERROR",
}

# ── Logging ───────────────────────────────────────────────────
# Library loggers propagate to root; pytest's caplog captures them.
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "loggers": {
        "asyncevents": {"level": "DEBUG"},
    },
}

# ── Internationalization ──────────────────────────────────────
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = False
USE_TZ = True
