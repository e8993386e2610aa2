"""
Settings read from environment variables when the app is created.

Unset variables fall back to the defaults below.
"""

import os
from typing import Any, Dict, Mapping, Optional
from urllib.parse import quote_plus

DEFAULTS = {
    "DB_HOST": "localhost",
    "DB_PORT": "3306",
    "DB_USER": "root",
    "DB_PASSWORD": "root",
    "DB_NAME": "todoapp",
    "DB_POOL_SIZE": "10",
    "DB_CREATE_SCHEMA": "false",
    "HOST": "127.0.0.1",
    "PORT": "5000",
    "LOG_LEVEL": "INFO",
    "TASKS_API_URL": "http://localhost:5000",
}


def _get(environ: Mapping[str, str], name: str) -> str:
    value = environ.get(name)
    if value is None or value.strip() == "":
        return DEFAULTS[name]
    return value.strip()


def _get_int(environ: Mapping[str, str], name: str) -> int:
    try:
        return int(_get(environ, name))
    except ValueError:
        return int(DEFAULTS[name])


def _get_bool(environ: Mapping[str, str], name: str) -> bool:
    return _get(environ, name).lower() in {"1", "true", "yes", "on"}


def database_url(environ: Optional[Mapping[str, str]] = None) -> str:
    """DATABASE_URL if set, else a MySQL URL built from the DB_* parts."""
    environ = os.environ if environ is None else environ
    url = environ.get("DATABASE_URL")
    if url and url.strip():
        return url.strip()
    user = quote_plus(_get(environ, "DB_USER"))
    password = quote_plus(_get(environ, "DB_PASSWORD"))
    host = _get(environ, "DB_HOST")
    port = _get_int(environ, "DB_PORT")
    name = _get(environ, "DB_NAME")
    return f"mysql+pymysql://{user}:{password}@{host}:{port}/{name}"


def from_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, Any]:
    """Build the Flask config mapping for the server."""
    environ = os.environ if environ is None else environ
    return {
        "SQLALCHEMY_DATABASE_URI": database_url(environ),
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "DB_POOL_SIZE": _get_int(environ, "DB_POOL_SIZE"),
        "CREATE_SCHEMA": _get_bool(environ, "DB_CREATE_SCHEMA"),
        "HOST": _get(environ, "HOST"),
        "PORT": _get_int(environ, "PORT"),
        "LOG_LEVEL": _get(environ, "LOG_LEVEL").upper(),
    }


def api_url(environ: Optional[Mapping[str, str]] = None) -> str:
    """Base URL the client side talks to."""
    environ = os.environ if environ is None else environ
    return _get(environ, "TASKS_API_URL").rstrip("/")
