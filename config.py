import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default=None):
    """Environment variables win over env.yaml values."""
    value = os.environ.get(key)
    if value is not None:
        return value
    return data.get(key, default)


def _get_list(key, default):
    value = _get(key, default)
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    return value


def _get_bool(key, default):
    value = _get(key, default)
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./waitlist.db")
    STORE_BACKEND = _get("STORE_BACKEND", "sql")
    NOTION_API_KEY = _get("NOTION_API_KEY", "")
    NOTION_DATABASE_ID = _get("NOTION_DATABASE_ID", "")
    NOTION_API_BASE = _get("NOTION_API_BASE", "https://api.notion.com/v1")
    NOTION_API_VERSION = _get("NOTION_API_VERSION", "2022-06-28")
    RESEND_API_KEY = _get("RESEND_API_KEY", "")
    RESEND_API_BASE = _get("RESEND_API_BASE", "https://api.resend.com")
    MAIL_FROM = _get("MAIL_FROM", "")
    APP_NAME = _get("APP_NAME", "Waitlist")
    API_PREFIX = _get("API_PREFIX", "/api")
    API_PORT = int(_get("API_PORT", 8000))
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _get_list("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = _get_bool("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = _get_bool("ENABLE_LOGGING_MIDDLEWARE", 1)
    HTTP_TIMEOUT = float(_get("HTTP_TIMEOUT", 10.0))
    WAITLIST_API_URL = _get("WAITLIST_API_URL", "http://localhost:8000/api")
