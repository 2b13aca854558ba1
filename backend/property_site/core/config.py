from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv


# Load backend/.env if it exists so local settings (e.g. DATABASE_URL, PORT)
# are available without exporting them in the shell first.
BASE_DIR = Path(__file__).resolve().parents[2]
env_path = BASE_DIR / ".env"
if env_path.exists():
    load_dotenv(env_path)


def _int_env(key: str, default: int) -> int:
    try:
        return int(os.getenv(key, str(default)))
    except Exception:
        return default


def _bool_env(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings:
    PROJECT_NAME = "Property Site API"
    API_V1_STR = "/api"

    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./contact.db")

    PUBLIC_DIR = os.getenv("PUBLIC_DIR", "./public")
    UPLOAD_DIR = os.getenv("UPLOAD_DIR", os.path.join(PUBLIC_DIR, "uploads"))
    UPLOAD_URL_PREFIX = os.getenv("UPLOAD_URL_PREFIX", "/uploads")
    ADMIN_REDIRECT_URL = os.getenv("ADMIN_REDIRECT_URL", "/admin.html")

    # Off by default: a listing whose insert fails still redirects and its
    # image stays on disk. When on, the image is removed and an error returned.
    CLEANUP_FAILED_UPLOADS = _bool_env("CLEANUP_FAILED_UPLOADS", False)

    _cors_origins = os.getenv("CORS_ORIGINS", "*")

    # If wildcard is present, treat as allow-all for local development
    if "*" in _cors_origins:
        CORS_ORIGINS = ["*"]
    else:
        CORS_ORIGINS = [o.strip() for o in _cors_origins.split(",") if o.strip()]

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = _int_env("PORT", 3000)


settings = Settings()
