"""Settings read from the environment at process start."""

import os
from datetime import timedelta

SECRET_KEY = os.getenv("MARKETPLACE_SECRET_KEY", "dev-only-secret-key")
TOKEN_ALGORITHM = "HS256"
TOKEN_LIFETIME = timedelta(days=1)

MEDIA_ROOT = os.getenv("MARKETPLACE_MEDIA_ROOT", "media")
MEDIA_URL = os.getenv("MARKETPLACE_MEDIA_URL", "/media").rstrip("/")

CORS_ORIGINS = [origin.strip() for origin in os.getenv("MARKETPLACE_CORS_ORIGINS", "*").split(",") if origin.strip()]
