"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes", "on"}


class Config:
    # Server
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "3000"))
    DEBUG = _env_flag("DEBUG")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] [user=%(user)s] %(name)s: %(message)s",
    )

    # Persistence: "prisma" (PostgreSQL through the Prisma client) or "memory"
    PERSISTENCE_BACKEND = os.getenv("PERSISTENCE_BACKEND", "prisma").lower()

    # Media uploads
    UPLOAD_DIR = os.getenv("UPLOAD_DIR", "webui/public/uploads")
    UPLOADS_URL_PREFIX = os.getenv("UPLOADS_URL_PREFIX", "/uploads/")
    DEFAULT_PROFILE_PHOTO = os.getenv("DEFAULT_PROFILE_PHOTO", "/default-profile.png")
    MAX_UPLOAD_MB = float(os.getenv("MAX_UPLOAD_MB", "10"))

    # Messaging
    FORWARD_BY_NAME_MARKER = os.getenv("FORWARD_BY_NAME_MARKER", "new")
    # Off by default: deleting a message historically never checked the sender.
    ENFORCE_MESSAGE_OWNERSHIP = _env_flag("ENFORCE_MESSAGE_OWNERSHIP")
