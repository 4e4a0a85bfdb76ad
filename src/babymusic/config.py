"""Configuration and environment settings."""

import os
from dotenv import load_dotenv

# Force reload of environment variables
load_dotenv(override=True)

# Directory Settings
DATA_DIR = os.getenv("BABYMUSIC_DATA_DIR", "data")

# Database Settings
DATABASE_URL = os.getenv(
    "BABYMUSIC_DATABASE_URL", "sqlite:///" + os.path.join(DATA_DIR, "music_urls.db")
)
DB_TIMEOUT = float(os.getenv("BABYMUSIC_DB_TIMEOUT", "5"))

# Server Settings
HOST = os.getenv("BABYMUSIC_HOST", "0.0.0.0")
PORT = int(os.getenv("BABYMUSIC_PORT", "3001"))
API_PREFIX = "/api"

# Loopback and private network origins only
ALLOWED_ORIGIN_REGEX = (
    r"^https?://("
    r"localhost"
    r"|127\.\d{1,3}\.\d{1,3}\.\d{1,3}"
    r"|\[::1\]"
    r"|10\.\d{1,3}\.\d{1,3}\.\d{1,3}"
    r"|172\.(1[6-9]|2\d|3[01])\.\d{1,3}\.\d{1,3}"
    r"|192\.168\.\d{1,3}\.\d{1,3}"
    r")(:\d+)?$"
)
