# backend/config.py
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

ANTHROPIC_API_URL = os.getenv("ANTHROPIC_API_URL", "https://api.anthropic.com/v1/messages")
MODEL_NAME = os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-20250514")
MAX_TOKENS = int(os.getenv("ANTHROPIC_MAX_TOKENS", "2000"))
ANTHROPIC_VERSION = os.getenv("ANTHROPIC_VERSION", "2023-06-01")
# Optional: without a key the request goes out bare (e.g. behind an auth proxy)
ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")


def _timeout() -> Optional[float]:
    raw = os.getenv("REVIEW_REQUEST_TIMEOUT")
    return float(raw) if raw else None


# None means wait as long as the model takes
REQUEST_TIMEOUT = _timeout()

SERVICE_HOST = os.getenv("SERVICE_HOST", "0.0.0.0")
SERVICE_PORT = int(os.getenv("SERVICE_PORT", "8000"))
