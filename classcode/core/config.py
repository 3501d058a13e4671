"""
Configuration settings for the application
"""
import os
import string
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


def _get_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Question code generation
CODE_LENGTH = int(os.getenv("CODE_LENGTH", "6"))
CODE_ALPHABET = os.getenv("CODE_ALPHABET", string.ascii_uppercase + string.digits)
CODE_MAX_ATTEMPTS = int(os.getenv("CODE_MAX_ATTEMPTS", "1000"))
MAX_CODE_LENGTH = int(os.getenv("MAX_CODE_LENGTH", "32"))

# Preload the MATH01 / SCI02 sample questions on startup
SEED_SAMPLE_QUESTIONS = _get_bool("SEED_SAMPLE_QUESTIONS", True)

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"
