import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY     = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")
    GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
    GEMINI_MODEL   = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    ADMIN_EMAIL    = os.getenv("ADMIN_EMAIL", "admin@moveo.com")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
    SEED_DEMO_DATA = _flag("SEED_DEMO_DATA", "true")
    LOG_LEVEL      = os.getenv("LOG_LEVEL", "INFO")


class TestingConfig(Config):
    TESTING        = True
    SECRET_KEY     = "testing"
    GEMINI_API_KEY = None
    ADMIN_EMAIL    = "admin@moveo.com"
    ADMIN_PASSWORD = "admin123"
    SEED_DEMO_DATA = False
