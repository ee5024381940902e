"""
Application settings loaded from environment variables (and a ``.env`` file).
"""
import os

from dotenv import load_dotenv

load_dotenv()

DEV_SECRET = "temporary_dev_secret"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Session settings
SESSION_SECRET = os.getenv("SESSION_SECRET", DEV_SECRET)
SESSION_SECURE = _env_flag("SESSION_SECURE")
SESSION_COOKIE_NAME = "__session"
SESSION_REMEMBER_SECONDS = 60 * 60 * 24 * 7  # 7 days
THEME_COOKIE_NAME = "theme"
THEME_MAX_AGE_SECONDS = 60 * 60 * 24 * 365
ALGORITHM = "HS256"

DEV_MODE = _env_flag("DEV_MODE")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

APP_NAME = "Notes Workbench"
APP_DESCRIPTION = "A notes demo app with server-rendered pages, themes and a small design system."

# Keys that may be exposed to the browser as window.ENV. Never add secrets here.
PUBLIC_ENV_KEYS = ("RECAPTCHA_ENABLED", "RECAPTCHA_SITE_KEY")


# PUBLIC_INTERFACE
def public_env() -> dict:
    """Whitelisted environment flags, read at call time."""
    env = {}
    for key in PUBLIC_ENV_KEYS:
        value = os.getenv(key)
        if key.endswith("_ENABLED"):
            env[key] = _env_flag(key)
        else:
            env[key] = value
    return env
