import logging
import os

from dotenv import load_dotenv

load_dotenv()


def _parse_log_level(raw: str) -> int:
    level = logging.getLevelName((raw or "INFO").strip().upper())
    if not isinstance(level, int):
        raise RuntimeError(f"SERVICES_LOG_LEVEL has an unknown value: {raw!r}")
    return level


SERVICES_TRANSLATION_FILE = "services.json"

SERVICES_SOURCE_DIR = os.getenv("SERVICES_SOURCE_DIR", "services")
SERVICES_DIST_FILE = os.getenv("SERVICES_DIST_FILE", os.path.join("dist", "services.json"))
SERVICES_LOCALES_DIR = os.getenv("SERVICES_LOCALES_DIR", "locales")
SERVICES_BASE_LOCALE = os.getenv("SERVICES_BASE_LOCALE", "en")
SERVICES_I18N_FILE = os.getenv(
    "SERVICES_I18N_FILE", os.path.join("dist", "services_i18n.json")
)
SERVICES_LOG_DIR = os.getenv("SERVICES_LOG_DIR") or None
SERVICES_LOG_LEVEL = _parse_log_level(os.getenv("SERVICES_LOG_LEVEL", "INFO"))

if not SERVICES_BASE_LOCALE.strip():
    raise RuntimeError("SERVICES_BASE_LOCALE must not be empty")
