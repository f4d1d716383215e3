"""
Web application configuration.

Wartości z zmiennych środowiskowych (opcjonalnie z pliku .env).
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Web app configuration."""

    HOST = os.getenv("AKP_WEB_HOST", "127.0.0.1")
    PORT = int(os.getenv("AKP_WEB_PORT", "5000"))
    DEBUG = _flag("AKP_WEB_DEBUG", "false")

    # Adnotacja słowami kluczowymi przez Gemini (wyłączona → brak wywołań modelu)
    ANNOTATE = _flag("AKP_ANNOTATE", "true")

    # Limit rozmiaru uploadu PDF
    MAX_CONTENT_LENGTH = int(os.getenv("AKP_MAX_UPLOAD_MB", "50")) * 1024 * 1024
