"""Centralized environment configuration for the provisioning service"""
import os
from pathlib import Path
from dotenv import load_dotenv

ROOT_DIR = Path(__file__).parent.parent
load_dotenv(ROOT_DIR / '.env')

# Runtime environment
ENVIRONMENT: str = os.environ.get('ENVIRONMENT', 'development').lower()

# MongoDB
MONGO_URL: str = os.environ['MONGO_URL']
DB_NAME: str = os.environ['DB_NAME']

# Logging
LOG_LEVEL: str = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Boot-time template seeding
SEED_TEMPLATES_ON_STARTUP: bool = os.environ.get('SEED_TEMPLATES_ON_STARTUP', 'true').lower() in {"1", "true", "yes"}


def _default_cors() -> str:
    return 'http://localhost:3000,http://localhost:5173,http://localhost'

CORS_ORIGINS: list[str] = [origin.strip() for origin in os.environ.get('CORS_ORIGINS', _default_cors()).split(',') if origin.strip()]


def is_production() -> bool:
    return ENVIRONMENT in {"prod", "production"}


def validate_settings() -> None:
    """Fail fast for unusable or insecure runtime settings."""
    if not DB_NAME:
        raise RuntimeError("DB_NAME must be set")

    if not CORS_ORIGINS or '*' in CORS_ORIGINS:
        raise RuntimeError("CORS_ORIGINS must be explicit and cannot include '*'")

    if is_production() and ('localhost' in MONGO_URL or '127.0.0.1' in MONGO_URL):
        raise RuntimeError("In production, MONGO_URL cannot point at localhost")
