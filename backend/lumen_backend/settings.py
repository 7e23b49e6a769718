"""Django settings for the lumen light service."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

from django.core.exceptions import ImproperlyConfigured
from django.core.management.utils import get_random_secret_key

BASE_DIR = Path(__file__).resolve().parent.parent

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off", ""}


def env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ImproperlyConfigured(f"Config validation error: {name} must be a boolean, got {raw!r}")


def env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ImproperlyConfigured(
            f"Config validation error: {name} must be a number, got {raw!r}"
        ) from None


def env_required(name: str) -> str:
    value = os.environ.get(name)
    if not value:
        raise ImproperlyConfigured(f'Config validation error: "{name}" is required')
    return value


# Core configuration
SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", get_random_secret_key())
DEBUG = env_bool("DJANGO_DEBUG", False)
ALLOWED_HOSTS: list[str] = os.environ.get("DJANGO_ALLOWED_HOSTS", "*").split(",")

# Light service
PORT = env_int("PORT", 3000)
BASIC_AUTH_USER = env_required("BASIC_AUTH_USER")
BASIC_AUTH_PASSWORD = env_required("BASIC_AUTH_PASSWORD")
LOGIN_REQUIRED = env_bool("LOGIN_REQUIRED", False)
LUMEN_RATE_LIMIT = os.environ.get("LUMEN_RATE_LIMIT", "100/15m")
LUMEN_LOG_LEVEL = os.environ.get("LUMEN_LOG_LEVEL", "INFO").upper()

# Applications
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "rest_framework",
    "drf_spectacular",
    "lights",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "lumen_backend.urls"
APPEND_SLASH = False

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
            ],
        },
    }
]

WSGI_APPLICATION = "lumen_backend.wsgi.application"
ASGI_APPLICATION = "lumen_backend.asgi.application"

# Light state lives in process memory; there is no database.
DATABASES: Dict[str, Dict[str, Any]] = {}

# Backs the per-IP rate limiter.
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "lumen-throttle",
    }
}

LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

STATIC_URL = "/static/"

# REST Framework
REST_FRAMEWORK = {
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "lights.authentication.SharedCredentialAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "lights.authentication.LoginRequiredPermission",
    ],
    "DEFAULT_THROTTLE_CLASSES": [
        "lights.throttling.ClientAddressRateThrottle",
    ],
    "DEFAULT_THROTTLE_RATES": {
        "client_address": LUMEN_RATE_LIMIT,
    },
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "DEFAULT_PARSER_CLASSES": [
        "rest_framework.parsers.JSONParser",
    ],
    "EXCEPTION_HANDLER": "lights.exceptions.light_exception_handler",
    "UNAUTHENTICATED_USER": None,
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Lumen Light Service API",
    "DESCRIPTION": "Control simulated lights, light groups and scheduled on/off actions.",
    "VERSION": "1.0.0",
    "SERVE_PERMISSIONS": [],
}

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "lights": {
            "handlers": ["console"],
            "level": LUMEN_LOG_LEVEL,
        },
    },
}
