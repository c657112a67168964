"""
Django settings for the routes backend.

Everything deployment specific comes from the environment (or a .env file).
OSRM and fan-out tunables are read by routing.policy / routing.osrm_client,
not here.
"""

import os

from dotenv import load_dotenv

load_dotenv()

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "dev-only-insecure-key")

DEBUG = os.getenv("DJANGO_DEBUG", "false").lower() in ("1", "true", "yes")

ALLOWED_HOSTS = os.getenv("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1,testserver").split(",")

INSTALLED_APPS = [
    # no tables are ever created, these only satisfy imports inside DRF
    "django.contrib.contenttypes",
    "django.contrib.auth",
    "rest_framework",
    "backend.routes",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "backend.routes_backend.urls"

WSGI_APPLICATION = "backend.routes_backend.wsgi.application"

# No persistence, the routes endpoint never touches a database.
DATABASES = {}

USE_TZ = True

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
}

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "simple": {
            "format": "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "routing": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
        },
        "backend": {
            "handlers": ["console"],
            "level": LOG_LEVEL,
        },
    },
}
