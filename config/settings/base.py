# ruff: noqa: ERA001, E501
"""Base settings to build other settings files upon."""

from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve(strict=True).parent.parent.parent
# camping/
APPS_DIR = BASE_DIR / "camping"
env = environ.Env()

READ_DOT_ENV_FILE = env.bool("DJANGO_READ_DOT_ENV_FILE", default=False)
if READ_DOT_ENV_FILE:
    # OS environment variables take precedence over variables from .env
    env.read_env(str(BASE_DIR / ".env"))

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#debug
DEBUG = env.bool("DJANGO_DEBUG", False)
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="kQ0Xq2c8Vb7nT1sYw4eLr9uZp3mJh6aDf5gKx2NvB8oCi1tRy7WqE4lUs0zPj9Hd",
)
# Local time zone. Choices are
# http://en.wikipedia.org/wiki/List_of_tz_zones_by_name
TIME_ZONE = "UTC"
# https://docs.djangoproject.com/en/dev/ref/settings/#language-code
LANGUAGE_CODE = "en-us"
# https://docs.djangoproject.com/en/dev/ref/settings/#use-i18n
USE_I18N = True
# https://docs.djangoproject.com/en/dev/ref/settings/#use-tz
USE_TZ = True

# APPS
# ------------------------------------------------------------------------------
# Nothing is stored in a database; Django falls back to its dummy backend.
# auth and contenttypes stay installed because simplejwt imports the auth
# models when its token backend is loaded.
DJANGO_APPS = [
    "django.contrib.contenttypes",
    "django.contrib.auth",
]
THIRD_PARTY_APPS = [
    "rest_framework",
]
LOCAL_APPS = [
    "camping.users",
    "camping.notifications",
    "camping.search",
]
# https://docs.djangoproject.com/en/dev/ref/settings/#installed-apps
INSTALLED_APPS = DJANGO_APPS + THIRD_PARTY_APPS + LOCAL_APPS

# CACHES
# ------------------------------------------------------------------------------
# The "credentials" alias is the persisted key/value store holding the session
# token between command invocations.
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
        "LOCATION": "",
    },
    "credentials": {
        "BACKEND": "django.core.cache.backends.filebased.FileBasedCache",
        "LOCATION": env(
            "CAMPING_CREDENTIALS_DIR",
            default=str(Path.home() / ".camping" / "credentials"),
        ),
        # Tokens are invalidated by the remote service, never by the cache.
        "TIMEOUT": None,
    },
}

# LOGGING
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#logging
# See https://docs.djangoproject.com/en/dev/topics/logging for
# more details on how to customize your logging configuration.
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(levelname)s %(asctime)s %(module)s %(process)d %(thread)d %(message)s",
        },
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "root": {"level": env("DJANGO_LOG_LEVEL", default="INFO"), "handlers": ["console"]},
    "loggers": {
        "socketio": {"level": "WARNING"},
        "engineio": {"level": "WARNING"},
    },
}

# CAMPING SERVICE
# ------------------------------------------------------------------------------
CAMPING_API_BASE_URL = env("CAMPING_API_BASE_URL", default="http://192.168.10.20:5000")
CAMPING_API_TIMEOUT = env.float("CAMPING_API_TIMEOUT", default=10.0)

# Realtime channel (python-socketio client)
CAMPING_SOCKETIO_URL = env("CAMPING_SOCKETIO_URL", default=CAMPING_API_BASE_URL)
CAMPING_SOCKETIO_RECONNECTION_ATTEMPTS = env.int(
    "CAMPING_SOCKETIO_RECONNECTION_ATTEMPTS",
    default=5,
)
CAMPING_SOCKETIO_TIMEOUT = env.float("CAMPING_SOCKETIO_TIMEOUT", default=5.0)

# Session tokens are HS256 JWTs signed by the camping service.
CAMPING_JWT_SIGNING_KEY = env("CAMPING_JWT_SIGNING_KEY", default="mySuperSecretPrivateKey")
CAMPING_CREDENTIALS_CACHE = "credentials"

CAMPING_DEFAULT_PROFILE_IMAGE = env(
    "CAMPING_DEFAULT_PROFILE_IMAGE",
    default="https://encrypted-tbn0.gstatic.com/images?q=tbn:ANd9GcSRuRip5LBOHjlx6SIMhLsGHLxpw_wUUXG8Z0sz9YUBaP9PstT_BmRY1CGaFBqqDeFAX9w&usqp=CAU",
)
