"""
With these settings, tests run faster.
"""

from .base import *  # noqa: F403
from .base import CACHES
from .base import env

# GENERAL
# ------------------------------------------------------------------------------
# https://docs.djangoproject.com/en/dev/ref/settings/#secret-key
SECRET_KEY = env(
    "DJANGO_SECRET_KEY",
    default="AlGzerkUv160WCFbKM8vn2qyFYWS5jX0AHND8TnRj55iqlMSPtJsUllwpba1oqOO",
)
# https://docs.djangoproject.com/en/dev/ref/settings/#test-runner
TEST_RUNNER = "django.test.runner.DiscoverRunner"

# CACHES
# ------------------------------------------------------------------------------
# Keep credentials in memory so tests never touch the user's token file.
CACHES["credentials"] = {
    "BACKEND": "django.core.cache.backends.locmem.LocMemCache",
    "LOCATION": "camping-test-credentials",
    "TIMEOUT": None,
}

# CAMPING SERVICE
# ------------------------------------------------------------------------------
CAMPING_API_BASE_URL = "http://camping.testserver"
CAMPING_SOCKETIO_URL = "http://camping.testserver"
CAMPING_API_TIMEOUT = 1.0
# HS256 keys shorter than the digest size trigger PyJWT warnings.
CAMPING_JWT_SIGNING_KEY = "camping-test-signing-key-0123456789abcdef"  # noqa: S105
