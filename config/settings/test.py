"""Settings used by the test suite."""

from .base import *  # noqa: F401,F403

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

INSTALLED_APPS = [*INSTALLED_APPS, 'apps.gateway']  # noqa: F405

SHAREIT_BOOKING_OVERLAP_POLICY = 'permissive'
SHAREIT_SERVER_URL = 'http://shareit-server.test'
SHAREIT_GATEWAY_TIMEOUT = 5

PASSWORD_HASHERS = ['django.contrib.auth.hashers.MD5PasswordHasher']

LOGGING["root"]["level"] = "CRITICAL"  # noqa: F405
LOGGING["loggers"]["apps"]["level"] = "CRITICAL"  # noqa: F405
LOGGING["loggers"]["shared"]["level"] = "CRITICAL"  # noqa: F405
LOGGING["loggers"]["django"]["level"] = "CRITICAL"  # noqa: F405
