"""Settings for the ShareIt edge gateway.

The gateway is stateless: it validates requests and forwards them to the
core service at ``SHAREIT_SERVER_URL``. It shares the logging and error
envelope configuration with the core service but has no database apps.
"""

from .base import *  # noqa: F401,F403

INSTALLED_APPS = [
    'django.contrib.contenttypes',
    'django.contrib.auth',
    'rest_framework',
    'corsheaders',
    'drf_spectacular',
    'apps.gateway',
]

MIDDLEWARE = [
    'django.middleware.security.SecurityMiddleware',
    'corsheaders.middleware.CorsMiddleware',
    'shared.infrastructure.middleware.RequestContextMiddleware',
    'django.middleware.common.CommonMiddleware',
]

ROOT_URLCONF = 'config.gateway_urls'

WSGI_APPLICATION = 'config.wsgi.application'

DATABASES = {}

REST_FRAMEWORK = {
    **REST_FRAMEWORK,  # noqa: F405
    'DEFAULT_FILTER_BACKENDS': [],
}

SHAREIT_SERVER_URL = get_env('SHAREIT_SERVER_URL', 'http://localhost:9090')  # noqa: F405
SHAREIT_GATEWAY_TIMEOUT = float(get_env('SHAREIT_GATEWAY_TIMEOUT', '10'))  # noqa: F405
