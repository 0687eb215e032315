"""WSGI config for the ShareIt project.

This module exposes the WSGI application for use by Django's runserver and
production WSGI servers. Point ``DJANGO_SETTINGS_MODULE`` at
``config.settings.gateway`` to serve the edge gateway instead of the core
service.
"""

import os
from django.core.wsgi import get_wsgi_application  # type: ignore

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings.dev')

application = get_wsgi_application()
