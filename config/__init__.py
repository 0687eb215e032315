"""Top-level package for Django configuration.

This package holds the settings modules of the ShareIt core service and
of its edge gateway, the URL configurations of both, and the WSGI and ASGI
entry points.
"""
