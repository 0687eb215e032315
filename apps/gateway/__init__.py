"""Gateway app package.

The edge tier of ShareIt: validates incoming requests and forwards them,
caller header included, to the core service. Downstream responses are
relayed unchanged. Run it with ``config.settings.gateway``.
"""
