"""Item requests app package.

A user who cannot find an item publishes a request describing it; owners
answer by creating items that point back at the request.
"""
