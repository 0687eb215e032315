"""
Shared Kernel

Building blocks shared by every ShareIt app: typed domain errors, domain
events, the unit of work, and the HTTP glue (caller identity, pagination,
error envelope, request logging).
"""
