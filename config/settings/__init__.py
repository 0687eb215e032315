"""Settings package for the ShareIt project.

This package exposes multiple environment‑specific settings modules. The
`base.py` contains common configuration of the core service. The `dev.py`,
`prod.py` and `test.py` modules extend it with environment specific
overrides, while `gateway.py` configures the stateless edge gateway.
"""
