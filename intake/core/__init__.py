"""
Core utilities shared across the intake service.

This package hosts:
- configuration helpers (env vars, paths)
- cross-cutting concerns such as logging setup

Routers and services depend on these primitives instead of reading
os.environ or configuring handlers themselves.
"""
