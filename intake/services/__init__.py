"""
High-level use cases for the intake API.

Routers call these services instead of manipulating the storage directory
directly.
"""
