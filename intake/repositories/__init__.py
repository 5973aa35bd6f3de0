"""
Persistence adapters.

These modules encapsulate how submissions are stored/retrieved (today one JSON
file per record). Services depend on the repository instead of touching the
storage directory.
"""
