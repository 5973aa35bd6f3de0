"""Project intake service: JSON submissions stored one file per record."""
