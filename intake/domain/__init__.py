"""Pure helpers for submission filenames and aggregate statistics."""
