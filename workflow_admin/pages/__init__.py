"""Admin page definitions."""
