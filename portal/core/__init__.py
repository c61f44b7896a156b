"""
Core utilities shared across the portal data layer.

This package hosts:
- configuration helpers (env vars, paths, storage backend selection)
- logging setup for scripts
- calendar helpers used to compute default values (current year-month, etc.)

Repositories depend on these primitives instead of reading os.environ directly.
"""
