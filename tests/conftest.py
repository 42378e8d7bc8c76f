"""Pytest configuration and shared fixtures."""

from hypothesis import settings

# Password hashing and key generation are slow enough to trip the default deadline.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
