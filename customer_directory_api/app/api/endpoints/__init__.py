"""Endpoint modules.  Each module exposes a ``router``."""
