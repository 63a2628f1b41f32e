"""Route handlers for the API."""

from foliogen.api.routes import health, portfolio

__all__ = [
    "health",
    "portfolio",
]
