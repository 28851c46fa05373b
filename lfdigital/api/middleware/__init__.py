"""API middleware."""

from lfdigital.api.middleware.context import RequestContextMiddleware

__all__ = ["RequestContextMiddleware"]
