"""Sellin TN middleware."""
from sellin.middleware.hosts import HostRoutingMiddleware

__all__ = ["HostRoutingMiddleware"]
