"""
Host Routing Middleware for Sellin TN

Serves store subdomains (``acme.sellin.tn``) from the store page route by
rewriting the request path based on the Host header.
"""
import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from sellin.services.host_router import HostRouter, RewriteTo

logger = logging.getLogger(__name__)


class HostRoutingMiddleware(BaseHTTPMiddleware):
    """Middleware that rewrites store subdomain requests to /store/{identifier}."""

    def __init__(self, app, router: HostRouter):
        super().__init__(app)
        self.router = router

    async def dispatch(self, request: Request, call_next):
        host = request.headers.get("host", "")
        path = request.scope["path"]

        decision = self.router.resolve(host, path)
        request.state.routing = decision

        if isinstance(decision, RewriteTo):
            logger.debug(f"Rewriting {host}{path} -> {decision.path}")
            # Same scope dict is handed to the app, so the route table sees the new path
            request.scope["path"] = decision.path
            request.scope["raw_path"] = decision.path.encode("utf-8")
            request.state.original_path = path

        return await call_next(request)
