"""
Host Router for Sellin TN

Decides, from the Host header and the path of a request, whether the request
is served as-is or internally rewritten to the page of a store.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union

STORE_PATH_PREFIX = "/store/"

# Paths that are never rewritten, whatever the host
API_PREFIX = "/api/"
INTERNAL_ASSETS_PREFIX = "/static/"
FAVICON_PATH = "/favicon.ico"

RESERVED_LABELS = {"www"}

# Characters that would change the meaning of the rewritten path
UNSAFE_LABEL_CHARS = set("/%?#\\")


@dataclass(frozen=True)
class PassThrough:
    """Leave the request unmodified."""


@dataclass(frozen=True)
class RewriteTo:
    """Serve the request from another path without changing the visible URL."""
    path: str


RoutingDecision = Union[PassThrough, RewriteTo]


def is_excluded_path(path: str) -> bool:
    """API routes, internal assets, the favicon and anything file-like."""
    return (
        path.startswith(API_PREFIX)
        or path.startswith(INTERNAL_ASSETS_PREFIX)
        or path == FAVICON_PATH
        or "." in path
    )


def normalize_hostname(hostname: Optional[str]) -> str:
    """Lowercase the hostname and drop the port and any trailing dot."""
    if not hostname:
        return ""
    return hostname.strip().lower().split(":")[0].rstrip(".")


def _is_under(hostname: str, domain: str) -> bool:
    return bool(domain) and (hostname == domain or hostname.endswith("." + domain))


class HostRouter:
    """
    Classifies requests by hostname shape.

    Only two shapes are recognised, both taken from configuration:
    - hosts under the apex domain (``acme.sellin.tn``) address a store
      through their first label
    - hosts under the preview domain never address a store; stores are
      reached by path there
    """

    def __init__(self, apex_domain: str, preview_domain_suffix: str):
        self.apex_domain = normalize_hostname(apex_domain)
        self.preview_domain_suffix = normalize_hostname(preview_domain_suffix)
        self._apex_label = self.apex_domain.split(".")[0]

    def resolve(self, hostname: Optional[str], path: Optional[str]) -> RoutingDecision:
        """Return the routing decision for one request. Never raises."""
        path = path or "/"
        if is_excluded_path(path):
            return PassThrough()

        candidate = self.store_identifier(hostname)
        if candidate is None:
            return PassThrough()
        return RewriteTo(STORE_PATH_PREFIX + candidate)

    def store_identifier(self, hostname: Optional[str]) -> Optional[str]:
        """First label of an apex subdomain, or None when the host addresses no store."""
        host = normalize_hostname(hostname)
        labels = host.split(".")
        if len(labels) < 3:
            return None

        if _is_under(host, self.preview_domain_suffix):
            return None

        if not _is_under(host, self.apex_domain):
            return None

        candidate = labels[0]
        if not candidate or candidate in RESERVED_LABELS or candidate == self._apex_label:
            return None
        if UNSAFE_LABEL_CHARS & set(candidate):
            return None
        return candidate

    def is_apex_host(self, hostname: Optional[str]) -> bool:
        """True for the apex domain itself and any host beneath it."""
        return _is_under(normalize_hostname(hostname), self.apex_domain)

    def build_store_url(self, identifier: str, request_host: Optional[str], scheme: str = "https") -> str:
        """
        Public URL of a store.

        Hosts served under the apex domain get subdomain addressing; every
        other host (preview domain, localhost, IPs) gets path addressing on
        the host the request came in on.
        """
        if self.is_apex_host(request_host):
            return f"{scheme}://{identifier}.{self.apex_domain}"
        host = (request_host or "localhost").strip()
        return f"{scheme}://{host}{STORE_PATH_PREFIX}{identifier}"
