"""
Static allow-list of upstream paths the relay is willing to forward.

Routes are evaluated top-to-bottom and the first match wins. Each route
mirrors its inbound path onto the single upstream host, so adding an
endpoint means adding one entry here.
"""

import re
from dataclasses import dataclass

from src.core.constants import UPSTREAM_BASE_URL


@dataclass(frozen=True)
class AllowedRoute:
    """An inbound path shape that may be forwarded upstream."""

    name: str
    pattern: re.Pattern[str]

    def matches(self, path: str) -> bool:
        return self.pattern.fullmatch(path) is not None


@dataclass(frozen=True)
class RouteMatch:
    route: AllowedRoute
    target_url: str


ALLOWED_ROUTES: tuple[AllowedRoute, ...] = (
    AllowedRoute(name="quote", pattern=re.compile(r"/v7/finance/quote")),
    # One segment only: the symbol can never walk into other upstream paths.
    AllowedRoute(name="chart", pattern=re.compile(r"/v8/finance/chart/[^/]+")),
)


def build_target_url(path: str, query: str = "") -> str:
    """Mirror an allow-listed path onto the upstream host, copying the query string verbatim."""
    target = f"{UPSTREAM_BASE_URL}{path}"
    if query:
        target = f"{target}?{query}"
    return target


def match_route(path: str, query: str = "") -> RouteMatch | None:
    """Return the first allow-listed route for ``path``, or None when the path is not forwardable."""
    for route in ALLOWED_ROUTES:
        if route.matches(path):
            return RouteMatch(route=route, target_url=build_target_url(path, query))
    return None
