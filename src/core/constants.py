"""
Application-wide constants.
"""

# Single upstream host; never derived from the request.
UPSTREAM_BASE_URL = "https://query1.finance.yahoo.com"

# Fixed headers sent on every outbound request. The UA avoids occasional 403s from Yahoo.
UPSTREAM_REQUEST_HEADERS: dict[str, str] = {
    "accept": "application/json, text/plain, */*",
    "user-agent": "asxcheck-proxy/1.0 (+https://github.com/asxcheck/asxcheck.github.io)",
}

INFO_PATHS = frozenset({"/", "/index.html"})
HEALTH_PATHS = frozenset({"/health", "/healthz", "/status"})

JSON_MEDIA_TYPE = "application/json; charset=utf-8"
