from src.core.cors import CORS_HEADERS, cors_headers, merge_cors


def test_cors_header_set():
    assert dict(CORS_HEADERS) == {
        "Access-Control-Allow-Origin": "*",
        "Access-Control-Allow-Methods": "GET, OPTIONS",
        "Access-Control-Allow-Headers": "*",
        "Vary": "Origin",
    }


def test_cors_headers_returns_independent_copy():
    headers = cors_headers()
    headers["Access-Control-Allow-Origin"] = "https://example.com"

    assert CORS_HEADERS["Access-Control-Allow-Origin"] == "*"
    assert cors_headers()["Access-Control-Allow-Origin"] == "*"


def test_merge_cors_overwrites_colliding_headers_case_insensitively():
    upstream = [
        ("content-type", "application/json"),
        ("access-control-allow-origin", "https://finance.yahoo.com"),
        ("vary", "Accept-Encoding"),
    ]

    merged = merge_cors(upstream)

    names = [name.lower() for name, _ in merged]
    assert names.count("access-control-allow-origin") == 1
    assert names.count("vary") == 1
    assert ("Access-Control-Allow-Origin", "*") in merged
    assert ("Vary", "Origin") in merged
    assert ("content-type", "application/json") in merged


def test_merge_cors_keeps_repeated_headers_and_does_not_mutate_input():
    upstream = [("set-cookie", "a=1"), ("set-cookie", "b=2")]

    merged = merge_cors(upstream)

    assert upstream == [("set-cookie", "a=1"), ("set-cookie", "b=2")]
    assert merged[:2] == upstream
    assert len(merged) == 2 + len(CORS_HEADERS)
