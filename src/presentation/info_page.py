from html import escape

# Example paths shown on the usage page, one per allow-listed route.
EXAMPLE_PATHS = (
    "/v7/finance/quote?symbols=BHP.AX,CSL.AX",
    "/v8/finance/chart/BHP.AX?range=1d&interval=1m",
)


def render_info_page(base_url: str) -> str:
    """Render the HTML usage page. ``base_url`` is the scheme and host the caller reached us on."""
    base = escape(base_url.rstrip("/"), quote=True)
    allowed = "\n".join(f"    <li><code>{escape(path)}</code></li>" for path in EXAMPLE_PATHS)
    examples = "\n".join(
        f'    <li><a href="{base}{escape(path)}">{base}{escape(path)}</a></li>' for path in EXAMPLE_PATHS
    )

    return f"""<!doctype html>
<meta charset="utf-8" />
<title>Yahoo Finance Proxy</title>
<body style="font-family:system-ui,Segoe UI,Arial;line-height:1.4;padding:16px">
  <h1>Yahoo Finance Proxy</h1>
  <p>Status: OK</p>
  <p>Allowed endpoints:</p>
  <ul>
{allowed}
  </ul>
  <p>Examples:</p>
  <ul>
{examples}
  </ul>
  <p>CORS: <code>Access-Control-Allow-Origin: *</code></p>
  <hr />
  <small>Not an open proxy; only the above allow-listed Yahoo endpoints are forwarded.</small>
</body>"""
