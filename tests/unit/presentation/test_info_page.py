from src.presentation.info_page import render_info_page


def test_render_info_page_links_use_request_base():
    page = render_info_page("https://relay.example.com")

    assert page.startswith("<!doctype html>")
    assert "<h1>Yahoo Finance Proxy</h1>" in page
    assert 'href="https://relay.example.com/v7/finance/quote?symbols=BHP.AX,CSL.AX"' in page
    assert 'href="https://relay.example.com/v8/finance/chart/BHP.AX?range=1d&amp;interval=1m"' in page
    assert "Access-Control-Allow-Origin: *" in page


def test_render_info_page_escapes_host():
    page = render_info_page('http://evil"><script>alert(1)</script>')

    assert "<script>" not in page
    assert "&lt;script&gt;" in page


def test_render_info_page_strips_trailing_slash():
    page = render_info_page("http://localhost:8000/")

    assert "http://localhost:8000//v7" not in page
    assert "http://localhost:8000/v7/finance/quote" in page
