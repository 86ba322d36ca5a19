"""
Pytest configuration and shared fixtures.

Sample pages mirror the live site: everything is a heading, the canteen page
uses h5/h6 interchangeably and the buffet page uses h4/h5/h6 for
category/item/price.
"""
import httpx
import pytest

from src.manas.config import ScraperConfig


CANTEEN_HTML = """
<html><body>
<h1>Manas Beslenme</h1>
<div class="day">
  <h5>07.02.2026 Cumartesi</h5>
  <h5>Yayla Çorbası</h5>
  <h6>Kalori: 175</h6>
  <h5>Tavuk Sote</h5>
  <h6>Kalori: 320</h6>
</div>
<div class="day">
  <h6>06.02.2026 Cuma</h6>
  <h6>Mercimek Çorbası</h6>
  <h5>Kalori: 160</h5>
  <h5>Yayla Çorbası</h5>
  <h6>Kalori: 175</h6>
</div>
</body></html>
"""

BUFFET_HTML = """
<html><body>
<h2>Büfe</h2>
<h4>SICAK İÇECEK</h4>
<h5>ÇAY DEMLEME</h5>
<h6>Fiyatı: 18 som</h6>
<h5>Türk Kahvesi</h5>
<h6>Fiyatı: 60 som</h6>
<h4>TATLILAR</h4>
<h5>Sütlaç</h5>
<h6>Fiyati: 80 som</h6>
</body></html>
"""


@pytest.fixture
def canteen_html() -> str:
    return CANTEEN_HTML


@pytest.fixture
def buffet_html() -> str:
    return BUFFET_HTML


@pytest.fixture
def config(tmp_path) -> ScraperConfig:
    return ScraperConfig(output_dir=str(tmp_path / "public"))


@pytest.fixture
def site_transport():
    """Serve the sample pages; any other path is a 404."""
    pages = {"/menu": CANTEEN_HTML, "/1": BUFFET_HTML}
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        body = pages.get(request.url.path)
        if body is None:
            return httpx.Response(404, text="not found")
        return httpx.Response(200, text=body, headers={"Content-Type": "text/html; charset=utf-8"})

    transport = httpx.MockTransport(handler)
    transport.requests = requests
    return transport
