"""
Offline fixtures for page-object tests.

Pages of a fake storefront are served through Playwright routing, so no
server is needed. Tests using them are skipped when no browser is installed.
"""

from __future__ import annotations

from typing import AsyncGenerator
from urllib.parse import urlparse

import pytest
from playwright.async_api import Error as PlaywrightError, Page, Route

from storefront_tools.settings import PlaywrightSettings
from testsuites.ui_testing.framework.browser_manager import BrowserManager


STOREFRONT_URL = "http://storefront.test"

LOGIN_HTML = """
<html><body>
  <form action="/products" method="get">
    <input name="username" placeholder="Username" />
    <input name="password" type="text" aria-label="password" />
    <button type="submit">Login</button>
  </form>
</body></html>
"""

PRODUCTS_HTML = """
<html><body>
  <h1>Welcome, user</h1>
  <input placeholder="Search by name" />
  <div class="product-card">
    <h3>Acer Predator Helios 300</h3>
    <p>Category: Laptops</p>
    <p>Price: $1299.99</p>
    <button onclick="addToCart()">Add to Cart</button>
  </div>
  <div class="product-card">
    <h3>Logitech MX Master</h3>
    <p>Category: Accessories</p>
    <p>Price: $99.50</p>
    <button onclick="addToCart()">Add to Cart</button>
  </div>
  <button>Open Cart</button>
  <span id="cart-count">0</span>
  <a id="help" href="/help" target="_blank">Help</a>
  <button id="confirm" onclick="document.getElementById('answer').textContent = confirm('Delete?')">Delete</button>
  <span id="answer"></span>
  <script>
    function addToCart() {
      const count = document.getElementById('cart-count');
      count.textContent = String(Number(count.textContent) + 1);
    }
  </script>
</body></html>
"""

HELP_HTML = "<html><head><title>Help Center</title></head><body>Help</body></html>"

WEB_ELEMENTS_HTML = """
<html><body>
  <div class="web-element">
    <input id="text-input" oninput="this.parentElement.querySelector('.web-element-output').textContent = 'You entered: ' + this.value" />
    <p class="web-element-output"></p>
  </div>
  <div class="web-element">
    <div class="web-element-counter">
      <button onclick="step(-1)">-</button>
      <span class="web-element-counter-value">0</span>
      <button onclick="step(1)">+</button>
    </div>
    <button class="web-element-button-reset" onclick="resetCounter()">Reset</button>
    <p class="web-element-error"></p>
  </div>
  <div class="web-element">
    <select id="dropdown" onchange="this.parentElement.querySelector('.web-element-output').textContent = 'Selected: ' + this.value">
      <option value="">Choose</option>
      <option value="option1">Option 1</option>
      <option value="option2">Option 2</option>
    </select>
    <p class="web-element-output"></p>
  </div>
  <div class="web-element">
    <div class="web-element-checkbox-group">
      <input type="checkbox" class="web-element-checkbox" value="A" onchange="showChecked()" />
      <input type="checkbox" class="web-element-checkbox" value="B" onchange="showChecked()" />
    </div>
    <p class="web-element-output" id="checkbox-output">Checked: none</p>
  </div>
  <div class="web-element">
    <div class="web-element-radio-group">
      <input type="radio" name="choice" class="web-element-radio-input" value="yes" onchange="showRadio(this)" />
      <input type="radio" name="choice" class="web-element-radio-input" value="no" onchange="showRadio(this)" />
    </div>
    <p class="web-element-output" id="radio-output"></p>
  </div>
  <div class="web-element">
    <div class="web-element-toggle-group">
      <button class="web-element-toggle-button enabled" onclick="setToggle('Enabled')">Enable</button>
      <button class="web-element-toggle-button disabled" onclick="setToggle('Disabled')">Disable</button>
    </div>
    <p class="web-element-output" id="toggle-output">Disabled</p>
  </div>
  <script>
    let counter = 0;
    function render() {
      document.querySelector('.web-element-counter-value').textContent = String(counter);
    }
    function step(delta) {
      const error = document.querySelector('.web-element-error');
      if (counter + delta < 0) {
        error.textContent = 'Counter cannot be negative';
        return;
      }
      error.textContent = '';
      counter += delta;
      render();
    }
    function resetCounter() {
      counter = 0;
      document.querySelector('.web-element-error').textContent = '';
      render();
    }
    function showChecked() {
      const checked = [...document.querySelectorAll('.web-element-checkbox:checked')].map(c => c.value);
      document.getElementById('checkbox-output').textContent = 'Checked: ' + (checked.join(', ') || 'none');
    }
    function showRadio(input) {
      document.getElementById('radio-output').textContent = 'Selected: ' + input.value;
    }
    function setToggle(state) {
      document.getElementById('toggle-output').textContent = state;
    }
  </script>
</body></html>
"""

PAGES = {
    "/form": LOGIN_HTML,
    "/products": PRODUCTS_HTML,
    "/help": HELP_HTML,
    "/webelements": WEB_ELEMENTS_HTML,
}


async def serve_storefront(route: Route) -> None:
    body = PAGES.get(urlparse(route.request.url).path)
    if body is None:
        await route.fulfill(status=404, body="Not found")
    else:
        await route.fulfill(status=200, content_type="text/html", body=body)


@pytest.fixture
def storefront_routes():
    """Route handler answering STOREFRONT_URL requests from PAGES."""
    return serve_storefront


@pytest.fixture
def storefront_settings() -> PlaywrightSettings:
    return PlaywrightSettings(base_url=STOREFRONT_URL, default_timeout_ms=5000)


@pytest.fixture
async def storefront_page(storefront_settings: PlaywrightSettings, tmp_path) -> AsyncGenerator[Page, None]:
    """Page whose requests to STOREFRONT_URL are answered from PAGES."""
    manager = BrowserManager(storefront_settings, output_dir=tmp_path)
    try:
        await manager.start()
    except PlaywrightError as e:
        pytest.skip(f"Chromium unavailable: {e}")

    context = await manager.new_context()
    await context.route(f"{STOREFRONT_URL}/**", serve_storefront)
    page = await manager.new_page(context)
    yield page
    await manager.close()
