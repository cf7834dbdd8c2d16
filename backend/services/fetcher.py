import asyncio
import logging
from typing import Optional

import requests

from backend.config import (
    DYNAMIC_FETCH_ENABLED,
    FETCH_RETRIES,
    MAX_HTML_SIZE,
    RENDER_WAIT_SECONDS,
    REQUEST_TIMEOUT,
)

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/120.0.0.0 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Connection": "keep-alive",
}

STRUCTURED_MARKERS = ("application/ld+json", "itemscope", "typeof=")

BROWSER_ARGS = [
    "--disable-blink-features=AutomationControlled",
    "--no-sandbox",
    "--disable-dev-shm-usage",
]

NAVIGATION_TIMEOUT_MS = 60000
HYDRATION_WAIT_MS = int(RENDER_WAIT_SECONDS * 1000)

logger = logging.getLogger(__name__)


def has_structured_markup(html: str) -> bool:
    html_lower = html.lower()
    return any(marker in html_lower for marker in STRUCTURED_MARKERS)


def fetch_static(url: str) -> Optional[str]:
    try:
        r = requests.get(
            url,
            headers=HEADERS,
            timeout=REQUEST_TIMEOUT,
            allow_redirects=True
        )
        r.raise_for_status()
        return r.text[:MAX_HTML_SIZE]
    except requests.RequestException as e:
        logger.warning(f"Static fetch failed: {e}")
        return None



def fetch_dynamic_sync(url: str) -> str:
    """
    Render the page in headless Chromium so markup injected by scripts
    (JSON-LD added after hydration, client-side microdata) is present.
    """
    # browser stack is only needed for the rendering fallback
    from playwright.sync_api import sync_playwright
    from playwright_stealth import stealth_sync

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True, args=BROWSER_ARGS)

        try:
            page = browser.new_page(
                extra_http_headers={"Accept-Language": HEADERS["Accept-Language"]}
            )
            stealth_sync(page)

            page.goto(url, wait_until="domcontentloaded", timeout=NAVIGATION_TIMEOUT_MS)
            page.wait_for_timeout(HYDRATION_WAIT_MS)

            rendered = page.content()
        finally:
            browser.close()

    return rendered[:MAX_HTML_SIZE]


async def fetch_page(url: str) -> dict:
    """
    Static fetch first, retried on failure; headless rendering when the
    static HTML carries no structured markup (client-rendered pages).
    Both run in the default executor so concurrent fetches overlap.
    """
    logger.info(f"Fetching: {url}")

    loop = asyncio.get_running_loop()
    static_html = None

    for attempt in range(max(FETCH_RETRIES, 1)):
        static_html = await loop.run_in_executor(None, fetch_static, url)

        if static_html:
            logger.info(
                f"[STATIC attempt {attempt+1}] html_size={len(static_html)} "
                f"markup={has_structured_markup(static_html)}"
            )
            break

    if static_html and has_structured_markup(static_html):
        return _page(url, "static", static_html)

    if DYNAMIC_FETCH_ENABLED:
        logger.info("⚠️ Falling back to dynamic rendering")

        try:
            rendered = await loop.run_in_executor(
                None,
                fetch_dynamic_sync,
                url
            )
            return _page(url, "dynamic", rendered)
        except Exception:
            logger.exception("Dynamic rendering failed")

    if static_html:
        # page really has no markup; inspect what we got
        return _page(url, "static", static_html)

    raise ValueError(f"Could not fetch {url}")


def _page(url: str, fetch_mode: str, html: str) -> dict:
    return {
        "url": url,
        "fetch_mode": fetch_mode,
        "html": html,
    }
