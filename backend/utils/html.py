import logging
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup

from backend.config import MAX_HTML_SIZE

logger = logging.getLogger(__name__)


def validate_html(html: str) -> str:
    """
    Ensures html is usable and bounded in size.
    """
    if not html or not isinstance(html, str):
        raise ValueError("Invalid HTML input")

    if len(html) > MAX_HTML_SIZE:
        raise ValueError("HTML size exceeds safe limit")

    return html


def make_soup(html: str) -> BeautifulSoup:
    """
    Create BeautifulSoup object safely
    """
    html = validate_html(html)

    try:
        soup = BeautifulSoup(html, "html.parser")
        return soup
    except Exception as e:
        logger.error(f"BeautifulSoup parse failed: {e}")
        raise ValueError("HTML parsing failed")


def attribute_text(element, name: str) -> str:
    """
    Attribute value as a single string; bs4 hands back lists for
    multi-valued attributes such as ``rel``.
    """
    value = element.get(name)

    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)

    return value


def document_base_url(soup: BeautifulSoup, url: Optional[str]) -> Optional[str]:
    """
    Base URL for resolving relative links: the page URL, adjusted by a
    ``<base href>`` element when the document declares one.
    """
    base = soup.find("base", href=True)

    if base is None:
        return url

    href = attribute_text(base, "href").strip()

    if not href:
        return url

    return urljoin(url, href) if url else href
