"""
Pytest Configuration and Shared Fixtures.

- jsonld_html: wraps JSON-LD payloads in a page
- product_page / local_business_page / event_page: sample documents
"""

import json

import pytest


def _page(body: str) -> str:
    return f"<html><head><title>Test</title></head><body>{body}</body></html>"


@pytest.fixture
def jsonld_html():
    """Return a builder that embeds JSON-LD payloads in a page."""

    def build(*payloads) -> str:
        blocks = "".join(
            '<script type="application/ld+json">'
            + (p if isinstance(p, str) else json.dumps(p))
            + "</script>"
            for p in payloads
        )
        return _page(blocks)

    return build


@pytest.fixture
def product_page(jsonld_html) -> str:
    return jsonld_html({
        "@context": "https://schema.org",
        "@type": "Product",
        "name": "Widget",
        "sku": "W-1",
        "brand": {"@type": "Brand", "name": "Acme", "url": "https://acme.example"},
        "offers": {
            "@type": "Offer",
            "price": "9.99",
            "priceCurrency": "USD",
            "availability": "https://schema.org/InStock",
        },
        "aggregateRating": {
            "@type": "AggregateRating",
            "ratingValue": "4.5",
            "reviewCount": "12",
        },
    })


@pytest.fixture
def local_business_page() -> str:
    return _page("""
    <div itemscope itemtype="https://schema.org/LocalBusiness">
      <h1 itemprop="name">Joe's Pizza</h1>
      <div itemprop="address" itemscope itemtype="https://schema.org/PostalAddress">
        <span itemprop="streetAddress">1 Main St</span>
        <span itemprop="addressLocality">Springfield</span>
        <span itemprop="postalCode">62701</span>
      </div>
      <span itemprop="telephone">555-1234</span>
      <meta itemprop="openingHours" content="Mo-Fr 11:00-22:00">
      <a itemprop="sameAs" href="https://facebook.com/joes">Facebook</a>
      <a itemprop="sameAs" href="https://instagram.com/joes">Instagram</a>
    </div>
    """)


@pytest.fixture
def event_page() -> str:
    return _page("""
    <div vocab="https://schema.org/" typeof="Event">
      <span property="name">Jazz Night</span>
      <div property="location" typeof="Place">
        <span property="name">Blue Room</span>
        <div property="address" typeof="PostalAddress">
          <span property="streetAddress">5 Elm St</span>
          <span property="addressLocality">Austin</span>
        </div>
      </div>
      <meta property="startDate" content="2025-05-01T20:00">
      <span property="eventStatus">EventScheduled</span>
    </div>
    """)
