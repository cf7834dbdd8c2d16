from typing import Any, Dict, List

from backend.models.values import (
    PropertyKind,
    as_sequence,
    first_object,
    kind_of,
    name_of,
    sub_field,
)
from backend.normalizers.common import derive

ANONYMOUS_REVIEWER = "Anonymous"

IDENTIFIERS = {
    "sku": "productSku",
    "gtin": "productGtin",
    "mpn": "productMpn",
}


def normalize_product(data: Dict[str, Any]) -> None:
    offer = first_object(data.get("offers"))
    if offer is not None:
        derive(data, "price", offer.get("price"))
        derive(data, "priceCurrency", offer.get("priceCurrency"))
        derive(data, "availability", offer.get("availability"))
        derive(data, "offerUrl", offer.get("url"))
        derive(data, "offerValidFrom", offer.get("priceValidFrom"))
        derive(data, "offerValidUntil", offer.get("priceValidUntil"))

    rating = first_object(data.get("aggregateRating"))
    if rating is not None:
        derive(data, "rating", rating.get("ratingValue"))
        derive(data, "ratingCount", rating.get("reviewCount", rating.get("ratingCount")))
        derive(data, "bestRating", rating.get("bestRating"))
        derive(data, "worstRating", rating.get("worstRating"))

    if kind_of(data.get("review")) is not PropertyKind.ABSENT:
        derive(data, "reviews", _reviews(data["review"]))

    for source, target in IDENTIFIERS.items():
        if data.get(source):
            derive(data, target, data[source])

    brand = data.get("brand")
    derive(data, "brandName", name_of(brand))
    derive(data, "brandUrl", sub_field(brand, "url"))


def _reviews(review: Any) -> List[Dict[str, Any]]:
    reviews = []

    for item in as_sequence(review):
        kind = kind_of(item)

        if kind is PropertyKind.OBJECT:
            reviews.append({
                "reviewer": _reviewer(item.get("author")),
                "rating": _rating_value(item.get("reviewRating")),
                "date": item.get("datePublished"),
                "text": item.get("reviewBody"),
            })
        elif kind is PropertyKind.SCALAR:
            reviews.append({
                "reviewer": ANONYMOUS_REVIEWER,
                "rating": None,
                "date": None,
                "text": item,
            })

    return reviews


def _reviewer(author: Any) -> Any:
    return name_of(author) or ANONYMOUS_REVIEWER


def _rating_value(rating: Any) -> Any:
    if kind_of(rating) is PropertyKind.SCALAR:
        return rating
    return sub_field(rating, "ratingValue")
