from typing import Any, Dict

from backend.models.values import PropertyKind, first_object, kind_of
from backend.normalizers.common import derive, join_address


def normalize_event(data: Dict[str, Any]) -> None:
    location = data.get("location")
    place = first_object(location)

    if place is not None:
        derive(data, "locationName", place.get("name"))
        address = place.get("address")
        if kind_of(address) is not PropertyKind.ABSENT:
            derive(data, "locationAddress", address)
            if first_object(address) is not None:
                derive(data, "locationFullAddress", join_address(address))
    elif kind_of(location) is PropertyKind.SCALAR:
        derive(data, "locationName", location)

    organizer = data.get("organizer")
    host = first_object(organizer)

    if host is not None:
        derive(data, "organizerName", host.get("name"))
        derive(data, "organizerUrl", host.get("url"))
        derive(data, "organizerType", host.get("@type") or "Organization")
    elif kind_of(organizer) is PropertyKind.SCALAR:
        derive(data, "organizerName", organizer)

    offer = first_object(data.get("offers"))
    if offer is not None:
        derive(data, "ticketPrice", offer.get("price"))
        derive(data, "ticketCurrency", offer.get("priceCurrency"))
        derive(data, "ticketAvailability", offer.get("availability"))
        derive(data, "ticketUrl", offer.get("url"))
        derive(data, "ticketValidFrom", offer.get("priceValidFrom"))
        derive(data, "ticketValidUntil", offer.get("priceValidUntil"))

    if data.get("eventStatus"):
        derive(data, "status", data["eventStatus"])
