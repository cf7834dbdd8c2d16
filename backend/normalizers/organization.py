from typing import Any, Dict

from backend.models.values import (
    PropertyKind,
    as_sequence,
    first_object,
    kind_of,
    url_of,
)
from backend.normalizers.common import ADDRESS_PARTS, derive, join_address


def normalize_organization(data: Dict[str, Any]) -> None:
    """
    Organization / LocalBusiness: address, contact point, geo,
    opening hours, social profiles and logo.
    """
    address = first_object(data.get("address"))
    if address is not None:
        for part in ADDRESS_PARTS:
            derive(data, part, address.get(part))
        derive(data, "fullAddress", join_address(address))

    contact = first_object(data.get("contactPoint"))
    if contact is not None:
        derive(data, "contactPhone", contact.get("telephone"))
        derive(data, "contactEmail", contact.get("email"))
        derive(data, "contactType", contact.get("contactType"))

    geo = first_object(data.get("geo"))
    if geo is not None:
        latitude = geo.get("latitude")
        longitude = geo.get("longitude")
        derive(data, "latitude", latitude)
        derive(data, "longitude", longitude)
        if latitude is not None and longitude is not None:
            derive(data, "coordinates", f"{latitude}, {longitude}")

    if kind_of(data.get("openingHours")) is not PropertyKind.ABSENT:
        derive(data, "openingHoursList", as_sequence(data["openingHours"]))

    if kind_of(data.get("sameAs")) is not PropertyKind.ABSENT:
        derive(data, "socialMediaLinks", as_sequence(data["sameAs"]))

    if kind_of(data.get("logo")) is not PropertyKind.ABSENT:
        derive(data, "logoUrl", url_of(data["logo"]))
