from typing import Any, Dict

from backend.models.values import first_object

ADDRESS_PARTS = (
    "streetAddress",
    "addressLocality",
    "addressRegion",
    "postalCode",
    "addressCountry",
)


def derive(data: Dict[str, Any], key: str, value: Any) -> None:
    """
    Add a derived field. Fields already in the bag (merged or derived on an
    earlier pass) are left untouched, and absent values are not written.
    """
    if value is None or key in data:
        return
    data[key] = value


def join_address(address: Any) -> str:
    """
    ``"1 Main St, Springfield, IL, 62701, US"`` with empty parts omitted.
    """
    obj = first_object(address)
    if obj is None:
        return ""

    return ", ".join(
        str(obj[part]) for part in ADDRESS_PARTS if obj.get(part)
    )
