from enum import Enum
from typing import Any, Dict, List, Optional


class PropertyKind(str, Enum):
    """
    Shape of a property value.

    Markup decides the shape, not the vocabulary: the same ``author`` can be
    a bare string in one page, a nested object in another and a list of
    either once two fragments are merged.
    """

    ABSENT = "absent"
    SCALAR = "scalar"
    OBJECT = "object"
    SEQUENCE = "sequence"


def kind_of(value: Any) -> PropertyKind:
    if value is None:
        return PropertyKind.ABSENT
    if isinstance(value, dict):
        return PropertyKind.OBJECT
    if isinstance(value, (list, tuple)):
        return PropertyKind.SEQUENCE
    return PropertyKind.SCALAR


# --------------------------------------------------
# Accessors
# --------------------------------------------------

def as_sequence(value: Any) -> List[Any]:
    kind = kind_of(value)

    if kind is PropertyKind.ABSENT:
        return []
    if kind is PropertyKind.SEQUENCE:
        return list(value)
    return [value]


def first_object(value: Any) -> Optional[Dict[str, Any]]:
    """
    The object to drill into: the value itself, or the first object of a
    sequence.
    """
    kind = kind_of(value)

    if kind is PropertyKind.OBJECT:
        return value

    if kind is PropertyKind.SEQUENCE:
        for item in value:
            if kind_of(item) is PropertyKind.OBJECT:
                return item

    return None


def sub_field(value: Any, key: str) -> Any:
    obj = first_object(value)
    if obj is None:
        return None
    return obj.get(key)


def url_of(value: Any) -> Any:
    kind = kind_of(value)

    if kind is PropertyKind.SCALAR:
        return value

    if kind is PropertyKind.OBJECT:
        for key in ("url", "contentUrl", "@id"):
            if value.get(key):
                return value[key]
        return None

    if kind is PropertyKind.SEQUENCE and value:
        return url_of(value[0])

    return None


def name_of(value: Any) -> Any:
    kind = kind_of(value)

    if kind is PropertyKind.SCALAR:
        return value

    if kind is PropertyKind.OBJECT:
        return value.get("name")

    if kind is PropertyKind.SEQUENCE and value:
        return name_of(value[0])

    return None


def text_of(value: Any) -> str:
    kind = kind_of(value)

    if kind is PropertyKind.SCALAR:
        return str(value)

    if kind is PropertyKind.OBJECT:
        text = value.get("text") or value.get("textContent") or ""
        return text if isinstance(text, str) else ""

    if kind is PropertyKind.SEQUENCE:
        return " ".join(text_of(item) for item in value)

    return ""
