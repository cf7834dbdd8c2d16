from typing import Any, Dict, List, Optional
from urllib.parse import urljoin

from backend.utils.html import attribute_text

HYPERLINK_TAGS = {"a", "link", "area"}
IMAGE_TAGS = {"img"}


def property_names(element, attribute: str) -> List[str]:
    """
    ``itemprop="name headline"`` names two properties.
    """
    return attribute_text(element, attribute).split()


def property_value(element, base_url: Optional[str] = None) -> str:
    """
    Value carried by a property element:
    link target, image source, ``content`` attribute, or trimmed text.
    """
    if element.name in HYPERLINK_TAGS:
        return _absolute(attribute_text(element, "href"), base_url)

    if element.name in IMAGE_TAGS:
        return _absolute(attribute_text(element, "src"), base_url)

    if element.has_attr("content"):
        return attribute_text(element, "content")

    return element.get_text().strip()


def fold_property(properties: Dict[str, Any], name: str, value: Any) -> None:
    """
    Repeated names within one item become a list in document order.
    """
    if name not in properties:
        properties[name] = value
        return

    existing = properties[name]

    if isinstance(existing, list):
        existing.append(value)
    else:
        properties[name] = [existing, value]


def owning_scope(element, scope_attribute: str):
    """
    Nearest ancestor that opens an item scope.
    """
    for parent in element.parents:
        if parent.has_attr(scope_attribute):
            return parent
    return None


def _absolute(link: str, base_url: Optional[str]) -> str:
    link = link.strip()

    if not base_url or not link:
        return link

    return urljoin(base_url, link)
