from typing import Any, Dict

from backend.models.values import PropertyKind, as_sequence, kind_of, url_of
from backend.normalizers.common import derive


def normalize_breadcrumb(data: Dict[str, Any]) -> None:
    if kind_of(data.get("itemListElement")) is PropertyKind.ABSENT:
        return

    crumbs = []

    for entry in as_sequence(data["itemListElement"]):
        if kind_of(entry) is not PropertyKind.OBJECT:
            continue

        item = entry.get("item")
        name = entry.get("name")

        if name is None and kind_of(item) is PropertyKind.OBJECT:
            name = item.get("name")

        crumbs.append({
            "name": name,
            "url": url_of(item),
            "position": entry.get("position"),
        })

    derive(data, "breadcrumbs", crumbs)
