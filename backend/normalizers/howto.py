from typing import Any, Dict, List

from backend.models.values import PropertyKind, as_sequence, kind_of
from backend.normalizers.common import derive


def normalize_howto(data: Dict[str, Any]) -> None:
    if kind_of(data.get("step")) is not PropertyKind.ABSENT:
        derive(data, "steps", _steps(data["step"]))

    if kind_of(data.get("supply")) is not PropertyKind.ABSENT:
        derive(data, "supplies", _named_links(data["supply"]))

    if kind_of(data.get("tool")) is not PropertyKind.ABSENT:
        derive(data, "tools", _named_links(data["tool"]))


def _steps(step: Any) -> List[Dict[str, Any]]:
    steps = []

    for number, item in enumerate(as_sequence(step), start=1):
        if kind_of(item) is PropertyKind.OBJECT:
            steps.append({
                "stepNumber": number,
                "name": item.get("name"),
                "text": item.get("text"),
                "url": item.get("url"),
                "image": item.get("image"),
            })
        else:
            # plain-text step
            steps.append({
                "stepNumber": number,
                "name": None,
                "text": item,
                "url": None,
                "image": None,
            })

    return steps


def _named_links(value: Any) -> List[Dict[str, Any]]:
    links = []

    for item in as_sequence(value):
        if kind_of(item) is PropertyKind.OBJECT:
            links.append({"name": item.get("name"), "url": item.get("url")})
        else:
            links.append({"name": item, "url": None})

    return links
