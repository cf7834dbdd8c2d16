from typing import Any, Dict

from backend.models.values import PropertyKind, as_sequence, kind_of
from backend.normalizers.common import derive


def normalize_faq(data: Dict[str, Any]) -> None:
    if kind_of(data.get("mainEntity")) is PropertyKind.ABSENT:
        return

    items = []

    for question in as_sequence(data["mainEntity"]):
        if kind_of(question) is not PropertyKind.OBJECT:
            continue

        items.append({
            "question": question.get("name"),
            "answer": _answer_text(question.get("acceptedAnswer")),
        })

    derive(data, "faqItems", items)


def _answer_text(answer: Any) -> Any:
    kind = kind_of(answer)

    if kind is PropertyKind.OBJECT:
        return answer.get("text", "")
    if kind is PropertyKind.SEQUENCE and answer:
        return _answer_text(answer[0])
    if kind is PropertyKind.SCALAR:
        return answer

    return ""
