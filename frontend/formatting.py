import json
from typing import Any, Dict, List

SCHEMA_ICONS = {
    "Article": "📰",
    "BlogPosting": "📝",
    "Organization": "🏢",
    "LocalBusiness": "🏪",
    "Product": "🛒",
    "Service": "🔧",
    "Event": "📅",
    "FAQPage": "❓",
    "HowTo": "📋",
    "BreadcrumbList": "🍞",
    "Person": "👤",
    "WebPage": "🌐",
    "WebSite": "🌍",
}

DEFAULT_ICON = "📄"

# --------------------------------------------------
# FIELD GROUPS (display order)
# --------------------------------------------------

FIELD_GROUPS = {
    "Core Information": {
        "@context", "@type", "name", "description", "url",
        "inLanguage", "mainEntityOfPage",
    },
    "Content Details": {
        "headline", "image", "author", "publisher", "datePublished",
        "dateModified", "articleBody", "wordCount",
    },
    "Contact & Location": {
        "address", "telephone", "openingHours", "sameAs",
        "contactPoint", "geo", "location", "organizer",
    },
    "Pricing & Offers": {
        "offers", "price", "priceCurrency", "availability",
        "brand", "sku", "gtin", "mpn",
    },
    "Reviews & Ratings": {
        "aggregateRating", "review", "rating", "ratingCount",
    },
}

OTHER_GROUP = "Additional Data"


def schema_icon(schema_type: str) -> str:
    return SCHEMA_ICONS.get(schema_type, DEFAULT_ICON)


def _group_for(key: str) -> str:
    for group, keys in FIELD_GROUPS.items():
        if key in keys:
            return group
    return OTHER_GROUP


def display_value(value: Any) -> Any:
    """
    Lists are kept for item-by-item rendering; objects collapse to their
    most telling field, or to pretty JSON.
    """
    if isinstance(value, list):
        return value

    if isinstance(value, dict):
        for key in ("text", "name", "url"):
            if value.get(key):
                return value[key]
        return json.dumps(value, indent=2, ensure_ascii=False)

    return value


def organize_fields_by_category(data: Dict[str, Any]) -> Dict[str, List[Dict[str, Any]]]:
    groups: Dict[str, List[Dict[str, Any]]] = {
        name: [] for name in list(FIELD_GROUPS) + [OTHER_GROUP]
    }

    for key, value in data.items():
        lowered = key.lower()

        groups[_group_for(key)].append({
            "key": key,
            "value": display_value(value),
            "is_url": "url" in lowered or "link" in lowered,
            "is_list": isinstance(value, list),
        })

    return groups


def format_list_item(item: Any) -> str:
    if not isinstance(item, dict):
        return str(item)

    if item.get("question") and item.get("answer"):
        return f"Q: {item['question']}\nA: {item['answer']}"

    if item.get("name") and item.get("url") and item.get("position"):
        return f"{item['position']}. {item['name']} ({item['url']})"

    if item.get("name") and item.get("url"):
        return f"{item['name']} ({item['url']})"

    if item.get("text"):
        return str(item["text"])

    if item.get("stepNumber") and item.get("name"):
        return f"Step {item['stepNumber']}: {item['name']}"

    return json.dumps(item, ensure_ascii=False)


def to_clipboard_text(record: Dict[str, Dict[str, Any]]) -> str:
    """
    Plain-text export of a whole record, one block per schema type.
    """
    lines: List[str] = []

    for schema_type, data in record.items():
        lines.append(f"{schema_icon(schema_type)} {schema_type}")
        lines.append("Core Information")

        for key, value in data.items():
            if isinstance(value, list):
                shown = "\n".join(
                    f"{i}. {format_list_item(item)}"
                    for i, item in enumerate(value, start=1)
                )
            else:
                shown = display_value(value)

            lines.append(f"{key}: {shown}")

        lines.append("")

    return "\n".join(lines)
