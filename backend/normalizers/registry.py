import logging
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml

from backend.normalizers.article import normalize_article
from backend.normalizers.breadcrumb import normalize_breadcrumb
from backend.normalizers.event import normalize_event
from backend.normalizers.faq import normalize_faq
from backend.normalizers.generic import normalize_generic
from backend.normalizers.howto import normalize_howto
from backend.normalizers.organization import normalize_organization
from backend.normalizers.product import normalize_product

logger = logging.getLogger(__name__)

Normalizer = Callable[[Dict[str, Any]], None]

FAMILIES_FILE = Path(__file__).resolve().parent / "families.yaml"

FAMILY_NORMALIZERS: Dict[str, Normalizer] = {
    "article": normalize_article,
    "organization": normalize_organization,
    "product": normalize_product,
    "event": normalize_event,
    "faq": normalize_faq,
    "howto": normalize_howto,
    "breadcrumb": normalize_breadcrumb,
}

FALLBACK_NORMALIZER: Normalizer = normalize_generic

# --------------------------------------------------
# Internal cache (singleton)
# --------------------------------------------------

_DISPATCH: Optional[Dict[str, Normalizer]] = None


def load_dispatch_table(path: Path = FAMILIES_FILE) -> Dict[str, Normalizer]:
    """
    Schema type -> normalizer, from the family file.

    Returns:
        Dict[schema_type, normalizer]
    """
    with open(path, "r", encoding="utf-8") as f:
        families = yaml.safe_load(f) or {}

    table: Dict[str, Normalizer] = {}

    for family, schema_types in families.items():
        normalizer = FAMILY_NORMALIZERS.get(family)

        if normalizer is None:
            logger.warning(f"Unknown normalizer family '{family}' ignored")
            continue

        for schema_type in schema_types or []:
            table[str(schema_type)] = normalizer

    return table


def get_dispatch_table() -> Dict[str, Normalizer]:
    global _DISPATCH

    if _DISPATCH is None:
        _DISPATCH = load_dispatch_table()

    return _DISPATCH


def get_normalizer(schema_type: str) -> Normalizer:
    return get_dispatch_table().get(schema_type, FALLBACK_NORMALIZER)


def normalize_record(record: Dict[str, Dict[str, Any]]) -> Dict[str, Dict[str, Any]]:
    """
    Run each type's normalizer once over its merged bag, in place.
    A failing normalizer is logged; the bag keeps whatever it already has.
    """
    for schema_type, data in record.items():
        normalizer = get_normalizer(schema_type)

        try:
            normalizer(data)
        except Exception:
            logger.exception(
                f"Normalizer {normalizer.__name__} failed for {schema_type}"
            )

    return record
