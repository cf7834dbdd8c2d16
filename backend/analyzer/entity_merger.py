import logging
from typing import Any, Iterable, Optional

from backend.analyzer.type_resolver import resolve_type
from backend.models.candidate import Candidate, NormalizedRecord

logger = logging.getLogger(__name__)

# Identity fields: first write wins, later candidates never append to them.
UNIVERSAL_FIELDS = frozenset({
    "@context",
    "@type",
    "name",
    "description",
    "url",
    "inLanguage",
    "mainEntityOfPage",
})


def merge_candidate(record: NormalizedRecord, candidate: Candidate) -> NormalizedRecord:
    schema_type = resolve_type(candidate.declared_type)
    bag = record.setdefault(schema_type, {})

    for key, value in candidate.properties.items():
        if key not in bag:
            bag[key] = list(value) if isinstance(value, list) else value
            continue

        if key in UNIVERSAL_FIELDS:
            continue

        bag[key] = _promote(bag[key], value)

    return record


def merge_candidates(
    candidates: Iterable[Candidate],
    record: Optional[NormalizedRecord] = None
) -> NormalizedRecord:
    record = {} if record is None else record

    for candidate in candidates:
        merge_candidate(record, candidate)

    logger.debug(f"Merged into {len(record)} schema types")
    return record


def _promote(existing: Any, incoming: Any) -> list:
    merged = list(existing) if isinstance(existing, list) else [existing]

    if isinstance(incoming, list):
        merged.extend(incoming)
    else:
        merged.append(incoming)

    return merged
