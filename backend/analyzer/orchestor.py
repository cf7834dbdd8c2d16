import logging
from typing import List, Optional

from bs4 import BeautifulSoup

from backend.analyzer.entity_merger import merge_candidates
from backend.extractors.jsonld_extractor import JSONLDExtractor
from backend.extractors.microdata_extractor import MicrodataExtractor
from backend.extractors.rdfa_extractor import RDFaExtractor
from backend.models.candidate import Candidate, NormalizedRecord
from backend.normalizers.registry import normalize_record
from backend.utils.html import document_base_url, make_soup

logger = logging.getLogger(__name__)


# --------------------------------------------------
# READINESS
# --------------------------------------------------

def ping() -> bool:
    """
    The inspector holds no state, so it is ready as soon as it is imported.
    """
    return True


# --------------------------------------------------
# EXTRACTION
# --------------------------------------------------

def extract_candidates(
    soup: BeautifulSoup,
    base_url: Optional[str] = None
) -> List[Candidate]:

    try:
        jsonld_candidates = JSONLDExtractor.extract_json_ld(soup)
    except Exception:
        logger.exception("JSON-LD extractor failed")
        jsonld_candidates = []

    try:
        microdata_candidates = MicrodataExtractor.extract_microdata(soup, base_url)
    except Exception:
        logger.exception("Microdata extractor failed")
        microdata_candidates = []

    try:
        rdfa_candidates = RDFaExtractor.extract_rdfa(soup, base_url)
    except Exception:
        logger.exception("RDFa extractor failed")
        rdfa_candidates = []

    logger.info(
        f"Candidates found: jsonld={len(jsonld_candidates)} "
        f"microdata={len(microdata_candidates)} "
        f"rdfa={len(rdfa_candidates)}"
    )

    return jsonld_candidates + microdata_candidates + rdfa_candidates


# --------------------------------------------------
# INSPECTION
# --------------------------------------------------

def inspect_document(
    soup: BeautifulSoup,
    base_url: Optional[str] = None
) -> NormalizedRecord:
    """
    Extract, merge and normalize every structured-data fragment in a parsed
    document. Read-only with respect to ``soup``; each call builds its own
    record.
    """
    base_url = document_base_url(soup, base_url)

    candidates = extract_candidates(soup, base_url)

    try:
        record = merge_candidates(candidates)
    except Exception:
        logger.exception("Candidate merge failed")
        record = {}

    normalize_record(record)

    logger.info(f"✅ Schema types found: {len(record)}")
    return record


def inspect_html(html: str, url: Optional[str] = None) -> NormalizedRecord:
    """
    Parse and inspect raw HTML. Raises ``ValueError`` for empty or
    oversized input; never for the markup it contains.
    """
    soup = make_soup(html)
    return inspect_document(soup, url)
