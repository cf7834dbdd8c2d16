import json
import logging
import re
from typing import Dict, List, Any, Optional
from bs4 import BeautifulSoup

from backend.models.candidate import Candidate, SourceFormat

logger = logging.getLogger(__name__)

JSON_LD_TYPE = re.compile(r"^\s*application/ld\+json\s*(;.*)?$", re.IGNORECASE)


class JSONLDExtractor:
    """
    JSON-LD extractor.

    One Candidate per typed top-level object. Arrays contribute each of
    their elements; an untyped ``@graph`` container contributes its typed
    members. Anything else without ``@type`` is skipped.
    """

    @staticmethod
    def extract_json_ld(soup: BeautifulSoup) -> List[Candidate]:
        results: List[Candidate] = []

        scripts = soup.find_all("script", attrs={"type": JSON_LD_TYPE})

        for index, script in enumerate(scripts, start=1):
            payload = script.string or script.get_text()

            if not payload or not payload.strip():
                logger.debug(f"Empty JSON-LD block #{index} ignored")
                continue

            try:
                data = json.loads(payload.strip())
            except (ValueError, RecursionError) as e:
                logger.warning(f"Malformed JSON-LD block #{index} skipped: {e}")
                continue

            blocks = data if isinstance(data, list) else [data]

            for block in blocks:
                try:
                    results.extend(JSONLDExtractor._candidates_from_block(block))
                except Exception as e:
                    logger.warning(f"JSON-LD fragment in block #{index} skipped: {e}")

        return results

    # --------------------------------------------------
    # Block handling
    # --------------------------------------------------

    @staticmethod
    def _candidates_from_block(block: Any) -> List[Candidate]:
        if not isinstance(block, dict):
            return []

        declared_type = JSONLDExtractor._declared_type(block)

        if declared_type is not None:
            return [
                Candidate(
                    declared_type=declared_type,
                    source_format=SourceFormat.JSON_LD,
                    properties=block,
                )
            ]

        graph = block.get("@graph")

        if isinstance(graph, list):
            candidates: List[Candidate] = []
            for member in graph:
                candidates.extend(JSONLDExtractor._candidates_from_block(member))
            return candidates

        logger.debug("JSON-LD fragment without @type skipped")
        return []

    @staticmethod
    def _declared_type(block: Dict[str, Any]) -> Optional[str]:
        """
        A list-valued ``@type`` is reduced to its first entry.
        """
        declared = block.get("@type")

        if isinstance(declared, list):
            declared = declared[0] if declared else None

        if declared is None or declared == "":
            return None

        return str(declared)
