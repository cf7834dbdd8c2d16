import logging
from typing import Dict, List, Any, Optional
from bs4 import BeautifulSoup

from backend.analyzer.type_resolver import resolve_type
from backend.extractors.properties import (
    fold_property,
    owning_scope,
    property_names,
    property_value,
)
from backend.models.candidate import Candidate, SourceFormat
from backend.utils.html import attribute_text

logger = logging.getLogger(__name__)


class RDFaExtractor:
    """
    RDFa extractor with nested typeof support.
    Same scoping rule as microdata, keyed on ``typeof`` / ``property``.
    """

    @staticmethod
    def extract_rdfa(
        soup: BeautifulSoup,
        base_url: Optional[str] = None
    ) -> List[Candidate]:
        results: List[Candidate] = []

        nodes = soup.select("[typeof]")

        for node in nodes:
            try:
                typeof = attribute_text(node, "typeof").strip()
                if not typeof:
                    continue

                results.append(
                    Candidate(
                        declared_type=typeof,
                        source_format=SourceFormat.RDFA,
                        properties=RDFaExtractor._extract_node(
                            node, base_url
                        ),
                    )
                )
            except Exception as e:
                logger.warning(f"RDFa node skipped: {e}")

        return results

    # --------------------------------------------------
    # Recursive extraction
    # --------------------------------------------------

    @staticmethod
    def _extract_node(node, base_url: Optional[str]) -> Dict[str, Any]:
        properties: Dict[str, Any] = {}

        for prop in node.find_all(attrs={"property": True}):
            if owning_scope(prop, "typeof") is not node:
                continue

            names = property_names(prop, "property")
            if not names:
                continue

            if prop.has_attr("typeof"):
                value = RDFaExtractor._nested_node(prop, base_url)
            else:
                value = property_value(prop, base_url)

            for name in names:
                fold_property(properties, name, value)

        return properties

    @staticmethod
    def _nested_node(node, base_url: Optional[str]) -> Dict[str, Any]:
        nested: Dict[str, Any] = {}

        typeof = attribute_text(node, "typeof").strip()
        if typeof:
            nested["@type"] = resolve_type(typeof)

        nested.update(RDFaExtractor._extract_node(node, base_url))
        return nested
