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


class MicrodataExtractor:
    """
    Microdata extractor with nested itemscope support.

    Every typed itemscope becomes a Candidate. A property belongs to its
    nearest enclosing itemscope only, so an outer item never picks up the
    fields of an item nested inside it; the nested item shows up in the
    outer one as an object value instead.
    """

    @staticmethod
    def extract_microdata(
        soup: BeautifulSoup,
        base_url: Optional[str] = None
    ) -> List[Candidate]:
        results: List[Candidate] = []

        items = soup.select("[itemscope][itemtype]")

        for item in items:
            try:
                itemtype = attribute_text(item, "itemtype").strip()
                if not itemtype:
                    continue

                results.append(
                    Candidate(
                        declared_type=itemtype,
                        source_format=SourceFormat.MICRODATA,
                        properties=MicrodataExtractor._extract_item(
                            item, base_url
                        ),
                    )
                )
            except Exception as e:
                logger.warning(f"Microdata item skipped: {e}")

        return results

    # --------------------------------------------------
    # Recursive extraction
    # --------------------------------------------------

    @staticmethod
    def _extract_item(node, base_url: Optional[str]) -> Dict[str, Any]:
        properties: Dict[str, Any] = {}

        for prop in node.find_all(attrs={"itemprop": True}):
            if owning_scope(prop, "itemscope") is not node:
                continue

            names = property_names(prop, "itemprop")
            if not names:
                continue

            if prop.has_attr("itemscope"):
                value = MicrodataExtractor._nested_item(prop, base_url)
            else:
                value = property_value(prop, base_url)

            for name in names:
                fold_property(properties, name, value)

        return properties

    @staticmethod
    def _nested_item(node, base_url: Optional[str]) -> Dict[str, Any]:
        nested: Dict[str, Any] = {}

        itemtype = attribute_text(node, "itemtype").strip()
        if itemtype:
            nested["@type"] = resolve_type(itemtype)

        nested.update(MicrodataExtractor._extract_item(node, base_url))
        return nested
