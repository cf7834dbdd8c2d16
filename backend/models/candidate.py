from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Any


class SourceFormat(str, Enum):
    JSON_LD = "jsonld"
    MICRODATA = "microdata"
    RDFA = "rdfa"


# canonical type -> merged property bag
NormalizedRecord = Dict[str, Dict[str, Any]]


@dataclass(frozen=True)
class Candidate:
    declared_type: str
    source_format: SourceFormat
    properties: Dict[str, Any] = field(default_factory=dict)
