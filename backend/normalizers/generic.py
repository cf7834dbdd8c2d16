from typing import Any, Dict

from backend.normalizers.common import derive
from backend.utils.validation import is_valid_url


def normalize_generic(data: Dict[str, Any]) -> None:
    if isinstance(data.get("url"), str):
        derive(data, "isValidUrl", is_valid_url(data["url"]))
