from fastapi import APIRouter, HTTPException
from typing import Dict, Any, Optional
from fastapi.concurrency import run_in_threadpool
import asyncio
import logging

from backend.analyzer.orchestor import inspect_html, ping
from backend.config import MAX_DOCUMENTS
from backend.schemas.response import InspectError, InspectResult, PingResponse
from backend.services.fetcher import fetch_page

router = APIRouter()

logger = logging.getLogger(__name__)


# --------------------------------------------------
# URL PROCESSOR (PARALLEL SAFE)
# --------------------------------------------------

async def process_url(url: str):

    try:
        page = await fetch_page(url)

        record = await run_in_threadpool(
            inspect_html,
            page["html"],
            url
        )

        return url, InspectResult(
            url=url,
            fetch_mode=page.get("fetch_mode"),
            total_types=len(record),
            data=record
        ).model_dump()

    except Exception as e:
        logger.warning(f"Inspection failed for {url}: {e}")
        return url, InspectError(error=str(e)).model_dump()


# --------------------------------------------------
# HTML PROCESSOR
# --------------------------------------------------

async def process_html(i: int, html: str, base_url: Optional[str] = None):

    try:
        record = await run_in_threadpool(
            inspect_html,
            html,
            base_url
        )

        return f"html_{i}", InspectResult(
            url=base_url,
            total_types=len(record),
            data=record
        ).model_dump()

    except Exception as e:
        logger.warning(f"Inspection failed for html_{i}: {e}")
        return f"html_{i}", InspectError(error=str(e)).model_dump()


def _require_list(payload: Dict[str, Any], key: str) -> list:
    items = payload[key]

    if not isinstance(items, list) or not items:
        raise HTTPException(400, f"'{key}' must be a non-empty list")

    if len(items) > MAX_DOCUMENTS:
        raise HTTPException(
            400, f"Maximum {MAX_DOCUMENTS} {key} allowed"
        )

    return items


# --------------------------------------------------
# PING
# --------------------------------------------------

@router.get("/ping", response_model=PingResponse)
def ping_inspector():
    return PingResponse(
        ready=ping(),
        message="Inspector is ready"
    )


# --------------------------------------------------
# INSPECT ENDPOINT
# --------------------------------------------------

@router.post("/inspect")
async def inspect(payload: Dict[str, Any]):

    # ---------------- MULTIPLE URLS ----------------

    if "urls" in payload:

        urls = _require_list(payload, "urls")

        if not all(isinstance(url, str) and url.strip() for url in urls):
            raise HTTPException(400, "'urls' must contain non-empty strings")

        results_list = await asyncio.gather(
            *[process_url(url.strip()) for url in urls]
        )

        return {
            "total": len(results_list),
            "results": dict(results_list)
        }

    # ---------------- SINGLE URL ----------------

    if "url" in payload:

        url = payload["url"]

        if not isinstance(url, str) or not url.strip():
            raise HTTPException(400, "'url' must be a non-empty string")

        key, value = await process_url(url.strip())

        return {
            "total": 1,
            "results": {key: value}
        }

    base_url = payload.get("base_url")

    # ---------------- MULTIPLE HTML ----------------

    if "htmls" in payload:

        htmls = _require_list(payload, "htmls")

        results_list = await asyncio.gather(*[
            process_html(i, html, base_url)
            for i, html in enumerate(htmls, start=1)
        ])

        return {
            "total": len(results_list),
            "results": dict(results_list)
        }

    # ---------------- SINGLE HTML ----------------

    if "html" in payload:

        key, value = await process_html(1, payload["html"], base_url)

        return {
            "total": 1,
            "results": {key: value}
        }

    raise HTTPException(
        400,
        "Provide 'url', 'urls', 'html', or 'htmls'"
    )
