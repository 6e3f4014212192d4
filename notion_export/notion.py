import logging
from typing import Dict, Iterator, List

import requests

from .config import Settings
from .errors import NotionAPIError

LOGGER = logging.getLogger(__name__)
API_BASE = "https://api.notion.com/v1"


def query_url(database_id: str) -> str:
    return f"{API_BASE}/databases/{database_id}/query"


def _headers(settings: Settings) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {settings.secret}",
        "Notion-Version": settings.notion_version,
        "Content-Type": "application/json"
    }


def _request_body(settings: Settings, cursor=None) -> Dict:
    if cursor:
        return {"start_cursor": cursor, "page_size": settings.page_size}
    return {"page_size": settings.page_size}


def iter_pages(settings: Settings, session=None) -> Iterator[List[Dict]]:
    """Yield the `results` of each page of the database query in turn.

    The next request is only sent once the caller asks for the next page,
    carrying the `next_cursor` of the previous response. Any non-success
    response raises NotionAPIError; nothing is retried.
    """
    http = session or requests
    url = query_url(settings.database_id)
    cursor = None
    page_count = 0
    while True:
        res = http.post(
            url,
            headers=_headers(settings),
            json=_request_body(settings, cursor)
        )
        if not res.ok:
            LOGGER.error("Notion API error: %d %s", res.status_code, res.text)
            raise NotionAPIError(res.status_code, res.text)
        data = res.json()
        page_count += 1
        results = data.get("results") or []
        LOGGER.debug("Page %d: %d records", page_count, len(results))
        yield results
        cursor = data.get("next_cursor")
        if not data.get("has_more"):
            break
        if not cursor:
            LOGGER.warning("has_more is set but next_cursor is empty. Stopping...")
            break


def fetch_all_pages(settings: Settings, session=None) -> List[Dict]:
    all_results: List[Dict] = []
    page_count = 0
    for results in iter_pages(settings, session=session):
        all_results.extend(results)
        page_count += 1
    LOGGER.info(
        "Fetched %d records in %d pages from Notion", len(all_results), page_count)
    return all_results
