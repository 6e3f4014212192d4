import os
from typing import Mapping, NamedTuple, Optional

from .errors import ConfigError

NOTION_VERSION = "2022-06-28"
# Notion refuses page sizes above 100
MAX_PAGE_SIZE = 100


class Settings(NamedTuple):
    secret: str
    database_id: str
    page_size: int = MAX_PAGE_SIZE
    notion_version: str = NOTION_VERSION


def _parse_page_size(raw: str) -> int:
    try:
        page_size = int(raw)
        if page_size < 1 or page_size > MAX_PAGE_SIZE:
            raise ValueError()
    except ValueError:
        raise ConfigError(
            f"NOTION_PAGE_SIZE should be in the range of [1, {MAX_PAGE_SIZE}], got {raw!r}."
        )
    return page_size


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build the run settings from environment variables.

    NOTION_SECRET and NOTION_DATABASE_ID are required. NOTION_PAGE_SIZE is
    optional and defaults to the largest page Notion will serve.
    """
    if environ is None:
        environ = os.environ
    secret = environ.get("NOTION_SECRET", "")
    database_id = environ.get("NOTION_DATABASE_ID", "")
    missing = [
        name for name, value in (
            ("NOTION_SECRET", secret),
            ("NOTION_DATABASE_ID", database_id)
        ) if not value
    ]
    if missing:
        raise ConfigError(
            f"{' and '.join(missing)} environment variable is not set."
        )
    page_size = MAX_PAGE_SIZE
    if environ.get("NOTION_PAGE_SIZE"):
        page_size = _parse_page_size(environ["NOTION_PAGE_SIZE"])
    return Settings(secret, database_id, page_size=page_size)


def debug_enabled(environ: Optional[Mapping[str, str]] = None) -> bool:
    if environ is None:
        environ = os.environ
    return bool(environ.get("DEBUG"))
