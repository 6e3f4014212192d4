class ExportError(Exception):
    """Base class for errors that abort an export run."""


class ConfigError(ExportError, ValueError):
    """A required setting is missing or malformed."""


class NotionAPIError(ExportError):
    """The Notion API answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Notion API error: {status_code} {body}")
        self.status_code = status_code
        self.body = body
