"""Export the Notion order database into files for the front-end.

Example usage:
    NOTION_SECRET=... NOTION_DATABASE_ID=... notion-export csv
    NOTION_SECRET=... NOTION_DATABASE_ID=... notion-export json
"""
import logging
from pathlib import Path

import typer

from .config import load_settings, debug_enabled
from .errors import ExportError, NotionAPIError
from .export import to_csv, to_json, write_output
from .mapping import ORDER_HEADERS, map_order, map_summary, map_pages
from .notion import fetch_all_pages

LOGGER = logging.getLogger(__name__)

DEFAULT_CSV_PATH = Path("fishorder.csv")
DEFAULT_JSON_PATH = Path("data") / "orders.json"

app = typer.Typer(help="Export the Notion order database to CSV or JSON.")


@app.callback()
def setup_logging():
    logging.basicConfig(format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                        level=logging.DEBUG if debug_enabled() else logging.INFO)


def _run(render, output: Path):
    """Fetch every row, render it and write the file.

    Nothing is written unless every page has been fetched.
    """
    try:
        settings = load_settings()
        LOGGER.info("Fetching records from Notion...")
        pages = fetch_all_pages(settings)
        text, count = render(pages)
        path = write_output(output, text)
    except NotionAPIError:
        # Status and body were logged by the retriever
        raise typer.Exit(code=1)
    except ExportError as e:
        LOGGER.error(str(e))
        raise typer.Exit(code=1)
    except Exception:
        LOGGER.exception("Export failed")
        raise typer.Exit(code=1)
    LOGGER.info("Wrote %d records into %s", count, path)


def _render_csv(pages):
    rows = map_pages(pages, map_order)
    return to_csv(rows, ORDER_HEADERS), len(rows)


def _render_json(pages):
    rows = map_pages(pages, map_summary)
    return to_json(rows), len(rows)


@app.command()
def csv(
    output: Path = typer.Option(DEFAULT_CSV_PATH, help="The path to the output CSV file.")
):
    """Write all orders as CSV with the column order the front-end expects."""
    _run(_render_csv, output)


@app.command()
def json(
    output: Path = typer.Option(DEFAULT_JSON_PATH, help="The path to the output JSON file.")
):
    """Write the id, edit time and product fields of all orders as a JSON array."""
    _run(_render_json, output)


def main():
    app()


if __name__ == "__main__":
    main()
