import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import polars as pl

LOGGER = logging.getLogger(__name__)


def _cell(value) -> Optional[str]:
    # Empty strings become nulls so that polars leaves the cell blank
    # instead of writing ""
    if value is None or value == "":
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def to_csv(rows: List[Dict], headers: Sequence[str]) -> str:
    """Render `rows` as CSV with the columns in `headers` order.

    Cells holding a comma, a double quote or a line break are quoted with
    inner quotes doubled. Missing values render as empty cells. Lines are
    joined by "\\n" without a trailing newline.
    """
    df = pl.DataFrame(
        {
            header: [_cell(row.get(header)) for row in rows]
            for header in headers
        },
        schema={header: pl.Utf8 for header in headers}
    )
    output = df.write_csv(quote_style="necessary")
    if output.endswith("\n"):
        output = output[:-1]
    return output


def to_json(rows: List[Dict]) -> str:
    return json.dumps(rows, ensure_ascii=False, indent=2)


def write_output(path: Union[str, Path], text: str) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf8", newline="") as f:
        f.write(text)
    LOGGER.debug("Wrote %d characters to %s", len(text), path)
    return path.resolve()
