import logging
from pathlib import Path

from .schemas import FEED_COLUMNS, FEED_HEADER, FeedRow

logger = logging.getLogger(__name__)


def format_feed_line(row: FeedRow) -> str:
    """Joins one row's fourteen columns with pipes, in header order."""
    values = row.model_dump(by_alias=True)
    return "|".join(values[column] for column in FEED_COLUMNS)


def save_feed(rows: list[FeedRow], output_path: Path) -> int:
    """
    Writes the header and one line per row to `output_path`, overwriting it.
    Returns the number of data rows written.
    """
    lines = [FEED_HEADER] + [format_feed_line(row) for row in rows]

    output_path = Path(output_path)
    if output_path.parent != Path("."):
        output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w", encoding="utf-8", newline="\n") as f:
        f.write("\n".join(lines) + "\n")

    logger.info(f"✅ Feed saved to: {output_path}")
    return len(rows)
