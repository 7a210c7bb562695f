"""
Renderings of player stats for chat replies

- render_text: MarkdownV2 code block with lifetime and last week sections
- render_raw: pretty printed provider document for a JSON attachment
- render_comparison: CSV table comparing several players side by side
"""

import csv
import io
import json
from typing import Any, Dict, List, Sequence, Tuple

from telegram.helpers import escape_markdown

from .record import LABELS, LIFETIME_FIELDS, WEEKLY_FIELDS, PlayerRecord, format_value

SEPARATOR = "---"


def _section(title: str) -> List[str]:
    return [SEPARATOR, title, SEPARATOR]


def render_text(record: PlayerRecord) -> str:
    """Render a record as a fenced MarkdownV2 block"""
    lines = _section("ALL")
    lines.append(f"User: {record.username}")
    lines.extend(f"{LABELS[key]}: {format_value(record.lifetime[key])}" for key, _ in LIFETIME_FIELDS)
    lines.extend(_section("Last week"))
    lines.extend(f"{LABELS[key]}: {format_value(record.weekly[key])}" for key, _ in WEEKLY_FIELDS)

    body = escape_markdown("\n".join(lines), version=2, entity_type="pre")
    return f"```\n{body}\n```\n"


def render_raw(document: Dict[str, Any]) -> str:
    return json.dumps(document, indent=2)


def render_comparison(entries: Sequence[Tuple[str, PlayerRecord]]) -> str:
    """
    Render players side by side as CSV.

    Args:
        entries: (handle, record) pairs in the order the players were requested

    Returns:
        CSV text: a header of handles, then one ALL:<label> row per lifetime stat
        and one LastWeek:<label> row per weekly stat
    """
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow([""] + [handle for handle, _ in entries])

    for key, _ in LIFETIME_FIELDS:
        writer.writerow([f"ALL:{LABELS[key]}"] + [format_value(record.lifetime[key]) for _, record in entries])
    for key, _ in WEEKLY_FIELDS:
        writer.writerow([f"LastWeek:{LABELS[key]}"] + [format_value(record.weekly[key]) for _, record in entries])

    return buffer.getvalue()
