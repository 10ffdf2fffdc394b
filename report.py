"""
Report generation — two output forms:
  1. Human-readable summary, one line per category
  2. Structured JSON payload

Rows are ordered by descending product count.
"""

import json
import sys

from classifier import Report, ReportRow


def sort_rows(report: Report) -> list[tuple]:
    """(category, row) pairs, highest count first. Ties keep report order."""
    return sorted(report.items(), key=lambda item: item[1].count, reverse=True)


def format_row(row: ReportRow) -> str:
    """Render one row, e.g. "Clearance Price: 4 products @ $10.00-$100.09"."""
    text = f"{row.display_txt}: {row.count} products"
    if not row.count:
        return text

    text += f" @ ${row.min:.2f}"
    if row.max and row.max != row.min:
        text += f"-${row.max:.2f}"
    return text


def build_text_report(report: Report) -> str:
    """Build the human-readable summary."""
    return "\n".join(format_row(row) for _, row in sort_rows(report))


def build_json_payload(report: Report) -> dict:
    """Build the structured report payload."""
    categories = []
    for category, row in sort_rows(report):
        categories.append({
            "category": category.value,
            "display": row.display_txt,
            "count": row.count,
            "min": row.min if row.count else None,
            "max": (row.max if row.max is not None else row.min) if row.count else None,
        })

    return {
        "categories": categories,
        "total_count": sum(c["count"] for c in categories),
    }


def display_report(report: Report, as_json: bool = False, stream=None):
    """Write the report to stdout (or the given stream)."""
    out = stream if stream is not None else sys.stdout
    if as_json:
        out.write(json.dumps(build_json_payload(report), indent=2) + "\n")
    else:
        out.write(build_text_report(report) + "\n")
