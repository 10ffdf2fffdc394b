"""
Line classification engine.

Each input line is either a "Type" row (sets a category's display label) or a
"Product" row (counted into pricing categories). Anything else is ignored.

Product rules, applied independently:
  clearance < normal  -> clearance
  clearance == normal -> normal
  in-cart flag "true" -> price_in_cart (always at the clearance price)

Products with stock below QUANTITY_MINIMUM are skipped entirely. Lines that
can't be parsed, including any non-numeric price or quantity,
leave the report as it was.
"""

import re
import sys
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from category_data import (
    Category, QUANTITY_MINIMUM, DELIMITER,
    ROW_TYPE, ROW_PRODUCT, IN_CART_TRUE,
)
from matcher import match_category

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_FLOAT_PREFIX = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


@dataclass
class ReportRow:
    """Aggregate for one category. min == 0 means no price seen yet."""
    display_txt: str
    count: int = 0
    min: float = 0.0
    max: Optional[float] = None


Report = dict[Category, ReportRow]


def new_report() -> Report:
    """Fresh report: every category zeroed, labelled with its key."""
    return {category: ReportRow(display_txt=category.value) for category in Category}


def copy_report(report: Report) -> Report:
    return {category: replace(row) for category, row in report.items()}


def _parse_int(text: str) -> int | None:
    """Leading integer of a field ("10", "10.7" -> 10), or None."""
    match = _INT_PREFIX.match(text or "")
    return int(match.group(1)) if match else None


def _parse_price(text: str) -> float | None:
    """Leading decimal number of a field ("49.99", "5abc" -> 5.0), or None."""
    match = _FLOAT_PREFIX.match(text or "")
    return float(match.group(1)) if match else None


def update_price_range(price: float, row: ReportRow) -> ReportRow:
    """Widen the row's observed [min, max] to include price."""
    if row.min == 0 or price < row.min:
        row.min = price
    if row.max is None or price > row.max:
        row.max = price
    return row


def handle_type_row(cols: list[str], report: Report) -> None:
    """Apply [Type, key, displayText] to the report in place."""
    if len(cols) < 3:
        return
    key, display_txt = cols[1], cols[2]

    match = match_category(key)
    category = match["category"]
    if category is None:
        print(f"Warning: unknown category '{key.strip()}' in Type row, skipped.", file=sys.stderr)
        return

    report[category].display_txt = display_txt


def handle_product_row(cols: list[str], report: Report) -> None:
    """Apply [Product, normal, clearance, quantity, inCart] to the report in place."""
    if len(cols) < 4:
        return

    quantity = _parse_int(cols[3])
    if quantity is None or quantity < QUANTITY_MINIMUM:
        return

    normal_price = _parse_price(cols[1])
    clearance_price = _parse_price(cols[2])
    if normal_price is None or clearance_price is None:
        return
    price_in_cart = len(cols) > 4 and cols[4] == IN_CART_TRUE

    if clearance_price < normal_price:
        report[Category.CLEARANCE].count += 1
        update_price_range(clearance_price, report[Category.CLEARANCE])

    if clearance_price == normal_price:
        report[Category.NORMAL].count += 1
        update_price_range(normal_price, report[Category.NORMAL])

    # Cart rows are tracked at the clearance price, even for normal products
    if price_in_cart:
        report[Category.PRICE_IN_CART].count += 1
        update_price_range(clearance_price, report[Category.PRICE_IN_CART])


def process_line(line: str, report: Report) -> Report:
    """
    Fold one input line into the report.

    Returns a new report; the one passed in is left untouched.
    """
    updated = copy_report(report)
    cols = line.rstrip("\r\n").split(DELIMITER)
    row_type = cols[0]

    if row_type == ROW_TYPE:
        handle_type_row(cols, updated)
    elif row_type == ROW_PRODUCT:
        handle_product_row(cols, updated)

    return updated


def build_report(lines: Iterable[str], report: Report | None = None) -> Report:
    """Fold every line, in order, starting from a fresh report."""
    result = report if report is not None else new_report()
    for line in lines:
        result = process_line(line, result)
    return result
