"""
Tests for report generation.

This test suite covers:
1. sort_rows() - descending count, stable ties
2. format_row() - text template
3. build_json_payload() / display_report()
"""

import io
import json

from category_data import Category
from classifier import ReportRow, new_report
from report import (
    sort_rows,
    format_row,
    build_text_report,
    build_json_payload,
    display_report,
)


def _report_with_counts(*counts):
    report = new_report()
    for category, count in zip(Category, counts):
        report[category].count = count
    return report


class TestSortRows:
    """Test sort_rows()."""

    def test_sorts_by_count_desc(self):
        rows = {i: ReportRow(display_txt=str(i), count=c) for i, c in enumerate([6, 2, 0, 1, 6])}
        ordered = sort_rows(rows)
        assert [row.count for _, row in ordered] == [6, 6, 2, 1, 0]
        # equal counts keep their original order
        assert [key for key, _ in ordered][:2] == [0, 4]

    def test_does_not_reorder_report(self):
        report = _report_with_counts(0, 5, 1)
        sort_rows(report)
        assert list(report) == list(Category)


class TestFormatRow:
    """Test format_row()."""

    def test_price_range(self):
        row = ReportRow("Clearance Price", count=4, min=10.0, max=100.09)
        assert format_row(row) == "Clearance Price: 4 products @ $10.00-$100.09"

    def test_single_price_without_max(self):
        row = ReportRow("Normal Price", count=1, min=50.0)
        assert format_row(row) == "Normal Price: 1 products @ $50.00"

    def test_equal_min_and_max_has_no_dash(self):
        row = ReportRow("Normal Price", count=2, min=50.0, max=50.0)
        assert format_row(row) == "Normal Price: 2 products @ $50.00"

    def test_zero_count_has_no_price(self):
        row = ReportRow("Price in cart", count=0, min=0)
        assert format_row(row) == "Price in cart: 0 products"


class TestOutputs:
    """Test the full text report, JSON payload and display."""

    def test_text_report(self):
        report = new_report()
        report[Category.NORMAL] = ReportRow("Normal Price", count=3, min=5.0, max=9.5)
        report[Category.CLEARANCE] = ReportRow("Clearance Price", count=1, min=2.0, max=2.0)
        assert build_text_report(report) == (
            "Normal Price: 3 products @ $5.00-$9.50\n"
            "Clearance Price: 1 products @ $2.00\n"
            "price_in_cart: 0 products"
        )

    def test_json_payload(self):
        report = new_report()
        report[Category.PRICE_IN_CART] = ReportRow("Price In Cart", count=2, min=29.98, max=49.98)
        report[Category.NORMAL] = ReportRow("normal", count=1, min=4.0)
        payload = build_json_payload(report)

        assert payload["total_count"] == 3
        assert payload["categories"][0] == {
            "category": "price_in_cart",
            "display": "Price In Cart",
            "count": 2,
            "min": 29.98,
            "max": 49.98,
        }
        assert payload["categories"][1]["max"] == 4.0
        assert payload["categories"][2] == {
            "category": "clearance",
            "display": "clearance",
            "count": 0,
            "min": None,
            "max": None,
        }

    def test_display_report_text(self):
        out = io.StringIO()
        display_report(new_report(), stream=out)
        assert out.getvalue() == (
            "clearance: 0 products\n"
            "normal: 0 products\n"
            "price_in_cart: 0 products\n"
        )

    def test_display_report_json(self):
        out = io.StringIO()
        display_report(_report_with_counts(1, 0, 0), as_json=True, stream=out)
        assert json.loads(out.getvalue())["total_count"] == 1

    def test_display_report_defaults_to_stdout(self, capsys):
        display_report(new_report())
        assert capsys.readouterr().out.startswith("clearance: 0 products")
