"""
Reference data for the pricing report.

The three pricing categories are fixed. Each one carries its default display
label and the aliases a "Type" row may use to refer to it.

Tunables can be overridden from the environment or a .env file:
    REPORT_QUANTITY_MINIMUM, REPORT_STDIN_TIMEOUT,
    REPORT_DELIMITER, REPORT_FUZZY_THRESHOLD
"""

import os
from enum import Enum

from dotenv import load_dotenv

load_dotenv()


class Category(Enum):
    """Pricing buckets, in default report order."""
    CLEARANCE = "clearance"
    NORMAL = "normal"
    PRICE_IN_CART = "price_in_cart"


# ── Category Aliases ────────────────────────────────────────────────
CATEGORY_ALIASES = {
    Category.CLEARANCE: [
        "clearance price", "clearance-price", "clearance_price",
    ],
    Category.NORMAL: [
        "normal price", "normal-price", "normal_price",
    ],
    Category.PRICE_IN_CART: [
        "price in cart", "price-in-cart", "priceincart",
    ],
}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


# ── Thresholds ──────────────────────────────────────────────────────
QUANTITY_MINIMUM = _env_int("REPORT_QUANTITY_MINIMUM", 3)   # Below this stock, a product is skipped
STDIN_TIMEOUT_SECONDS = _env_float("REPORT_STDIN_TIMEOUT", 0.1)
DELIMITER = os.environ.get("REPORT_DELIMITER") or ","
FUZZY_THRESHOLD = _env_int("REPORT_FUZZY_THRESHOLD", 85)

# ── Row Discriminators ──────────────────────────────────────────────
ROW_TYPE = "Type"
ROW_PRODUCT = "Product"
IN_CART_TRUE = "true"
