"""
Category key matching for "Type" rows.

Matching pipeline (in order of confidence):
  1. Exact match against category keys (case-insensitive)
  2. Alias match against known aliases
  3. Fuzzy match using thefuzz (Levenshtein distance)

Keys that match nothing resolve to None and the row is skipped, so an
unknown key can never add a category to the report.
"""

from thefuzz import fuzz

from category_data import Category, CATEGORY_ALIASES, FUZZY_THRESHOLD


def match_category(key: str | None, threshold: int = FUZZY_THRESHOLD) -> dict:
    """
    Match a "Type" row key against the fixed categories.

    Returns:
        category: The matched Category (or None)
        match_type: "exact", "alias", "fuzzy", or "none"
        confidence: 0.0 to 1.0
    """
    if not key or not key.strip():
        return {"category": None, "match_type": "none", "confidence": 0.0}

    key_lower = key.strip().lower()

    # 1. Exact match
    for category in Category:
        if key_lower == category.value:
            return {"category": category, "match_type": "exact", "confidence": 1.0}

    # 2. Alias match
    for category, aliases in CATEGORY_ALIASES.items():
        if key_lower in aliases:
            return {"category": category, "match_type": "alias", "confidence": 0.95}

    # 3. Fuzzy match
    best_score = 0
    best_match = None
    for category in Category:
        score = fuzz.ratio(key_lower, category.value)
        if score > best_score:
            best_score = score
            best_match = category

        for alias in CATEGORY_ALIASES.get(category, []):
            score = fuzz.ratio(key_lower, alias)
            if score > best_score:
                best_score = score
                best_match = category

    if best_score >= threshold:
        return {"category": best_match, "match_type": "fuzzy", "confidence": best_score / 100}

    return {"category": None, "match_type": "none", "confidence": 0.0}
