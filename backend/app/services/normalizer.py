import re
from typing import Dict, Optional

from app.schemas.product_schema import ProductCandidate

DEFAULT_UNIT = "pcs"
DEFAULT_CATEGORY = "Uncategorized"
DEFAULT_BRAND = "Unknown"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def parse_stock(raw: Optional[str]) -> int:
    """
    Lenient integer parse for imported stock cells: leading digits win
    ("12", " 12 ", "12.5", "12 boxes" -> 12). Missing, unparseable or
    negative values count as 0.
    """
    if not raw:
        return 0
    m = _LEADING_INT.match(raw)
    if not m:
        return 0
    return max(int(m.group(1)), 0)


def normalize_row(row: Dict[str, str]) -> Optional[ProductCandidate]:
    """Turn a parsed CSV row into a candidate product, or None when the row must be skipped."""
    name = (row.get("name") or "").strip()
    if not name:
        return None

    # the status column is never trusted; it is derived from stock
    return ProductCandidate(
        name=name,
        unit=row.get("unit") or DEFAULT_UNIT,
        category=row.get("category") or DEFAULT_CATEGORY,
        brand=row.get("brand") or DEFAULT_BRAND,
        stock=parse_stock(row.get("stock")),
        image=row.get("image") or None,
    )
