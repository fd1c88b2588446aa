"""
Read-only views over a catalog snapshot.

Every function here is pure: it takes a list of product dicts and
returns a new value without touching the store. ``query_products``
applies the category filter, then the name search, then pagination.
"""

import re
import sys
from typing import Any, Dict, List, Optional

_INT_PREFIX = re.compile(r"^\s*([+-]?)([0-9]+)")

UNCATEGORIZED = "uncategorized"


def parse_int(raw: Optional[str]) -> Optional[int]:
    """Leading-integer parse: ``"2"`` and ``"2abc"`` give 2, ``"abc"`` gives None."""
    if raw is None:
        return None
    m = _INT_PREFIX.match(str(raw))
    if not m:
        return None
    sign = -1 if m.group(1) == "-" else 1
    try:
        return sign * int(m.group(2))
    except ValueError:
        # past the int conversion digit limit; clamp so paging stays out of range
        return sign * sys.maxsize


def filter_by_category(products: List[Dict[str, Any]], category: Optional[str]) -> List[Dict[str, Any]]:
    if not category:
        return list(products)
    wanted = category.lower()
    return [p for p in products if p.get("category") and p["category"].lower() == wanted]


def search_by_name(products: List[Dict[str, Any]], term: Optional[str]) -> List[Dict[str, Any]]:
    if not term:
        return list(products)
    term = term.lower()
    return [p for p in products if term in (p.get("name") or "").lower()]


def paginate(products: List[Dict[str, Any]], page: Optional[str] = None, limit: Optional[str] = None) -> Dict[str, Any]:
    page_num = parse_int(page)
    if not page_num or page_num < 1:
        page_num = 1
    size = parse_int(limit)
    if not size or size < 1:
        size = len(products)
    start = (page_num - 1) * size
    return {
        "page": page_num,
        "limit": size,
        "total": len(products),
        "data": products[start:start + size],
    }


def query_products(
    products: List[Dict[str, Any]],
    category: Optional[str] = None,
    search: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
) -> Dict[str, Any]:
    result = filter_by_category(products, category)
    result = search_by_name(result, search)
    return paginate(result, page, limit)


def category_stats(products: List[Dict[str, Any]]) -> Dict[str, Any]:
    stats: Dict[str, int] = {}
    for p in products:
        key = p.get("category") or UNCATEGORIZED
        stats[key] = stats.get(key, 0) + 1
    return {"totalProducts": len(products), "stats": stats}
