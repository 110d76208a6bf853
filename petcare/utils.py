# petcare/utils.py
from typing import Any, Dict, Optional
import math
import re

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 25
MAX_LIMIT = 100
# skip + limit tiene que caber en un int64 de BSON
INT64_MAX = 2 ** 63 - 1
MAX_PAGE = INT64_MAX // MAX_LIMIT - 1

_LEADING_INT = re.compile(r"^\s*([+-]?)0*(\d+)")

def format_pet(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Convierte _id -> id (str) y deja el resto de campos tal cual, en su orden.
    Si doc es None, devuelve None.
    """
    if doc is None:
        return None
    d = dict(doc)
    _id = d.pop("_id", None)
    return {"id": str(_id) if _id is not None else None, **d}

# ==================== Paginación ====================

def parse_int_param(value: Optional[str]) -> Optional[int]:
    """
    Lee el entero inicial de un query param ("2abc" -> 2).
    Devuelve None si no hay número.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    sign, digits = match.groups()
    # números enormes se saturan en vez de convertirse entero a entero
    number = INT64_MAX if len(digits) > 19 else min(int(digits), INT64_MAX)
    return -number if sign == "-" else number

def resolve_pagination(page: Optional[str], limit: Optional[str]) -> tuple[int, int, int]:
    """Devuelve (page, limit, skip) ya acotados."""
    parsed_page = parse_int_param(page)
    parsed_limit = parse_int_param(limit)
    page_n = min(max(parsed_page if parsed_page is not None else DEFAULT_PAGE, 1), MAX_PAGE)
    limit_n = min(max(parsed_limit if parsed_limit is not None else DEFAULT_LIMIT, 1), MAX_LIMIT)
    return page_n, limit_n, (page_n - 1) * limit_n

def total_pages(total: int, limit: int) -> int:
    return math.ceil(total / limit) or 1
