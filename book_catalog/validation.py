import re
from typing import Any, Dict, Mapping, Optional

from .errors import InvalidParameter, InvalidYear, MissingField

MIN_YEAR = 1500
MAX_YEAR = 2024

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _to_int(raw: Any) -> Optional[int]:
    """Whole-number value of ``raw``, or None when it is not one."""
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        return int(raw) if raw.is_integer() else None
    if isinstance(raw, str):
        text = raw.strip()
        if not _INT_RE.fullmatch(text):
            return None
        try:
            return int(text)
        except ValueError:
            # past the interpreter's digit limit
            return None
    return None


def validate_year(raw: Any) -> int:
    """
    Parse a publication year.
    Raises InvalidYear unless it is a whole number in MIN_YEAR..MAX_YEAR.
    """
    year = _to_int(raw)
    if year is None or not MIN_YEAR <= year <= MAX_YEAR:
        raise InvalidYear(
            f"Year should be a valid number between {MIN_YEAR} and {MAX_YEAR}"
        )
    return year


def parse_int(raw: Any, default: int, name: str) -> int:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return default
    value = _to_int(raw)
    if value is None:
        raise InvalidParameter(f"'{name}' should be a whole number")
    return value


def _text(data: Mapping[str, Any], name: str) -> str:
    value = data.get(name)
    return str(value).strip() if value is not None else ""


def validate_book(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Build the complete field set for a create or update.

    The year is checked first, then title and author must be non-blank.
    A blank genre is stored as None.
    """
    year = validate_year(data.get("year"))

    title = _text(data, "title")
    author = _text(data, "author")
    if not title or not author:
        raise MissingField("Please fill in Title and Author.")

    return {
        "title": title,
        "author": author,
        "genre": _text(data, "genre") or None,
        "year": year,
    }
