"""
Pattern recognizers for heading lines of the menu pages.

Every recognizer returns a `(value, matched)` pair and never raises: a line that
does not match, or whose number cannot be converted, is reported as unmatched.
"""
import re
from enum import Enum


DATE_RE = re.compile(r"^\s*([0-9]{2})\.([0-9]{2})\.([0-9]{4})\b")  # 07.02.2026 Cumartesi
KCAL_RE = re.compile(r"Kalori:\s*([0-9]+)", re.IGNORECASE)
PRICE_RE = re.compile(r"Fiyat[ıi]:\s*([0-9]+)", re.IGNORECASE)


class LineKind(Enum):
    DATE = "date"
    CALORIE = "calorie"
    PRICE = "price"
    LABEL = "label"


def _parse_int(pattern: re.Pattern, text: str) -> tuple[int, bool]:
    match = pattern.search(text)
    if match is None:
        return 0, False
    try:
        return int(match.group(1)), True
    except ValueError:
        return 0, False


def parse_date(text: str) -> tuple[str, bool]:
    """Convert a leading `DD.MM.YYYY` into ISO `YYYY-MM-DD`."""
    match = DATE_RE.match(text)
    if match is None:
        return "", False
    day, month, year = match.groups()
    return f"{year}-{month}-{day}", True


def parse_kcal(text: str) -> tuple[int, bool]:
    """Extract N from `Kalori: N`."""
    return _parse_int(KCAL_RE, text)


def parse_price(text: str) -> tuple[int, bool]:
    """Extract N from `Fiyatı: N` / `Fiyati: N`."""
    return _parse_int(PRICE_RE, text)


def classify_line(text: str) -> LineKind:
    """Classify a heading line, checking date, calorie and price in that order."""
    if parse_date(text)[1]:
        return LineKind.DATE
    if parse_kcal(text)[1]:
        return LineKind.CALORIE
    if parse_price(text)[1]:
        return LineKind.PRICE
    return LineKind.LABEL
