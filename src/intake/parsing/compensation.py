"""Compensation and experience extraction."""

import re
from typing import Optional, Tuple

_AMOUNT = r"(\d[\d,]*(?:\.\d+)?)"

HOURLY_PATTERN = re.compile(rf"\$\s*{_AMOUNT}\s*(?:/\s*|per\s+)h(?:ou)?r", re.IGNORECASE)
RANGE_PATTERN = re.compile(
    rf"\$\s*{_AMOUNT}\s*(k)?\s*(?:-|–|—|to)\s*\$?\s*{_AMOUNT}\s*(k)?",
    re.IGNORECASE,
)

EXPERIENCE_PATTERNS = (
    re.compile(r"\bexp(?:erience)?\s*[:=]?\s*(\d+)\+?\s*(?:years?|yrs?|yr)?", re.IGNORECASE),
    re.compile(
        r"(?<!\d)(\d+)\+?\s*(?:years?|yrs?)\s*(?:of\s*)?(?:industry\s*)?(?:experience|exp)?",
        re.IGNORECASE,
    ),
)

# Range figures below this are read as thousands ("120-150" means 120k-150k)
THOUSANDS_THRESHOLD = 1000


def parse_amount(raw: str) -> Optional[float]:
    try:
        return float(raw.replace(",", ""))
    except ValueError:
        return None


def _annualize(value: float) -> float:
    return value * 1000 if value < THOUSANDS_THRESHOLD else value


def extract_hourly_rate(text: str) -> Optional[float]:
    match = HOURLY_PATTERN.search(text)
    if not match:
        return None
    return parse_amount(match.group(1))


def extract_salary_range(text: str) -> Tuple[Optional[float], Optional[float]]:
    """Return (salary_min, salary_max) from a "$120k - $150k" style range."""
    match = RANGE_PATTERN.search(text)
    if not match:
        return None, None
    low = parse_amount(match.group(1))
    high = parse_amount(match.group(3))
    if low is None or high is None:
        return None, None
    return _annualize(low), _annualize(high)


def extract_experience(text: str) -> Optional[int]:
    for pattern in EXPERIENCE_PATTERNS:
        match = pattern.search(text)
        if match:
            try:
                return int(match.group(1))
            except ValueError:
                # digit strings past the interpreter's int conversion limit
                return None
    return None
