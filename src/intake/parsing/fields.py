"""Single-value field extractors: title, location, company, recruiter, description.

Every function takes the cleaned text and/or its line list explicitly and
returns an empty string when nothing is found.
"""

import re
from typing import List, Optional, Sequence, Tuple

from .normalize import strip_emoji

LOCATION_PIN = "\U0001F4CD"

# --- Title ---
ROLE_LABEL = re.compile(
    r"^(?:role(?:\s*\d)?|(?:job\s+)?title|position)\s*[:=]\s*(.+)$", re.IGNORECASE
)
HIRING_FOR = re.compile(r"(?:is\s+)?hiring\s+for\s+(.+?)\s*$", re.IGNORECASE | re.MULTILINE)
LEADING_PUNCT = re.compile(r"^[\s\-–—:]+")
PIPE_SUFFIX = re.compile(r"\s*\|.*$")
WORK_MODE_SUFFIX = re.compile(r"\s*[-–—]\s*(?:remote|on-?site|hybrid)\s*$", re.IGNORECASE)
GREETING = re.compile(
    r"^(?:hello|hi|hey)\b[\s,!.:-]*"
    r"(?:(?:all|everyone|connections|folks|there|team|network)\b[\s,!.:-]*)?"
    r"(?:(?:we\s+are\s+|i\s+am\s+)?accepting\s+resumes\s+for\s+(?:the\s+)?(?:role\s+(?:of\s+)?)?[\s:\-–]*)?",
    re.IGNORECASE,
)

# --- Location ---
PIN_LOCATION = re.compile(
    LOCATION_PIN + r"\uFE0F?\s*(?:location\s*:\s*)?([^\n|]+)", re.IGNORECASE
)
LABEL_LOCATION = re.compile(r"\b(?:location|loc)\s*:\s*([^\n|]+)", re.IGNORECASE)
DAYS_PARENTHETICAL = re.compile(
    r"\s*\([^)]*?\b\d+\s*days?\b[^)]*?(?:onsite|on-site|remote|hybrid|in[-\s]office)[^)]*\)",
    re.IGNORECASE,
)
NOISE_PARENTHETICAL = re.compile(
    r"\s*\([^)]*\b(?:local|only|required|dl|drivers?)\b[^)]*\)", re.IGNORECASE
)
TRAILING_SEPARATORS = re.compile(r"[\s,;:\-–—]+$")

# --- Company / recruiter ---
COMPANY_LABEL = re.compile(r"^(?:company|client|employer)(?:\s+name)?\s*[:=]\s*(.+)$", re.IGNORECASE)
COMPANY_HIRING = re.compile(r"^([A-Z][\w&.'-]*(?:\s+[A-Z][\w&.'-]*)*)\s+is\s+hiring\b")
CONTACT_LABEL = re.compile(
    r"^(?:recruiter(?:\s+name)?|contact(?:\s+person)?|poc|submitted\s+by)\s*[:=\-–]\s*(.+)$",
    re.IGNORECASE,
)
EMAIL_LABEL = re.compile(
    r"^(?:recruiter\s+|contact\s+)?e-?mail(?:\s+id)?\s*[:=\-–]\s*(.+)$", re.IGNORECASE
)
PHONE_LABEL = re.compile(
    r"^(?:recruiter\s+|contact\s+)?(?:phone|cell|mobile)(?:\s+(?:no\.?|number|#))?\s*[:=\-–]\s*(.+)$",
    re.IGNORECASE,
)
EMAIL = re.compile(r"[\w.+-]+@[\w-]+(?:\.[\w-]+)+")
STANDALONE_EMAIL = re.compile(r"^[\w.+-]+@[\w-]+(?:\.[\w-]+)+$")
PHONE = re.compile(r"\+?\(?\d[\d\s().-]{6,}\d")
NAME_SEPARATORS = re.compile(r"\s*[|,;/]\s*|\s+[-–—]\s+")

# --- Description ---
DURATION = re.compile(r"(?<!\d)\d+\+?\s*months?", re.IGNORECASE)
CONTACT_LINE = re.compile(
    r"^(?:recruiter|contact|poc|submitted\s+by|e-?mail|phone|cell|mobile)\b[^:=]*[:=]",
    re.IGNORECASE,
)


def _plain(line: str) -> str:
    return strip_emoji(line).strip()


def _first_group(pattern: re.Pattern, lines: Sequence[str]) -> Optional[str]:
    for line in lines:
        match = pattern.match(_plain(line))
        if match:
            return match.group(1).strip()
    return None


def clean_title_line(line: str) -> str:
    title = LEADING_PUNCT.sub("", _plain(line))
    title = PIPE_SUFFIX.sub("", title)
    title = WORK_MODE_SUFFIX.sub("", title)
    title = GREETING.sub("", title)
    return title.strip()


def extract_title(text: str, lines: Sequence[str]) -> str:
    """Role label, then "hiring for" phrase, then the first (or second) line."""
    labeled = _first_group(ROLE_LABEL, lines)
    if labeled is not None:
        return _plain(labeled)

    hiring = HIRING_FOR.search(text)
    if hiring:
        return _plain(hiring.group(1))

    if not lines:
        return ""
    title = clean_title_line(lines[0])
    if not title and len(lines) > 1:
        title = clean_title_line(lines[1])
    return title


def extract_location(text: str) -> str:
    match = PIN_LOCATION.search(text) or LABEL_LOCATION.search(text)
    if not match:
        return ""
    location = strip_emoji(match.group(1))
    # "(3 days onsite)" belongs to the work mode, not the place
    location = DAYS_PARENTHETICAL.sub("", location)
    location = NOISE_PARENTHETICAL.sub("", location)
    return TRAILING_SEPARATORS.sub("", location.strip())


def extract_company(lines: Sequence[str]) -> str:
    labeled = _first_group(COMPANY_LABEL, lines)
    if labeled:
        return PIPE_SUFFIX.sub("", labeled).strip()
    hiring = _first_group(COMPANY_HIRING, lines)
    return hiring or ""


def _name_from_contact(value: str) -> str:
    remainder = PHONE.sub("", EMAIL.sub("", value))
    for part in NAME_SEPARATORS.split(remainder):
        part = TRAILING_SEPARATORS.sub("", part.strip())
        if part:
            return part
    return ""


def extract_recruiter(lines: Sequence[str], platform_marker: str = "") -> Tuple[str, str, str]:
    """Return (name, email, phone) for the recruiter.

    An email carrying ``platform_marker`` was added by the platform, not the
    recruiter, and is dropped.
    """
    contact = _first_group(CONTACT_LABEL, lines) or ""
    name = _name_from_contact(contact)

    email = ""
    email_value = _first_group(EMAIL_LABEL, lines)
    email_match = EMAIL.search(email_value or "") or EMAIL.search(contact)
    if email_match:
        email = email_match.group(0)
    else:
        for line in lines:
            if STANDALONE_EMAIL.match(_plain(line)):
                email = _plain(line)
                break
    if email and platform_marker and platform_marker.lower() in email.lower():
        email = ""

    phone = ""
    phone_value = _first_group(PHONE_LABEL, lines)
    phone_match = PHONE.search(phone_value or "") or PHONE.search(contact)
    if phone_match:
        phone = phone_match.group(0).strip()

    return name, email, phone


def _is_description_noise(line: str) -> bool:
    if LOCATION_PIN in line:
        return True
    plain = _plain(line)
    return bool(CONTACT_LINE.match(plain) or STANDALONE_EMAIL.match(plain))


def assemble_description(text: str, lines: Sequence[str], raw_text: str = "") -> str:
    """Residual lines after the title, led by a duration line when one is stated.

    Falls back to the whole cleaned text (or the raw text when cleaning left
    nothing) so the description is only empty for empty input.
    """
    residual: List[str] = [line for line in lines[1:] if not _is_description_noise(line)]
    if residual:
        duration = DURATION.search(text)
        if duration:
            residual.insert(0, f"Duration: {duration.group(0)}")
        return "\n".join(residual)
    return text if text.strip() else raw_text
