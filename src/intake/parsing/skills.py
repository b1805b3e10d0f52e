"""Skills extraction.

Three strategies feed one ordered, de-duplicated list:

1. dictionary scan over the whole text
2. tokens from "must have" / "required" / "tech stack" style blocks
3. tokens from "plus" / "nice to have" / "preferred" style blocks

Only tokens present in ``SKILL_DICTIONARY`` are ever kept.
"""

import re
from typing import Iterable, Iterator, List, Mapping, Set, Tuple

from .normalize import strip_emoji
from .vocabulary import NOISE_WORDS, SKILL_DICTIONARY

MIN_TOKEN_LENGTH = 2
MAX_TOKEN_LENGTH = 60

_HEADER_LEAD = r"^[\s\-–—*•·>]*"
_HEADER_TAIL = r"\b\s*:?\s*(?P<rest>.*)$"

REQUIRED_HEADER = re.compile(
    _HEADER_LEAD
    + r"(?:must[\s-]+haves?|mandatory\s+skills|skills\s+required|required\s+skills|required"
    + r"|technologies|tech\s+stack|key\s+skills|knowledge\s*/\s*skills)"
    + _HEADER_TAIL,
    re.IGNORECASE,
)
PLUS_HEADER = re.compile(
    _HEADER_LEAD
    + r"(?:nice[\s-]+to[\s-]+haves?|good[\s-]+to[\s-]+haves?|preferred\s*/\s*recommended|preferred|bonus|plus)"
    + _HEADER_TAIL,
    re.IGNORECASE,
)
# "Responsibilities:", "Nice to have: Kafka", ...
LABEL_LINE = re.compile(r"^[A-Z][^:\n]{0,40}:")

TOKEN_SEPARATORS = re.compile(r"[,;|\n•·▪●◦➤►]")
PLUS_JOIN = re.compile(r"\s*(?<!\+)\+(?!\+)\s*")
LEADING_BULLET = re.compile(r"^[\s\-–—*>]+")
PARENTHETICAL = re.compile(r"\([^)]*\)")


def _compile_dictionary(dictionary: Mapping[str, str]) -> Tuple[Tuple[re.Pattern, str], ...]:
    return tuple(
        (re.compile(rf"(?<![A-Za-z0-9]){re.escape(key)}(?![A-Za-z0-9])", re.IGNORECASE), canonical)
        for key, canonical in dictionary.items()
    )


DICTIONARY_PATTERNS = _compile_dictionary(SKILL_DICTIONARY)


def _is_header(line: str) -> bool:
    return bool(
        LABEL_LINE.match(line) or REQUIRED_HEADER.match(line) or PLUS_HEADER.match(line)
    )


def capture_blocks(text: str, header: re.Pattern) -> List[str]:
    """Collect the text following each ``header`` line.

    A block runs until a blank line, the next header-looking line, or the end
    of the text. Content on the header line itself after the label is kept.
    """
    blocks: List[str] = []
    raw_lines = text.split("\n")
    index = 0
    while index < len(raw_lines):
        match = header.match(strip_emoji(raw_lines[index]).strip())
        index += 1
        if not match:
            continue
        parts = [match.group("rest")] if match.group("rest").strip() else []
        while index < len(raw_lines):
            line = strip_emoji(raw_lines[index]).strip()
            if not line or _is_header(line):
                break
            parts.append(line)
            index += 1
        if parts:
            blocks.append("\n".join(parts))
    return blocks


def tokenize_block(block: str) -> Iterator[str]:
    for piece in TOKEN_SEPARATORS.split(block):
        for token in PLUS_JOIN.split(piece):
            token = LEADING_BULLET.sub("", strip_emoji(token))
            token = PARENTHETICAL.sub("", token).strip().rstrip(".:").strip()
            if MIN_TOKEN_LENGTH <= len(token) <= MAX_TOKEN_LENGTH:
                yield token


def _is_noise(token: str) -> bool:
    words = token.lower().split()
    return all(word in NOISE_WORDS for word in words)


def _skills_from_blocks(text: str, header: re.Pattern) -> Iterator[str]:
    for block in capture_blocks(text, header):
        for token in tokenize_block(block):
            if _is_noise(token):
                continue
            canonical = SKILL_DICTIONARY.get(token.lower())
            if canonical:
                yield canonical


def _dictionary_scan(text: str) -> Iterator[str]:
    for pattern, canonical in DICTIONARY_PATTERNS:
        if pattern.search(text):
            yield canonical


def _merge(candidates: Iterable[str], seen: Set[str], skills: List[str]) -> None:
    for skill in candidates:
        key = skill.lower()
        if key not in seen:
            seen.add(key)
            skills.append(skill)


def extract_skills(text: str) -> List[str]:
    """Return canonical skill names in first-seen order across all strategies."""
    seen: Set[str] = set()
    skills: List[str] = []
    _merge(_dictionary_scan(text), seen, skills)
    _merge(_skills_from_blocks(text, REQUIRED_HEADER), seen, skills)
    _merge(_skills_from_blocks(text, PLUS_HEADER), seen, skills)
    return skills
