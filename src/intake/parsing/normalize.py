"""Text normalization shared by every extraction stage."""

import re
from typing import List, Tuple

HASHTAG_TOKEN = re.compile(r"hashtag#\w+", re.IGNORECASE)
HASH_WORD = re.compile(r"#\w+")
HASHTAG_WORD = re.compile(r"\bhashtag\b", re.IGNORECASE)

EMOJI = re.compile(
    "["
    "\U0001F000-\U0001FAFF"
    "\u2300-\u23FF"
    "\u2600-\u27BF"
    "\u2B00-\u2BFF"
    "\uFE0F"
    "\u200D"
    "]"
)


def strip_emoji(text: str) -> str:
    return EMOJI.sub("", text)


def clean_text(raw_text: str) -> str:
    """Drop LinkedIn hashtag noise and carriage returns; everything else is kept."""
    text = raw_text.replace("\r", "")
    text = HASHTAG_TOKEN.sub("", text)
    text = HASH_WORD.sub("", text)
    text = HASHTAG_WORD.sub("", text)
    return text


def split_lines(text: str) -> List[str]:
    return [line.strip() for line in text.split("\n") if line.strip()]


def normalize(raw_text: str) -> Tuple[str, List[str]]:
    """Return the cleaned full text and its non-empty, trimmed lines."""
    text = clean_text(raw_text)
    return text, split_lines(text)
