"""Keyword-precedence classifiers for work mode, job type and job subtype.

Each classifier walks an ordered list of (pattern, value) pairs; the first
pattern found anywhere in the text decides the value.
"""

import re
from typing import Sequence, Tuple

from ..models.records import JobSubtype, JobType, WorkMode

Rule = Tuple[re.Pattern, str]

DAYS_ONSITE = r"(?<!\d)\d+\s*days?\s*(?:a\s+week\s+|per\s+week\s+|/\s*week\s+)?(?:onsite|on-site|in[-\s]office)"

WORK_MODE_RULES: Sequence[Rule] = (
    (re.compile(rf"\bhybrid\b|{DAYS_ONSITE}", re.IGNORECASE), "hybrid"),
    (re.compile(r"\bon-?site\b|\bin[-\s]office\b|\bin[-\s]person\b", re.IGNORECASE), "onsite"),
    (re.compile(r"\bremote\b|\bwfh\b|\bwork\s+from\s+home\b|\btelecommut", re.IGNORECASE), "remote"),
)

JOB_SUBTYPE_RULES: Sequence[Rule] = (
    (re.compile(r"\bc2c\b|\bcorp[-\s]+to[-\s]+corp\b", re.IGNORECASE), "c2c"),
    (re.compile(r"\bcth\b|\bc2h\b|\bcontract[-\s]+to[-\s]+hire\b", re.IGNORECASE), "c2h"),
    (re.compile(r"\bw-?2\b", re.IGNORECASE), "w2"),
    (re.compile(r"\b1099\b"), "1099"),
    (re.compile(r"\bdirect[-\s]+hire\b|\bdirect\s+client\b", re.IGNORECASE), "direct_hire"),
    (re.compile(r"\bsalar(?:y|ied)\b", re.IGNORECASE), "salary"),
)

JOB_TYPE_RULES: Sequence[Rule] = (
    (re.compile(r"\bfull[-\s_]?time\b|\bfte\b|\bpermanent\b|\bperm\b", re.IGNORECASE), "full_time"),
    (re.compile(r"\bpart[-\s_]?time\b", re.IGNORECASE), "part_time"),
    (
        re.compile(
            r"\bcontract(?:or|ual)?\b|\bcth\b|\bc2c\b|\bc2h\b|\bw-?2\b|\b1099\b|\bconsult(?:ant|ing)\b",
            re.IGNORECASE,
        ),
        "contract",
    ),
)


def first_match(text: str, rules: Sequence[Rule]) -> str:
    for pattern, value in rules:
        if pattern.search(text):
            return value
    return ""


def infer_work_mode(text: str) -> WorkMode:
    return first_match(text, WORK_MODE_RULES)


def infer_job_subtype(text: str) -> JobSubtype:
    return first_match(text, JOB_SUBTYPE_RULES)


def infer_job_type(text: str) -> JobType:
    return first_match(text, JOB_TYPE_RULES)
