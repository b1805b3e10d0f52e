"""Explicit ``Key: Value`` job fields.

The intake form's own paste layout states fields outright ("Salary Min:
130000", "Job Type: full_time"). Whatever is read here takes precedence over
the keyword heuristics for the same field.
"""

import re
from typing import Any, Dict, List, Optional, get_args

from ..models.records import JobSubtype, JobType, WorkMode
from .candidate_parser import get_value, parse_number

JOB_TYPE_VALUES = frozenset(v for v in get_args(JobType) if v)
JOB_SUBTYPE_VALUES = frozenset(v for v in get_args(JobSubtype) if v)
WORK_MODE_VALUES = frozenset(v for v in get_args(WorkMode) if v)


def _choice(value: str, choices: frozenset, separators: str, joiner: str) -> str:
    normalized = re.sub(separators, joiner, value.strip().lower())
    return normalized if normalized in choices else ""


def _amount(value: str) -> Optional[float]:
    number = parse_number(value.replace(",", "").lstrip("$ "))
    if number is None or number < 0:
        return None
    return number


def read_job_labels(text: str) -> Dict[str, Any]:
    """Labeled job fields present in ``text``, keyed by record field name.

    Only fields with a usable value are returned; an unknown enum value or an
    unparseable number leaves the field to the heuristics.
    """
    labels: Dict[str, Any] = {}

    description = get_value(text, "Description", "Job Description")
    if description:
        labels["description"] = description

    job_type = _choice(get_value(text, "Job Type", "Type"), JOB_TYPE_VALUES, r"[\s-]+", "_")
    if job_type:
        labels["job_type"] = job_type

    subtype = _choice(
        get_value(text, "Sub Type", "Subtype", "Job Subtype"), JOB_SUBTYPE_VALUES, r"[\s-]+", "_"
    )
    if subtype:
        labels["job_subtype"] = subtype

    # "On-site" and "on site" both mean onsite
    work_mode = _choice(get_value(text, "Work Mode", "Mode"), WORK_MODE_VALUES, r"[\s_-]+", "")
    if work_mode:
        labels["work_mode"] = work_mode

    for field, keys in (
        ("salary_min", ("Salary Min", "Min Salary")),
        ("salary_max", ("Salary Max", "Max Salary")),
        ("pay_per_hour", ("Pay Per Hour", "Hourly Pay")),
    ):
        amount = _amount(get_value(text, *keys))
        if amount is not None:
            labels[field] = amount

    experience = _amount(get_value(text, "Experience Required", "Required Experience"))
    if experience is not None:
        labels["experience_required"] = int(experience)

    skills: List[str] = [
        skill.strip()
        for skill in get_value(text, "Skills Required", "Skills", "Required Skills").split(",")
        if skill.strip()
    ]
    if skills:
        labels["skills_required"] = skills

    return labels
