"""Heuristic job-posting extractor.

Every stage reads the same cleaned text (and line list); no stage consumes
another stage's output. Stages degrade to empty/undefined values instead of
raising, so any input string yields a well-formed record.

Explicit ``Key: Value`` labels are read first and win over the heuristics for
the fields they name.
"""

import logging
from typing import List, Sequence

from ..models.records import ExtractedJobRecord
from .classify import infer_job_subtype, infer_job_type, infer_work_mode
from .compensation import extract_experience, extract_hourly_rate, extract_salary_range
from .fields import (
    assemble_description,
    extract_company,
    extract_location,
    extract_recruiter,
    extract_title,
)
from .labels import read_job_labels
from .normalize import normalize
from .skills import extract_skills

logger = logging.getLogger(__name__)


def _merge_skills(labeled: Sequence[str], inferred: Sequence[str]) -> List[str]:
    seen = set()
    skills = []
    for skill in [*labeled, *inferred]:
        if skill.lower() not in seen:
            seen.add(skill.lower())
            skills.append(skill)
    return skills


def extract_job(raw_text: str, platform_marker: str = "") -> ExtractedJobRecord:
    """Parse a pasted recruiter blurb into an ``ExtractedJobRecord``."""
    text, lines = normalize(raw_text)
    labels = read_job_labels(text)

    salary_min, salary_max = extract_salary_range(text)
    recruiter_name, recruiter_email, recruiter_phone = extract_recruiter(lines, platform_marker)

    fields = dict(
        title=extract_title(text, lines),
        description=assemble_description(text, lines, raw_text),
        company=extract_company(lines),
        location=extract_location(text),
        job_type=infer_job_type(text),
        job_subtype=infer_job_subtype(text),
        work_mode=infer_work_mode(text),
        salary_min=salary_min,
        salary_max=salary_max,
        pay_per_hour=extract_hourly_rate(text),
        experience_required=extract_experience(text),
        recruiter_name=recruiter_name,
        recruiter_email=recruiter_email,
        recruiter_phone=recruiter_phone,
    )
    fields.update(labels)
    fields["skills_required"] = _merge_skills(labels.get("skills_required", []), extract_skills(text))

    record = ExtractedJobRecord(**fields)

    logger.debug(
        f"Extracted job record: title={record.title!r} skills={len(record.skills_required)} "
        f"work_mode={record.work_mode!r} subtype={record.job_subtype!r} labels={sorted(labels)}"
    )
    return record
