"""Reader for candidate profiles pasted as ``Key: Value`` lines."""

import math
import re
from typing import Optional

from ..models.records import ExtractedCandidateRecord

JOB_TYPES = ("full_time", "part_time", "contract")
LEADING_NUMBER = re.compile(r"^\s*[-+]?\d+(?:\.\d+)?")


def get_value(text: str, *keys: str) -> str:
    """Value of the first ``Key: value`` line found, trying ``keys`` in order."""
    for key in keys:
        match = re.search(rf"^{re.escape(key)}[ \t]*[:=][ \t]*(.+)$", text, re.IGNORECASE | re.MULTILINE)
        if match and match.group(1).strip():
            return match.group(1).strip()
    return ""


def parse_number(value: str) -> Optional[float]:
    """Leading numeric prefix of ``value`` ("5+ years" -> 5.0); None when absent."""
    match = LEADING_NUMBER.match(value)
    if not match:
        return None
    number = float(match.group(0))
    if not math.isfinite(number):
        return None
    return number or None


def parse_candidate_text(text: str) -> ExtractedCandidateRecord:
    text = text.replace("\r", "")

    job_type = re.sub(r"\s+", "_", get_value(text, "Preferred Job Type", "Job Type").lower())
    if job_type not in JOB_TYPES:
        job_type = ""

    skills = [skill.strip() for skill in get_value(text, "Skills").split(",") if skill.strip()]

    return ExtractedCandidateRecord(
        name=get_value(text, "Name"),
        email=get_value(text, "Email"),
        phone=get_value(text, "Phone"),
        location=get_value(text, "Location"),
        current_company=get_value(text, "Current Company", "Company"),
        current_role=get_value(text, "Current Role", "Role"),
        preferred_job_type=job_type,
        expected_hourly_rate=parse_number(get_value(text, "Expected Hourly Rate", "Hourly Rate")),
        experience_years=parse_number(get_value(text, "Experience Years", "Experience")),
        skills=skills,
        bio=get_value(text, "Bio"),
        resume_summary=get_value(text, "Resume Summary", "Summary"),
        resume_experience=get_value(text, "Resume Experience", "Experience Details"),
        resume_education=get_value(text, "Resume Education", "Education"),
        resume_achievements=get_value(text, "Resume Achievements", "Achievements"),
    )
