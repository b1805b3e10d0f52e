"""
Entry point for paste parsing.

Picks the job or candidate reader for a record kind and coerces whatever the
caller hands over into text first.
"""

from typing import Any, Optional, Union

from .config import settings
from .logging_config import setup_logging
from .models.records import ExtractedCandidateRecord, ExtractedJobRecord
from .parsing import extract_job, parse_candidate_text

# Create module-specific logger
logger = setup_logging("intake.parser")

RECORD_KINDS = ("job", "candidate")

CANDIDATE_TEMPLATE = """Name: John Doe
Email: john.doe@email.com
Phone: 555-123-4567
Location: New York, NY
Current Company: Tech Corp
Current Role: Senior Developer
Preferred Job Type: full_time
Experience Years: 5
Expected Hourly Rate: 75
Skills: React, Node.js, TypeScript, MongoDB, AWS
Bio: Experienced full-stack developer with a passion for building scalable applications.
Resume Summary: Full-stack developer with 5+ years of experience building enterprise-grade web apps.
Resume Experience: Senior Developer at Tech Corp (2020-present) - Led a team of 5 engineers.
Resume Education: BS Computer Science, MIT, 2018
Resume Achievements: Led migration to microservices, reducing deploy time by 60%"""

JOB_TEMPLATE = """Title: Senior React Developer
Company: Innovation Labs
Location: San Francisco, CA
Description: We are looking for an experienced React developer to lead our frontend architecture. Must have strong TypeScript skills.
Job Type: full_time
Sub Type: w2
Work Mode: hybrid
Salary Min: 130000
Salary Max: 165000
Skills Required: React, TypeScript, Redux, GraphQL, CSS, Jest
Experience Required: 5
Recruiter Name: Emily Watson
Recruiter Email: emily@innovationlabs.com
Recruiter Phone: 555-111-2222"""


def coerce_text(text: Any) -> str:
    """Turn any input into text; parsing never fails on what it is given."""
    if text is None:
        return ""
    if isinstance(text, (bytes, bytearray)):
        return bytes(text).decode("utf-8", errors="replace")
    if isinstance(text, str):
        return text
    return str(text)


def _check_kind(kind: str) -> str:
    normalized = (kind or "").strip().lower()
    if normalized not in RECORD_KINDS:
        raise ValueError(f"Unknown record kind: {kind!r} (expected one of {RECORD_KINDS})")
    return normalized


def example_text(kind: str = "job") -> str:
    """Sample paste for ``kind``."""
    return CANDIDATE_TEMPLATE if _check_kind(kind) == "candidate" else JOB_TEMPLATE


def parse_posting(
    text: Any,
    kind: str = "job",
    platform_marker: Optional[str] = None,
) -> Union[ExtractedJobRecord, ExtractedCandidateRecord]:
    """
    Parse pasted text into a structured record.

    Args:
        text: The pasted text (str, bytes or anything str()-able)
        kind: "job" or "candidate"
        platform_marker: Emails containing this marker are dropped; defaults
            to the configured platform marker

    Returns:
        ExtractedJobRecord or ExtractedCandidateRecord

    Raises:
        ValueError: If ``kind`` is not a known record kind
    """
    kind = _check_kind(kind)
    raw_text = coerce_text(text)

    if kind == "candidate":
        record = parse_candidate_text(raw_text)
    else:
        marker = settings.platform_email_marker if platform_marker is None else platform_marker
        record = extract_job(raw_text, marker)

    logger.debug(f"Parsed {kind} posting ({len(raw_text)} chars)")
    return record
