"""Structured records produced by the paste parsers."""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

RecordKind = Literal["job", "candidate"]
JobType = Literal["full_time", "part_time", "contract", ""]
JobSubtype = Literal["c2c", "c2h", "w2", "1099", "direct_hire", "salary", ""]
WorkMode = Literal["remote", "onsite", "hybrid", ""]

NUMERIC_JOB_FIELDS = ("salary_min", "salary_max", "pay_per_hour", "experience_required")


class ExtractedJobRecord(BaseModel):
    """
    Structured view of one pasted job posting.

    Absence is an empty string for text fields and ``None`` (undefined) for
    numbers. Records are built once per parse call and never mutated.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    title: str = ""
    description: str = ""
    company: str = ""
    location: str = ""

    job_type: JobType = ""
    job_subtype: JobSubtype = ""
    work_mode: WorkMode = ""

    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    pay_per_hour: Optional[float] = None

    skills_required: List[str] = Field(default_factory=list)
    experience_required: Optional[int] = None

    recruiter_name: str = ""
    recruiter_email: str = ""
    recruiter_phone: str = ""

    def to_payload(self) -> Dict[str, Any]:
        """Plain dict for consumers; undefined numbers are left out."""
        return self.model_dump(exclude_none=True)

    @classmethod
    def from_external(cls, payload: Dict[str, Any]) -> "ExtractedJobRecord":
        """
        Build a record from the alternate (AI-backed) extraction path.

        That path reports missing values as ``null``; they are folded into the
        same empty/undefined defaults the heuristic parser uses.
        """
        cleaned: Dict[str, Any] = {}
        for key, value in payload.items():
            if key not in cls.model_fields:
                continue
            if value is None:
                if key == "skills_required":
                    cleaned[key] = []
                elif key not in NUMERIC_JOB_FIELDS:
                    cleaned[key] = ""
                continue
            cleaned[key] = value
        return cls.model_validate(cleaned)


class ExtractedCandidateRecord(BaseModel):
    """Candidate profile read from ``Key: Value`` pasted text."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    current_company: str = ""
    current_role: str = ""
    preferred_job_type: JobType = ""
    expected_hourly_rate: Optional[float] = None
    experience_years: Optional[float] = None
    skills: List[str] = Field(default_factory=list)
    bio: str = ""
    resume_summary: str = ""
    resume_experience: str = ""
    resume_education: str = ""
    resume_achievements: str = ""

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
