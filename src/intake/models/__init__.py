"""
Data models for the intake parsers.
"""

from .records import (
    ExtractedCandidateRecord,
    ExtractedJobRecord,
    JobSubtype,
    JobType,
    RecordKind,
    WorkMode,
)

__all__ = [
    "ExtractedCandidateRecord",
    "ExtractedJobRecord",
    "JobSubtype",
    "JobType",
    "RecordKind",
    "WorkMode",
]
