"""
Recruitment intake: turns pasted recruiter text into structured job and
candidate records.
"""

from .models import ExtractedCandidateRecord, ExtractedJobRecord
from .parser import example_text, parse_posting

__version__ = "0.1.0"

__all__ = [
    "ExtractedCandidateRecord",
    "ExtractedJobRecord",
    "example_text",
    "parse_posting",
]
