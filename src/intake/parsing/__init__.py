"""
Heuristic parsers for pasted job postings and candidate profiles.
"""

from .candidate_parser import parse_candidate_text
from .job_parser import extract_job

__all__ = ["extract_job", "parse_candidate_text"]
