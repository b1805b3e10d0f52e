"""Tests for the parse dispatch entry point."""

import pytest

from intake import ExtractedCandidateRecord, ExtractedJobRecord, example_text, parse_posting
from intake.parser import coerce_text


def test_parse_job_by_default(java_onsite_posting):
    record = parse_posting(java_onsite_posting)
    assert isinstance(record, ExtractedJobRecord)
    assert record.title == "Sr. Java Developer"


def test_parse_candidate_kind_case_insensitive():
    record = parse_posting("Name: Jane Roe\nSkills: SQL, Excel", kind="Candidate")
    assert isinstance(record, ExtractedCandidateRecord)
    assert record.skills == ["SQL", "Excel"]


def test_unknown_kind_raises():
    with pytest.raises(ValueError):
        parse_posting("anything", kind="resume")


def test_platform_marker_uses_settings_default():
    record = parse_posting("Java Developer\nEmail: alerts@matchdb.app")
    assert record.recruiter_email == ""


def test_platform_marker_override():
    text = "Java Developer\nEmail: jane@talentbridge.com"
    assert parse_posting(text, platform_marker="talentbridge").recruiter_email == ""
    assert parse_posting(text, platform_marker="").recruiter_email == "jane@talentbridge.com"


def test_coerce_text():
    assert coerce_text(None) == ""
    assert coerce_text(b"Java \xff Developer") == "Java \ufffd Developer"
    assert coerce_text(42) == "42"


def test_parse_bytes_and_none():
    assert parse_posting(b"Role: Data Analyst").title == "Data Analyst"
    assert parse_posting(None) == ExtractedJobRecord()


def test_example_texts_parse():
    job = parse_posting(example_text("job"))
    assert job.title == "Senior React Developer"
    assert job.company == "Innovation Labs"
    assert job.location == "San Francisco, CA"
    assert job.description.startswith("We are looking for an experienced React developer")
    assert job.job_type == "full_time"
    assert job.job_subtype == "w2"
    assert job.work_mode == "hybrid"
    assert job.salary_min == 130000
    assert job.salary_max == 165000
    assert job.pay_per_hour is None
    assert job.experience_required == 5
    assert job.skills_required == ["React", "TypeScript", "Redux", "GraphQL", "CSS", "Jest"]
    assert job.recruiter_name == "Emily Watson"
    assert job.recruiter_email == "emily@innovationlabs.com"
    assert job.recruiter_phone == "555-111-2222"

    candidate = parse_posting(example_text("candidate"), kind="candidate")
    assert candidate.name == "John Doe"
