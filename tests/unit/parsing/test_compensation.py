"""Tests for compensation and experience extraction."""

import pytest

from intake.parsing.compensation import (
    extract_experience,
    extract_hourly_rate,
    extract_salary_range,
    parse_amount,
)


def test_hourly_rate():
    assert extract_hourly_rate("Rate: $65/hr on W2") == 65
    assert extract_hourly_rate("$72.50 per hour") == 72.5
    assert extract_hourly_rate("$1,100/hour") == 1100
    assert extract_hourly_rate("Competitive pay") is None


def test_hourly_rate_does_not_set_range():
    assert extract_salary_range("$65/hr") == (None, None)


@pytest.mark.parametrize("text,expected", [
    ("$120k - $150k", (120000, 150000)),
    ("$120-150", (120000, 150000)),
    ("$120K to $150K DOE", (120000, 150000)),
    ("$100,000 – $130,000 base", (100000, 130000)),
])
def test_salary_range(text, expected):
    assert extract_salary_range(text) == expected


def test_salary_range_missing():
    assert extract_salary_range("Pay: DOE") == (None, None)


def test_hourly_and_range_can_both_match():
    text = "$60-$65/hr"
    assert extract_hourly_rate(text) == 65
    assert extract_salary_range(text) == (60000, 65000)


def test_parse_amount():
    assert parse_amount("1,250") == 1250
    assert parse_amount(",") is None


@pytest.mark.parametrize("text,expected", [
    ("Experience: 8+ years", 8),
    ("Exp=5 yrs", 5),
    ("10+ years of industry experience", 10),
    ("3 yrs exp in Java", 3),
    ("Exp: 7\nalso 12 years total", 7),
    ("Entry level", None),
])
def test_experience(text, expected):
    assert extract_experience(text) == expected
