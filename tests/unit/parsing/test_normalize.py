"""Tests for text normalization."""

from intake.parsing.normalize import clean_text, normalize, split_lines, strip_emoji


def test_clean_text_removes_hashtag_noise():
    text = clean_text("Java role hashtag#hiring #java\r\nApply hashtag now")
    assert "hashtag" not in text
    assert "#" not in text
    assert "\r" not in text
    assert text.startswith("Java role")


def test_clean_text_keeps_language_names_with_symbols():
    assert "C#" in clean_text("Must know C# and C++")


def test_split_lines_drops_blank_and_trims():
    assert split_lines("  first  \n\n   \nsecond\n") == ["first", "second"]


def test_normalize_empty_string():
    assert normalize("") == ("", [])


def test_strip_emoji():
    assert strip_emoji("\U0001F4A5 Sr. Java Developer ⏳").strip() == "Sr. Java Developer"
    assert strip_emoji("Sr. Java Developer – Onsite") == "Sr. Java Developer – Onsite"
