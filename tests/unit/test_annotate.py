"""Unit tests for contact normalization and linkify."""

import pytest

from vitae.resume.annotate import (
    LinkSegment,
    TextSegment,
    linkify,
    normalize_tel,
    normalize_url,
    segment_text,
)


SAMPLE_TEXTS = [
    "",
    "plain words only",
    "Visit https://x.com/a, or mail a@b.com.",
    "see www.example.org) and (http://foo.bar/baz?q=1)",
    "Contact: first.last+tag@mail.example.co.uk!",
    "trailing url https://end.example",
    "  spaced\n\tlines www.a.io\nnext  ",
    "HTTP://LOUD.EXAMPLE and a@b",
]


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw,expected",
    [
        ("a@b.com", "mailto:a@b.com"),
        ("example.com", "https://example.com"),
        ("https://x.com", "https://x.com"),
        ("http://x.com", "http://x.com"),
        ("mailto:a@b.com", "mailto:a@b.com"),
        ("tel:+123", "tel:+123"),
        ("HTTPS://X.COM", "HTTPS://X.COM"),
        ("linkedin.com/in/alex", "https://linkedin.com/in/alex"),
        ("  github.com/alex  ", "https://github.com/alex"),
        ("", ""),
        ("   ", ""),
    ],
)
def test_normalize_url(raw, expected):
    """Known prefixes pass through, emails get mailto:, the rest https://."""
    assert normalize_url(raw) == expected


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    ["a@b.com", "example.com", "https://x.com", "", "a b", " www.x.org ", "tel:12"],
)
def test_normalize_url_is_idempotent(raw):
    """Normalizing twice gives the same result as once."""
    once = normalize_url(raw)
    assert normalize_url(once) == once


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw,expected",
    [
        ("+1 (555) 123-4567", "tel:+15551234567"),
        ("555.123.4567", "tel:5551234567"),
        (" +44 20 7946 0958", "tel:+442079460958"),
        ("call me", ""),
        ("+", ""),
        ("", ""),
    ],
)
def test_normalize_tel(raw, expected):
    """Only digits and a leading plus are kept."""
    assert normalize_tel(raw) == expected


@pytest.mark.unit
def test_linkify_splits_text_and_links():
    """URLs and emails become links; trailing punctuation stays in the text."""
    segments = linkify("Visit https://x.com/a, or mail a@b.com.")

    assert segments == [
        TextSegment("Visit "),
        LinkSegment("https://x.com/a", "https://x.com/a"),
        TextSegment(", or mail "),
        LinkSegment("a@b.com", "mailto:a@b.com"),
        TextSegment("."),
    ]


@pytest.mark.unit
def test_linkify_bare_www_host():
    """A www host gets an https href but keeps its displayed text."""
    segments = linkify("see www.example.org)")

    assert segments == [
        TextSegment("see "),
        LinkSegment("www.example.org", "https://www.example.org"),
        TextSegment(")"),
    ]


@pytest.mark.unit
def test_linkify_plain_text():
    """Text without links is a single text segment; empty text gives nothing."""
    assert linkify("plain words") == [TextSegment("plain words")]
    assert linkify("") == []


@pytest.mark.unit
@pytest.mark.parametrize("text", SAMPLE_TEXTS)
def test_linkify_is_lossless(text):
    """Joining the displayed segment text reproduces the input exactly."""
    assert "".join(segment_text(s) for s in linkify(text)) == text


@pytest.mark.unit
def test_linkify_hrefs_are_normalized():
    """Every link href is the normalized display text."""
    for text in SAMPLE_TEXTS:
        for segment in linkify(text):
            if isinstance(segment, LinkSegment):
                assert segment.href == normalize_url(segment.display)


@pytest.mark.unit
def test_linkify_keeps_balanced_parentheses():
    """A closing paren is part of the URL only when it closes one inside it."""
    url = "https://en.wikipedia.org/wiki/Foo_(bar)"

    assert linkify(f"see {url}.") == [
        TextSegment("see "),
        LinkSegment(url, url),
        TextSegment("."),
    ]
    assert linkify(f"({url})") == [
        TextSegment("("),
        LinkSegment(url, url),
        TextSegment(")"),
    ]
