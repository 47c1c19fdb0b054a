"""Contact string normalization and free-text linkification."""

import re
from dataclasses import dataclass
from typing import Union


LINK_PREFIXES = ("http://", "https://", "mailto:", "tel:")

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# Absolute URL, bare www host, or email address, tried in that order.
TOKEN_PATTERN = re.compile(
    r"https?://[^\s<>\"']+"
    r"|www\.[^\s<>\"']+"
    r"|[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}",
    re.IGNORECASE,
)

# Left out of a link when a token ends with them.
TRAILING_PUNCTUATION = ".,;:!?)]}'\""


@dataclass(frozen=True)
class TextSegment:
    value: str


@dataclass(frozen=True)
class LinkSegment:
    display: str
    href: str


Segment = Union[TextSegment, LinkSegment]


def normalize_url(raw: str) -> str:
    """Turn a contact value into an href.

    >>> normalize_url("a@b.com")
    'mailto:a@b.com'
    >>> normalize_url("example.com")
    'https://example.com'
    """
    value = (raw or "").strip()
    if not value:
        return ""
    if value.lower().startswith(LINK_PREFIXES):
        return value
    if EMAIL_PATTERN.match(value):
        return f"mailto:{value}"
    return f"https://{value}"


def normalize_tel(raw: str) -> str:
    value = (raw or "").strip()
    digits = re.sub(r"\D", "", value)
    if not digits:
        return ""
    return "tel:" + ("+" if value.startswith("+") else "") + digits


def _trim_token(token: str) -> str:
    trimmed = token
    while trimmed and trimmed[-1] in TRAILING_PUNCTUATION:
        # A closing paren that balances one inside the URL belongs to it.
        if trimmed[-1] == ")" and trimmed.count("(") >= trimmed.count(")"):
            break
        trimmed = trimmed[:-1]
    return trimmed or token


def linkify(text: str) -> list[Segment]:
    """Split ``text`` into plain and link segments, left to right.

    Joining the displayed text of the result gives back ``text`` unchanged.
    """
    segments: list[Segment] = []
    position = 0

    for match in TOKEN_PATTERN.finditer(text):
        display = _trim_token(match.group())
        start = match.start()
        if start > position:
            segments.append(TextSegment(text[position:start]))
        segments.append(LinkSegment(display, normalize_url(display)))
        position = start + len(display)

    if position < len(text):
        segments.append(TextSegment(text[position:]))
    return segments


def segment_text(segment: Segment) -> str:
    if isinstance(segment, LinkSegment):
        return segment.display
    return segment.value
