"""JSON snapshots of a resume and its display preferences.

Two payload shapes are accepted on import:

* wrapped: ``{"version": 1, "dark": false, "compact": false, "form": {...}}``
* bare: the resume object itself, as saved by older exports.
"""

import json
from typing import Any

from pydantic import ValidationError

from vitae.resume.models import Preferences, Resume
from vitae.shared import Color, DecodeFailure, echo


SNAPSHOT_VERSION = 1

RESUME_KEYS = set(Resume.model_fields) | {
    field.alias for field in Resume.model_fields.values() if field.alias
}


def serialize(resume: Resume, preferences: Preferences) -> bytes:
    payload = {
        "version": SNAPSHOT_VERSION,
        **preferences.model_dump(),
        "form": resume.model_dump(mode="json", by_alias=True),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")


def from_payload(payload: Any) -> tuple[Resume, Preferences]:
    """Build state from an already parsed payload of either shape."""
    if not isinstance(payload, dict):
        raise DecodeFailure(f"expected an object, got {type(payload).__name__}")

    try:
        if "form" in payload:
            resume = Resume.model_validate(payload["form"])
            preferences = Preferences.model_validate(
                {k: v for k, v in payload.items() if k in Preferences.model_fields}
            )
        else:
            if not RESUME_KEYS.intersection(payload):
                raise DecodeFailure("no resume fields found")
            resume = Resume.model_validate(payload)
            preferences = Preferences()
    except ValidationError as e:
        raise DecodeFailure(f"{e.error_count()} invalid field(s)") from e

    return resume, preferences


def deserialize(data: bytes | str) -> tuple[Resume, Preferences]:
    try:
        payload = json.loads(data)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DecodeFailure(str(e)) from e
    return from_payload(payload)


def restore(
    current: Resume,
    preferences: Preferences,
    data: bytes | str,
    verbose: bool = False,
) -> tuple[Resume, Preferences]:
    """Import ``data``, keeping the current state when it cannot be decoded."""
    try:
        return deserialize(data)
    except DecodeFailure as e:
        if verbose:
            echo(f"Import ignored: {e}", Color.WARNING)
        return current, preferences
