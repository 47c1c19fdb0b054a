"""Unit tests for the JSON snapshot codec."""

import json

import pytest

from vitae.resume.models import Preferences, Resume
from vitae.resume.paths import remove_at
from vitae.resume.snapshot import (
    SNAPSHOT_VERSION,
    deserialize,
    from_payload,
    restore,
    serialize,
)
from vitae.shared import DecodeFailure


@pytest.mark.unit
def test_round_trip_sample(sample, preferences):
    """Serializing then deserializing gives back the same state."""
    assert deserialize(serialize(sample, preferences)) == (sample, preferences)


@pytest.mark.unit
def test_round_trip_full(full_resume):
    """Photo and websites survive a round trip."""
    prefs = Preferences(dark=False, compact=True)
    resume, restored_prefs = deserialize(serialize(full_resume, prefs))

    assert resume == full_resume
    assert resume.websites[0].label == "Blog"
    assert resume.photo == full_resume.photo
    assert restored_prefs == prefs


@pytest.mark.unit
def test_round_trip_empty_sequences():
    """Lists emptied by removals stay empty after a round trip."""
    resume = Resume()
    for field in ("education", "experience", "certifications"):
        resume = remove_at(resume, field, 0)

    restored, _ = deserialize(serialize(resume, Preferences()))

    assert restored.education == ()
    assert restored.experience == ()
    assert restored.certifications == ()
    assert restored == resume


@pytest.mark.unit
def test_serialize_payload_shape(sample):
    """The payload carries a version, the preference flags and the form."""
    payload = json.loads(serialize(sample, Preferences(dark=True)))

    assert payload["version"] == SNAPSHOT_VERSION
    assert payload["dark"] is True
    assert payload["compact"] is False
    assert payload["form"]["name"] == "Alex Student"
    assert payload["form"]["skillsInput"] == "JavaScript, React, Node.js, SQL"
    assert payload["form"]["photo"] is None
    assert "skills_input" not in payload["form"]


@pytest.mark.unit
def test_deserialize_bare_resume(sample):
    """A payload without a form key is read as the resume itself."""
    bare = json.dumps(sample.model_dump(mode="json", by_alias=True))

    resume, prefs = deserialize(bare)

    assert resume == sample
    assert prefs == Preferences()


@pytest.mark.unit
def test_deserialize_wrapped_without_version():
    """The persisted {form, dark, compact} record is accepted."""
    resume, prefs = from_payload({"form": {"name": "Kim"}, "dark": True, "compact": True})

    assert resume.name == "Kim"
    assert resume.experience == Resume().experience
    assert prefs == Preferences(dark=True, compact=True)


@pytest.mark.unit
@pytest.mark.parametrize(
    "data",
    [
        b"{not json",
        b"\xff\xfe\x00",
        b"[1, 2]",
        b'"just a string"',
        b'{"unrelated": 1}',
        b'{"form": "nope"}',
        b'{"form": {"skills": [1, 2]}}',
        b'{"name": "Kim", "education": [{"school": 5}]}',
    ],
)
def test_deserialize_rejects_malformed(data):
    """Bad JSON or a bad shape raises DecodeFailure."""
    with pytest.raises(DecodeFailure):
        deserialize(data)


@pytest.mark.unit
def test_restore_keeps_state_on_failure(sample, preferences):
    """A failed import returns the current state unchanged."""
    before = serialize(sample, preferences)

    resume, prefs = restore(sample, preferences, b"{broken")

    assert resume is sample
    assert prefs is preferences
    assert serialize(resume, prefs) == before


@pytest.mark.unit
def test_restore_verbose_warns(capsys, sample, preferences):
    restore(sample, preferences, b"{broken", verbose=True)
    assert "Import ignored" in capsys.readouterr().out


@pytest.mark.unit
def test_restore_replaces_state(sample):
    """A valid import replaces both the resume and the preferences."""
    data = serialize(sample, Preferences(compact=True))

    resume, prefs = restore(Resume(), Preferences(), data)

    assert resume == sample
    assert prefs.compact is True
