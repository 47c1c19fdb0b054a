import io

import pytest
from PIL import Image

from vitae.resume.models import Preferences, Resume, Website, sample_resume
from vitae.resume.storage import SnapshotStore


@pytest.fixture
def sample() -> Resume:
    return sample_resume()


@pytest.fixture
def full_resume() -> Resume:
    """Sample resume with every optional field populated."""
    return sample_resume().model_copy(
        update={
            "websites": (
                Website(label="Blog", url="alex.dev"),
                Website(url="https://portfolio.example.com"),
            ),
            "photo": "data:image/png;base64,iVBORw0KGgo=",
        }
    )


@pytest.fixture
def preferences() -> Preferences:
    return Preferences(dark=True, compact=False)


@pytest.fixture
def store(tmp_path) -> SnapshotStore:
    return SnapshotStore(tmp_path / "state")


@pytest.fixture
def png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (40, 40), "#3366cc").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def png_file(tmp_path, png_bytes):
    path = tmp_path / "photo.png"
    path.write_bytes(png_bytes)
    return path
