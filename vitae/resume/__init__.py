"""Resume model and exporters.

Provides the copy-on-write resume model, link normalization, a JSON
snapshot codec, and Word/PDF exporters.
"""

from vitae.resume.models import Resume, Preferences, sample_resume
from vitae.resume.paths import mutate, append, remove_at, commit_skills
from vitae.resume.document import DocxEncoder, build_blocks
from vitae.resume.raster import RasterExporter, StaticRenderer
from vitae.resume.session import ResumeSession

__all__ = [
    "Resume",
    "Preferences",
    "sample_resume",
    "mutate",
    "append",
    "remove_at",
    "commit_skills",
    "DocxEncoder",
    "build_blocks",
    "RasterExporter",
    "StaticRenderer",
    "ResumeSession",
]
