"""Editing session holding the current resume state."""

from pathlib import Path
from typing import Optional

from vitae.resume import paths
from vitae.resume.models import Preferences, Resume, sample_resume
from vitae.resume.photo import read_photo
from vitae.resume.snapshot import restore, serialize
from vitae.resume.storage import Autosaver, SnapshotStore


class ResumeSession:
    """Applies edits to one Resume and hands every new state to autosave.

    Each edit replaces ``resume`` with a new instance; previous instances
    are never modified.
    """

    def __init__(
        self,
        store: SnapshotStore,
        autosaver: Optional[Autosaver] = None,
        verbose: bool = False,
    ):
        self.store = store
        self.autosaver = autosaver
        self.verbose = verbose
        self.resume, self.preferences = store.load()

    def _replace(
        self, resume: Resume, preferences: Optional[Preferences] = None
    ) -> Resume:
        self.resume = resume
        if preferences is not None:
            self.preferences = preferences
        if self.autosaver is not None:
            self.autosaver.schedule(self.resume, self.preferences)
        return self.resume

    def update(self, path: paths.PathLike, value: Optional[str]) -> Resume:
        return self._replace(paths.mutate(self.resume, path, value))

    def set_date_range(self, field: str, index: int, text: str) -> Resume:
        return self._replace(paths.set_date_range(self.resume, field, index, text))

    def append(self, field: str, item=None) -> Resume:
        return self._replace(paths.append(self.resume, field, item))

    def remove_at(self, field: str, index: int) -> Resume:
        return self._replace(paths.remove_at(self.resume, field, index))

    def commit_skills(self) -> Resume:
        return self._replace(paths.commit_skills(self.resume))

    def clear_skills(self) -> Resume:
        return self._replace(paths.clear_skills(self.resume))

    def fill_sample(self) -> Resume:
        return self._replace(sample_resume())

    def toggle_dark(self) -> Preferences:
        dark = not self.preferences.dark
        self._replace(self.resume, self.preferences.model_copy(update={"dark": dark}))
        return self.preferences

    def toggle_compact(self) -> Preferences:
        compact = not self.preferences.compact
        self._replace(
            self.resume, self.preferences.model_copy(update={"compact": compact})
        )
        return self.preferences

    def import_snapshot(self, data: bytes | str) -> bool:
        """Replace the state with ``data``; returns False and keeps it on failure."""
        resume, preferences = restore(
            self.resume, self.preferences, data, verbose=self.verbose
        )
        if resume is self.resume and preferences is self.preferences:
            return False
        self._replace(resume, preferences)
        return True

    def export_snapshot(self) -> bytes:
        return serialize(self.resume, self.preferences)

    async def upload_photo(self, path: str | Path) -> Resume:
        photo = await read_photo(path)
        return self.update("photo", photo)

    def remove_photo(self) -> Resume:
        return self.update("photo", None)

    def save(self) -> None:
        if self.autosaver is not None:
            self.autosaver.cancel()
        self.store.save(self.resume, self.preferences)

    def reset(self) -> Resume:
        """Return to a blank resume and forget the persisted copy."""
        if self.autosaver is not None:
            self.autosaver.cancel()
        self.resume = Resume()
        self.store.clear()
        return self.resume
