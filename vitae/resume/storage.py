"""Persisted resume state and debounced autosave."""

import asyncio
import os
from pathlib import Path
from typing import Optional

from vitae.resume.models import Preferences, Resume
from vitae.resume.snapshot import deserialize, serialize
from vitae.shared import Color, DecodeFailure, echo


VITAE_HOME = Path(os.environ.get("VITAE_HOME", Path.home() / ".vitae"))
STATE_FILE = "state.json"
AUTOSAVE_DELAY = 0.4


class SnapshotStore:
    """Keeps one snapshot record under ``state_dir``."""

    def __init__(self, state_dir: Path | str = VITAE_HOME, verbose: bool = False):
        self.state_dir = Path(state_dir)
        self.verbose = verbose

    @property
    def path(self) -> Path:
        return self.state_dir / STATE_FILE

    def load(self) -> tuple[Resume, Preferences]:
        """Return the saved state, or a blank one when nothing usable is saved."""
        if not self.path.exists():
            return Resume(), Preferences()
        try:
            return deserialize(self.path.read_bytes())
        except DecodeFailure as e:
            if self.verbose:
                echo(f"Saved state ignored: {e}", Color.WARNING)
            return Resume(), Preferences()

    def save(self, resume: Resume, preferences: Preferences) -> None:
        self.state_dir.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(".tmp")
        tmp_path.write_bytes(serialize(resume, preferences))
        tmp_path.replace(self.path)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class Autosaver:
    """Writes the latest state once no change has arrived for ``delay`` seconds.

    Must be used from a running event loop.
    """

    def __init__(self, store: SnapshotStore, delay: float = AUTOSAVE_DELAY):
        self.store = store
        self.delay = delay
        self._handle: Optional[asyncio.TimerHandle] = None
        self._pending: Optional[tuple[Resume, Preferences]] = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    def schedule(self, resume: Resume, preferences: Preferences) -> None:
        self._pending = (resume, preferences)
        if self._handle is not None:
            self._handle.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self.flush)

    def flush(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        if self._pending is not None:
            resume, preferences = self._pending
            self._pending = None
            self.store.save(resume, preferences)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self._pending = None
