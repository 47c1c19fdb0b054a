"""Copy-on-write edits addressed by dotted paths.

A path such as ``experience.0.role`` is parsed into a :class:`FieldPath`
checked against the Resume schema before anything is copied. Only the
ancestors of the edited leaf are rebuilt; untouched records are shared
between the old and new Resume, which is safe because they are frozen.
"""

import re
from typing import NamedTuple, Optional, Sequence, Union

from vitae.resume.models import LIST_ITEMS, Resume
from vitae.shared import InvalidPathError


SCALAR_FIELDS = {
    "name",
    "title",
    "phone",
    "email",
    "address",
    "linkedin",
    "github",
    "course",
    "gpa",
    "summary",
    "skills_input",
    "photo",
}
ALIASES = {"skillsInput": "skills_input"}
RECORD_LISTS = {
    name: set(model.model_fields)
    for name, model in LIST_ITEMS.items()
    if model is not str
}
STRING_LISTS = {name for name, model in LIST_ITEMS.items() if model is str}

SKILL_SEPARATORS = re.compile(r"[,;\n]")

PathLike = Union[str, Sequence[Union[str, int]]]


class FieldPath(NamedTuple):
    """A validated address of one leaf in a Resume."""

    field: str
    index: Optional[int] = None
    attr: Optional[str] = None

    def __str__(self) -> str:
        parts = [self.field]
        if self.index is not None:
            parts.append(str(self.index))
        if self.attr is not None:
            parts.append(self.attr)
        return ".".join(parts)


def _split(path: PathLike) -> list[str]:
    if isinstance(path, str):
        return path.split(".") if path else []
    return [str(part) for part in path]


def _index(raw: str, size: int, path: str) -> int:
    if not raw.isdigit():
        raise InvalidPathError(path, f"'{raw}' is not a list index")
    index = int(raw)
    if index >= size:
        raise InvalidPathError(path, f"index {index} out of range ({size} items)")
    return index


def parse_path(path: PathLike, resume: Resume) -> FieldPath:
    """Resolve ``path`` against ``resume`` or raise InvalidPathError."""
    parts = _split(path)
    text = ".".join(parts)
    if not parts:
        raise InvalidPathError(text, "empty path")

    field = ALIASES.get(parts[0], parts[0])

    if field == "skills":
        raise InvalidPathError(text, "skills are derived, commit skillsInput instead")

    if field in SCALAR_FIELDS:
        if len(parts) != 1:
            raise InvalidPathError(text, f"'{field}' has no sub-fields")
        return FieldPath(field)

    if field in STRING_LISTS:
        if len(parts) != 2:
            raise InvalidPathError(text, f"expected '{field}.<index>'")
        return FieldPath(field, _index(parts[1], len(getattr(resume, field)), text))

    if field in RECORD_LISTS:
        if len(parts) != 3:
            raise InvalidPathError(text, f"expected '{field}.<index>.<field>'")
        index = _index(parts[1], len(getattr(resume, field)), text)
        if parts[2] not in RECORD_LISTS[field]:
            raise InvalidPathError(text, f"unknown field '{parts[2]}'")
        return FieldPath(field, index, parts[2])

    raise InvalidPathError(text, f"unknown field '{field}'")


def mutate(resume: Resume, path: PathLike, value: Optional[str]) -> Resume:
    """Return a copy of ``resume`` with the leaf at ``path`` set to ``value``."""
    target = parse_path(path, resume)

    if value is None and target.field != "photo":
        raise TypeError(f"{target} does not accept None")
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{target} expects a string, got {type(value).__name__}")

    if target.index is None:
        return resume.model_copy(update={target.field: value})

    items = list(getattr(resume, target.field))
    if target.attr is None:
        items[target.index] = value
    else:
        items[target.index] = items[target.index].model_copy(
            update={target.attr: value}
        )
    return resume.model_copy(update={target.field: tuple(items)})


def _list_field(resume: Resume, field: str) -> tuple:
    if field not in LIST_ITEMS:
        raise InvalidPathError(field, "not a list field")
    return getattr(resume, field)


def append(resume: Resume, field: str, item=None) -> Resume:
    """Return a copy of ``resume`` with one element added to ``field``."""
    items = _list_field(resume, field)
    if item is None:
        item = LIST_ITEMS[field]()
    elif not isinstance(item, LIST_ITEMS[field]):
        raise TypeError(f"{field} holds {LIST_ITEMS[field].__name__} items")
    return resume.model_copy(update={field: items + (item,)})


def remove_at(resume: Resume, field: str, index: int) -> Resume:
    """Return a copy of ``resume`` without element ``index`` of ``field``."""
    items = _list_field(resume, field)
    if not 0 <= index < len(items):
        raise InvalidPathError(
            f"{field}.{index}", f"index {index} out of range ({len(items)} items)"
        )
    return resume.model_copy(update={field: items[:index] + items[index + 1 :]})


def split_skills(raw: str) -> tuple[str, ...]:
    tokens = (token.strip() for token in SKILL_SEPARATORS.split(raw))
    return tuple(token for token in tokens if token)


def commit_skills(resume: Resume) -> Resume:
    """Recompute ``skills`` from the current ``skills_input``."""
    return resume.model_copy(update={"skills": split_skills(resume.skills_input)})


def clear_skills(resume: Resume) -> Resume:
    return resume.model_copy(update={"skills_input": "", "skills": ()})


def format_date_range(start: str, end: str) -> str:
    return start + (f" - {end}" if end else "")


def set_date_range(resume: Resume, field: str, index: int, text: str) -> Resume:
    """Apply the "Start - End" editor text to a dated record.

    The text is split on every hyphen, so ISO dates like ``2021-06`` do not
    survive this editor; set ``start``/``end`` by path for those.
    """
    if field not in ("education", "experience"):
        raise InvalidPathError(field, "not a dated list field")
    parts = [part.strip() for part in text.split("-")]
    start = parts[0] if parts else ""
    end = parts[1] if len(parts) > 1 else ""
    resume = mutate(resume, (field, index, "start"), start)
    return mutate(resume, (field, index, "end"), end)
