import re
from enum import Enum


class Color(str, Enum):
    SUCCESS = "\033[92m"
    ERROR = "\033[91m"
    INFO = "\033[94m"
    WARNING = "\033[93m"
    RESET = "\033[0m"


class Format(str, Enum):
    PDF = "pdf"
    DOCX = "docx"
    JSON = "json"


def colored(text: str, color: Color) -> str:
    return f"{color.value}{text}{Color.RESET.value}"


def echo(text: str, color: Color = Color.INFO) -> None:
    print(colored(text, color))


class InvalidPaperSizeError(ValueError):
    def __init__(self, size_str: str):
        super().__init__(
            f"Invalid paper size: {size_str}. Valid sizes: {[s.name for s in PaperSize]}"
        )


class InvalidPathError(ValueError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Invalid path '{path}': {reason}")
        self.path = path


class DecodeFailure(ValueError):
    def __init__(self, reason: str):
        super().__init__(f"Could not decode snapshot: {reason}")


class RenderFailure(Exception):
    def __init__(self, cause: object):
        super().__init__(f"Rendering failed: {cause}")


class UnsupportedImageError(ValueError):
    def __init__(self, path: str):
        super().__init__(f"Not a supported image: {path}")


class PaperSize(Enum):
    A3 = (842, 1191)
    A4 = (595, 842)
    A5 = (420, 595)
    B4 = (709, 1001)
    B5 = (499, 709)
    LETTER = (612, 792)
    LEGAL = (612, 1008)

    @property
    def width(self) -> int:
        return self.value[0]

    @property
    def height(self) -> int:
        return self.value[1]

    @staticmethod
    def from_string(size_str: str) -> "PaperSize":
        try:
            return PaperSize[size_str.upper()]
        except KeyError as exc:
            raise InvalidPaperSizeError(size_str) from exc


def export_filename(name: str, ext: str | Format) -> str:
    """Build the download name for an export: whitespace runs become underscores."""
    if isinstance(ext, Format):
        ext = ext.value
    stem = re.sub(r"\s+", "_", name or "") or "resume"
    return f"{stem}.{ext}"
