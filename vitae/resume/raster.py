"""PDF export of a rendered resume image with clickable link regions.

Rendering itself is done elsewhere: a :class:`Renderer` returns the pixels
and the link boxes from the same layout pass, and this module places them
on a single page with reportlab.
"""

import asyncio
import io
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from PIL import Image
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from vitae.resume.models import Resume
from vitae.shared import Color, Format, PaperSize, RenderFailure, echo, export_filename


OVERSAMPLING = 2
BACKGROUND = "#ffffff"
MIN_LINK_SIZE = 2


@dataclass(frozen=True)
class LinkBox:
    """Hyperlink area in source (CSS pixel) coordinates, origin top-left."""

    href: str
    x: float
    y: float
    width: float
    height: float


@dataclass
class RenderResult:
    image: Image.Image
    source_width: float
    source_height: float
    links: list[LinkBox] = field(default_factory=list)


@dataclass(frozen=True)
class ExportResult:
    data: bytes
    filename: str


class Renderer(Protocol):
    async def render(self, scale: int, background: str) -> RenderResult: ...


class StaticRenderer:
    """Serves an image already rendered at ``scale`` plus its link boxes."""

    def __init__(
        self,
        image_path: str | Path,
        links: list[LinkBox] | None = None,
        scale: int = OVERSAMPLING,
    ):
        self.image_path = Path(image_path)
        self.links = links or []
        self.scale = scale

    @staticmethod
    def load_links(path: str | Path, verbose: bool = False) -> list[LinkBox]:
        """Read link boxes from a JSON list; malformed entries are skipped."""
        with open(path) as f:
            data = json.load(f)

        links = []
        for i, item in enumerate(data):
            try:
                links.append(
                    LinkBox(
                        href=str(item["href"]),
                        x=float(item["x"]),
                        y=float(item["y"]),
                        width=float(item["width"]),
                        height=float(item["height"]),
                    )
                )
            except (KeyError, TypeError, ValueError) as e:  # noqa: PERF203
                if verbose:
                    echo(f"  Skipped link entry {i}: {e!r}", Color.WARNING)
        return links

    def _load_image(self) -> Image.Image:
        with Image.open(self.image_path) as img:
            img.load()
            return img.copy()

    async def render(self, scale: int, background: str) -> RenderResult:
        loop = asyncio.get_event_loop()
        image = await loop.run_in_executor(None, self._load_image)
        return RenderResult(
            image=image,
            source_width=image.width / self.scale,
            source_height=image.height / self.scale,
            links=list(self.links),
        )


def flatten(image: Image.Image, background: str = BACKGROUND) -> Image.Image:
    """Composite ``image`` onto an opaque background."""
    if image.mode == "RGB":
        return image
    rgba = image.convert("RGBA")
    base = Image.new("RGB", rgba.size, background)
    base.paste(rgba, mask=rgba.getchannel("A"))
    return base


def calculate_fit_size(
    img_width: int,
    img_height: int,
    page_width: int,
    page_height: int,
) -> tuple[float, float]:
    ratio = min(page_width / img_width, page_height / img_height)
    return img_width * ratio, img_height * ratio


def link_rect(
    box: LinkBox, fx: float, fy: float, page_height: float
) -> tuple[float, float, float, float] | None:
    """Map ``box`` to a PDF rectangle, or None when it is too small to click."""
    width = box.width * fx
    height = box.height * fy
    if width <= MIN_LINK_SIZE or height <= MIN_LINK_SIZE:
        return None
    x1 = box.x * fx
    top = page_height - box.y * fy
    return x1, top - height, x1 + width, top


class RasterExporter:
    """Creates a one-page PDF from a rendered resume."""

    format = Format.PDF

    def __init__(self, paper_size: PaperSize = PaperSize.A4, verbose: bool = False):
        self.paper_size: PaperSize = paper_size
        self.verbose: bool = verbose

    def filename(self, resume: Resume) -> str:
        return export_filename(resume.name, self.format)

    async def export(self, resume: Resume, renderer: Renderer) -> ExportResult:
        try:
            result = await renderer.render(OVERSAMPLING, BACKGROUND)
        except Exception as e:
            raise RenderFailure(e) from e

        return ExportResult(self.build_pdf(result), self.filename(resume))

    def build_pdf(self, result: RenderResult) -> bytes:
        page_width, page_height = self.paper_size.width, self.paper_size.height
        image = flatten(result.image)
        out_width, out_height = calculate_fit_size(
            image.width, image.height, page_width, page_height
        )

        buffer = io.BytesIO()
        c = canvas.Canvas(buffer, pagesize=(page_width, page_height))
        c.drawImage(
            ImageReader(image), 0, page_height - out_height, out_width, out_height
        )

        fx = out_width / result.source_width
        fy = out_height / result.source_height
        added = 0
        for box in result.links:
            try:
                rect = link_rect(box, fx, fy, page_height)
                if rect is None:
                    continue
                c.linkURL(box.href, rect, relative=0, thickness=0)
                added += 1
            except Exception as e:  # noqa: PERF203
                if self.verbose:
                    echo(f"  Skipped link {box.href!r}: {e}", Color.WARNING)

        if self.verbose:
            echo(f"  Added {added} of {len(result.links)} link region(s)", Color.INFO)

        c.showPage()
        c.save()
        return buffer.getvalue()
