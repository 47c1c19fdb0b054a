"""Word (.docx) export for resume documents using python-docx.

The resume is first flattened into an ordered list of styled blocks, which
is what the tests inspect, and then written out by :class:`DocxEncoder`.
"""

import io
from dataclasses import dataclass, field
from typing import Optional

from docx import Document
from docx.opc.constants import RELATIONSHIP_TYPE
from docx.oxml import OxmlElement
from docx.oxml.ns import qn
from docx.shared import Inches, Pt

from vitae.resume.annotate import LinkSegment, linkify, normalize_tel, normalize_url
from vitae.resume.models import Resume
from vitae.resume.paths import format_date_range
from vitae.resume.photo import decode_photo
from vitae.shared import Color, Format, UnsupportedImageError, echo, export_filename


FALLBACK_NAME = "Full Name"
LINK_COLOR = "0563C1"
FONT_SIZE_BODY = 10
PHOTO_WIDTH = Inches(1.2)
DOCX_IMAGE_FORMATS = {"PNG", "JPEG", "GIF", "BMP", "TIFF"}

STYLE_NAMES = {
    "title": "Title",
    "subtitle": "Subtitle",
    "heading": "Heading 1",
    "paragraph": "Normal",
    "bullet": "List Bullet",
}


@dataclass(frozen=True)
class Run:
    text: str
    bold: bool = False
    italic: bool = False
    href: Optional[str] = None


@dataclass
class Block:
    kind: str
    runs: list[Run] = field(default_factory=list)

    @property
    def text(self) -> str:
        return "".join(run.text for run in self.runs)


def _linked_runs(text: str) -> list[Run]:
    runs = []
    for segment in linkify(text):
        if isinstance(segment, LinkSegment):
            runs.append(Run(segment.display, href=segment.href))
        else:
            runs.append(Run(segment.value))
    return runs


def _entry_header(primary: str, secondary: str, start: str, end: str) -> list[Run]:
    runs = [Run(part, bold=True) for part in (primary, secondary) if part]
    if len(runs) == 2:
        runs.insert(1, Run(", "))
    dates = format_date_range(start, end)
    if dates:
        runs.extend([Run(" "), Run(dates, italic=True)])
    return runs


def _add_contact(blocks: list[Block], resume: Resume) -> None:
    blocks.append(Block("heading", [Run("Contact")]))

    if resume.phone:
        href = normalize_tel(resume.phone) or None
        blocks.append(Block("paragraph", [Run(resume.phone, href=href)]))
    if resume.email:
        blocks.append(Block("paragraph", [Run(resume.email, href=normalize_url(resume.email))]))
    if resume.address:
        blocks.append(Block("paragraph", [Run(resume.address)]))

    for label, value in (("LinkedIn", resume.linkedin), ("GitHub", resume.github)):
        if value:
            blocks.append(
                Block("paragraph", [Run(f"{label}: "), Run(value, href=normalize_url(value))])
            )

    for site in resume.websites:
        if not site.url:
            continue
        prefix = [Run(f"{site.label}: ")] if site.label.strip() else []
        blocks.append(Block("paragraph", prefix + [Run(site.url, href=normalize_url(site.url))]))


def _add_experience(blocks: list[Block], resume: Resume) -> None:
    blocks.append(Block("heading", [Run("Work Experience")]))

    entries = [e for e in resume.experience if e.role or e.company]
    if not entries:
        blocks.append(Block("paragraph", [Run("No experience added yet")]))

    for entry in entries:
        blocks.append(
            Block("paragraph", _entry_header(entry.role, entry.company, entry.start, entry.end))
        )
        for line in entry.details.split("\n"):
            if line.strip():
                blocks.append(Block("bullet", _linked_runs(line.strip())))


def _add_education(blocks: list[Block], resume: Resume) -> None:
    blocks.append(Block("heading", [Run("Education")]))

    for entry in resume.education:
        if not entry.school and not entry.degree:
            continue
        blocks.append(
            Block("paragraph", _entry_header(entry.school, entry.degree, entry.start, entry.end))
        )
        if entry.details:
            blocks.append(Block("paragraph", [Run(entry.details)]))

    if resume.course:
        blocks.append(Block("paragraph", [Run("Course: ", bold=True), Run(resume.course)]))
    if resume.gpa:
        blocks.append(Block("paragraph", [Run("GPA: ", bold=True), Run(resume.gpa)]))


def build_blocks(resume: Resume) -> list[Block]:
    """Lay the resume out as an ordered list of styled blocks."""
    blocks = [Block("title", [Run(resume.name or FALLBACK_NAME)])]
    if resume.title:
        blocks.append(Block("subtitle", [Run(resume.title)]))

    _add_contact(blocks, resume)

    if resume.summary:
        blocks.append(Block("heading", [Run("Profile")]))
        blocks.append(Block("paragraph", _linked_runs(resume.summary)))

    _add_experience(blocks, resume)
    _add_education(blocks, resume)

    blocks.append(Block("heading", [Run("Skills")]))
    if resume.skills:
        blocks.extend(Block("bullet", [Run(skill)]) for skill in resume.skills)
    else:
        blocks.append(Block("paragraph", [Run("No skills")]))

    blocks.append(Block("heading", [Run("Certifications")]))
    certifications = [c for c in resume.certifications if c]
    if certifications:
        blocks.extend(Block("bullet", [Run(c)]) for c in certifications)
    else:
        blocks.append(Block("paragraph", [Run("None")]))

    return blocks


def _add_hyperlink(paragraph, run: Run) -> None:
    """Append ``run`` to ``paragraph`` as an external hyperlink."""
    r_id = paragraph.part.relate_to(run.href, RELATIONSHIP_TYPE.HYPERLINK, is_external=True)

    hyperlink = OxmlElement("w:hyperlink")
    hyperlink.set(qn("r:id"), r_id)

    r = OxmlElement("w:r")
    rpr = OxmlElement("w:rPr")
    if run.bold:
        rpr.append(OxmlElement("w:b"))
    if run.italic:
        rpr.append(OxmlElement("w:i"))
    color = OxmlElement("w:color")
    color.set(qn("w:val"), LINK_COLOR)
    rpr.append(color)
    underline = OxmlElement("w:u")
    underline.set(qn("w:val"), "single")
    rpr.append(underline)
    r.append(rpr)

    t = OxmlElement("w:t")
    t.set(qn("xml:space"), "preserve")
    t.text = run.text
    r.append(t)

    hyperlink.append(r)
    paragraph._p.append(hyperlink)


class DocxEncoder:
    """Writes resumes as Word documents."""

    format = Format.DOCX

    def __init__(self, verbose: bool = False):
        self.verbose = verbose

    def filename(self, resume: Resume) -> str:
        return export_filename(resume.name, self.format)

    def encode(self, resume: Resume) -> bytes:
        doc = Document()
        doc.styles["Normal"].font.size = Pt(FONT_SIZE_BODY)
        doc.core_properties.title = f"{resume.name or FALLBACK_NAME} - Resume"

        if resume.photo:
            self._add_photo(doc, resume.photo)

        for block in build_blocks(resume):
            paragraph = doc.add_paragraph(style=STYLE_NAMES[block.kind])
            for run in block.runs:
                if run.href:
                    _add_hyperlink(paragraph, run)
                else:
                    added = paragraph.add_run(run.text)
                    added.bold = run.bold or None
                    added.italic = run.italic or None

        buffer = io.BytesIO()
        doc.save(buffer)
        return buffer.getvalue()

    def _add_photo(self, doc, photo: str) -> None:
        try:
            data = decode_photo(photo, DOCX_IMAGE_FORMATS)
        except UnsupportedImageError as e:
            if self.verbose:
                echo(f"Photo skipped: {e}", Color.WARNING)
            return
        doc.add_picture(io.BytesIO(data), width=PHOTO_WIDTH)
