"""Export and import commands."""

import argparse
import asyncio
import json
from pathlib import Path
from typing import Any

import yaml

from vitae.cmd.edit import _fail, open_session
from vitae.shared import Color, Format, PaperSize, echo, export_filename
from vitae.resume.document import DocxEncoder
from vitae.resume.pages import estimate_pages
from vitae.resume.raster import RasterExporter, StaticRenderer


def _write(data: bytes, output: str | None, default_name: str) -> Path:
    path = Path(output or default_name)
    path.write_bytes(data)
    return path


def _plain(value: Any) -> Any:
    """Stringify YAML scalars such as dates and numbers; flags stay booleans."""
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_plain(v) for v in value]
    if value is None or isinstance(value, (str, bool)):
        return value
    return str(value)


def _read_import(input_path: Path) -> bytes | None:
    """Return JSON bytes for ``input_path``; YAML files are converted."""
    raw = input_path.read_bytes()
    if input_path.suffix.lower() not in (".yaml", ".yml"):
        return raw
    try:
        return json.dumps(_plain(yaml.safe_load(raw))).encode("utf-8")
    except (yaml.YAMLError, TypeError, ValueError) as e:
        echo(f"Invalid YAML: {e}", Color.WARNING)
        return None


def cmd_import(args: argparse.Namespace) -> int:
    """Replace the saved resume with a snapshot file."""
    input_path = Path(args.input)

    if not input_path.exists():
        echo(f"Input file not found: {input_path}", Color.ERROR)
        return 1

    if input_path.suffix.lower() not in (".json", ".yaml", ".yml"):
        echo("Unsupported file format. Use .json or .yaml", Color.ERROR)
        return 1

    session = open_session(args)
    data = _read_import(input_path)
    if data is None or not session.import_snapshot(data):
        echo("Import ignored, current resume kept", Color.WARNING)
        return 1

    session.save()
    echo(f"Imported {input_path}", Color.SUCCESS)
    return 0


def cmd_json(args: argparse.Namespace) -> int:
    """Export the snapshot as JSON."""
    session = open_session(args)
    path = _write(
        session.export_snapshot(),
        args.output,
        export_filename(session.resume.name, Format.JSON),
    )
    echo(f"Snapshot written: {path}", Color.SUCCESS)
    return 0


def cmd_docx(args: argparse.Namespace) -> int:
    """Export the resume as a Word document."""
    session = open_session(args)
    encoder = DocxEncoder(verbose=args.verbose)

    try:
        data = encoder.encode(session.resume)
    except Exception as e:
        return _fail("Word export failed", e, args.verbose)

    path = _write(data, args.output, encoder.filename(session.resume))
    echo(f"Word document created: {path}", Color.SUCCESS)
    return 0


def cmd_pdf(args: argparse.Namespace) -> int:
    """Export a rendered resume image as a PDF with link regions."""
    try:
        paper_size = PaperSize.from_string(args.size)
    except ValueError as e:
        echo(str(e), Color.ERROR)
        return 1

    session = open_session(args)

    try:
        links = []
        if args.links:
            links = StaticRenderer.load_links(args.links, args.verbose)
        renderer = StaticRenderer(args.image, links, scale=args.scale)
        exporter = RasterExporter(paper_size, verbose=args.verbose)
        result = asyncio.run(exporter.export(session.resume, renderer))
    except Exception as e:
        return _fail("PDF export failed", e, args.verbose)

    path = _write(result.data, args.output, result.filename)
    echo(f"PDF created: {path}", Color.SUCCESS)
    return 0


def cmd_pages(args: argparse.Namespace) -> int:
    """Estimate printed pages for a rendered width and height."""
    pages = estimate_pages(args.width, args.height)
    if args.json:
        print(json.dumps({"pages": pages}))
    else:
        echo(f"Estimated pages: {pages}", Color.INFO)
    return 0
