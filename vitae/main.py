import argparse
import sys

from vitae.cmd import (
    cmd_show,
    cmd_set,
    cmd_dates,
    cmd_add,
    cmd_remove,
    cmd_skills,
    cmd_photo,
    cmd_sample,
    cmd_reset,
    cmd_prefs,
    cmd_import,
    cmd_json,
    cmd_docx,
    cmd_pdf,
    cmd_pages,
)
from vitae.resume.paths import RECORD_LISTS, STRING_LISTS
from vitae.resume.storage import VITAE_HOME


LIST_FIELDS = sorted(RECORD_LISTS) + sorted(STRING_LISTS)

COMMANDS = {
    "show": cmd_show,
    "set": cmd_set,
    "dates": cmd_dates,
    "add": cmd_add,
    "remove": cmd_remove,
    "skills": cmd_skills,
    "photo": cmd_photo,
    "sample": cmd_sample,
    "reset": cmd_reset,
    "prefs": cmd_prefs,
    "import": cmd_import,
    "json": cmd_json,
    "docx": cmd_docx,
    "pdf": cmd_pdf,
    "pages": cmd_pages,
}


def build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--state-dir",
        default=str(VITAE_HOME),
        help=f"Directory holding the saved resume (default: {VITAE_HOME})",
    )
    common.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose logging"
    )

    parser = argparse.ArgumentParser(description="Build and export a resume.")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("show", parents=[common], help="Print the saved resume")

    set_parser = subparsers.add_parser("set", parents=[common], help="Set one field")
    set_parser.add_argument("path", help="Field path, e.g. name or experience.0.role")
    set_parser.add_argument("value", help="New value")

    dates_parser = subparsers.add_parser(
        "dates", parents=[common], help="Set start/end from 'Start - End' text"
    )
    dates_parser.add_argument("field", choices=["education", "experience"])
    dates_parser.add_argument("index", type=int)
    dates_parser.add_argument("text", help="e.g. 'Jun 2023 - Present'")

    add_parser = subparsers.add_parser("add", parents=[common], help="Add a list entry")
    add_parser.add_argument("field", choices=LIST_FIELDS)
    add_parser.add_argument("--url", help="Website url (websites only)")
    add_parser.add_argument("--label", help="Website label (websites only)")

    remove_parser = subparsers.add_parser(
        "remove", parents=[common], help="Remove a list entry"
    )
    remove_parser.add_argument("field", choices=LIST_FIELDS)
    remove_parser.add_argument("index", type=int)

    skills_parser = subparsers.add_parser(
        "skills", parents=[common], help="Commit skillsInput into the skills list"
    )
    skills_parser.add_argument(
        "--clear", action="store_true", help="Clear skills and skillsInput"
    )

    photo_parser = subparsers.add_parser("photo", parents=[common], help="Set the photo")
    photo_parser.add_argument("input", nargs="?", help="Image file")
    photo_parser.add_argument("--remove", action="store_true", help="Remove the photo")

    subparsers.add_parser("sample", parents=[common], help="Load the sample resume")
    subparsers.add_parser("reset", parents=[common], help="Clear the saved resume")

    prefs_parser = subparsers.add_parser(
        "prefs", parents=[common], help="Toggle display preferences"
    )
    prefs_parser.add_argument("--dark", action="store_true", help="Toggle dark mode")
    prefs_parser.add_argument(
        "--compact", action="store_true", help="Toggle compact layout"
    )

    import_parser = subparsers.add_parser(
        "import", parents=[common], help="Import a JSON or YAML snapshot"
    )
    import_parser.add_argument("input", help="Snapshot file")

    for name, help_text in (
        ("json", "Export a JSON snapshot"),
        ("docx", "Export a Word document"),
    ):
        export_parser = subparsers.add_parser(name, parents=[common], help=help_text)
        export_parser.add_argument(
            "-o", "--output", help="Output path (default: <name>.<ext>)"
        )

    pdf_parser = subparsers.add_parser(
        "pdf", parents=[common], help="Export a rendered image as PDF"
    )
    pdf_parser.add_argument("--image", required=True, help="Rendered resume image")
    pdf_parser.add_argument(
        "--links", help="JSON list of link boxes in source pixel coordinates"
    )
    pdf_parser.add_argument(
        "--scale", type=int, default=2, help="Oversampling of the image (default: 2)"
    )
    pdf_parser.add_argument("-s", "--size", default="A4", help="Page size (default: A4)")
    pdf_parser.add_argument("-o", "--output", help="Output path (default: <name>.pdf)")

    pages_parser = subparsers.add_parser(
        "pages", parents=[common], help="Estimate printed pages"
    )
    pages_parser.add_argument("width", type=float, help="Rendered width in pixels")
    pages_parser.add_argument("height", type=float, help="Rendered height in pixels")
    pages_parser.add_argument("--json", action="store_true", help="Output in JSON format")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    command = COMMANDS.get(args.command)
    if command is None:
        parser.print_help()
        return 1
    return command(args)


if __name__ == "__main__":
    sys.exit(main())
