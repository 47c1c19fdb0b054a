"""Command implementations for the vitae CLI."""

from vitae.cmd.edit import (
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
)
from vitae.cmd.export import cmd_import, cmd_json, cmd_docx, cmd_pdf, cmd_pages

__all__ = [
    "cmd_show",
    "cmd_set",
    "cmd_dates",
    "cmd_add",
    "cmd_remove",
    "cmd_skills",
    "cmd_photo",
    "cmd_sample",
    "cmd_reset",
    "cmd_prefs",
    "cmd_import",
    "cmd_json",
    "cmd_docx",
    "cmd_pdf",
    "cmd_pages",
]
