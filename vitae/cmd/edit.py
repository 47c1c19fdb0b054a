"""Commands that edit the saved resume."""

import argparse
import asyncio

from vitae.shared import Color, echo
from vitae.resume.models import Website
from vitae.resume.session import ResumeSession
from vitae.resume.storage import SnapshotStore


def open_session(args: argparse.Namespace) -> ResumeSession:
    store = SnapshotStore(args.state_dir, verbose=args.verbose)
    return ResumeSession(store, verbose=args.verbose)


def _fail(message: str, e: Exception, verbose: bool) -> int:
    echo(f"{message}: {e}", Color.ERROR)
    if verbose:
        import traceback

        traceback.print_exc()
    return 1


def cmd_show(args: argparse.Namespace) -> int:
    """Print the saved resume snapshot."""
    session = open_session(args)
    print(session.export_snapshot().decode("utf-8"))
    return 0


def cmd_set(args: argparse.Namespace) -> int:
    """Handle single field edit."""
    session = open_session(args)
    try:
        session.update(args.path, args.value)
    except (ValueError, TypeError) as e:
        return _fail("Edit failed", e, args.verbose)

    session.save()
    echo(f"Set {args.path}", Color.SUCCESS)
    return 0


def cmd_dates(args: argparse.Namespace) -> int:
    """Handle "Start - End" date range edit."""
    session = open_session(args)
    try:
        session.set_date_range(args.field, args.index, args.text)
    except ValueError as e:
        return _fail("Edit failed", e, args.verbose)

    session.save()
    entry = getattr(session.resume, args.field)[args.index]
    echo(f"{args.field}.{args.index}: start={entry.start!r} end={entry.end!r}", Color.SUCCESS)
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    """Handle list entry creation."""
    session = open_session(args)
    item = None
    if args.field == "websites" and (args.url or args.label):
        item = Website(label=args.label or "", url=args.url or "")

    try:
        session.append(args.field, item)
    except (ValueError, TypeError) as e:
        return _fail("Add failed", e, args.verbose)

    session.save()
    index = len(getattr(session.resume, args.field)) - 1
    echo(f"Added {args.field}.{index}", Color.SUCCESS)
    return 0


def cmd_remove(args: argparse.Namespace) -> int:
    """Handle list entry removal."""
    session = open_session(args)
    try:
        session.remove_at(args.field, args.index)
    except ValueError as e:
        return _fail("Remove failed", e, args.verbose)

    session.save()
    echo(f"Removed {args.field}.{args.index}", Color.SUCCESS)
    return 0


def cmd_skills(args: argparse.Namespace) -> int:
    """Commit or clear the skills list."""
    session = open_session(args)
    if args.clear:
        session.clear_skills()
    else:
        session.commit_skills()
    session.save()

    skills = session.resume.skills
    echo(f"Skills: {', '.join(skills) if skills else 'none'}", Color.SUCCESS)
    return 0


def cmd_photo(args: argparse.Namespace) -> int:
    """Attach or remove the profile photo."""
    session = open_session(args)
    if args.remove:
        session.remove_photo()
        session.save()
        echo("Photo removed", Color.SUCCESS)
        return 0

    if not args.input:
        echo("Photo path required (or use --remove)", Color.ERROR)
        return 1

    try:
        asyncio.run(session.upload_photo(args.input))
    except ValueError as e:
        return _fail("Photo upload failed", e, args.verbose)

    session.save()
    echo(f"Photo set from {args.input}", Color.SUCCESS)
    return 0


def cmd_sample(args: argparse.Namespace) -> int:
    """Replace the saved resume with the sample resume."""
    session = open_session(args)
    session.fill_sample()
    session.save()
    echo("Sample resume loaded", Color.SUCCESS)
    return 0


def cmd_reset(args: argparse.Namespace) -> int:
    """Forget the saved resume."""
    session = open_session(args)
    session.reset()
    echo("Resume reset", Color.SUCCESS)
    return 0


def cmd_prefs(args: argparse.Namespace) -> int:
    """Toggle display preferences."""
    session = open_session(args)
    if args.dark:
        session.toggle_dark()
    if args.compact:
        session.toggle_compact()
    session.save()
    prefs = session.preferences
    echo(f"dark={prefs.dark} compact={prefs.compact}", Color.INFO)
    return 0
