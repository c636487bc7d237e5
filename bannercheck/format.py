"""Terminal output formatting: box layout, colors, width control."""

import shutil
from typing import List

import click

from .models import Diagnostic, Failure, Listing, LookupOutcome, RepoRef


def _get_width() -> int:
    try:
        return min(72, shutil.get_terminal_size((72, 24)).columns)
    except OSError:
        return 72


def _wrap(text: str, indent: int = 0, width: int = 72) -> List[str]:
    """Wrap text to width, first line has indent, following lines +2."""
    prefix = " " * indent
    extra = "  "
    lines = []
    rest = text
    first = True
    while rest:
        max_len = width - (indent if first else indent + len(extra))
        if len(rest) <= max_len:
            lines.append(prefix + rest)
            break
        break_at = rest.rfind(" ", 0, max_len + 1)
        if break_at <= 0:
            break_at = max_len
        chunk = rest[:break_at].strip()
        rest = rest[break_at:].strip()
        lines.append(prefix + chunk)
        prefix = " " * indent + extra
        first = False
    return lines


def _size(n: int) -> str:
    if n < 1024:
        return f"{n} B"
    if n < 1024 * 1024:
        return f"{n / 1024:.1f} KB"
    return f"{n / 1024 / 1024:.1f} MB"


def status_label(outcome: LookupOutcome) -> str:
    if isinstance(outcome, Listing):
        return "OK"
    if isinstance(outcome, Diagnostic):
        return "NO FOLDER" if outcome.folder_missing else "NO BANNER"
    return "ERROR"


def _status_color(outcome: LookupOutcome) -> str:
    if isinstance(outcome, Listing):
        return "green"
    if isinstance(outcome, Diagnostic):
        return "yellow"
    return "red"


def format_human(ref: RepoRef, outcome: LookupOutcome, verbose: bool = False) -> str:
    """Build the human terminal output as a single string."""
    width = _get_width()
    lines = []

    lines.append("┌" + "─" * (width - 2) + "┐")
    lines.append(f" bannercheck · {ref.slug}")
    lines.append("─" * width)
    lines.append(click.style(f" Status   {status_label(outcome)}", fg=_status_color(outcome)))
    lines.append("─" * width)

    if isinstance(outcome, Listing):
        lines.append(" BANNERS")
        for e in outcome.banners:
            for ln in _wrap(f"● {e.path} ({_size(e.size_bytes)})", indent=2, width=width):
                lines.append(click.style(ln, fg="green"))
            if e.raw_content_url:
                for ln in _wrap(e.raw_content_url, indent=4, width=width):
                    lines.append(click.style(ln, dim=True))
        if verbose:
            lines.append(f" PUBLIC FOLDER ({len(outcome.entries)} entries)")
            for e in outcome.entries:
                for ln in _wrap(f"○ {e.name} [{e.kind.value}]", indent=2, width=width):
                    lines.append(click.style(ln, dim=True))
    elif isinstance(outcome, Diagnostic):
        for ln in _wrap(outcome.message, indent=1, width=width):
            lines.append(click.style(ln, fg="yellow"))
        for ln in _wrap(f"Fix: {outcome.suggestion}", indent=1, width=width):
            lines.append(click.style(ln, dim=True))
    elif isinstance(outcome, Failure):
        for ln in _wrap(outcome.message or type(outcome.error).__name__, indent=1, width=width):
            lines.append(click.style(ln, fg="red"))
        if verbose:
            lines.append(click.style(f" ({outcome.kind.value}: {type(outcome.error).__name__})", dim=True))

    lines.append("─" * width)
    footer = " Run with --json for machine output  ·  --ci for exit codes"
    if len(footer) > width:
        footer = " --json  ·  --ci  ·  --help"
    lines.append(click.style(footer, dim=True))
    lines.append("└" + "─" * (width - 2) + "┘")

    return "\n".join(lines)


def format_markdown(ref: RepoRef, outcome: LookupOutcome) -> str:
    """Markdown output for docs/PRs."""
    lines = [f"# bannercheck: {ref.slug}", "", f"**Status: {status_label(outcome)}**", ""]
    if isinstance(outcome, Listing):
        lines.append("## Banners")
        for e in outcome.banners:
            link = e.web_url or e.raw_content_url
            lines.append(f"- [{e.path}]({link})" if link else f"- {e.path}")
        lines.append("")
        lines.append(f"{len(outcome.entries)} entries in `public/`.")
    elif isinstance(outcome, Diagnostic):
        lines.append(outcome.message)
        lines.append("")
        lines.append(f"- **Suggestion:** {outcome.suggestion}")
        lines.append(f"- **Status:** {outcome.status_code}")
    else:
        lines.append(f"- **Error ({outcome.kind.value}):** {outcome.message}")
    return "\n".join(lines)


def outcome_to_dict(ref: RepoRef, outcome: LookupOutcome) -> dict:
    """JSON-ready view of an outcome."""
    data: dict = {"repo": ref.slug, "status": status_label(outcome)}
    if isinstance(outcome, Listing):
        data["success"] = True
        data["banners"] = [e.name for e in outcome.banners]
        data["entries"] = [e.to_dict() for e in outcome.entries]
    elif isinstance(outcome, Diagnostic):
        data.update(outcome.to_dict())
    else:
        data["success"] = False
        data["error"] = {"kind": outcome.kind.value, "message": outcome.message}
    return data
