"""CLI entry point — look up banners, output clearly."""

import json
import sys
from pathlib import Path

import click
import typer


def _err(msg: str) -> None:
    """Raise a styled error (red box) — used for all CLI errors."""
    raise click.BadParameter(msg)

_SUBCOMMANDS = {"check", "a"}


def _preprocess_argv():
    """Fix argv so `bannercheck owner/repo --json` runs the check command."""
    argv = sys.argv[1:]
    if not argv:
        return
    first = argv[0]
    if first in _SUBCOMMANDS or first.startswith("-"):
        return
    sys.argv[1:] = ["check", *argv]

from .config import Config, find_config
from .fleet import audit, load_targets, parse_repo_ref, summarize
from .format import format_human, format_markdown, outcome_to_dict, status_label
from .log import setup_logging
from .lookup import lookup_banner
from .models import Listing, RepoRef

app = typer.Typer(help="Check whether a repository ships a banner image in its public folder.")


def _load_config(config_path: Path | None, verbose: bool) -> Config:
    try:
        config = find_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        _err(str(e))
    setup_logging("DEBUG" if verbose else config.log_level, config.log_file)
    return config


def _resolve_ref(owner: str, repo: str | None) -> RepoRef:
    if repo:
        return RepoRef(owner=owner, repo=repo)
    try:
        return parse_repo_ref(owner)
    except ValueError as e:
        _err(str(e))


@app.command("check")
def check_cmd(
    owner: str = typer.Argument(..., help="Owner name, or owner/repo"),
    repo: str = typer.Argument(None, help="Repository name"),
    json_out: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    markdown_out: bool = typer.Option(False, "--markdown", "-m", help="Output as Markdown"),
    ci: bool = typer.Option(False, "--ci", help="CI mode: exit 1 unless a banner is found"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="List every entry and log requests"),
    config_path: Path = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Look for a banner image in <owner>/<repo>/public."""
    ref = _resolve_ref(owner, repo)
    config = _load_config(config_path, verbose)
    outcome = lookup_banner(ref.owner, ref.repo, config=config)

    if json_out:
        typer.echo(json.dumps(outcome_to_dict(ref, outcome), indent=2, ensure_ascii=False))
    elif markdown_out:
        typer.echo(format_markdown(ref, outcome))
    else:
        typer.echo(format_human(ref, outcome, verbose=verbose))

    if ci and not isinstance(outcome, Listing):
        raise typer.Exit(1)


@app.command("a")
def audit_cmd(
    targets: Path = typer.Argument(..., help="File listing owner/repo per line (or YAML list)"),
    json_out: bool = typer.Option(False, "--json", "-j", help="JSON output"),
    ci: bool = typer.Option(False, "--ci", help="CI mode: exit 1 if any repo lacks a banner"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests"),
    config_path: Path = typer.Option(None, "--config", "-c", help="YAML config file"),
) -> None:
    """Check many repositories at once."""
    if not targets.exists() or not targets.is_file():
        _err(f"Targets file not found: {targets}")
    try:
        refs = load_targets(targets)
    except ValueError as e:
        _err(str(e))
    config = _load_config(config_path, verbose)
    results = audit(refs, config=config)
    summary = summarize(results)

    if json_out:
        output = {
            "summary": summary,
            "results": [outcome_to_dict(ref, outcome) for ref, outcome in results],
        }
        typer.echo(json.dumps(output, indent=2, ensure_ascii=False))
    elif not results:
        typer.echo("No repos found.")
    else:
        typer.echo(
            f"Checked {summary['total']} repos. {summary['with_banner']} with banner. "
            f"{summary['missing_folder'] + summary['missing_banner']} missing. {summary['failed']} failed."
        )
        typer.echo()
        for ref, outcome in results:
            line = f"  [{status_label(outcome)}] {ref.slug}"
            if isinstance(outcome, Listing):
                line += f": {', '.join(e.name for e in outcome.banners)}"
            else:
                line += f": {outcome.message}"
            typer.echo(line)

    if ci and summary["with_banner"] < summary["total"]:
        raise typer.Exit(1)


def _main() -> None:
    """Entry point: preprocess argv (bannercheck o/r -> bannercheck check o/r), then run app."""
    _preprocess_argv()
    app()


if __name__ == "__main__":
    _main()
