"""Fleet audit — banner lookups across many repositories."""

from __future__ import annotations

import asyncio
import re
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Iterable

import yaml

from .config import Config
from .log import Warner, get_logger
from .lookup import lookup_banner, lookup_banner_async
from .models import Diagnostic, Failure, Listing, LookupOutcome, RepoRef

logger = get_logger(__name__)

_SLUG_RE = re.compile(r"^([A-Za-z0-9_.-]+)/([A-Za-z0-9_.-]+)$")
_URL_RE = re.compile(r"^https?://(?:www\.)?github\.com/([A-Za-z0-9_.-]+)/([A-Za-z0-9_.-]+?)(?:\.git)?/?$")


def parse_repo_ref(text: str) -> RepoRef:
    """Parse "owner/repo" or a github.com URL into a RepoRef."""
    s = text.strip()
    m = _SLUG_RE.match(s) or _URL_RE.match(s)
    if not m:
        raise ValueError(f"Not a repository reference: {text!r} (expected owner/repo)")
    return RepoRef(owner=m.group(1), repo=m.group(2))


def load_targets(path: Path) -> list[RepoRef]:
    """
    Read repository refs from a file.
    Text: one ref per line, '#' comments. YAML: a list, or a mapping with 'repos'.
    Unreadable or malformed files raise ValueError.
    """
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise ValueError(f"{path}: cannot read targets: {e}") from e
    if path.suffix in (".yml", ".yaml"):
        try:
            data: Any = yaml.safe_load(text) or []
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: invalid YAML: {e}") from e
        if isinstance(data, dict):
            data = data.get("repos") or []
        if not isinstance(data, list):
            raise ValueError(f"{path}: expected a list of repositories")
        lines = [str(x) for x in data]
    else:
        lines = [ln.split("#", 1)[0] for ln in text.splitlines()]
    refs = [parse_repo_ref(ln) for ln in lines if ln.strip()]
    return list(dict.fromkeys(refs))  # dedupe, keep order


def audit(
    refs: Iterable[RepoRef],
    *,
    config: Config | None = None,
    session: Any = None,
    warner: Warner | None = None,
) -> list[tuple[RepoRef, LookupOutcome]]:
    """Look up every ref in a thread pool. Results follow input order."""
    config = config or Config()
    refs = list(refs)
    if not refs:
        return []

    def one(ref: RepoRef) -> LookupOutcome:
        return lookup_banner(ref.owner, ref.repo, session=session, config=config, warner=warner)

    workers = max(1, min(config.max_workers, len(refs)))
    logger.debug("Auditing %d repos with %d workers", len(refs), workers)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        outcomes = list(executor.map(one, refs))
    return list(zip(refs, outcomes))


async def audit_async(
    refs: Iterable[RepoRef],
    *,
    config: Config | None = None,
    session: Any = None,
    warner: Warner | None = None,
) -> list[tuple[RepoRef, LookupOutcome]]:
    """asyncio flavour of audit()."""
    refs = list(refs)
    outcomes = await asyncio.gather(
        *(
            lookup_banner_async(r.owner, r.repo, session=session, config=config, warner=warner)
            for r in refs
        )
    )
    return list(zip(refs, outcomes))


def summarize(results: list[tuple[RepoRef, LookupOutcome]]) -> dict[str, int]:
    """Count outcomes by variant."""
    summary = {
        "total": len(results),
        "with_banner": 0,
        "missing_folder": 0,
        "missing_banner": 0,
        "failed": 0,
    }
    for _, outcome in results:
        if isinstance(outcome, Listing):
            summary["with_banner"] += 1
        elif isinstance(outcome, Diagnostic):
            key = "missing_folder" if outcome.folder_missing else "missing_banner"
            summary[key] += 1
        elif isinstance(outcome, Failure):
            summary["failed"] += 1
    return summary
