"""Banner lookup: one GET against the contents API, then a filename scan."""

from __future__ import annotations

import asyncio
from typing import Any

import requests

from .config import Config
from .errors import ContentsDecodeError, UnexpectedStatusError
from .log import LoggerWarner, Warner, get_logger
from .models import (
    Diagnostic,
    DirectoryEntry,
    Failure,
    FailureKind,
    Listing,
    LookupOutcome,
    is_banner,
)

logger = get_logger(__name__)

PUBLIC_FOLDER = "public"

FOLDER_MISSING_MESSAGE = '⚠️📂 In the repository >{repo}< the "public" folder was not found.'
FOLDER_MISSING_SUGGESTION = (
    'Create a "public" folder and insert your banner '
    "(e.g: /public/bannerXYZ.svg - bannerABC.png - bannerEFG.jpg)"
)
NO_BANNER_MESSAGE = '⚠️🖼️ In repository >{repo}< no banner file was found in folder "public".'
NO_BANNER_SUGGESTION = 'Insert an image that contains the name "banner" and is png, jpg, jpeg or svg'


def contents_url(owner_name: str, repo_name: str, base_url: str = Config.api_base_url) -> str:
    return f"{base_url.rstrip('/')}/repos/{owner_name}/{repo_name}/contents/{PUBLIC_FOLDER}"


def _diagnostic(message: str, suggestion: str, status_code: int, warner: Warner) -> Diagnostic:
    result = Diagnostic(message=message, suggestion=suggestion, status_code=status_code)
    text = f"{result.message}  ℹ️{result.suggestion}"
    try:
        warner.warn(text)
    except Exception:
        # sink failed; fall back to the module logger
        logger.warning(text, exc_info=True)
    return result


def _decode_entries(response: Any) -> tuple[DirectoryEntry, ...]:
    data = response.json()
    if not isinstance(data, list):
        raise ContentsDecodeError(
            f'Expected a directory listing for "{PUBLIC_FOLDER}", got {type(data).__name__}'
        )
    return tuple(DirectoryEntry.from_api(item) for item in data)


def lookup_banner(
    owner_name: str,
    repo_name: str,
    *,
    session: Any = None,
    config: Config | None = None,
    warner: Warner | None = None,
) -> LookupOutcome:
    """
    Look for a banner image in <owner>/<repo>/public.

    Returns a Listing (banner found, full folder contents), a Diagnostic
    (folder missing: 404, or no banner: 200) or a Failure. Never raises.
    """
    http = session if session is not None else requests
    config = config or Config()
    warner = warner or LoggerWarner(logger)
    url = contents_url(owner_name, repo_name, config.api_base_url)

    logger.debug("GET %s", url)
    try:
        response = http.get(url, timeout=config.timeout_seconds)
    except Exception as e:
        logger.debug("Transport failure for %s/%s: %s", owner_name, repo_name, e)
        return Failure(kind=FailureKind.TRANSPORT, error=e)

    status = response.status_code
    if status == 404:
        return _diagnostic(
            FOLDER_MISSING_MESSAGE.format(repo=repo_name),
            FOLDER_MISSING_SUGGESTION,
            404,
            warner,
        )
    if not 200 <= status < 300:
        error = UnexpectedStatusError(status, response.reason or "")
        logger.debug("%s/%s: %s", owner_name, repo_name, error)
        return Failure(kind=FailureKind.UNEXPECTED_STATUS, error=error)

    try:
        entries = _decode_entries(response)
    except Exception as e:
        logger.debug("Could not decode listing for %s/%s: %s", owner_name, repo_name, e)
        return Failure(kind=FailureKind.DECODE, error=e)

    if not any(is_banner(e) for e in entries):
        return _diagnostic(
            NO_BANNER_MESSAGE.format(repo=repo_name),
            NO_BANNER_SUGGESTION,
            200,
            warner,
        )
    return Listing(entries=entries)


async def lookup_banner_async(
    owner_name: str,
    repo_name: str,
    *,
    session: Any = None,
    config: Config | None = None,
    warner: Warner | None = None,
) -> LookupOutcome:
    """Awaitable lookup_banner; the request runs in a worker thread."""
    return await asyncio.to_thread(
        lookup_banner,
        owner_name,
        repo_name,
        session=session,
        config=config,
        warner=warner,
    )
