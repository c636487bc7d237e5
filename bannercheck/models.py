"""Structured entries and lookup outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Union

from .errors import ContentsDecodeError


BANNER_MARKER = "banner"
BANNER_EXTENSIONS = (".png", ".jpg", ".jpeg", ".svg")


class EntryKind(str, Enum):
    FILE = "file"
    DIRECTORY = "dir"
    SYMLINK = "symlink"
    SUBMODULE = "submodule"
    OTHER = "other"  # any type the provider adds later

    @classmethod
    def from_api(cls, value: Any) -> "EntryKind":
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


class FailureKind(str, Enum):
    TRANSPORT = "transport"
    DECODE = "decode"
    UNEXPECTED_STATUS = "unexpected_status"


@dataclass(frozen=True)
class RepoRef:
    """An owner/repository pair."""

    owner: str
    repo: str

    @property
    def slug(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return self.slug


@dataclass(frozen=True)
class DirectoryEntry:
    """One item of a contents listing, as reported by the provider."""

    name: str
    path: str
    content_hash: str  # provider "sha"
    size_bytes: int
    api_url: str
    web_url: str
    kind: EntryKind
    git_url: Optional[str] = None
    raw_content_url: Optional[str] = None  # None for directories
    api_type: str = ""  # provider "type" as sent, kept when kind is OTHER

    @classmethod
    def from_api(cls, data: Any) -> "DirectoryEntry":
        """
        Build an entry from one decoded contents-API object.

        Only "name" is required. Unknown or missing "type" decodes to
        EntryKind.OTHER so one odd entry cannot hide a banner next to it.
        """
        if not isinstance(data, dict):
            raise ContentsDecodeError(f"Expected an object per entry, got {type(data).__name__}")
        try:
            name = str(data["name"])
            api_type = str(data.get("type") or "")
            return cls(
                name=name,
                path=str(data.get("path") or name),
                content_hash=str(data.get("sha") or ""),
                size_bytes=int(data.get("size") or 0),
                api_url=data.get("url") or "",
                web_url=data.get("html_url") or "",
                kind=EntryKind.from_api(api_type),
                git_url=data.get("git_url"),
                raw_content_url=data.get("download_url"),
                api_type=api_type,
            )
        except KeyError as e:
            raise ContentsDecodeError(f"Entry is missing field {e.args[0]!r}") from e
        except (TypeError, ValueError) as e:
            raise ContentsDecodeError(f"Malformed entry {data.get('name', '?')!r}: {e}") from e

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "path": self.path,
            "sha": self.content_hash,
            "size": self.size_bytes,
            "url": self.api_url,
            "html_url": self.web_url,
            "git_url": self.git_url,
            "download_url": self.raw_content_url,
            "type": self.api_type or self.kind.value,
        }


@dataclass(frozen=True)
class Listing:
    """Banner present: the full contents of the public folder."""

    entries: tuple[DirectoryEntry, ...] = field(default_factory=tuple)
    success: bool = field(default=True, init=False)

    @property
    def banners(self) -> list[DirectoryEntry]:
        return [e for e in self.entries if is_banner(e)]

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class Diagnostic:
    """Expected negative result with a remediation hint."""

    message: str
    suggestion: str
    status_code: int
    success: bool = field(default=False, init=False)

    @property
    def folder_missing(self) -> bool:
        return self.status_code == 404

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "message": self.message,
            "details": {
                "suggestion": self.suggestion,
                "status": self.status_code,
            },
        }


@dataclass(frozen=True)
class Failure:
    """Transport, decode or unexpected-status fault, error kept verbatim."""

    kind: FailureKind
    error: BaseException
    success: bool = field(default=False, init=False)

    @property
    def message(self) -> str:
        return str(self.error)


LookupOutcome = Union[Listing, Diagnostic, Failure]


def is_banner(entry: DirectoryEntry) -> bool:
    """True for a file whose name contains "banner" and ends in an image extension."""
    if entry.kind != EntryKind.FILE:
        return False
    name = entry.name.lower()
    return BANNER_MARKER in name and name.endswith(BANNER_EXTENSIONS)
