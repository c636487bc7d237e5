"""Pytest configuration and fixtures."""

import json
import threading

import pytest
import requests


def api_item(name: str, type_: str = "file", size: int = 100) -> dict:
    """One contents-API object for public/<name>."""
    base = "https://api.github.com/repos/octo-org/site"
    return {
        "name": name,
        "path": f"public/{name}",
        "sha": f"sha-{name}",
        "size": size if type_ == "file" else 0,
        "url": f"{base}/contents/public/{name}?ref=main",
        "html_url": f"https://github.com/octo-org/site/blob/main/public/{name}",
        "git_url": f"{base}/git/blobs/sha-{name}",
        "download_url": (
            f"https://raw.githubusercontent.com/octo-org/site/main/public/{name}"
            if type_ == "file" else None
        ),
        "type": type_,
    }


def make_response(status: int, payload=None, reason: str = "OK", body: str | None = None) -> requests.Response:
    r = requests.Response()
    r.status_code = status
    r.reason = reason
    if body is None:
        body = json.dumps(payload if payload is not None else {"message": reason})
    r._content = body.encode("utf-8")
    r.encoding = "utf-8"
    return r


class FakeSession:
    """requests-compatible get(); answers from a {url_suffix: response} map."""

    def __init__(self, routes=None, default=None, raises=None):
        self.routes = routes or {}
        self.default = default
        self.raises = raises
        self.calls = []
        self._lock = threading.Lock()

    def get(self, url, timeout=None, **kwargs):
        with self._lock:
            self.calls.append({"url": url, "timeout": timeout, **kwargs})
        if self.raises is not None:
            raise self.raises
        for suffix, response in self.routes.items():
            if url.endswith(suffix):
                return response
        if self.default is not None:
            return self.default
        return make_response(404, reason="Not Found")


class RecordingWarner:
    def __init__(self):
        self.messages = []

    def warn(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def warner():
    return RecordingWarner()


@pytest.fixture
def site_listing():
    """public/ of octo-org/site: index.html, banner-dark.svg, logo.png."""
    return [api_item("index.html"), api_item("banner-dark.svg"), api_item("logo.png")]
