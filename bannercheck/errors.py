"""Exceptions carried inside Failure outcomes."""


class BannerCheckError(Exception):
    """Base class for errors raised by bannercheck itself."""


class UnexpectedStatusError(BannerCheckError):
    """The contents API answered with a status other than 2xx or 404."""

    def __init__(self, status_code: int, status_text: str = ""):
        self.status_code = status_code
        self.status_text = status_text
        super().__init__(f"Error {status_code}: {status_text}")


class ContentsDecodeError(BannerCheckError, ValueError):
    """The response body was JSON but not a directory listing."""
