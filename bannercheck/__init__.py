"""bannercheck: does a repository ship a banner image in its public folder?"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("bannercheck")
except PackageNotFoundError:
    __version__ = "0.0.0.dev0"
