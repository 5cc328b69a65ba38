"""Happy hour event utilities."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("happy-hour-events")
except PackageNotFoundError:  # pragma: no cover - fallback during local dev
    __version__ = "0.0.0"

__all__ = ["__version__"]
