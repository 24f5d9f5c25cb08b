"""Package domain ports."""

from .repository import PackageRepository

__all__ = ["PackageRepository"]
