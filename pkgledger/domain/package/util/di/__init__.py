from .provider import PackageProvider

__all__ = ["PackageProvider"]
