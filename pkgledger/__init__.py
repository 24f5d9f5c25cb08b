"""pkgledger - append-only package metadata registry."""

__version__ = "0.1.0"
