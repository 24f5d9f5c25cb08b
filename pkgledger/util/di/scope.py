"""Custom Dishka scopes for pkgledger."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """Dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (engine, in-memory stores)
    - UOW: Unit of Work (one registry transition or query, one transaction)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
