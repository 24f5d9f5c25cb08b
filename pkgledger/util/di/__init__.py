from pkgledger.util.di.base import Provider, ProviderBase, get_provider
from pkgledger.util.di.scope import Scope

__all__ = ["Provider", "ProviderBase", "Scope", "get_provider"]
