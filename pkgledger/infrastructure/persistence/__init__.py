from .di import PersistenceProvider, StoreProvider

__all__ = ["PersistenceProvider", "StoreProvider"]
