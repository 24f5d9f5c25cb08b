from .registry import RegistryService

__all__ = ["RegistryService"]
