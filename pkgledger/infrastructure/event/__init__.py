from .di import EventProvider

__all__ = ["EventProvider"]
