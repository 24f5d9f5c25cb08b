from __future__ import annotations

from typing import ClassVar, Literal, Type

from dishka import Provider as _DishkaProvider

Component = Literal["persistence"]


class ProviderBase(_DishkaProvider):
    """Base for all DI providers with unified metadata.

    Attributes:
        __mock_component__: Component name (for swappable components, None for concrete providers)
        __is_mock__: Whether this is the in-process implementation
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


Provider = ProviderBase


def get_provider(base: Type[ProviderBase], use_mock: bool = False) -> Type[ProviderBase]:
    """Get appropriate provider class.

    - No subclasses: Concrete provider, use directly
    - Has subclasses: Swappable component, select by __is_mock__ flag

    Raises:
        ValueError: If requested implementation not found
    """
    subclasses = base.__subclasses__()

    if not subclasses:
        return base

    impl = next(
        (c for c in subclasses if getattr(c, "__is_mock__", False) == use_mock),
        None,
    )

    if not impl:
        kind = "mock" if use_mock else "production"
        component_name = base.__mock_component__ or base.__name__
        raise ValueError(f"No {kind} implementation for {component_name}")

    return impl
