"""Provider base class and mockable component names."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a production and a test implementation
Component = Literal["email", "persistence"]


class ProviderBase(Provider):
    """Common base of every provider in the container.

    A component base sets ``__mock_component__``; each of its implementations
    subclasses it and sets ``__is_mock__``. Providers with no subclasses are
    used as they are in every environment.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
