"""Provider metadata shared by every DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure components that tests can swap for in-memory fakes
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider carrying component metadata.

    A base that names a ``__mock_component__`` is swappable: its subclasses
    are one production implementation and one mock flagged with
    ``__is_mock__``. A provider without subclasses is used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_swappable(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> type["ProviderBase"]:
        """Pick the production or mock subclass of a swappable provider.

        Raises:
            ValueError: If no subclass matches ``use_mock``
        """
        if not cls.is_swappable():
            return cls
        for impl in cls.__subclasses__():
            if impl.__is_mock__ == use_mock:
                return impl
        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
