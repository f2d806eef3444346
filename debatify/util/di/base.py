"""Provider selection for the DI container.

Config, domain and application providers have exactly one implementation.
Infrastructure components (database, mailer, blob storage) declare a base
class tagged with ``__mock_component__``; the production subclass lives in
``util.di.infrastructure`` and the mock subclass in ``tests/di``, which
registers itself simply by being imported.
"""

from typing import ClassVar, Literal

from dishka import Provider

Component = Literal["persistence", "mailer", "storage"]


class ProviderBase(Provider):
    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_swappable(cls) -> bool:
        return cls.__mock_component__ is not None

    @classmethod
    def implementation(cls, use_mock: bool = False) -> type["ProviderBase"]:
        """Subclass to instantiate for this component.

        Raises:
            ValueError: The requested flavour was never registered
        """
        if not cls.is_swappable():
            return cls
        for impl in cls.__subclasses__():
            if impl.__is_mock__ == use_mock:
                return impl
        flavour = "mock" if use_mock else "production"
        raise ValueError(f"No {flavour} provider for {cls.__mock_component__}")
