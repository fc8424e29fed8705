from abc import ABC, abstractmethod
from typing import Any, TypeVar

T = TypeVar("T")


class ConfigurationInterface(ABC):
    """Typed access to environment-specific settings."""

    @abstractmethod
    def get_configuration(self, key: str, cast_type: type[T], default: Any = ...) -> T:
        """Return ``key`` cast to ``cast_type``, or ``default`` when it is absent."""
        pass

    @abstractmethod
    def get_environment(self) -> str:
        pass
