from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, List, Optional, Protocol, Type, runtime_checkable

from beanwire.domain.models import Definition


@runtime_checkable
class BeanConstruct(Protocol):
    """Called right after the container instantiates the bean, before any injection."""

    def bean_construct(self) -> None: ...


@runtime_checkable
class PreInitialize(Protocol):
    """Called at the start of the bean's injection phase."""

    def pre_initialize(self) -> None: ...


@runtime_checkable
class AfterPropertiesSet(Protocol):
    """Called once the bean's own fields are injected."""

    def after_properties_set(self) -> None: ...


@runtime_checkable
class Initialized(Protocol):
    """Called after every container-built bean has been wired."""

    def initialized(self) -> None: ...


class IValueStore(ABC):
    """Abstract interface for a hierarchical key/value configuration store."""

    @abstractmethod
    def set_default(self, key: str, value: Any) -> None:
        """Set the fallback value of a key.

        Args:
            key: Dot-separated key path.
            value: The default value.
        """

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Set the explicit value of a key, overriding its default.

        Args:
            key: Dot-separated key path.
            value: The value.
        """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the value of a key, or ``default`` if it is unset.

        Args:
            key: Dot-separated key path.
            default: Returned when neither a value nor a default exists.
        """

    @abstractmethod
    def get_all(self) -> Dict[str, Any]:
        """Return every value, defaults merged under explicit values."""


class IContainer(ABC):
    """Abstract interface for bean container operations."""

    @abstractmethod
    def register_bean(self, bean: Any, name: str = "") -> "IContainer":
        """Register a ready-made instance.

        Args:
            bean: The instance. It is never injected nor notified.
            name: Bean name; derived from the instance's class when empty.
        """

    @abstractmethod
    def provide(self, bean_type: Type, name: str = "") -> "IContainer":
        """Define a bean the container will construct and wire on load.

        Args:
            bean_type: The class to instantiate.
            name: Bean name; derived from the class when empty.
        """

    @abstractmethod
    def load(self) -> None:
        """Construct, wire, and notify every defined bean."""

    @abstractmethod
    def get_bean(self, name: str) -> Optional[Any]:
        """Return the bean registered or built under a name, or None."""

    @abstractmethod
    def bean_names(self) -> List[str]:
        """Return the names of every bean currently visible to lookups."""

    @abstractmethod
    def definitions(self) -> Iterator[Definition]:
        """Iterate over the provided definitions."""
