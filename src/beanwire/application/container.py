import inspect
import logging
from typing import Any, Dict, Iterator, List, Optional, Type

from beanwire.application.engine import ResolutionEngine
from beanwire.application.registry import DefinitionRegistry
from beanwire.application.value_store import DictValueStore
from beanwire.domain import (
    AlreadyLoadedError,
    BeanNotFoundError,
    ContainerState,
    Definition,
    DuplicateDefinitionError,
    DuplicateInstanceError,
    IContainer,
    InvalidBeanError,
    IValueStore,
    bean_name_of,
)

logger = logging.getLogger(__name__)


class BeanContainer(IContainer):
    """Main bean container.

    Collects ready-made beans and bean definitions, then builds and wires every
    definition in a single load. After load, the container only serves lookups.

    Attributes:
        _registry: Definitions of the beans to build.
        _registered: Ready-made beans, keyed by name.
        _beans: Beans built by the container, filled during load.
        _state: Current lifecycle state.
        _unsafe: Whether injection may write non-public or guarded fields.
        _value_store: Configuration store exposed to the application.
    """

    def __init__(self, value_store: Optional[IValueStore] = None, unsafe: bool = False) -> None:
        """Initialize an empty, pending container.

        Args:
            value_store: Configuration store; a fresh DictValueStore when omitted.
            unsafe: Enable injection into non-public or guarded fields.
        """
        self._registry = DefinitionRegistry()
        self._registered: Dict[str, Any] = {}
        self._beans: Dict[str, Any] = {}
        self._state = ContainerState.PENDING
        self._unsafe = unsafe
        self._value_store: IValueStore = value_store if value_store is not None else DictValueStore()

    @property
    def state(self) -> ContainerState:
        return self._state

    @property
    def loaded(self) -> bool:
        return self._state is ContainerState.LOADED

    @property
    def unsafe(self) -> bool:
        return self._unsafe

    def unsafe_mode(self, enabled: bool = True) -> "BeanContainer":
        """Toggle injection into non-public or guarded fields.

        Raises:
            AlreadyLoadedError: If the container is no longer pending.
        """
        self._ensure_pending()
        self._unsafe = enabled
        return self

    def register_bean(self, bean: Any, name: str = "") -> "BeanContainer":
        """Register a ready-made bean.

        Registered beans are never injected and receive no lifecycle calls.

        Args:
            bean: The instance to register.
            name: Bean name; derived from the instance's class when empty.

        Returns:
            The container, for chaining.

        Raises:
            AlreadyLoadedError: If the container is no longer pending.
            InvalidBeanError: If ``bean`` is None or a class.
            DuplicateDefinitionError: If the name is already defined.
            DuplicateInstanceError: If the name is already registered.

        Example:
            >>> container.register_bean(Database(prefix="t_"), "db")
        """
        self._ensure_pending()
        self._validate_bean(bean)

        name = name or bean_name_of(bean)
        self._check_name_available(name)
        self._registered[name] = bean
        logger.debug("Registered bean %r (%s)", name, type(bean).__name__)
        return self

    def provide(self, bean_type: Type, name: str = "") -> "BeanContainer":
        """Define a bean the container builds on load.

        Args:
            bean_type: The class to instantiate. An instance provides its class.
            name: Bean name; derived from the class when empty.

        Returns:
            The container, for chaining.

        Raises:
            AlreadyLoadedError: If the container is no longer pending.
            InvalidBeanError: If ``bean_type`` is None.
            DuplicateDefinitionError: If the name is already defined.
            DuplicateInstanceError: If the name is already registered.
            InvalidFieldDeclarationError: If an injection field is invalid.

        Example:
            >>> container.provide(UserDao).provide(UserService, "users")
        """
        self._ensure_pending()
        if bean_type is None:
            raise InvalidBeanError("Cannot provide None as a bean type")
        if not inspect.isclass(bean_type):
            bean_type = type(bean_type)

        name = name or bean_name_of(bean_type)
        self._check_name_available(name)
        self._registry.define(name, bean_type)
        return self

    def load(self) -> None:
        """Build, wire and notify every defined bean.

        Raises:
            AlreadyLoadedError: If load already ran, successfully or not.
            DIException: Any construction, resolution or assignment failure;
                the container is then left in the FAILED state.
        """
        self._ensure_pending()
        self._state = ContainerState.LOADING

        engine = ResolutionEngine(self._registry, self._registered, beans=self._beans, unsafe=self._unsafe)
        try:
            engine.load()
        except Exception as e:
            self._state = ContainerState.FAILED
            self._beans.clear()
            logger.error("Bean container failed to load: %s", e)
            raise

        self._state = ContainerState.LOADED
        logger.info(
            "Bean container loaded: %d built, %d registered",
            len(self._beans),
            len(self._registered),
        )

    def get_bean(self, name: str) -> Optional[Any]:
        """Return the bean under a name, or None.

        Registered beans are found at any time; built beans once they are wired.
        """
        if name in self._registered:
            return self._registered[name]
        return self._beans.get(name)

    def has_bean(self, name: str) -> bool:
        return name in self._registered or name in self._beans

    def get_required_bean(self, name: str) -> Any:
        """Return the bean under a name.

        Raises:
            BeanNotFoundError: If no such bean is visible.
        """
        if not self.has_bean(name):
            raise BeanNotFoundError(name)
        return self.get_bean(name)

    def bean_names(self) -> List[str]:
        return list(self._registered) + [name for name in self._beans if name not in self._registered]

    def get_definition(self, name: str) -> Optional[Definition]:
        return self._registry.get(name)

    def definitions(self) -> Iterator[Definition]:
        return iter(self._registry)

    @property
    def value_store(self) -> IValueStore:
        return self._value_store

    def use_value_store(self, value_store: IValueStore) -> None:
        self._value_store = value_store

    def _ensure_pending(self) -> None:
        if self._state is not ContainerState.PENDING:
            raise AlreadyLoadedError(self._state)

    def _validate_bean(self, bean: Any) -> None:
        if bean is None:
            raise InvalidBeanError("Cannot register None as a bean")
        if inspect.isclass(bean):
            raise InvalidBeanError(f"Bean must be an instance, got class {bean.__name__}; use provide() instead")

    def _check_name_available(self, name: str) -> None:
        existing = self._registry.get(name)
        if existing is not None:
            raise DuplicateDefinitionError(name, existing.bean_type)
        if name in self._registered:
            raise DuplicateInstanceError(name)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.has_bean(name)
