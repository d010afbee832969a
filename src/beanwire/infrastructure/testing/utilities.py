from typing import Any, Dict, List, Optional

from beanwire.application import BeanContainer
from beanwire.domain import IValueStore


class TestContainer(BeanContainer):
    """Bean container for testing with bean override capabilities.

    Allows replacing provided definitions with ready-made test doubles
    before load. A mocked bean is registered as-is: it is neither injected
    nor notified, and every bean depending on its name receives it.

    Attributes:
        _mocks: Mocked beans, keyed by name.

    Example:
        >>> def test_user_service():
        ...     container = TestContainer()
        ...     container.provide(UserService).provide(EmailService)
        ...
        ...     mock_email = MockEmailService()
        ...     container.mock_bean("emailService", mock_email)
        ...     container.load()
        ...
        ...     assert container.get_bean("userService").email is mock_email
    """

    __test__ = False  # Tell pytest not to collect this class as a test

    def __init__(self, value_store: Optional[IValueStore] = None, unsafe: bool = False) -> None:
        super().__init__(value_store=value_store, unsafe=unsafe)
        self._mocks: Dict[str, Any] = {}

    def mock_bean(self, name: str, mock_instance: Any) -> "TestContainer":
        """Replace a bean with a ready-made instance.

        Drops any definition or earlier mock under the same name.

        Args:
            name: The bean name to override.
            mock_instance: The instance every dependent receives.

        Returns:
            The container, for chaining.

        Raises:
            AlreadyLoadedError: If the container is no longer pending.
            InvalidBeanError: If ``mock_instance`` is None or a class.
        """
        self._ensure_pending()
        self._validate_bean(mock_instance)
        self._registry.remove(name)
        self._registered.pop(name, None)
        self.register_bean(mock_instance, name)
        self._mocks[name] = mock_instance
        return self

    def mocked_names(self) -> List[str]:
        return list(self._mocks)


def create_mock_container(**beans: Any) -> TestContainer:
    """Create a test container with pre-registered mock beans.

    Args:
        **beans: Mock instances keyed by bean name.

    Returns:
        TestContainer with the mocks registered.

    Example:
        >>> container = create_mock_container(db=MockDatabase(), cache=MockCache())
        >>> container.provide(UserDao)
        >>> container.load()
    """
    container = TestContainer()
    for name, mock_instance in beans.items():
        container.mock_bean(name, mock_instance)
    return container
