from enum import Enum


class DependencyKind(str, Enum):
    """Defines what an injected field requires of the bean it receives.

    Attributes:
        CONCRETE: The bean must be an instance of the declared class (or a subclass).
        INTERFACE: The bean must implement the declared abstract class or protocol.
    """

    CONCRETE = "concrete"
    INTERFACE = "interface"

    def __str__(self) -> str:
        return self.value


class ContainerState(str, Enum):
    """Lifecycle state of a bean container.

    Attributes:
        PENDING: Accepting registrations and definitions.
        LOADING: The load protocol is running.
        LOADED: Every bean is wired; the container is read-only.
        FAILED: Load aborted; the container is unusable.
    """

    PENDING = "pending"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value
