from typing import Optional, Type


def _type_name(cls: Optional[Type]) -> str:
    return getattr(cls, "__name__", repr(cls))


class DIException(Exception):
    """Base exception for bean container errors."""


class DuplicateDefinitionError(DIException):
    """Raised when a bean name already has a definition.

    Attributes:
        bean_name: The conflicting bean name.
        existing_type: The type already defined under that name.
    """

    def __init__(self, bean_name: str, existing_type: Type) -> None:
        self.bean_name = bean_name
        self.existing_type = existing_type
        super().__init__(f"Bean '{bean_name}' is already defined by {_type_name(existing_type)}")


class DuplicateInstanceError(DIException):
    """Raised when a bean name already has an instance.

    Attributes:
        bean_name: The conflicting bean name.
    """

    def __init__(self, bean_name: str) -> None:
        self.bean_name = bean_name
        super().__init__(f"Bean '{bean_name}' already exists")


class AlreadyLoadedError(DIException):
    """Raised when the container is mutated or loaded outside the pending state.

    Attributes:
        state: The container state at the time of the call.
    """

    def __init__(self, state: object) -> None:
        self.state = state
        super().__init__(f"Container is no longer pending (state: {state})")


class InvalidBeanError(DIException):
    """Raised when an object cannot be registered or provided as a bean.

    This occurs when:
    - A class or None is registered as a ready-made bean.
    - Something other than a class or instance is provided as a prototype.
    """


class InvalidFieldDeclarationError(DIException):
    """Raised when an injection-marked field declares an unsupported type.

    Attributes:
        bean_type: The class declaring the field.
        field_name: The offending field.
        reason: Why the declaration was rejected.
    """

    def __init__(self, bean_type: Type, field_name: str, reason: str) -> None:
        self.bean_type = bean_type
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Invalid injection field {_type_name(bean_type)}.{field_name}: {reason}")


class BeanCreationError(DIException):
    """Raised when a prototype cannot be instantiated.

    Attributes:
        bean_name: Name of the bean being created.
        bean_type: The class that failed to instantiate.
        reason: Description of the failure.
    """

    def __init__(self, bean_name: str, bean_type: Type, reason: str) -> None:
        self.bean_name = bean_name
        self.bean_type = bean_type
        self.reason = reason
        super().__init__(f"Cannot create bean '{bean_name}' ({_type_name(bean_type)}): {reason}")


class DependencyNotFoundError(DIException):
    """Raised when an injection target names a bean that does not exist.

    Attributes:
        dependency_name: The missing bean name.
        bean_name: The dependent bean.
        bean_type: The dependent bean's class.
        field_name: The field that requested the dependency.
    """

    def __init__(self, dependency_name: str, bean_name: str, bean_type: Type, field_name: str) -> None:
        self.dependency_name = dependency_name
        self.bean_name = bean_name
        self.bean_type = bean_type
        self.field_name = field_name
        super().__init__(
            f"Bean '{dependency_name}' not found for {bean_name}({_type_name(bean_type)}.{field_name})"
        )


class TypeMismatchError(DIException):
    """Raised when a resolved bean does not satisfy the field's declared type.

    Attributes:
        dependency_name: Name of the resolved bean.
        actual_type: Class of the resolved bean.
        declared_type: Type declared on the field.
        bean_name: The dependent bean.
        bean_type: The dependent bean's class.
        field_name: The field being injected.
    """

    def __init__(
        self,
        dependency_name: str,
        actual_type: Type,
        declared_type: Type,
        bean_name: str,
        bean_type: Type,
        field_name: str,
        interface: bool = False,
    ) -> None:
        self.dependency_name = dependency_name
        self.actual_type = actual_type
        self.declared_type = declared_type
        self.bean_name = bean_name
        self.bean_type = bean_type
        self.field_name = field_name
        requirement = "does not implement interface" if interface else "does not match type"
        super().__init__(
            f"Bean '{dependency_name}' ({_type_name(actual_type)}) {requirement} {_type_name(declared_type)} "
            f"required by {bean_name}({_type_name(bean_type)}.{field_name})"
        )


class FieldAccessError(DIException):
    """Raised when a resolved bean cannot be written into its field.

    This occurs when:
    - The field is non-public and unsafe mode is disabled.
    - The instance refuses attribute assignment (frozen, read-only property).

    Attributes:
        bean_name: The dependent bean.
        bean_type: The dependent bean's class.
        field_name: The field being injected.
        reason: Description of the failure.
    """

    def __init__(self, bean_name: str, bean_type: Type, field_name: str, reason: str) -> None:
        self.bean_name = bean_name
        self.bean_type = bean_type
        self.field_name = field_name
        self.reason = reason
        super().__init__(f"Cannot set field {bean_name}({_type_name(bean_type)}.{field_name}): {reason}")


class BeanNotFoundError(DIException):
    """Raised by strict lookups when no bean exists under a name.

    Attributes:
        bean_name: The requested bean name.
    """

    def __init__(self, bean_name: str) -> None:
        self.bean_name = bean_name
        super().__init__(f"Bean '{bean_name}' not found")
