"""Application layer - Bean definitions and injection-target extraction."""

import inspect
import logging
from typing import Annotated, Any, Dict, Iterator, List, Optional, Tuple, Type, get_args, get_origin, get_type_hints

from beanwire.domain import (
    Definition,
    DependencyKind,
    DuplicateDefinitionError,
    FieldSpec,
    Inject,
    InvalidFieldDeclarationError,
    derive_bean_name,
)

logger = logging.getLogger(__name__)


def is_protocol_class(cls: Any) -> bool:
    """Return True for classes declared directly as ``typing.Protocol`` subclasses."""
    return inspect.isclass(cls) and bool(getattr(cls, "_is_protocol", False))


def classify_dependency_type(declared_type: Any) -> Optional[DependencyKind]:
    """Decide whether a declared field type is a concrete class or an interface.

    Returns:
        The dependency kind, or None when the type cannot be injected
        (builtins, unions, generics, ``typing.Any``).
    """
    if not inspect.isclass(declared_type) or get_origin(declared_type) is not None:
        return None
    if is_protocol_class(declared_type) or inspect.isabstract(declared_type):
        return DependencyKind.INTERFACE
    if declared_type.__module__ in ("builtins", "typing"):
        return None
    return DependencyKind.CONCRETE


def _find_marker(hint: Any) -> Optional[Inject]:
    if get_origin(hint) is not Annotated:
        return None
    for metadata in hint.__metadata__:
        if isinstance(metadata, Inject):
            return metadata
    return None


def extract_field_specs(bean_type: Type) -> Tuple[FieldSpec, ...]:
    """Collect the injection targets declared on a class.

    A field is a target if and only if its annotation is
    ``Annotated[T, Inject(...)]``. Annotations inherited from base classes
    are included, base classes first.

    Args:
        bean_type: The class to inspect.

    Returns:
        The field specs, in declaration order.

    Raises:
        InvalidFieldDeclarationError: If the annotations cannot be evaluated or
            a marked field declares a type that is neither concrete nor an interface.

    Example:
        >>> class UserDao:
        ...     db: Annotated[Database, Inject("db")]
        ...     table_name: str = ""
        >>> [spec.dependency_name for spec in extract_field_specs(UserDao)]
        ['db']
    """
    try:
        hints = get_type_hints(bean_type, include_extras=True)
    except Exception as e:
        raise InvalidFieldDeclarationError(bean_type, "<annotations>", f"cannot evaluate type hints: {e}") from e

    specs: List[FieldSpec] = []
    for field_name, hint in hints.items():
        marker = _find_marker(hint)
        if marker is None:
            continue

        declared_type = get_args(hint)[0]
        kind = classify_dependency_type(declared_type)
        if kind is None:
            raise InvalidFieldDeclarationError(
                bean_type,
                field_name,
                f"{declared_type!r} is neither a concrete class nor an interface",
            )

        specs.append(
            FieldSpec(
                field_name=field_name,
                dependency_name=marker.name or derive_bean_name(field_name),
                declared_type=declared_type,
                kind=kind,
            )
        )
    return tuple(specs)


class DefinitionRegistry:
    """Holds one definition per bean name.

    Definitions are only added or removed while the owning container is
    pending; the container state guards every change.

    Attributes:
        _definitions: Definitions keyed by bean name, in registration order.
    """

    def __init__(self) -> None:
        self._definitions: Dict[str, Definition] = {}

    def define(self, name: str, bean_type: Type) -> Definition:
        """Build and store the definition of a bean type.

        Args:
            name: The bean name.
            bean_type: The class to instantiate on load.

        Returns:
            The stored definition.

        Raises:
            DuplicateDefinitionError: If the name is already defined.
            InvalidFieldDeclarationError: If an injection field is invalid.
        """
        self._check_available(name)
        definition = Definition(
            name=name,
            bean_type=bean_type,
            injection_targets=extract_field_specs(bean_type),
        )
        self.add(definition)
        return definition

    def add(self, definition: Definition) -> None:
        """Store a prebuilt definition.

        Raises:
            DuplicateDefinitionError: If the name is already defined.
        """
        self._check_available(definition.name)
        self._definitions[definition.name] = definition
        logger.debug(
            "Defined bean %r as %s with %d injection target(s)",
            definition.name,
            definition.bean_type.__name__,
            len(definition.injection_targets),
        )

    def remove(self, name: str) -> Optional[Definition]:
        """Drop a definition, returning it if it existed."""
        return self._definitions.pop(name, None)

    def get(self, name: str) -> Optional[Definition]:
        return self._definitions.get(name)

    def _check_available(self, name: str) -> None:
        existing = self._definitions.get(name)
        if existing is not None:
            raise DuplicateDefinitionError(name, existing.bean_type)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[Definition]:
        return iter(list(self._definitions.values()))

    def __len__(self) -> int:
        return len(self._definitions)
