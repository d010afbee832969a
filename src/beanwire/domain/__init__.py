"""
Domain layer - Core concepts of bean wiring.

This layer contains the models, markers, naming rules and error kinds of the container.
It has no dependencies on other layers.
"""

from .enums import ContainerState, DependencyKind
from .exceptions import (
    AlreadyLoadedError,
    BeanCreationError,
    BeanNotFoundError,
    DependencyNotFoundError,
    DIException,
    DuplicateDefinitionError,
    DuplicateInstanceError,
    FieldAccessError,
    InvalidBeanError,
    InvalidFieldDeclarationError,
    TypeMismatchError,
)
from .interfaces import (
    AfterPropertiesSet,
    BeanConstruct,
    IContainer,
    Initialized,
    IValueStore,
    PreInitialize,
)
from .markers import Inject
from .models import Definition, FieldSpec
from .naming import bean_name_of, derive_bean_name

__all__ = [
    # Enums
    "ContainerState",
    "DependencyKind",
    # Exceptions
    "DIException",
    "AlreadyLoadedError",
    "BeanCreationError",
    "BeanNotFoundError",
    "DependencyNotFoundError",
    "DuplicateDefinitionError",
    "DuplicateInstanceError",
    "FieldAccessError",
    "InvalidBeanError",
    "InvalidFieldDeclarationError",
    "TypeMismatchError",
    # Interfaces
    "IContainer",
    "IValueStore",
    "BeanConstruct",
    "PreInitialize",
    "AfterPropertiesSet",
    "Initialized",
    # Markers
    "Inject",
    # Models
    "Definition",
    "FieldSpec",
    # Naming
    "bean_name_of",
    "derive_bean_name",
]
