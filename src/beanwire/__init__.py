"""
beanwire: Name-based bean container with field injection and lifecycle hooks.

Public API exports for the beanwire package.
"""

# Application exports
from beanwire.application.container import BeanContainer
from beanwire.application.value_store import DictValueStore

# Domain exports
from beanwire.domain.enums import ContainerState, DependencyKind
from beanwire.domain.exceptions import (
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
from beanwire.domain.interfaces import AfterPropertiesSet, BeanConstruct, Initialized, IValueStore, PreInitialize
from beanwire.domain.markers import Inject

__version__ = "0.1.0"

__all__ = [
    # Container
    "BeanContainer",
    "DictValueStore",
    "IValueStore",
    # Marker
    "Inject",
    # Lifecycle hooks
    "BeanConstruct",
    "PreInitialize",
    "AfterPropertiesSet",
    "Initialized",
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
]
