"""Application layer - Three-phase bean loading."""

import logging
from typing import Any, Dict, Mapping, MutableMapping, Optional, Set, Type

from beanwire.application.registry import DefinitionRegistry, is_protocol_class
from beanwire.domain import (
    AfterPropertiesSet,
    BeanConstruct,
    BeanCreationError,
    Definition,
    DependencyNotFoundError,
    FieldAccessError,
    FieldSpec,
    Initialized,
    PreInitialize,
    TypeMismatchError,
)

logger = logging.getLogger(__name__)


def _protocol_members(protocol: Type) -> Set[str]:
    # __protocol_attrs__ exists from Python 3.12
    members = getattr(protocol, "__protocol_attrs__", None)
    if members is not None:
        return set(members)
    found: Set[str] = set()
    for base in protocol.__mro__[:-1]:
        if base.__name__ in ("Protocol", "Generic"):
            continue
        found.update(vars(base))
        found.update(getattr(base, "__annotations__", {}))
    return {name for name in found if not name.startswith("_")}


def satisfies(instance: Any, spec: FieldSpec) -> bool:
    """Check a bean against the type requirement of an injection target.

    Concrete targets accept instances of the declared class or a subclass.
    Interface targets accept anything ``isinstance`` approves for abstract
    classes and runtime-checkable protocols, and anything exposing every
    member of a plain protocol.
    """
    declared_type = spec.declared_type
    if spec.requires_concrete_type:
        return isinstance(instance, declared_type)
    if is_protocol_class(declared_type) and not getattr(declared_type, "_is_runtime_protocol", False):
        return all(hasattr(instance, member) for member in _protocol_members(declared_type))
    return isinstance(instance, declared_type)


class ResolutionEngine:
    """Constructs, wires and notifies the beans of a definition registry.

    Loading runs three phases, each over the definitions in registration order:

    1. Construct: instantiate every definition, then call ``bean_construct``.
    2. Inject: per bean, call ``pre_initialize``, inject its fields, call
       ``after_properties_set`` and promote it into the bean pool.
    3. Notify: call ``initialized`` on every built bean.

    Dependencies are looked up in the registered pool first, then among the
    beans built so far, wired or not.

    Attributes:
        _registry: Definitions to build.
        _registered: Ready-made instances, never injected nor notified.
        _beans: Public bean pool, filled as each bean finishes injection.
        _prototypes: Built instances, keyed by bean name.
        _unsafe: Whether assignments bypass attribute guards.
    """

    def __init__(
        self,
        registry: DefinitionRegistry,
        registered: Mapping[str, Any],
        beans: Optional[MutableMapping[str, Any]] = None,
        unsafe: bool = False,
    ) -> None:
        self._registry = registry
        self._registered = registered
        self._beans: MutableMapping[str, Any] = beans if beans is not None else {}
        self._prototypes: Dict[str, Any] = {}
        self._unsafe = unsafe

    def load(self) -> MutableMapping[str, Any]:
        """Run the construct, inject and notify phases.

        Returns:
            The bean pool holding every built bean.

        Raises:
            BeanCreationError: If a definition cannot be instantiated.
            DependencyNotFoundError: If an injection target names an unknown bean.
            TypeMismatchError: If a resolved bean has the wrong type.
            FieldAccessError: If a field cannot be written.
        """
        self._construct()
        self._inject()
        self._notify()
        return self._beans

    def _construct(self) -> None:
        for definition in self._registry:
            self._prototypes[definition.name] = self._instantiate(definition)
        logger.debug("Constructed %d prototype(s)", len(self._prototypes))

        for name, prototype in self._prototypes.items():
            if isinstance(prototype, BeanConstruct):
                logger.debug("Calling bean_construct on %r", name)
                prototype.bean_construct()

    def _instantiate(self, definition: Definition) -> Any:
        try:
            return definition.bean_type()
        except Exception as e:
            raise BeanCreationError(definition.name, definition.bean_type, str(e)) from e

    def _inject(self) -> None:
        for name, prototype in self._prototypes.items():
            definition = self._registry.get(name)

            if isinstance(prototype, PreInitialize):
                logger.debug("Calling pre_initialize on %r", name)
                prototype.pre_initialize()

            for spec in definition.injection_targets:
                dependency = self._resolve(definition, spec)
                self._check_type(definition, spec, dependency)
                self._assign(definition, prototype, spec, dependency)

            if isinstance(prototype, AfterPropertiesSet):
                logger.debug("Calling after_properties_set on %r", name)
                prototype.after_properties_set()

            self._beans[name] = prototype
            logger.debug("Bean %r is wired", name)

    def _resolve(self, definition: Definition, spec: FieldSpec) -> Any:
        dependency_name = spec.dependency_name
        if dependency_name in self._registered:
            return self._registered[dependency_name]
        if dependency_name in self._beans:
            return self._beans[dependency_name]
        if dependency_name in self._prototypes:
            return self._prototypes[dependency_name]
        raise DependencyNotFoundError(dependency_name, definition.name, definition.bean_type, spec.field_name)

    def _check_type(self, definition: Definition, spec: FieldSpec, dependency: Any) -> None:
        if satisfies(dependency, spec):
            return
        raise TypeMismatchError(
            spec.dependency_name,
            type(dependency),
            spec.declared_type,
            definition.name,
            definition.bean_type,
            spec.field_name,
            interface=not spec.requires_concrete_type,
        )

    def _assign(self, definition: Definition, prototype: Any, spec: FieldSpec, dependency: Any) -> None:
        field_name = spec.field_name
        if not self._unsafe and field_name.startswith("_"):
            raise FieldAccessError(
                definition.name,
                definition.bean_type,
                field_name,
                "field is not public; enable unsafe mode to inject it",
            )

        setter = object.__setattr__ if self._unsafe else setattr
        try:
            setter(prototype, field_name, dependency)
        except (AttributeError, TypeError, ValueError) as e:
            raise FieldAccessError(definition.name, definition.bean_type, field_name, str(e)) from e

    def _notify(self) -> None:
        for name, prototype in self._prototypes.items():
            if isinstance(prototype, Initialized):
                logger.debug("Calling initialized on %r", name)
                prototype.initialized()
