from typing import Any, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field

from beanwire.domain.enums import DependencyKind


class FieldSpec(BaseModel):
    """Value object describing one injection target of a bean type.

    Attributes:
        field_name: Attribute name on the bean instance.
        dependency_name: Name of the bean to inject.
        declared_type: Type declared on the field.
        kind: Whether the field requires a concrete class or an interface.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    field_name: str = Field(..., description="Attribute name on the bean instance.")
    dependency_name: str = Field(..., description="Name of the bean to inject.")
    declared_type: Type[Any] = Field(..., description="Type declared on the field.")
    kind: DependencyKind = Field(..., description="Concrete or interface requirement.")

    @property
    def requires_concrete_type(self) -> bool:
        return self.kind is DependencyKind.CONCRETE


class Definition(BaseModel):
    """Value object representing a provided bean type.

    Attributes:
        name: The bean name.
        bean_type: The class the container instantiates.
        injection_targets: Fields to inject, base classes first, in declaration order.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., min_length=1, description="The bean name.")
    bean_type: Type[Any] = Field(..., description="The class to instantiate.")
    injection_targets: Tuple[FieldSpec, ...] = Field(
        default=(),
        description="Fields requiring injection.",
    )
