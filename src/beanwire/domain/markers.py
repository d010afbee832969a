from typing import Optional


class Inject:
    """Marks a class-level annotation as an injection target.

    Used as ``typing.Annotated`` metadata. Without a name the dependency name
    is derived from the field's own name.

    Example:
        >>> class UserDao:
        ...     db: Annotated[Database, Inject("db")]
        ...     cache: Annotated[Cache, Inject()]
    """

    __slots__ = ("name",)

    def __init__(self, name: Optional[str] = None) -> None:
        self.name = name or ""

    def __repr__(self) -> str:
        return f"Inject({self.name!r})" if self.name else "Inject()"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Inject) and other.name == self.name

    def __hash__(self) -> int:
        return hash((Inject, self.name))
