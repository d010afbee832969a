"""Bean name derivation."""

import inspect
from typing import Any


def derive_bean_name(name: str) -> str:
    """Lower-case the first character of a name.

    Example:
        >>> derive_bean_name("UserDao")
        'userDao'
    """
    return name[:1].lower() + name[1:]


def bean_name_of(target: Any) -> str:
    """Derive the default bean name of a class, or of an instance's class."""
    bean_type = target if inspect.isclass(target) else type(target)
    return derive_bean_name(bean_type.__name__)
