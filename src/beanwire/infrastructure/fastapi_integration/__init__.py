"""
FastAPI integration module.

Provides helpers for serving beans of a loaded container to FastAPI endpoints.
"""

from .integration import (
    BeanContainerMiddleware,
    create_bean_dependency,
    create_request_bean_dependency,
)

__all__ = [
    "create_bean_dependency",
    "create_request_bean_dependency",
    "BeanContainerMiddleware",
]
