from typing import Any, Awaitable, Callable

from fastapi import FastAPI, Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from beanwire.application import BeanContainer


def _lookup(container: BeanContainer, bean_name: str) -> Any:
    if not container.loaded:
        raise RuntimeError(f"Cannot look up bean '{bean_name}': the container is not loaded.")
    return container.get_required_bean(bean_name)


def create_bean_dependency(container: BeanContainer, bean_name: str) -> Callable[[], Any]:
    """Create a FastAPI Depends() callable that returns a bean by name.

    Args:
        container: The loaded container to read from.
        bean_name: The bean to return when the dependency is called.

    Returns:
        A callable that FastAPI can use with Depends().

    Raises:
        RuntimeError: When called before the container is loaded.
        BeanNotFoundError: When called and no bean has that name.

    Example:
        >>> container = BeanContainer()
        >>> container.register_bean(Database(), "db").provide(UserDao)
        >>> container.load()
        >>>
        >>> get_user_dao = create_bean_dependency(container, "userDao")
        >>>
        >>> @app.get("/users")
        >>> async def list_users(dao: UserDao = Depends(get_user_dao)):
        ...     return dao.all()
    """

    def dependency() -> Any:
        """Return the bean from the container."""
        return _lookup(container, bean_name)

    return dependency


def create_request_bean_dependency(bean_name: str) -> Callable[[Request], Any]:
    """Create a dependency that reads a bean from the request's container.

    Requires the BeanContainerMiddleware to be installed.

    Args:
        bean_name: The bean to return.

    Returns:
        A callable that resolves from ``request.state.bean_container``.

    Example:
        >>> app.add_middleware(BeanContainerMiddleware, container=container)
        >>>
        >>> get_clock = create_request_bean_dependency("clock")
        >>>
        >>> @app.get("/now")
        >>> async def now(clock: Clock = Depends(get_clock)):
        ...     return {"now": clock.now()}
    """

    def request_bean_dependency(request: Request) -> Any:
        """Return the bean from the request's container."""
        container = getattr(request.state, "bean_container", None)
        if container is None:
            raise RuntimeError(
                "Request does not have a bean container. Did you forget to add BeanContainerMiddleware?"
            )
        return _lookup(container, bean_name)

    return request_bean_dependency


class BeanContainerMiddleware(BaseHTTPMiddleware):
    """Middleware exposing a bean container to every request.

    The container is accessible via ``request.state.bean_container``.

    Attributes:
        container: The container attached to each request.

    Example:
        >>> app = FastAPI()
        >>> app.add_middleware(BeanContainerMiddleware, container=container)
    """

    def __init__(self, app: FastAPI, container: BeanContainer):
        """Initialize the middleware.

        Args:
            app: The FastAPI/Starlette application.
            container: The container to expose.
        """
        super().__init__(app)
        self.container = container

    async def dispatch(self, request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        """Attach the container to the request and execute the endpoint.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint handler.

        Returns:
            The response from the endpoint.
        """
        request.state.bean_container = self.container
        return await call_next(request)
