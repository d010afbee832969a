"""End-to-end tests for loading a container across all layers."""

from abc import ABC, abstractmethod
from typing import Annotated, Protocol

from beanwire import BeanContainer, Inject


class Db:
    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix


class UserDao:
    db: Annotated[Db, Inject("db")]
    table_name: str = ""

    def after_properties_set(self):
        self.table_name = "user"


class TestEndToEndLoading:
    """Test complete loading scenarios."""

    def test_registered_db_with_user_dao(self):
        """Test wiring a provided dao to a registered database."""
        container = BeanContainer()
        container.register_bean(Db(prefix="t_"), "db")
        container.provide(UserDao, "userDao")

        container.load()

        dao = container.get_bean("userDao")
        assert dao.db.prefix == "t_"
        assert dao.table_name == "user"

    def test_registered_instance_is_untouched(self):
        """Test that a registered bean is returned as-is, never injected."""

        class Ready:
            other: Annotated[Db, Inject("db")]

            def after_properties_set(self):
                raise AssertionError("registered beans must not be notified")

        ready = Ready()
        container = BeanContainer().register_bean(ready, "ready").register_bean(Db(), "db")

        container.load()

        assert container.get_bean("ready") is ready
        assert not hasattr(ready, "other")
        assert vars(ready) == {}

    def test_hook_order_for_bean_without_fields(self):
        """Test that each hook runs exactly once, in lifecycle order."""
        calls = []

        class Lifecycle:
            def bean_construct(self):
                calls.append("bean_construct")

            def pre_initialize(self):
                calls.append("pre_initialize")

            def after_properties_set(self):
                calls.append("after_properties_set")

            def initialized(self):
                calls.append("initialized")

        container = BeanContainer().provide(Lifecycle)
        container.load()

        assert isinstance(container.get_bean("lifecycle"), Lifecycle)
        assert calls == ["bean_construct", "pre_initialize", "after_properties_set", "initialized"]

    def test_dependency_chain(self):
        """Test A -> B -> C resolves to the exact instances in the pool."""

        class C:
            pass

        class B:
            c: Annotated[C, Inject("C")]

        class A:
            b: Annotated[B, Inject("B")]

        container = BeanContainer().provide(A, "A").provide(B, "B").provide(C, "C")
        container.load()

        assert container.get_bean("A").b is container.get_bean("B")
        assert container.get_bean("B").c is container.get_bean("C")

    def test_interface_dependencies(self):
        """Test wiring through an ABC and a protocol."""

        class Repository(ABC):
            @abstractmethod
            def find(self, key): ...

        class Clock(Protocol):
            def now(self) -> float: ...

        class MemoryRepository(Repository):
            def find(self, key):
                return key

        class FixedClock:
            def now(self) -> float:
                return 42.0

        class Service:
            repo: Annotated[Repository, Inject("repository")]
            clock: Annotated[Clock, Inject()]

        container = (
            BeanContainer()
            .provide(MemoryRepository, "repository")
            .register_bean(FixedClock(), "clock")
            .provide(Service)
        )
        container.load()

        service = container.get_bean("service")
        assert service.repo.find("k") == "k"
        assert service.clock.now() == 42.0

    def test_initialized_sees_whole_graph(self):
        """Test that initialized runs once every bean is wired."""

        class Cache:
            db: Annotated[Db, Inject("db")]

        class Warmup:
            cache: Annotated[Cache, Inject()]

            def initialized(self):
                self.prefix = self.cache.db.prefix

        container = BeanContainer().provide(Warmup).provide(Cache).register_bean(Db("w_"), "db")
        container.load()

        assert container.get_bean("warmup").prefix == "w_"

    def test_value_store_available_to_application(self):
        """Test that the container exposes its configuration store."""
        container = BeanContainer()
        container.value_store.set_default("db.prefix", "t_")

        class Configured:
            def bean_construct(self):
                self.prefix = container.value_store.get("db.prefix")

        container.provide(Configured)
        container.load()

        assert container.get_bean("configured").prefix == "t_"
