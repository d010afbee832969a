"""Unit tests for domain interfaces."""

import pytest

from beanwire.domain.interfaces import (
    AfterPropertiesSet,
    BeanConstruct,
    IContainer,
    Initialized,
    IValueStore,
    PreInitialize,
)


class TestLifecycleProtocols:
    """Test that lifecycle hooks are matched structurally."""

    def test_structural_match_without_inheritance(self):
        """Test that a class implementing the methods satisfies the protocols."""

        class Bean:
            def bean_construct(self):
                pass

            def pre_initialize(self):
                pass

            def after_properties_set(self):
                pass

            def initialized(self):
                pass

        bean = Bean()

        assert isinstance(bean, BeanConstruct)
        assert isinstance(bean, PreInitialize)
        assert isinstance(bean, AfterPropertiesSet)
        assert isinstance(bean, Initialized)

    def test_partial_implementation(self):
        """Test that only implemented hooks match."""

        class Bean:
            def after_properties_set(self):
                pass

        bean = Bean()

        assert isinstance(bean, AfterPropertiesSet)
        assert not isinstance(bean, BeanConstruct)
        assert not isinstance(bean, Initialized)


class TestAbstractInterfaces:
    """Test that the abstract interfaces cannot be instantiated."""

    def test_icontainer_is_abstract(self):
        """Test IContainer cannot be instantiated."""
        with pytest.raises(TypeError):
            IContainer()

    def test_ivalue_store_is_abstract(self):
        """Test IValueStore cannot be instantiated."""
        with pytest.raises(TypeError):
            IValueStore()
