"""End-to-end tests through the unified factory API"""

import logging

import pytest

import typefactory
from typefactory import (
    AbstractFactory,
    Producible,
    add_production,
    create_object,
    get_factory,
    is_registered,
    list_types,
    production_type_id,
    registry_for,
)
from typefactory.core.production import ANOTHER_CLASS_NOTE, SAME_CLASS_NOTE


@pytest.fixture
def english(greeter):
    @add_production(greeter)
    @production_type_id("en")
    class English(Producible, greeter):
        def greet(self):
            return "hello"

    return English


@pytest.fixture
def french(greeter):
    @add_production(greeter)
    @production_type_id("fr")
    class French(Producible, greeter):
        def greet(self):
            return "bonjour"

    return French


class TestAbstractFactory:
    """Test cases for the facade entry points"""

    def test_facade_matches_registry(self, greeter, english):
        """Test that the facade forwards to the capability's registry"""
        assert isinstance(AbstractFactory.create_object(greeter, "en"), english)
        assert isinstance(create_object(greeter, "en"), english)
        assert AbstractFactory.create_object(greeter, "de") is None
        assert create_object(greeter, "de") is None

    def test_facade_forwards_clashing_keywords(self, factory_config, greeter):
        """Test that keywords named like facade parameters are forwarded"""
        factory_config(variadic=True)

        @add_production(greeter)
        @production_type_id("decoder")
        class Decoder(Producible, greeter):
            def __init__(self, type_id, capability=None):
                self.message_type = type_id
                self.capability = capability

            def greet(self):
                return self.message_type

        obj = create_object(greeter, "decoder", type_id="msg", capability="x")
        assert (obj.greet(), obj.capability) == ("msg", "x")

        obj = AbstractFactory.create_object(greeter, "decoder", capability="y", type_id="ack")
        assert (obj.greet(), obj.capability) == ("ack", "y")

    def test_get_factory(self, greeter):
        assert get_factory(greeter) is registry_for(greeter)

    def test_list_types(self, greeter, english, french):
        """Test listing registered type ids"""
        assert list_types(greeter) == ["en", "fr"]

    def test_is_registered(self, greeter, counter, english):
        assert is_registered(greeter, "en")
        assert not is_registered(greeter, "fr")
        assert not is_registered(counter, "en")

    def test_package_exports(self):
        """Test that the top-level package exposes the public API"""
        for name in typefactory.__all__:
            assert hasattr(typefactory, name), name


class TestScenarios:
    """Whole-flow scenarios"""

    def test_single_variant(self, greeter, english):
        """Test one registered production"""
        obj = create_object(greeter, "en")

        assert obj is not None
        assert obj.greet() == "hello"
        assert create_object(greeter, "fr") is None

    def test_two_variants(self, greeter, english, french):
        """Test choosing between two productions"""
        assert isinstance(create_object(greeter, "en"), english)
        assert isinstance(create_object(greeter, "fr"), french)
        assert create_object(greeter, "de") is None

    def test_capability_disjointness(self, greeter, counter, english):
        """Test one id under two capabilities"""

        @add_production(counter)
        @production_type_id("en")
        class Tally(Producible, counter):
            def __init__(self):
                self.count = 0

            def increment(self):
                self.count += 1
                return self.count

        greeter_obj = create_object(greeter, "en")
        counter_obj = create_object(counter, "en")

        assert isinstance(greeter_obj, english) and not isinstance(greeter_obj, Tally)
        assert isinstance(counter_obj, Tally) and not isinstance(counter_obj, english)
        assert counter_obj.increment() == 1

    def test_duplicate_id_different_variant(self, greeter, caplog):
        """Test that a later class with a taken id wins and is reported"""

        @add_production(greeter)
        @production_type_id("x")
        class A(Producible, greeter):
            def greet(self):
                return "a"

        with caplog.at_level(logging.WARNING, logger="typefactory"):

            @add_production(greeter)
            @production_type_id("x")
            class B(Producible, greeter):
                def greet(self):
                    return "b"

        assert any(ANOTHER_CLASS_NOTE in r.getMessage() for r in caplog.records)
        assert isinstance(create_object(greeter, "x"), B)

    def test_repeated_same_variant(self, greeter, caplog):
        """Test registering the same class twice"""

        @production_type_id("x")
        class A(Producible, greeter):
            def greet(self):
                return "a"

        with caplog.at_level(logging.WARNING, logger="typefactory"):
            add_production(greeter)(A)
            add_production(greeter)(A)

        messages = [r.getMessage() for r in caplog.records]
        assert any(SAME_CLASS_NOTE in m for m in messages)
        assert not any(ANOTHER_CLASS_NOTE in m for m in messages)
        assert isinstance(create_object(greeter, "x"), A)
        assert len(A.__productions__) == 2

    def test_freshness(self, greeter):
        """Test that every create returns an independently constructed object"""

        @add_production(greeter)
        @production_type_id("x")
        class A(Producible, greeter):
            created = 0

            def __init__(self):
                type(self).created += 1

            def greet(self):
                return "a"

        first = create_object(greeter, "x")
        second = create_object(greeter, "x")

        assert first is not second
        assert A.created == 2
