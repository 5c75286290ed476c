"""
Tests for contract support: UnimplementedOperation, the @unimplemented
stub decorator, and strict completeness checking.
"""

import pytest
from ddvisit.contract import (
    Contract,
    UnimplementedOperation,
    unimplemented,
    unimplemented_methods,
)
from ddvisit.components import Component, ConcreteComponentA
from ddvisit.visitors import Visitor, Visitor1, TraceCollector


class Shape(Contract):
    @unimplemented
    def area(self):
        """Compute the area."""

    @unimplemented
    def perimeter(self):
        pass

    def describe(self):
        return "shape"


class TestUnimplementedOperation:
    """Test the single traversal error kind."""

    def test_carries_type_and_method(self):
        """Should expose the offending type and method names."""
        err = UnimplementedOperation("Component", "dispatch")
        assert err.type_name == "Component"
        assert err.method_name == "dispatch"

    def test_message_names_type_and_method(self):
        """Message should name both the type and the method."""
        err = UnimplementedOperation("Component", "dispatch")
        assert str(err) == "Component did not implement method 'dispatch'"

    def test_is_not_implemented_error(self):
        """Should be catchable as NotImplementedError."""
        assert issubclass(UnimplementedOperation, NotImplementedError)


class TestUnimplementedDecorator:
    """Test contract method stubs."""

    def test_stub_raises(self):
        """Calling a stub should raise UnimplementedOperation."""
        with pytest.raises(UnimplementedOperation) as exc_info:
            Shape().area()
        assert exc_info.value.type_name == "Shape"
        assert exc_info.value.method_name == "area"

    def test_stub_names_runtime_class(self):
        """The error should name the subclass, not the declaring class."""
        class Square(Shape):
            def area(self):
                return 4

        with pytest.raises(UnimplementedOperation) as exc_info:
            Square().perimeter()
        assert exc_info.value.type_name == "Square"
        assert exc_info.value.method_name == "perimeter"

    def test_stub_ignores_arguments(self):
        """Stubs accept any arguments before raising."""
        with pytest.raises(UnimplementedOperation):
            Visitor().handle_concrete_component_a(ConcreteComponentA())

    def test_stub_keeps_name_and_doc(self):
        """Stubs should look like the method they replace."""
        assert Shape.area.__name__ == "area"
        assert Shape.area.__doc__ == "Compute the area."


class TestUnimplementedMethods:
    """Test discovery of missing overrides."""

    def test_lists_stubs_sorted(self):
        assert unimplemented_methods(Shape) == ["area", "perimeter"]

    def test_accepts_instance(self):
        assert unimplemented_methods(Shape()) == ["area", "perimeter"]

    def test_overrides_are_removed(self):
        class Square(Shape):
            def area(self):
                return 4

        assert unimplemented_methods(Square) == ["perimeter"]

    def test_component_contract(self):
        assert unimplemented_methods(Component) == ["dispatch"]

    def test_visitor_contract(self):
        assert unimplemented_methods(Visitor) == [
            "handle_concrete_component_a",
            "handle_concrete_component_b",
        ]

    def test_concrete_visitors_are_complete(self):
        assert unimplemented_methods(Visitor1) == []
        assert unimplemented_methods(TraceCollector) == []


class TestStrictSubclasses:
    """Test definition-time completeness checking."""

    def test_incomplete_strict_subclass_rejected(self):
        """A strict subclass missing an override should not be definable."""
        with pytest.raises(TypeError) as exc_info:
            class Circle(Shape, strict=True):
                def area(self):
                    return 3.14

        assert "Circle" in str(exc_info.value)
        assert "perimeter" in str(exc_info.value)
        assert "area" not in str(exc_info.value).split(":")[-1]

    def test_complete_strict_subclass_accepted(self):
        class Square(Shape, strict=True):
            def area(self):
                return 4

            def perimeter(self):
                return 8

        assert Square().perimeter() == 8

    def test_non_strict_partial_subclass_allowed(self):
        """Partial coverage is allowed without strict and fails at call time."""
        class Circle(Shape):
            def area(self):
                return 3.14

        circle = Circle()
        assert circle.area() == 3.14
        with pytest.raises(UnimplementedOperation):
            circle.perimeter()

    def test_strict_visitor_missing_handler_rejected(self):
        with pytest.raises(TypeError) as exc_info:
            class HalfVisitor(Visitor, strict=True):
                def handle_concrete_component_a(self, element):
                    return "A"

        assert "handle_concrete_component_b" in str(exc_info.value)
