"""
Component Hierarchy (the closed set of data variants)

Each concrete component knows exactly one Visitor handler: the one named
after its own class. Calling it with `self` is what hands the visitor the
component's concrete type.

    ConcreteComponentA.dispatch(v)  ->  v.handle_concrete_component_a(self)
    ConcreteComponentB.dispatch(v)  ->  v.handle_concrete_component_b(self)

ARCHITECTURAL RULE:
    Components know the abstract Visitor contract only.
    They never inspect the visitor's concrete type.
    They never branch on anything: the override IS the dispatch.
"""

from .contract import Contract, unimplemented


class Component(Contract):
    """
    Base class for all components.

    Components hold no state beyond their identity. They are equal when
    they are the same variant with the same attributes, so sample
    sequences compare naturally.
    """

    @unimplemented
    def dispatch(self, operation):
        """
        Forward control to the operation's handler for this variant.

        Args:
            operation: Any object satisfying the Visitor contract

        Returns:
            Whatever the handler returns
        """

    def __eq__(self, other):
        if not isinstance(other, Component):
            return NotImplemented
        return type(self) is type(other) and vars(self) == vars(other)

    def __hash__(self):
        return hash(type(self))

    def __repr__(self):
        return f"{type(self).__name__}()"


class ConcreteComponentA(Component, strict=True):
    """Component variant A."""

    def dispatch(self, operation):
        return operation.handle_concrete_component_a(self)

    def exclusive_method_of_concrete_component_a(self) -> str:
        """Only reachable by a visitor once dispatch has resolved variant A."""
        return "A"


class ConcreteComponentB(Component, strict=True):
    """Component variant B."""

    def dispatch(self, operation):
        return operation.handle_concrete_component_b(self)

    def special_method_of_concrete_component_b(self) -> str:
        return "B"
