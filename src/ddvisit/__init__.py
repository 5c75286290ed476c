"""
Double-Dispatch Visitor Package

A closed set of component variants processed by an open set of visitors,
without touching the component classes.

ARCHITECTURAL GUARANTEE:
------------------------
Components know only the abstract Visitor contract.
Visitors know only the concrete component variants they handle.
The driver knows neither side's concrete types.

Adding a visitor never edits a component.
Adding a component means adding one handler to every visitor.
"""

from .contract import Contract, UnimplementedOperation, unimplemented, unimplemented_methods
from .components import Component, ConcreteComponentA, ConcreteComponentB
from .visitors import Visitor, TracingVisitor, Visitor1, Visitor2, TraceCollector
from .client import client_code

__version__ = "0.1.0"

__all__ = [
    "Contract",
    "UnimplementedOperation",
    "unimplemented",
    "unimplemented_methods",
    "Component",
    "ConcreteComponentA",
    "ConcreteComponentB",
    "Visitor",
    "TracingVisitor",
    "Visitor1",
    "Visitor2",
    "TraceCollector",
    "client_code",
]
