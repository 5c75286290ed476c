"""
Visitor Hierarchy (the open set of operations)

The Visitor contract declares one handler per concrete component variant.
The handler signature tells the visitor which concrete class it is
handling, so it may call that variant's exclusive methods.

Reference visitors:
    - Visitor1, Visitor2: print "<tag> + <visitor name>" per component
    - TraceCollector: keeps the same lines instead of printing them

All handlers return a value. The driver hands the values back to its
caller, so a visitor may produce results, side effects, or both.

IMPORTANT:
    A plain subclass of Visitor may leave handlers out. It then fails with
    UnimplementedOperation only when the missing variant is dispatched.
    Declare the subclass with strict=True to reject it at definition time.
"""

from typing import List, Optional, TextIO

from .contract import Contract, unimplemented
from .components import ConcreteComponentA, ConcreteComponentB


def trace_line(value: str, visitor: "Visitor") -> str:
    """Format one trace line: "<accessor value> + <visitor type name>"."""
    return f"{value} + {type(visitor).__name__}"


class Visitor(Contract):
    """
    Base class for all visitors.

    Adding a component variant means adding its handler here, then to
    every concrete visitor.
    """

    @unimplemented
    def handle_concrete_component_a(self, element: ConcreteComponentA):
        """Handle variant A."""

    @unimplemented
    def handle_concrete_component_b(self, element: ConcreteComponentB):
        """Handle variant B."""


class TracingVisitor(Visitor, strict=True):
    """
    Writes one trace line per component to an output stream.

    Properties:
        stream: Text stream to write to. None means sys.stdout at write time.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream

    def handle_concrete_component_a(self, element: ConcreteComponentA) -> str:
        return self._emit(element.exclusive_method_of_concrete_component_a())

    def handle_concrete_component_b(self, element: ConcreteComponentB) -> str:
        return self._emit(element.special_method_of_concrete_component_b())

    def _emit(self, value: str) -> str:
        line = trace_line(value, self)
        print(line, file=self.stream)
        return line


class Visitor1(TracingVisitor, strict=True):
    pass


class Visitor2(TracingVisitor, strict=True):
    pass


class TraceCollector(Visitor, strict=True):
    """
    Accumulates trace lines across traversals instead of printing them.

    Shows a visitor carrying state between handler calls. The same
    instance may be reused; call reset() to start over.
    """

    def __init__(self):
        self.lines: List[str] = []

    def handle_concrete_component_a(self, element: ConcreteComponentA) -> str:
        return self._collect(element.exclusive_method_of_concrete_component_a())

    def handle_concrete_component_b(self, element: ConcreteComponentB) -> str:
        return self._collect(element.special_method_of_concrete_component_b())

    def _collect(self, value: str) -> str:
        line = trace_line(value, self)
        self.lines.append(line)
        return line

    def reset(self) -> None:
        self.lines.clear()
