"""
Example component sequences and visitor registry.

Builds the sample data used by the demo and the tests: a fresh sequence
of components per call, and fresh visitors looked up by class name.
"""
from typing import Dict, Iterable, List, Optional, TextIO, Type

from ddvisit.components import Component, ConcreteComponentA, ConcreteComponentB
from ddvisit.visitors import Visitor, TracingVisitor, Visitor1, Visitor2, TraceCollector


COMPONENT_VARIANTS: Dict[str, Type[Component]] = {
    "A": ConcreteComponentA,
    "B": ConcreteComponentB,
}

VISITORS: Dict[str, Type[Visitor]] = {
    "Visitor1": Visitor1,
    "Visitor2": Visitor2,
    "TraceCollector": TraceCollector,
}


def build_example_components(tags: Iterable[str] = ("A", "B")) -> List[Component]:
    components = []
    for tag in tags:
        try:
            components.append(COMPONENT_VARIANTS[tag]())
        except KeyError:
            raise ValueError(
                f"Unknown component tag: {tag!r} (known: {', '.join(COMPONENT_VARIANTS)})"
            )
    return components


def build_visitor(name: str, stream: Optional[TextIO] = None) -> Visitor:
    """
    Instantiate a registered visitor by class name.

    Args:
        name: Key in VISITORS (e.g., "Visitor1")
        stream: Output stream for tracing visitors; ignored by the others

    Returns:
        A new visitor instance
    """
    if name not in VISITORS:
        raise ValueError(f"Unknown visitor: {name!r} (known: {', '.join(VISITORS)})")
    cls = VISITORS[name]
    if issubclass(cls, TracingVisitor):
        return cls(stream=stream)
    return cls()
