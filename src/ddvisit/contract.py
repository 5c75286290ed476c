"""
Contract support shared by the Component and Visitor hierarchies.

A contract method is declared on a base class with the @unimplemented
decorator. Calling it without an override raises UnimplementedOperation
naming the receiver's runtime class and the method.

Two ways to catch a missing override:
    - At call time (default): the stub raises when it is reached.
    - At class definition time: declare the subclass with strict=True.

    class Visitor1(Visitor, strict=True):
        ...

A strict subclass that leaves any contract method as a stub is rejected
with TypeError before it can be instantiated.
"""

import functools
from typing import Callable, List


class UnimplementedOperation(NotImplementedError):
    """
    Raised when a contract method is invoked without an overriding implementation.

    This is a programming error (a missing override), not a runtime fault.
    It is never caught inside the package.

    Properties:
        type_name: Name of the concrete class that received the call
        method_name: Name of the contract method that should have been overridden
    """

    def __init__(self, type_name: str, method_name: str):
        self.type_name = type_name
        self.method_name = method_name
        super().__init__(f"{type_name} did not implement method '{method_name}'")


def unimplemented(method: Callable) -> Callable:
    """Turn a contract method into a stub raising UnimplementedOperation."""

    @functools.wraps(method)
    def stub(self, *args, **kwargs):
        raise UnimplementedOperation(type(self).__name__, method.__name__)

    stub.__unimplemented__ = True
    return stub


def unimplemented_methods(target) -> List[str]:
    """
    List contract methods still bound to their stub.

    Args:
        target: A class or an instance of one

    Returns:
        Sorted method names with no overriding implementation
    """
    cls = target if isinstance(target, type) else type(target)
    return sorted(
        name for name in dir(cls)
        if getattr(getattr(cls, name, None), "__unimplemented__", False)
    )


class Contract:
    """
    Base class for abstract contracts with optional completeness checking.

    Subclasses accept a `strict` class keyword. Strict subclasses must
    override every @unimplemented method they inherit.
    """

    def __init_subclass__(cls, strict: bool = False, **kwargs):
        super().__init_subclass__(**kwargs)
        if strict:
            missing = unimplemented_methods(cls)
            if missing:
                raise TypeError(
                    f"Can't define strict class {cls.__name__} "
                    f"without implementing: {', '.join(missing)}"
                )
