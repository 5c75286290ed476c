"""
Driver: run one visitor over a sequence of components.

The client works through the abstract contracts only. It never learns
which concrete component or visitor it is handling.
"""

import logging
from typing import Any, Iterable, List

from .components import Component
from .visitors import Visitor

logger = logging.getLogger(__name__)


def client_code(components: Iterable[Component], visitor: Visitor) -> List[Any]:
    """
    Dispatch every component to the same visitor, in sequence order.

    No reordering, filtering or error handling happens here. The first
    UnimplementedOperation aborts the remaining components and reaches
    the caller unchanged.

    Args:
        components: Components to visit
        visitor: Visitor instance shared by the whole traversal

    Returns:
        Handler results, one per component, in sequence order
    """
    results = []
    for index, component in enumerate(components):
        logger.debug("Dispatching %r to %s (#%d)", component, type(visitor).__name__, index)
        results.append(component.dispatch(visitor))
    return results
