"""Visitor-driven traversal of tree-sitter syntax trees."""
from enum import Enum
from typing import Callable, Dict, Optional
from tree_sitter import Node


class VisitAction(Enum):
    """What the walker does after a handler has seen a node."""
    CONTINUE = "continue"
    SKIP_CHILDREN = "skip_children"
    STOP = "stop"


Handler = Callable[[Node], Optional[VisitAction]]


def walk(root: Node, handlers: Dict[str, Handler]) -> bool:
    """Walk a tree in pre-order, left to right, dispatching on node type.

    Handlers are looked up by ``node.type``. A handler returning ``None`` is
    treated as ``VisitAction.CONTINUE``. Uses an explicit stack, so deeply
    nested markup never hits the recursion limit.

    Args:
        root: Node to start from (visited itself)
        handlers: Mapping of node type to callback

    Returns:
        False if a handler stopped the walk, True otherwise
    """
    stack = [root]
    while stack:
        node = stack.pop()

        handler = handlers.get(node.type)
        action = handler(node) if handler else None

        if action is VisitAction.STOP:
            return False
        if action is VisitAction.SKIP_CHILDREN:
            continue

        # Reverse so the leftmost child is popped first
        stack.extend(reversed(node.children))

    return True
