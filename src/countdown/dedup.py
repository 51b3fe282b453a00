from typing import Iterable, List

from .node import Node


def deduplicate(solutions: Iterable[Node]) -> List[Node]:
    """
    Collapse solutions that render to the same text.

    Returns one node per distinct rendering, sorted by that rendering.
    Expressions that only differ in grouping or operand order stay separate.
    """
    ordered = sorted(solutions, key=lambda node: node.render())
    unique: List[Node] = []
    for node in ordered:
        if unique and unique[-1].render() == node.render():
            continue
        unique.append(node)
    return unique
