from typing import Iterable, List

from countdown.node import Node


def format_nodes(nodes: Iterable[Node]) -> str:
    """
    Renders a collection of nodes on one line as `text[value]` entries
    """
    return '  '.join(f"{node.render()}[{node.evaluate()}]" for node in nodes)


def format_solutions(solutions: Iterable[Node]) -> List[str]:
    """One `text [value]` line per solution"""
    return [f"{node.render()} [{node.evaluate()}]" for node in solutions]


def format_elapsed(seconds: float) -> str:
    return f"{seconds * 1000:.0f}ms"
