import logging
from typing import List, Sequence

from .node import Node, Operator, OPERATORS, make_leaf, make_operation

logger = logging.getLogger(__name__)


class CountdownSolver:
    """
    Exhaustive solver for the Countdown Numbers Game.
    Finds every expression tree over the given numbers that hits the target.
    """

    def __init__(self):
        self.candidates = 0

    def solve(self, nodes: Sequence[Node], target: int) -> List[Node]:
        """
        Find all expression trees built from `nodes` that evaluate to `target`.

        Args:
            nodes: Starting nodes, usually one leaf per input number.
            target: The number to reach.

        Returns:
            Every solution node in the order it was found. The same expression
            can appear more than once; pass the result through deduplicate().
        """
        self.candidates = 0
        solutions: List[Node] = []
        if len(nodes) > 1:
            self._search(list(nodes), target, solutions)
        logger.debug("Explored %d candidates, found %d solutions for %d",
                     self.candidates, len(solutions), target)
        return solutions

    def solve_numbers(self, numbers: Sequence[int], target: int) -> List[Node]:
        """Convenience wrapper building one leaf per number."""
        return self.solve([make_leaf(n) for n in numbers], target)

    def _search(self, nodes: List[Node], target: int, solutions: List[Node]) -> None:
        # Each call receives its own list; two nodes go out and one comes in,
        # so the working set shrinks by one per level.
        count = len(nodes)
        for i in range(count):
            a = nodes[i]
            a_value = a.evaluate()
            for j in range(count):
                if i == j:
                    continue
                b = nodes[j]
                b_value = b.evaluate()

                # Try every pair once, larger operand first. Equal values are
                # taken in position order.
                if a_value < b_value or (a_value == b_value and i > j):
                    continue

                rest = [nodes[k] for k in range(count) if k != i and k != j]

                for op in OPERATORS:
                    # No remainders, no division by zero
                    if op is Operator.DIV and (b_value == 0 or a_value % b_value != 0):
                        continue

                    combined = make_operation(op, a, b)
                    self.candidates += 1
                    if combined.evaluate() == target:
                        # Keep going: adding zero or multiplying by one can
                        # still lead to more solutions.
                        solutions.append(combined)

                    if rest:
                        self._search(rest + [combined], target, solutions)


def solve(nodes: Sequence[Node], target: int) -> List[Node]:
    """Module-level shortcut for CountdownSolver().solve()."""
    return CountdownSolver().solve(nodes, target)
