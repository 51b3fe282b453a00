# Countdown numbers solver
from .node import Node, Leaf, Operation, Operator, InvariantError, make_leaf, make_operation
from .solver import CountdownSolver, solve
from .dedup import deduplicate
from .expression_parser import ExpressionParser
from .puzzle import Puzzle, PuzzleRules, PuzzleGenerator

__all__ = [
    'Node',
    'Leaf',
    'Operation',
    'Operator',
    'InvariantError',
    'make_leaf',
    'make_operation',
    'CountdownSolver',
    'solve',
    'deduplicate',
    'ExpressionParser',
    'Puzzle',
    'PuzzleRules',
    'PuzzleGenerator',
]
