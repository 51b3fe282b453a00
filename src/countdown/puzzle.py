"""
Countdown Numbers Game - puzzle model and random round generation.

A round deals a few large numbers and some small ones, then picks a
three-digit target, like the TV show.
"""

import random
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .node import Leaf, make_leaf


@dataclass
class PuzzleRules:
    """How random rounds are dealt."""
    large_numbers: List[int] = field(default_factory=lambda: [25, 50, 75, 100])
    small_numbers: List[int] = field(default_factory=lambda: list(range(1, 11)))
    num_large: int = 2
    num_small: int = 4
    target_min: int = 100
    target_max: int = 999

    def validate(self) -> None:
        if self.num_large < 0 or self.num_small < 0:
            raise ValueError("Number counts cannot be negative")
        if self.num_large + self.num_small < 2:
            raise ValueError("A round needs at least two numbers")
        if self.num_large > len(self.large_numbers):
            raise ValueError(f"Cannot draw {self.num_large} large numbers from "
                             f"a pool of {len(self.large_numbers)}")
        if self.num_small and not self.small_numbers:
            raise ValueError("Small number pool is empty")
        if any(n <= 0 for n in self.large_numbers + self.small_numbers):
            raise ValueError("Number pools may only contain positive integers")
        if not 0 <= self.target_min <= self.target_max:
            raise ValueError(f"Invalid target range {self.target_min}-{self.target_max}")


@dataclass
class Puzzle:
    """A set of starting numbers and the target to reach."""
    numbers: List[int]
    target: int

    def validate(self) -> None:
        """
        Raises:
            ValueError: If the puzzle cannot be handed to the solver
        """
        if len(self.numbers) < 2:
            raise ValueError("At least two numbers are required")
        for n in self.numbers:
            if isinstance(n, bool) or not isinstance(n, int):
                raise ValueError(f"Numbers must be integers, got {n!r}")
            if n <= 0:
                raise ValueError(f"Numbers must be positive, got {n}")
        if isinstance(self.target, bool) or not isinstance(self.target, int):
            raise ValueError(f"Target must be an integer, got {self.target!r}")
        if self.target < 0:
            raise ValueError(f"Target cannot be negative, got {self.target}")

    def leaves(self) -> List[Leaf]:
        """One leaf node per number, in order."""
        return [make_leaf(n) for n in self.numbers]


class PuzzleGenerator:
    """Deals random rounds according to a set of PuzzleRules."""

    def __init__(self, rules: Optional[PuzzleRules] = None, rng: Optional[random.Random] = None):
        self.rules = rules or PuzzleRules()
        self.rules.validate()
        self.rng = rng or random.Random()

    def generate_numbers(self) -> Tuple[List[int], List[int], List[int]]:
        """
        Generate the numbers for a round.

        Returns:
            Tuple of (all_numbers, large_numbers, small_numbers)
        """
        large = self.rng.sample(self.rules.large_numbers, self.rules.num_large)
        small = self.rng.choices(self.rules.small_numbers, k=self.rules.num_small)  # Can repeat
        return large + small, large, small

    def generate_target(self) -> int:
        """Generate a random target number."""
        return self.rng.randint(self.rules.target_min, self.rules.target_max)

    def generate(self) -> Puzzle:
        numbers, _, _ = self.generate_numbers()
        return Puzzle(numbers=numbers, target=self.generate_target())
