"""
Safe checker for rendered Countdown solutions.
Uses Python's ast module to re-evaluate an expression with exact integer
arithmetic, without eval().
"""

import ast
import operator
import re
from collections import Counter
from typing import List, Optional, Tuple


class ExpressionParser:
    """
    Parses and evaluates solution expressions.
    Only allows: +, -, *, / operators, non-negative integers, and parentheses.
    Division must be exact.
    """

    # Mapping of AST operators to integer operations
    SAFE_OPERATORS = {
        ast.Add: operator.add,
        ast.Sub: operator.sub,
        ast.Mult: operator.mul,
        ast.Div: operator.floordiv,
    }

    # Characters allowed in expressions
    ALLOWED_CHARS = set('0123456789+-*/() ')

    def extract_numbers(self, expression: str) -> List[int]:
        """Return every integer literal in the expression, in order."""
        return [int(n) for n in re.findall(r'\d+', expression)]

    def validate_numbers(self, expression: str, available: List[int]) -> Tuple[bool, Optional[str]]:
        """
        Check if expression only uses available numbers (each once max).

        Returns:
            Tuple of (is_valid, error_message or None)
        """
        available_counter = Counter(available)
        used_counter = Counter(self.extract_numbers(expression))

        for num, count in used_counter.items():
            if num not in available_counter:
                return False, f"Number {num} is not available"
            if count > available_counter[num]:
                return False, f"Number {num} used more times than available"

        return True, None

    def _safe_eval(self, node: ast.AST) -> int:
        """
        Recursively evaluate AST node with only allowed operations.

        Raises:
            ValueError: If an unsupported or inexact operation is encountered
        """
        if isinstance(node, ast.Expression):
            return self._safe_eval(node.body)

        if isinstance(node, ast.Constant):
            if isinstance(node.value, int) and not isinstance(node.value, bool):
                return node.value
            raise ValueError("Only integer values allowed")

        if isinstance(node, ast.BinOp):
            op_type = type(node.op)
            if op_type not in self.SAFE_OPERATORS:
                raise ValueError(f"Operator not allowed: {op_type.__name__}")

            left = self._safe_eval(node.left)
            right = self._safe_eval(node.right)

            if op_type is ast.Div:
                if right == 0:
                    raise ValueError("Division by zero")
                if left % right != 0:
                    raise ValueError(f"Division with remainder: {left} / {right}")

            return self.SAFE_OPERATORS[op_type](left, right)

        raise ValueError("Invalid expression structure")

    def evaluate(self, expression: str) -> Tuple[bool, Optional[int], Optional[str]]:
        """
        Safely evaluate expression using AST parsing.

        Returns:
            Tuple of (success, result or None, error_message or None)
        """
        if not expression.strip():
            return False, None, "Empty expression"

        if any(c not in self.ALLOWED_CHARS for c in expression):
            return False, None, "Expression contains invalid characters"

        try:
            tree = ast.parse(expression, mode='eval')
            return True, self._safe_eval(tree), None
        except SyntaxError as e:
            return False, None, f"Invalid syntax: {e}"
        except ValueError as e:
            return False, None, str(e)

    def check_solution(self, expression: str, available: List[int],
                       target: int) -> Tuple[bool, Optional[int], Optional[str]]:
        """
        Check that a rendered solution uses only the available numbers and
        evaluates exactly to the target.

        Returns:
            Tuple of (ok, result or None, error_message or None)
        """
        is_valid, error = self.validate_numbers(expression, available)
        if not is_valid:
            return False, None, error

        success, result, error = self.evaluate(expression)
        if not success:
            return False, None, error

        if result != target:
            return False, result, f"Evaluates to {result}, not {target}"

        return True, result, None
