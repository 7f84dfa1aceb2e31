"""
Shared pytest fixtures and configuration for the calculator tests.
"""

import sys
from pathlib import Path

import pytest

# Add the project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from calculator import ExpressionEvaluator, CalculatorSession  # noqa: E402
from core import tokenize, to_rpn  # noqa: E402


@pytest.fixture
def evaluator():
    """Fresh evaluator with a small cache."""
    return ExpressionEvaluator(cache_size=4, max_expression_length=64)


@pytest.fixture
def session(evaluator):
    return CalculatorSession(evaluator)


@pytest.fixture
def rpn_values():
    """Return the RPN of an expression as a plain list of token values."""
    def _rpn_values(expression):
        return [token.value for token in to_rpn(tokenize(expression))]
    return _rpn_values
