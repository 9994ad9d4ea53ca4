# logic/__init__.py

"""Evaluation and truth-table interface.

This package provides:
  • TruthValue: tri-state value (UNSET, FALSE, TRUE)
  • Assignment: explicit variable values read by the evaluator
  • evaluate / try_evaluate: recursive evaluation of expression trees
  • generate_truth_table / truth_table: full truth-table enumeration
  • UndeterminedValueError, InvalidMutationError: evaluation API misuse
"""

from .truth_value import TruthValue
from .assignment import Assignment
from .evaluator import Evaluator, evaluate, try_evaluate
from .exceptions import EvaluationError, InvalidMutationError, UndeterminedValueError
from .truth_table import TruthTable, generate_truth_table, truth_table

__all__ = [
    "TruthValue",
    "Assignment",
    "Evaluator",
    "evaluate",
    "try_evaluate",
    "EvaluationError",
    "InvalidMutationError",
    "UndeterminedValueError",
    "TruthTable",
    "generate_truth_table",
    "truth_table",
]
