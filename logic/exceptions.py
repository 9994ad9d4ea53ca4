# logic/exceptions.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Custom exceptions for assignment and evaluation failures

"""Exceptions raised while assigning and evaluating propositions.

Both indicate misuse of the evaluation API rather than bad input text:
truth-table generation always assigns every variable before evaluating and
never assigns to a compound node.
"""


class EvaluationError(RuntimeError):
    """Base class for failures while assigning or evaluating propositions."""

    pass


class UndeterminedValueError(EvaluationError):
    """Raised when an evaluation needs a variable that has no value yet."""

    def __init__(self, name: str):
        super().__init__(f"Truth value of variable '{name}' is not determined")
        self.name = name


class InvalidMutationError(EvaluationError):
    """Raised when a truth value is assigned directly to a compound node.

    Only atoms are assignable; a compound's value is always computed from
    its children.
    """

    pass
