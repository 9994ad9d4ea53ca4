# logic/truth_value.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Tri-state truth value used by assignments and the evaluator

from enum import Enum, auto
from typing import Optional


class TruthValue(Enum):
    """Tri-state value of a variable or of an evaluated expression.

    An Atom starts out UNSET until an assignment gives it a value. The
    evaluator propagates UNSET upward: an expression whose evaluation needs
    an unset variable is itself UNSET.

    Values:
        UNSET: No value has been assigned
        FALSE: Assigned or evaluated false
        TRUE: Assigned or evaluated true
    """

    UNSET = auto()
    FALSE = auto()
    TRUE = auto()

    def __str__(self) -> str:
        return self.name

    @classmethod
    def of(cls, value: Optional[bool]) -> "TruthValue":
        """Convert a Python boolean (or None for unset) to a TruthValue."""
        if value is None:
            return cls.UNSET
        return cls.TRUE if value else cls.FALSE

    def is_determined(self) -> bool:
        return self is not TruthValue.UNSET

    def to_bool(self) -> bool:
        """Return the boolean for a determined value.

        Raises:
            ValueError: Value is UNSET
        """
        if self is TruthValue.UNSET:
            raise ValueError("UNSET has no boolean value")
        return self is TruthValue.TRUE
