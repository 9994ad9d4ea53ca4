# parser/variable_registry.py
# This file is part of Tabula - A Propositional Truth-Table Generator
#
# Registry mapping variable letters to their shared Atom nodes

"""Variable registry for one parsed formula.

Maps each variable letter to a single Atom instance, created the first time
the letter is met and handed out again on every later occurrence. Iteration
follows first-occurrence order, which is also the order of the Atom indices
and of the bits of a truth-table row index.
"""

from typing import Dict, Iterator, Tuple
from utils.logger import get_logger
from .ast_nodes import Atom


class VariableRegistry:
    """Insertion-ordered mapping from variable name to shared Atom.

    Exactly one registry exists per parsed formula; a new formula gets a new
    registry.

    Attributes:
        _atoms: Atoms keyed by variable name, in first-occurrence order
    """

    def __init__(self):
        self._atoms: Dict[str, Atom] = {}

    def atom(self, name: str) -> Atom:
        """Return the Atom for name, creating and registering it if absent.

        Args:
            name: Variable letter

        Returns:
            The Atom shared by every occurrence of name
        """
        existing = self._atoms.get(name)
        if existing is not None:
            return existing

        created = Atom(name, len(self._atoms))
        self._atoms[name] = created
        get_logger().debug(f"Registered variable '{name}' with index {created.index}")
        return created

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._atoms)

    def __getitem__(self, name: str) -> Atom:
        return self._atoms[name]

    def __contains__(self, name: object) -> bool:
        return name in self._atoms

    def __iter__(self) -> Iterator[Atom]:
        return iter(self._atoms.values())

    def __len__(self) -> int:
        return len(self._atoms)

    def __repr__(self) -> str:
        return f"VariableRegistry({', '.join(self._atoms)})"
