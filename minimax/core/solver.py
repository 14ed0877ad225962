"""
Solver Strategy Interface

Every move-selection strategy exposes the same single operation so callers
stay independent of how the search is carried out.
"""

from abc import ABC, abstractmethod
from typing import List

from .schemas import Move


class Solver(ABC):
    """Abstract base class for move selectors"""

    @abstractmethod
    def get_moves(self, board) -> List[Move]:
        """Return every optimal move from `board`, in move-generation order"""
        pass
