import logging
from typing import List, Tuple

from .enums import Player
from .heuristic import evaluate_board
from .schemas import Move
from .solver import Solver

logger = logging.getLogger(__name__)


class StreamingAI(Solver):
    """
    Same answers as AI, but each branch is scored and dropped before the next
    sibling is searched. Peak memory is O(branching_factor * depth).
    """

    def __init__(self, player: Player, depth: int):
        self.player = player
        self.depth = depth
        self.nodes = 0

    def get_moves(self, board) -> List[Move]:
        self.nodes = 0
        value, moves = self._search(board, self.player, self.depth)
        logger.debug("Streaming search: %s nodes, root value %s, best columns %s",
                     self.nodes, value, [m.column for m in moves])
        return moves

    def _search(self, board, mover: Player, depth: int) -> Tuple[int, List[Move]]:
        self.nodes += 1

        if depth == 0 or board.has_connect_four() is not None:
            return evaluate_board(board, self.player), []

        possible = board.get_possible_moves(mover)
        if not possible:
            return evaluate_board(board, self.player), []

        maximizing = mover == self.player
        best_value = None
        best_moves: List[Move] = []
        for move, next_board in possible:
            value, _ = self._search(next_board, mover.opponent, depth - 1)
            better = best_value is None or (value > best_value if maximizing else value < best_value)
            if better:
                best_value = value
                best_moves = [move]
            elif value == best_value:
                best_moves.append(move)
        return best_value, best_moves
