import logging
from typing import List

from .enums import Player
from .heuristic import evaluate_board
from .schemas import Move
from .solver import Solver
from .state import State

# Logger setup
logger = logging.getLogger(__name__)


class AI(Solver):
    """
    Minimax solver for `player` that searches `depth` plies ahead.

    The whole game tree is built before it is evaluated, so memory grows as
    branching_factor ** depth. Depths around 5 or 6 are already slow.
    """

    def __init__(self, player: Player, depth: int):
        self.player = player
        self.depth = depth

    def get_moves(self, board) -> List[Move]:
        """
        Every move from `board` whose resulting state ties the root's minimax value.
        Empty when depth is 0, the board is full, or the game is already decided.
        """
        state = State(self.player, board)
        self.create_game_tree(state, self.depth)
        self.minimax(state)

        moves = [child.last_move for child in state.children if child.value == state.value]

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Player %s depth %s: %s nodes, root value %s, best columns %s",
                self.player, self.depth, state.size(), state.value,
                [m.column for m in moves]
            )
        return moves

    @staticmethod
    def create_game_tree(state: State, depth: int) -> None:
        """
        Expands `state` in place into a game tree of the given depth.
        A state whose board already has a winner is left as a leaf.
        Runs in time exponential in `depth`.
        """
        if depth == 0:
            return
        state.initialize_children()
        for child in state.children:
            AI.create_game_tree(child, depth - 1)

    def minimax(self, state: State) -> int:
        """
        Assigns a value to every state in the tree rooted at `state`:
        heuristic at the leaves, max at this player's turns, min at the opponent's.
        """
        if state.is_leaf:
            state.value = self.evaluate_board(state.board)
            return state.value

        values = [self.minimax(child) for child in state.children]
        if state.player == self.player:
            state.value = max(values)
        else:
            state.value = min(values)
        return state.value

    def evaluate_board(self, board) -> int:
        """Leaf score of `board` for this player. Only valid on leaves."""
        return evaluate_board(board, self.player)
