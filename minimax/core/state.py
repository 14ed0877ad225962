from typing import List, Optional

from .enums import Player
from .schemas import Move


class State:
    """
    A node of the game tree: whose turn it is, the board, and the move that led here.
    `value` stays None until the tree is evaluated.
    """

    def __init__(self, player: Player, board, last_move: Optional[Move] = None):
        self.player = player
        self.board = board
        self.last_move = last_move
        self.children: List["State"] = []
        self.value: Optional[int] = None

    def initialize_children(self) -> None:
        """
        Creates one child per legal move from this board, in column order.
        A board that already has a winner stays a leaf.
        """
        if self.board.has_connect_four() is not None:
            self.children = []
            return
        next_player = self.player.opponent
        self.children = [State(next_player, board, move)
                         for move, board in self.board.get_possible_moves(self.player)]

    @property
    def is_leaf(self) -> bool:
        return not self.children

    def size(self) -> int:
        """Number of nodes in the tree rooted here."""
        total = 0
        stack = [self]
        while stack:
            node = stack.pop()
            total += 1
            stack.extend(node.children)
        return total

    def __repr__(self) -> str:
        return (f"State(player={self.player!r}, last_move={self.last_move!r}, "
                f"children={len(self.children)}, value={self.value!r})")
