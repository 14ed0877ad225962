import unittest
from minimax.core.ai import AI
from minimax.core.board import Board
from minimax.core.enums import Player
from minimax.core.schemas import Move
from minimax.core.streaming import StreamingAI
from minimax.tests.boards import (
    ScriptedBoard, full_draw_matrix, horizontal_threat_matrix, vertical_threat_matrix
)


class TestStreamingAI(unittest.TestCase):
    def assertSameMoves(self, board, player, depth):
        expected = AI(player, depth).get_moves(board)
        actual = StreamingAI(player, depth).get_moves(board)
        self.assertEqual(actual, expected, f"player={player} depth={depth}\n{board}")

    def test_matches_tree_search_on_real_boards(self):
        opening = Board().play(Player.ONE, 3).play(Player.TWO, 2)
        boards = [
            Board(),
            opening,
            Board.from_matrix(horizontal_threat_matrix()),
            Board.from_matrix(vertical_threat_matrix()),
        ]
        for board in boards:
            for player in Player:
                for depth in (0, 1, 2, 3):
                    self.assertSameMoves(board, player, depth)

    def test_matches_tree_search_on_scripted_ties(self):
        scores = {
            (0, 0): 5, (0, 1): 3, (0, 2): 8,
            (1, 0): 3, (1, 1): 4, (1, 2): 7,
            (2, 0): 6, (2, 1): 1, (2, 2): 9,
        }
        board = ScriptedBoard(scores, 3)
        for player in Player:
            self.assertSameMoves(board, player, 2)
        self.assertEqual(StreamingAI(Player.ONE, 2).get_moves(board),
                         [Move(player=Player.ONE, column=0), Move(player=Player.ONE, column=1)])

    def test_edge_cases_return_nothing(self):
        decided = vertical_threat_matrix()
        decided[2][0] = 1
        self.assertEqual(StreamingAI(Player.ONE, 3).get_moves(Board.from_matrix(full_draw_matrix())), [])
        self.assertEqual(StreamingAI(Player.TWO, 3).get_moves(Board.from_matrix(decided)), [])
        self.assertEqual(StreamingAI(Player.ONE, 0).get_moves(Board()), [])

    def test_counts_every_position_once(self):
        ai = StreamingAI(Player.ONE, 2)
        ai.get_moves(Board())
        self.assertEqual(ai.nodes, 1 + 7 + 49)


if __name__ == '__main__':
    unittest.main()
