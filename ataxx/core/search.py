import random
import time
from typing import List, Optional, Tuple

from ataxx.config import CONFIG
from ataxx.core.board import Board
from ataxx.core.evaluator import Evaluator
from ataxx.core.move import Move, PASS, PieceColor
from ataxx.core.utils import print_info

INF = 1000000


class SearchEngine:
    """Minimax with alpha-beta pruning; Red maximizes, Blue minimizes."""

    def __init__(self, evaluator: Optional[Evaluator] = None, depth: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        self.evaluator = evaluator or Evaluator()
        self.max_depth = depth if depth is not None else CONFIG.search.depth
        self.rng = rng if rng is not None else random.Random(CONFIG.search.seed)
        self.nodes = 0

    def find_best_move(self, board: Board, depth: Optional[int] = None,
                       rng: Optional[random.Random] = None) -> Tuple[Move, int]:
        """Return (move, value) for the player to move on BOARD.

        BOARD itself is never modified.  Among root moves sharing the optimal
        value one is picked with RNG, which is consulted nowhere else.
        """
        if rng is None:
            rng = self.rng
        depth = self.max_depth if depth is None else depth
        if depth < 1:
            raise ValueError(f"search depth must be at least 1, got {depth}")
        self.nodes = 0

        if not board.can_move(board.whose_move):
            return PASS, self.evaluator.evaluate(board)

        start_time = time.time()
        search_board = board.copy()
        maximizing = board.whose_move is PieceColor.RED
        value, ties = self._search_root(search_board, depth, maximizing)
        best_move = rng.choice(ties)

        if CONFIG.search.show_info:
            elapsed = time.time() - start_time
            print_info(depth, value, self.nodes, elapsed, best_move,
                       self.evaluator.winning_value)
        return best_move, value

    def _search_root(self, board: Board, depth: int, maximizing: bool) -> Tuple[int, List[Move]]:
        # Each child is searched with a window one unit wider than the best
        # value so far, so any child reported equal to it is an exact tie.
        value = -INF if maximizing else INF
        ties: List[Move] = []
        for move in list(board.legal_moves()):
            board.apply(move)
            if maximizing:
                lo = value - 1 if ties else -INF
                score = self._minimax(board, depth - 1, lo, INF, False)
            else:
                hi = value + 1 if ties else INF
                score = self._minimax(board, depth - 1, -INF, hi, True)
            board.undo()

            if score == value:
                ties.append(move)
            elif (score > value) if maximizing else (score < value):
                value = score
                ties = [move]
        return value, ties

    def _minimax(self, board: Board, depth: int, alpha: int, beta: int, maximizing: bool) -> int:
        self.nodes += 1
        if depth <= 0 or board.game_over():
            return self.evaluator.evaluate(board)

        moves = list(board.legal_moves()) or [PASS]

        if maximizing:
            value = -INF
            for move in moves:
                board.apply(move)
                value = max(value, self._minimax(board, depth - 1, alpha, beta, False))
                board.undo()
                alpha = max(alpha, value)
                if beta <= alpha:
                    break
        else:
            value = INF
            for move in moves:
                board.apply(move)
                value = min(value, self._minimax(board, depth - 1, alpha, beta, True))
                board.undo()
                beta = min(beta, value)
                if beta <= alpha:
                    break
        return value


def best_move(board: Board, depth: Optional[int] = None,
              rng: Optional[random.Random] = None) -> Move:
    """Pick a move for the player to move on BOARD."""
    move, _value = SearchEngine(depth=depth, rng=rng).find_best_move(board)
    return move
