"""Static evaluator: piece difference, positive favours Red."""

from ataxx.config import CONFIG
from .board import Board


class Evaluator:
    def __init__(self, cfg=None):
        self.cfg = cfg or CONFIG.eval

    @property
    def winning_value(self) -> int:
        return self.cfg.winning_value

    def evaluate(self, board: Board) -> int:
        """Return a score for BOARD from Red's point of view.

        A finished game scores +/- winning_value (a tie counts against Red).
        Otherwise the score is the piece difference, less pass_penalty when
        the position was reached by a pass.
        """
        red = board.red_pieces
        blue = board.blue_pieces
        if board.game_over():
            return self.cfg.winning_value if red > blue else -self.cfg.winning_value
        score = red - blue
        last = board.last_move
        if last is not None and last.is_pass():
            score -= self.cfg.pass_penalty
        return score
