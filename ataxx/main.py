import random
from typing import Optional

from ataxx.config import CONFIG
from ataxx.core.board import Board
from ataxx.core.errors import ContractViolation, GameError, UndoError
from ataxx.core.evaluator import Evaluator
from ataxx.core.search import SearchEngine
from ataxx.notation import format_move, parse_move, parse_square


class Engine:
    """One authoritative board plus the AI that plays on it."""

    def __init__(self, depth=None, seed=None, listener=None):
        self.board = Board(listener)
        self.rng = random.Random(seed if seed is not None else CONFIG.search.seed)
        self.search = SearchEngine(Evaluator(), depth=depth, rng=self.rng)

    def set_seed(self, seed: int):
        self.rng.seed(seed)

    def set_depth(self, depth: int):
        self.search.max_depth = depth

    def get_best_move(self):
        move, value = self.search.find_best_move(self.board)
        return format_move(move), value

    def play_best_move(self):
        """Search, apply the chosen move, and return it with its value."""
        move, value = self.search.find_best_move(self.board)
        self.board.apply(move)
        return format_move(move), value

    def make_move(self, move_text: str) -> bool:
        """Apply a move such as 'a7-b6' or '-'. Returns True if it was legal."""
        try:
            move = parse_move(move_text)
        except GameError:
            return False
        if not self.board.is_legal(move):
            return False
        self.board.apply(move)
        return True

    def place_block(self, square: str) -> bool:
        try:
            col, row = parse_square(square)
            self.board.place_block(col, row)
        except (GameError, ContractViolation):
            return False
        return True

    def undo_move(self) -> bool:
        try:
            self.board.undo()
        except UndoError:
            return False
        return True

    def reset(self):
        self.board.clear()

    def winner(self) -> str:
        """'Red', 'Blue' or 'Draw' by piece count."""
        red, blue = self.board.red_pieces, self.board.blue_pieces
        if red == blue:
            return "Draw"
        return "Red" if red > blue else "Blue"

    def print_board(self, legend: Optional[bool] = None):
        if legend is None:
            legend = CONFIG.ui.legend
        print(self.board.render(legend))
