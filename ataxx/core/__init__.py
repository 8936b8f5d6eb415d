"""Core engine components: board, moves, evaluator and search."""

from .board import Board, clone
from .errors import ContractViolation, GameError, IllegalBlockError, IllegalMoveError, UndoError
from .evaluator import Evaluator
from .move import Move, MoveKind, PASS, PieceColor
from .search import SearchEngine, best_move
