"""Ataxx board with capture propagation and a snapshot history for undo.

Squares are addressed externally by 0-based (col, row) pairs, column 0 being
'a' and row 0 being '1'.  Internally the 7x7 board sits inside an 11x11 flat
list whose outer two rings are always BLOCKED, so every square within two
columns and rows of a playable square is a valid index and looks blocked
when it is off the board.
"""

from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional, Tuple

from .errors import IllegalBlockError, IllegalMoveError, UndoError
from .move import Move, MoveKind, PieceColor

RED = PieceColor.RED
BLUE = PieceColor.BLUE
EMPTY = PieceColor.EMPTY
BLOCKED = PieceColor.BLOCKED

SIDE = 7
EXTENDED_SIDE = SIDE + 4
SQ_NUMBER = SIDE * SIDE

# Consecutive non-extending moves before the game is declared over.
JUMP_LIMIT = 25

_SYMBOLS = {RED: "r", BLUE: "b", EMPTY: "-", BLOCKED: "X"}
_MOVE_DISTANCE = {MoveKind.EXTEND: 1, MoveKind.JUMP: 2}


def index(col: int, row: int) -> int:
    """Linearized index of (col, row); -2 <= col, row <= SIDE + 1."""
    return (row + 2) * EXTENDED_SIDE + (col + 2)


def neighbor(sq: int, dc: int, dr: int) -> int:
    """Index of the square DC columns and DR rows away from SQ."""
    return sq + dc + dr * EXTENDED_SIDE


def col_row(sq: int) -> Tuple[int, int]:
    return sq % EXTENDED_SIDE - 2, sq // EXTENDED_SIDE - 2


PLAYABLE = [index(c, r) for r in range(SIDE) for c in range(SIDE)]

# (dc, dr) within two squares, and within one square, in a fixed order.
REACH = [(dc, dr) for dr in range(-2, 3) for dc in range(-2, 3) if dc or dr]
ADJACENT = [(dc, dr) for dr in range(-1, 2) for dc in range(-1, 2) if dc or dr]

_REACH_OFFSETS = [neighbor(0, dc, dr) for dc, dr in REACH]
_ADJACENT_OFFSETS = [neighbor(0, dc, dr) for dc, dr in ADJACENT]


@dataclass(frozen=True)
class Snapshot:
    """Board state recorded after each move, pass or block placement."""

    cells: Tuple[PieceColor, ...]
    red: int
    blue: int
    jumps: int
    whose_move: PieceColor
    last_move: Optional[Move]


class Board:
    """A 7x7 Ataxx board.

    The optional LISTENER is called with the board after every apply, undo,
    block placement and clear.  Copies never inherit it.
    """

    def __init__(self, listener: Optional[Callable[["Board"], None]] = None):
        self._listener = listener
        self._reset()

    @classmethod
    def new_game(cls, listener: Optional[Callable[["Board"], None]] = None) -> "Board":
        return cls(listener)

    @classmethod
    def from_rows(cls, rows: List[str], whose_move: PieceColor = RED) -> "Board":
        """Board set up from seven rows of 'r', 'b', 'X' and '-', row 7 first.

        Spaces are ignored, so the output of render() is accepted.  Blocked
        squares are recorded in row-major order and count as placed blocks.
        """
        symbols = {v: k for k, v in _SYMBOLS.items()}
        if len(rows) != SIDE:
            raise ValueError(f"expected {SIDE} rows, got {len(rows)}")
        board = cls()
        board._cells = [BLOCKED] * (EXTENDED_SIDE * EXTENDED_SIDE)
        board._red = board._blue = board._blocked = 0
        board._blocks = []
        for i, text in enumerate(rows):
            squares = text.replace(" ", "")
            if len(squares) != SIDE or any(s not in symbols for s in squares):
                raise ValueError(f"bad row: {text!r}")
            row = SIDE - 1 - i
            for col, s in enumerate(squares):
                board._cells[index(col, row)] = symbols[s]
        for sq in PLAYABLE:
            color = board._cells[sq]
            if color is BLOCKED:
                board._blocks.append(sq)
                board._blocked += 1
            elif color is not EMPTY:
                board._incr(color, 1)
        board._whose_move = whose_move
        board._history = [board._snapshot(None)]
        return board

    def _reset(self):
        self._cells = [BLOCKED] * (EXTENDED_SIDE * EXTENDED_SIDE)
        for sq in PLAYABLE:
            self._cells[sq] = EMPTY
        self._cells[index(0, 0)] = BLUE
        self._cells[index(0, SIDE - 1)] = RED
        self._cells[index(SIDE - 1, 0)] = RED
        self._cells[index(SIDE - 1, SIDE - 1)] = BLUE
        self._red = 2
        self._blue = 2
        self._blocked = 0
        self._jumps = 0
        self._whose_move = RED
        self._blocks: List[int] = []
        self._moves: List[Move] = []
        self._history: List[Snapshot] = [self._snapshot(None)]
        # History entries at or below this position can never be undone.
        self._floor = 0

    def clear(self):
        """Return to the starting position with no blocks."""
        self._reset()
        self._notify()

    def copy(self) -> "Board":
        """Independent deep copy sharing no mutable state."""
        other = Board.__new__(Board)
        other._listener = None
        other._cells = list(self._cells)
        other._red = self._red
        other._blue = self._blue
        other._blocked = self._blocked
        other._jumps = self._jumps
        other._whose_move = self._whose_move
        other._blocks = list(self._blocks)
        other._moves = list(self._moves)
        other._history = list(self._history)
        other._floor = self._floor
        return other

    # ── Queries ────────────────────────────────────────────────────────────

    def cell_at(self, col: int, row: int) -> PieceColor:
        """Contents of (col, row); border squares (-2..-1, SIDE..SIDE+1) are BLOCKED."""
        return self._cells[index(col, row)]

    def count_of(self, color: PieceColor) -> int:
        if color is RED:
            return self._red
        if color is BLUE:
            return self._blue
        if color is BLOCKED:
            return self._blocked
        return SQ_NUMBER - self._red - self._blue - self._blocked

    @property
    def red_pieces(self) -> int:
        return self._red

    @property
    def blue_pieces(self) -> int:
        return self._blue

    @property
    def block_pieces(self) -> int:
        return self._blocked

    @property
    def whose_move(self) -> PieceColor:
        """Colour of the player to move; arbitrary once the game is over."""
        return self._whose_move

    @property
    def num_jumps(self) -> int:
        """Non-pass moves since the last extend (or pass, or game start)."""
        return self._jumps

    @property
    def num_moves(self) -> int:
        return len(self._moves)

    @property
    def moves(self) -> List[Move]:
        return list(self._moves)

    @property
    def blocks(self) -> List[int]:
        """Indices of blocked squares in the order they were placed."""
        return list(self._blocks)

    @property
    def last_move(self) -> Optional[Move]:
        return self._history[-1].last_move

    def can_move(self, who: PieceColor) -> bool:
        """True iff WHO has any move, ignoring whose turn it is."""
        cells = self._cells
        for sq in PLAYABLE:
            if cells[sq] is who:
                for off in _REACH_OFFSETS:
                    if cells[sq + off] is EMPTY:
                        return True
        return False

    def is_legal(self, move: Optional[Move]) -> bool:
        if move is None:
            return False
        if move.is_pass():
            return not self.can_move(self._whose_move)
        for coord in (move.col0, move.row0, move.col1, move.row1):
            if not 0 <= coord < SIDE:
                return False
        if self.cell_at(move.col0, move.row0) is not self._whose_move:
            return False
        if self.cell_at(move.col1, move.row1) is not EMPTY:
            return False
        dist = move.distance
        if dist == 0 or dist > 2:
            return False
        return _MOVE_DISTANCE[move.kind] == dist

    def legal_moves(self) -> Iterator[Move]:
        """Yield every legal non-pass move for the player to move, row-major."""
        cells = self._cells
        mover = self._whose_move
        for sq in PLAYABLE:
            if cells[sq] is not mover:
                continue
            col, row = col_row(sq)
            for (dc, dr), off in zip(REACH, _REACH_OFFSETS):
                if cells[sq + off] is EMPTY:
                    yield Move.between(col, row, col + dc, row + dr)

    def legal_block(self, col: int, row: int) -> bool:
        """True iff (col, row) and its mirror images hold no piece."""
        if not (0 <= col < SIDE and 0 <= row < SIDE):
            return False
        return not any(self.cell_at(c, r).is_piece()
                       for c, r in _reflections(col, row))

    def game_over(self) -> bool:
        if self._jumps >= JUMP_LIMIT:
            return True
        if self._red == 0 or self._blue == 0:
            return True
        if self._red + self._blue + self._blocked == SQ_NUMBER:
            return True
        return not self.can_move(RED) and not self.can_move(BLUE)

    # ── Mutation ───────────────────────────────────────────────────────────

    def apply(self, move: Move):
        """Make MOVE for the player to move.  Raises IllegalMoveError, leaving
        the board untouched, unless is_legal(MOVE)."""
        if not self.is_legal(move):
            raise IllegalMoveError("illegal move: %s" % move)
        mover = self._whose_move
        if move.is_pass():
            self._jumps = 0
        else:
            dest = index(move.col1, move.row1)
            if move.is_extend():
                self._incr(mover, 1)
                self._jumps = 0
            else:
                self._cells[index(move.col0, move.row0)] = EMPTY
                self._jumps += 1
            self._cells[dest] = mover
            opponent = mover.opposite()
            for off in _ADJACENT_OFFSETS:
                if self._cells[dest + off] is opponent:
                    self._cells[dest + off] = mover
                    self._incr(mover, 1)
                    self._incr(opponent, -1)
        self._whose_move = mover.opposite()
        self._moves.append(move)
        self._history.append(self._snapshot(move))
        self._notify()

    def undo(self):
        """Take back the most recent move or pass.  Blocks stay in place."""
        if len(self._history) - 1 <= self._floor:
            raise UndoError("no move to undo")
        self._history.pop()
        self._moves.pop()
        self._restore(self._history[-1])
        self._notify()

    def place_block(self, col: int, row: int):
        """Block (col, row) and its reflections across the middle column and row."""
        if not self.legal_block(col, row):
            raise IllegalBlockError("illegal block placement")
        for c, r in _reflections(col, row):
            sq = index(c, r)
            if self._cells[sq] is not BLOCKED:
                self._cells[sq] = BLOCKED
                self._blocks.append(sq)
                self._blocked += 1
        self._history.append(self._snapshot(self.last_move))
        self._floor = len(self._history) - 1
        self._notify()

    def _incr(self, color: PieceColor, k: int):
        if color is RED:
            self._red += k
        else:
            self._blue += k

    def _snapshot(self, last_move: Optional[Move]) -> Snapshot:
        return Snapshot(tuple(self._cells), self._red, self._blue,
                        self._jumps, self._whose_move, last_move)

    def _restore(self, snap: Snapshot):
        self._cells[:] = snap.cells
        self._red = snap.red
        self._blue = snap.blue
        self._jumps = snap.jumps
        self._whose_move = snap.whose_move

    def _notify(self):
        if self._listener is not None:
            self._listener(self)

    # ── Display ────────────────────────────────────────────────────────────

    def render(self, legend: bool = False) -> "BoardText":
        return BoardText(self, legend)

    def __str__(self):
        return str(self.render(False))

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self._cells == other._cells
                and self._red == other._red
                and self._blue == other._blue
                and self._blocked == other._blocked
                and self._whose_move is other._whose_move)

    __hash__ = None


class BoardText:
    """Lines of a board picture, produced afresh on every iteration."""

    def __init__(self, board: Board, legend: bool):
        self._board = board
        self._legend = legend

    def __iter__(self) -> Iterator[str]:
        for row in range(SIDE - 1, -1, -1):
            squares = " ".join(_SYMBOLS[self._board.cell_at(col, row)]
                               for col in range(SIDE))
            yield ("%d " % (row + 1) if self._legend else " ") + squares
        if self._legend:
            yield "  " + " ".join(chr(ord("a") + col) for col in range(SIDE))

    def __str__(self):
        return "\n".join(self)


def _reflections(col: int, row: int) -> List[Tuple[int, int]]:
    mc, mr = SIDE - 1 - col, SIDE - 1 - row
    return [(col, row), (mc, row), (col, mr), (mc, mr)]


def clone(board: Board) -> Board:
    return board.copy()
