"""Cell colours and move values shared by the board and the search."""

from dataclasses import dataclass
from enum import Enum


class PieceColor(Enum):
    RED = "red"
    BLUE = "blue"
    EMPTY = "empty"
    BLOCKED = "blocked"

    def opposite(self) -> "PieceColor":
        """Return the other player's colour; EMPTY and BLOCKED map to themselves."""
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    def is_piece(self) -> bool:
        return self is PieceColor.RED or self is PieceColor.BLUE

    def __str__(self):
        return self.value.capitalize()


class MoveKind(Enum):
    PASS = 0
    EXTEND = 1
    JUMP = 2


@dataclass(frozen=True)
class Move:
    """A pass, or a displacement from (col0, row0) to (col1, row1).

    Columns and rows are 0-based board coordinates (column 0 is 'a',
    row 0 is '1').
    """

    kind: MoveKind
    col0: int = 0
    row0: int = 0
    col1: int = 0
    row1: int = 0

    @classmethod
    def between(cls, col0: int, row0: int, col1: int, row1: int) -> "Move":
        """Tag a displacement as EXTEND (distance <= 1) or JUMP (anything further)."""
        dist = max(abs(col1 - col0), abs(row1 - row0))
        kind = MoveKind.EXTEND if dist <= 1 else MoveKind.JUMP
        return cls(kind, col0, row0, col1, row1)

    @property
    def distance(self) -> int:
        """Chebyshev distance between source and destination (0 for a pass)."""
        if self.is_pass():
            return 0
        return max(abs(self.col1 - self.col0), abs(self.row1 - self.row0))

    def is_pass(self) -> bool:
        return self.kind is MoveKind.PASS

    def is_extend(self) -> bool:
        return self.kind is MoveKind.EXTEND

    def is_jump(self) -> bool:
        return self.kind is MoveKind.JUMP

    def __str__(self):
        if self.is_pass():
            return "-"
        return "%s%d-%s%d" % (chr(ord("a") + self.col0), self.row0 + 1,
                              chr(ord("a") + self.col1), self.row1 + 1)


PASS = Move(MoveKind.PASS)
