"""Text form of squares and moves: "d4", "a7-b5", and "-" for a pass."""

import re
from typing import Tuple

from ataxx.core.board import SIDE
from ataxx.core.errors import GameError
from ataxx.core.move import Move, PASS

_SQUARE = re.compile(r"^([a-g])([1-7])$")
_MOVE = re.compile(r"^([a-g])([1-7])-([a-g])([1-7])$")


def parse_square(text: str) -> Tuple[int, int]:
    """Return the 0-based (col, row) of a square such as "d4"."""
    m = _SQUARE.match(text.strip())
    if not m:
        raise GameError(f"invalid square: {text}")
    return ord(m.group(1)) - ord("a"), int(m.group(2)) - 1


def format_square(col: int, row: int) -> str:
    if not (0 <= col < SIDE and 0 <= row < SIDE):
        raise ValueError(f"square off the board: {col}, {row}")
    return f"{chr(ord('a') + col)}{row + 1}"


def parse_move(text: str) -> Move:
    text = text.strip()
    if text == "-":
        return PASS
    m = _MOVE.match(text)
    if not m:
        raise GameError(f"invalid move: {text}")
    c0, r0, c1, r1 = m.groups()
    return Move.between(ord(c0) - ord("a"), int(r0) - 1,
                        ord(c1) - ord("a"), int(r1) - 1)


def is_move_text(text: str) -> bool:
    text = text.strip()
    return text == "-" or _MOVE.match(text) is not None


def format_move(move: Move) -> str:
    if move.is_pass():
        return "-"
    return f"{format_square(move.col0, move.row0)}-{format_square(move.col1, move.row1)}"
