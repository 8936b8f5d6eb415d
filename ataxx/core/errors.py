"""Exceptions raised by the engine and its command layer."""


class GameError(Exception):
    """A user-facing problem: bad syntax, unknown command, wrong game state."""


class ContractViolation(AssertionError):
    """A caller broke a board precondition. The board is left untouched."""


class IllegalMoveError(ContractViolation):
    pass


class IllegalBlockError(ContractViolation):
    pass


class UndoError(ContractViolation):
    pass
