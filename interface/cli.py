"""Line-oriented command interpreter for playing Ataxx in a terminal."""

import argparse
import sys

from ataxx.config import CONFIG
from ataxx.core.errors import ContractViolation, GameError
from ataxx.core.move import PASS, PieceColor
from ataxx.main import Engine
from ataxx.notation import is_move_text, parse_move, parse_square

SETUP, PLAYING, FINISHED = "setup", "playing", "finished"

HELP = """\
Commands:
  start              begin play (setup only)
  clear              abandon the game and return to setup
  auto red|blue      let the AI play that colour
  manual red|blue    take moves for that colour from the input
  block <sq>         block a square and its reflections (setup only)
  seed <n>           seed the AI's random tie-breaking
  depth <n>          set the AI's search depth in plies
  dump               print the board
  undo               take back the last move (and any AI replies)
  load <file>        read commands from a file
  help               print this message
  quit               exit
  c0r0-c1r1          move a piece, e.g. a7-b6
  -                  pass (only when no move is possible)"""

_COLORS = {"red": PieceColor.RED, "blue": PieceColor.BLUE}


class Game:
    def __init__(self, engine=None, inputs=None, out=None, err=None):
        self.engine = engine or Engine()
        self._interactive = inputs is None
        # Stack of line sources; files pushed by "load" are read first.
        self._sources = [] if inputs is None else [iter(inputs)]
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.state = SETUP
        self.players = {
            PieceColor.RED: CONFIG.ui.red_player,
            PieceColor.BLUE: CONFIG.ui.blue_player,
        }
        self._running = True
        self._commands = {
            "start": self.do_start,
            "clear": self.do_clear,
            "auto": self.do_auto,
            "manual": self.do_manual,
            "block": self.do_block,
            "seed": self.do_seed,
            "depth": self.do_depth,
            "dump": self.do_dump,
            "undo": self.do_undo,
            "load": self.do_load,
            "help": self.do_help,
            "quit": self.do_quit,
        }

    @property
    def board(self):
        return self.engine.board

    def process(self):
        """Run commands and moves until 'quit' or end of input."""
        while self._running:
            if self.state == PLAYING:
                if self.board.game_over():
                    self.report_winner()
                    self.state = FINISHED
                    continue
                mover = self.board.whose_move
                if self.players[mover] == "auto":
                    self.play_ai(mover)
                    continue
                if not self.board.can_move(mover):
                    self.board.apply(PASS)
                    self.report(f"{mover} passes.")
                    continue
                line = self._read(f"{mover}: ")
            else:
                line = self._read(CONFIG.ui.prompt)
            if line is None:
                break
            self.do_command(line)

    def do_command(self, line: str):
        line = line.strip()
        if not line or line.startswith("#"):
            return
        try:
            if is_move_text(line):
                self.do_move(line)
                return
            words = line.split()
            command = self._commands.get(words[0].lower())
            if command is None:
                raise GameError("Command not understood")
            command(words[1:])
        except (GameError, ContractViolation) as e:
            print(f"error: {e}", file=self.err)

    def play_ai(self, mover: PieceColor):
        text, _value = self.engine.play_best_move()
        if text == "-":
            self.report(f"{mover} passes.")
        else:
            self.report(f"{mover} moves {text}.")

    def report(self, msg: str):
        print(msg, file=self.out)

    def report_winner(self):
        winner = self.engine.winner()
        self.report("Draw." if winner == "Draw" else f"{winner} wins.")

    # ── Command processors ────────────────────────────────────────────────

    def do_move(self, text: str):
        self._check_state("move", SETUP, PLAYING)
        move = parse_move(text)
        if self.board.is_legal(move):
            self.board.apply(move)
        elif move.is_pass():
            raise GameError("Player can move, so may not pass.")
        else:
            raise GameError("Illegal move.")

    def do_start(self, _args):
        self._check_state("start", SETUP)
        self.state = PLAYING

    def do_clear(self, _args):
        self.engine.reset()
        self.state = SETUP

    def do_auto(self, args):
        self.players[self._color_arg(args)] = "auto"

    def do_manual(self, args):
        self.players[self._color_arg(args)] = "manual"

    def do_block(self, args):
        self._check_state("block", SETUP)
        col, row = parse_square(self._single_arg("block", args))
        if not self.board.legal_block(col, row):
            raise GameError("Illegal block placement.")
        self.board.place_block(col, row)

    def do_seed(self, args):
        self.engine.set_seed(self._int_arg("seed", args))

    def do_depth(self, args):
        depth = self._int_arg("depth", args)
        if depth < 1:
            raise GameError("depth must be at least 1")
        self.engine.set_depth(depth)

    def do_dump(self, _args):
        self.report("===")
        self.report(str(self.board))
        self.report("===")

    def do_undo(self, _args):
        self._check_state("undo", SETUP, PLAYING)
        if not self.engine.undo_move():
            raise GameError("Nothing to undo.")
        if self.state == PLAYING:
            # Back up to the last position a manual player has to move in.
            while self.players[self.board.whose_move] == "auto" and self.engine.undo_move():
                pass

    def do_load(self, args):
        name = self._single_arg("load", args)
        try:
            with open(name) as f:
                lines = f.read().splitlines()
        except OSError:
            raise GameError(f"Cannot open file {name}")
        self._sources.append(iter(lines))

    def do_help(self, _args):
        self.report(HELP)

    def do_quit(self, _args):
        self._running = False

    # ── Helpers ───────────────────────────────────────────────────────────

    def _read(self, prompt: str):
        while self._sources:
            line = next(self._sources[-1], None)
            if line is not None:
                return line
            self._sources.pop()
        if not self._interactive:
            return None
        try:
            return input(prompt)
        except EOFError:
            return None

    def _check_state(self, cmnd: str, *states):
        if self.state not in states:
            raise GameError(f"'{cmnd}' command is not allowed now.")

    @staticmethod
    def _single_arg(cmnd: str, args):
        if len(args) != 1:
            raise GameError(f"'{cmnd}' takes one argument")
        return args[0]

    def _color_arg(self, args) -> PieceColor:
        color = _COLORS.get(self._single_arg("player", args).lower())
        if color is None:
            raise GameError("expected 'red' or 'blue'")
        return color

    def _int_arg(self, cmnd: str, args) -> int:
        try:
            return int(self._single_arg(cmnd, args))
        except ValueError:
            raise GameError(f"'{cmnd}' expects an integer")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="ataxx", description="Play Ataxx against the computer.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the AI's tie-breaking")
    parser.add_argument("--depth", type=int, default=None, help="AI search depth in plies")
    args = parser.parse_args(argv)

    game = Game(Engine(depth=args.depth, seed=args.seed))
    game.process()
    return 0


if __name__ == "__main__":
    sys.exit(main())
