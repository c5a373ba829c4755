import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

log = logging.getLogger(__name__)

BOARD_SIZE = 3                       # fixed 3x3 grid
CELL_COUNT = BOARD_SIZE * BOARD_SIZE

# every winning triple, row-major indices
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # cols
    (0, 4, 8), (2, 4, 6),             # diags
)


class Mark(str, Enum):
    """the two player symbols"""
    X = "X"
    O = "O"

    def opposite(self) -> "Mark":
        return Mark.O if self is Mark.X else Mark.X


class Phase(str, Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class MoveOutcome(str, Enum):
    """
    what make_move did; only WIN/DRAW/CONTINUE change state
    """
    WIN = "win"
    DRAW = "draw"
    CONTINUE = "continue"
    OCCUPIED = "occupied"
    GAME_OVER = "game_over"
    INVALID = "invalid"

    @property
    def accepted(self) -> bool:
        return self in (MoveOutcome.WIN, MoveOutcome.DRAW, MoveOutcome.CONTINUE)


@dataclass(frozen=True)
class GameStatus:
    """
    read-only view of the game for rendering
    """
    phase: Phase
    current_player: Optional[Mark] = None               # set while in progress
    winner: Optional[Mark] = None                       # set when won
    winning_line: Optional[Tuple[int, int, int]] = None

    @property
    def is_terminal(self) -> bool:
        return self.phase is not Phase.IN_PROGRESS


@dataclass(frozen=True)
class MoveResult:
    outcome: MoveOutcome
    index: int
    status: GameStatus


class GameLogic:
    """
    tic-tac-toe rules and state
    """
    def __init__(self):
        """
        init board and counters
        """
        self.reset_game()

    @property
    def board(self) -> Tuple[Optional[Mark], ...]:
        # copy so callers can't write cells directly
        return tuple(self._board)

    @property
    def current_player(self) -> Mark:
        return self._current_player

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def winner(self) -> Optional[Mark]:
        return self._winner

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self._winning_line

    @property
    def is_draw(self) -> bool:
        return self._phase is Phase.DRAW

    @property
    def game_over(self) -> bool:
        return self._phase is not Phase.IN_PROGRESS

    @property
    def move_count(self) -> int:
        return sum(1 for c in self._board if c is not None)

    def make_move(self, index: int) -> MoveResult:
        """
        place current player's mark at index (0-8) and report the result.
        rejected moves (invalid, game_over, occupied) leave state untouched.
        """
        if not isinstance(index, int) or isinstance(index, bool) \
           or not 0 <= index < CELL_COUNT:
            return self._reject(MoveOutcome.INVALID, index)
        if self.game_over:
            return self._reject(MoveOutcome.GAME_OVER, index)
        if self._board[index] is not None:
            return self._reject(MoveOutcome.OCCUPIED, index)

        player = self._current_player
        self._board[index] = player
        log.debug("%s played cell %d", player.value, index)

        # only the mover can have completed a line
        line = self._find_line(player)
        if line is not None:
            self._phase = Phase.WON
            self._winner = player; self._winning_line = line
            log.info("%s wins on line %s", player.value, line)
            return MoveResult(MoveOutcome.WIN, index, self.get_status())
        if all(c is not None for c in self._board):
            self._phase = Phase.DRAW
            log.info("board full, draw")
            return MoveResult(MoveOutcome.DRAW, index, self.get_status())

        self._current_player = player.opposite()
        return MoveResult(MoveOutcome.CONTINUE, index, self.get_status())

    def get_status(self) -> GameStatus:
        if self._phase is Phase.WON:
            return GameStatus(Phase.WON, winner=self._winner,
                              winning_line=self._winning_line)
        if self._phase is Phase.DRAW:
            return GameStatus(Phase.DRAW)
        return GameStatus(Phase.IN_PROGRESS, current_player=self._current_player)

    def _reject(self, outcome: MoveOutcome, index) -> MoveResult:
        log.debug("move at %r rejected: %s", index, outcome.value)
        return MoveResult(outcome, index, self.get_status())

    def _find_line(self, player: Mark) -> Optional[Tuple[int, int, int]]:
        """
        first win line fully held by player, or None
        """
        b = self._board
        for line in WIN_LINES:
            if all(b[i] is player for i in line):
                return line
        return None

    def is_cell_empty(self, index: int) -> bool:
        """
        true if index valid and cell blank
        """
        if 0 <= index < CELL_COUNT:
            return self._board[index] is None
        return False

    def cell(self, row: int, col: int) -> Optional[Mark]:
        """
        mark at row, col; None if blank or off the board
        """
        if 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE:
            return self._board[row * BOARD_SIZE + col]
        return None

    def reset_game(self):
        """
        clear board and reset flags
        """
        # back to fresh state
        self._board: List[Optional[Mark]] = [None] * CELL_COUNT
        self._current_player = Mark.X      # X always starts
        self._phase = Phase.IN_PROGRESS
        self._winner: Optional[Mark] = None
        self._winning_line: Optional[Tuple[int, int, int]] = None
