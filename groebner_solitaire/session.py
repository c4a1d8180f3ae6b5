"""A single game of Groebner solitaire.

The session owns the live configuration, the display color and region flag of
every stick, the current selection, and the record of pairs already combined.
It never draws anything: every visual consequence of a move is queued as a
presentation command which a host may drain and schedule however it likes.
The session's own state is correct whether or not those commands ever run.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple, Union

from .buchberger import IndexPair, buchberger_basis
from .config import GameConfig, get_game_config
from .minimize import minimize
from .orderings import GREVLEX, Ordering
from .points import Point
from .sticks import Stick, meeting_point, new_stick, reduction_path

logger = logging.getLogger(__name__)


class SessionState(Enum):
    IDLE = "idle"
    FIRST_SELECTED = "first-selected"
    RESOLVING = "resolving"


@dataclass(frozen=True)
class RenderConfiguration:
    """Redraw the board."""

    configuration: Tuple[Stick, ...]
    delay: int = 0


@dataclass(frozen=True)
class AnimateMeeting:
    """Slide two sticks up and to the right until their heads meet."""

    first: Stick
    second: Stick
    meeting_point: Point
    color: str
    delay: int = 0


@dataclass(frozen=True)
class AnimateReduction:
    """Show the successive rewrites of a new stick, ending in its reduced form."""

    steps: Tuple[Stick, ...]
    color: str
    delay: int = 0


PresentationCommand = Union[RenderConfiguration, AnimateMeeting, AnimateReduction]


def _pair(i: int, j: int) -> IndexPair:
    return (i, j) if i <= j else (j, i)


class Session:
    """Interactive state machine driving one game on top of the engine."""

    def __init__(
        self,
        configuration: Iterable[Stick] = (),
        ordering: Ordering = GREVLEX,
        config: Optional[GameConfig] = None,
    ) -> None:
        self.ordering = ordering
        self.config = config if config is not None else get_game_config()
        self.player_moves = 0
        self._configuration: List[Stick] = []
        self._colors: List[str] = []
        self._show_region: List[bool] = []
        self._start: Tuple[Stick, ...] = ()
        self._state = SessionState.IDLE
        self._selected: Optional[int] = None
        self._candidates: Set[int] = set()
        self._previous_moves: Set[IndexPair] = set()
        self._pending: Optional[Stick] = None
        self._pending_color = self.config.stick_color
        self._solution: Optional[FrozenSet[Stick]] = None
        self._num_moves = 0
        self._commands: List[PresentationCommand] = []
        self.reset_configuration(configuration)

    # ------------------------------------------------------------------
    # read-only views for the presentation layer

    @property
    def configuration(self) -> Tuple[Stick, ...]:
        return tuple(self._configuration)

    @property
    def start_configuration(self) -> Tuple[Stick, ...]:
        return self._start

    @property
    def colors(self) -> Tuple[str, ...]:
        """Display color of each stick, including selection highlighting."""

        colors = list(self._colors)
        for j in self._candidates:
            colors[j] = self.config.pair_color
        if self._selected is not None:
            colors[self._selected] = self.config.highlight_color
        return tuple(colors)

    @property
    def show_region(self) -> Tuple[bool, ...]:
        return tuple(self._show_region)

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def selected(self) -> Optional[int]:
        return self._selected

    @property
    def candidates(self) -> FrozenSet[int]:
        return frozenset(self._candidates)

    @property
    def previous_moves(self) -> FrozenSet[IndexPair]:
        return frozenset(self._previous_moves)

    @property
    def pending_stick(self) -> Optional[Stick]:
        return self._pending

    @property
    def solution(self) -> FrozenSet[Stick]:
        """The minimized basis of the starting configuration."""

        return self._ensure_solution()

    @property
    def num_moves(self) -> int:
        """Number of moves the computer needed to reach :attr:`solution`."""

        self._ensure_solution()
        return self._num_moves

    def stick_is_selected(self) -> bool:
        return self._selected is not None

    def stick_is_potential_pair(self, i: int) -> bool:
        return i in self._candidates

    def drain_commands(self) -> List[PresentationCommand]:
        """Hand over the queued presentation commands, oldest first."""

        commands, self._commands = self._commands, []
        return commands

    # ------------------------------------------------------------------
    # configuration

    def reset_configuration(self, to: Iterable[Stick]) -> None:
        """Start over from ``to``, forgetting moves, selection and solution."""

        self._configuration = []
        self._colors = []
        self._show_region = []
        self._previous_moves.clear()
        self._clear_selection()
        self._pending = None
        self._solution = None
        self._num_moves = 0
        self.player_moves = 0
        for stick in to:
            self.add_stick(stick, self.config.stick_color)
        self._start = tuple(self._configuration)
        self._commands.append(RenderConfiguration(self.configuration))

    def add_stick(self, stick: Optional[Stick] = None, color: Optional[str] = None) -> bool:
        """Add ``stick``, or commit the pending new stick when none is given.

        Vanished sticks and sticks already in play are refused.
        """

        if stick is None:
            stick, self._pending = self._pending, None
            if stick is None:
                return False
            color = color or self._pending_color
        color = color or self.config.stick_color
        if stick.is_trivial or stick in self._configuration:
            logger.debug("refusing to add %s", stick)
            return False
        self._configuration.append(stick)
        self._colors.append(color)
        self._show_region.append(False)
        return True

    # ------------------------------------------------------------------
    # selection and moves

    def select_stick(self, i: int, color: Optional[str] = None) -> None:
        """React to the player picking stick ``i``.

        The first pick highlights ``i`` and marks every stick not yet combined
        with it as a candidate.  Picking a candidate next performs the move;
        picking anything else clears the selection.  Indices outside the
        configuration are ignored.
        """

        if not 0 <= i < len(self._configuration):
            logger.debug("ignoring selection of index %d", i)
            return

        if self._state is SessionState.IDLE:
            self._selected = i
            self._candidates = {
                j
                for j in range(len(self._configuration))
                if j != i and _pair(i, j) not in self._previous_moves
            }
            self._state = SessionState.FIRST_SELECTED
            return

        first = self._selected
        if first is not None and i in self._candidates:
            self._state = SessionState.RESOLVING
            try:
                self.perform_move(first, i, color)
            finally:
                self._clear_selection()
            return
        self._clear_selection()

    def perform_move(self, i: int, j: int, color: Optional[str] = None) -> int:
        """Combine sticks ``i`` and ``j`` unless that pair was combined before.

        Returns the number of animation frames the move queued.  A repeated
        pair, or any pair while a new stick is still pending, queues nothing
        and returns 0.
        """

        if _pair(i, j) in self._previous_moves:
            logger.debug("pair (%d, %d) was already combined", i, j)
            return 0
        if self._pending is not None:
            logger.debug("pair (%d, %d) refused while %s is pending", i, j, self._pending)
            return 0
        return self.move(i, j, color)

    def move(self, i: int, j: int, color: Optional[str] = None) -> int:
        """Combine sticks ``i`` and ``j`` and hold any surviving stick as pending.

        Does not check whether the pair was combined before.  The pair is only
        recorded once its reduction has finished, so a move that raises
        :class:`ReductionLimitError` leaves the session as it was.
        """

        size = len(self._configuration)
        if not (0 <= i < size and 0 <= j < size):
            raise ValueError(f"move indices ({i}, {j}) out of range for {size} stick(s)")
        if self._pending is not None:
            raise RuntimeError(f"{self._pending} is still pending; commit it with add_stick() or finish_move() first")

        color = color or self.config.stick_color
        first, second = self._configuration[i], self._configuration[j]
        meet = meeting_point(first, second, self.ordering)
        path = reduction_path(
            new_stick(first, second, self.ordering),
            self._configuration,
            self.ordering,
            max_steps=self.config.max_reduction_steps,
        )
        self._previous_moves.add(_pair(i, j))
        self.player_moves += 1
        self._commands.append(AnimateMeeting(first, second, meet, self.config.animation_color))
        self._commands.append(AnimateReduction(tuple(path), color, delay=self.config.meeting_frames))

        result = path[-1]
        if result.is_trivial:
            logger.info("Move (%d, %d) vanished after %d reduction step(s)", i, j, len(path) - 1)
            self._pending = None
        else:
            logger.info("Move (%d, %d) produced %s", i, j, result)
            self._pending = result
            self._pending_color = color
        return self.config.meeting_frames + (len(path) - 1) * self.config.reduction_step_frames

    def finish_move(self) -> bool:
        """Commit the pending stick, redraw, and report whether the game is over.

        When it is over, sticks in the solution take the solution color and
        show their regions; the rest are greyed out.
        """

        self.add_stick()
        over = self.is_over()
        if over:
            solution = self._ensure_solution()
            for idx, stick in enumerate(self._configuration):
                if stick in solution:
                    self._colors[idx] = self.config.solution_color
                    self._show_region[idx] = True
                else:
                    self._colors[idx] = self.config.inactive_color
            logger.info(
                "Game over: computer needed %d move(s), player made %d", self._num_moves, self.player_moves
            )
        self._commands.append(RenderConfiguration(self.configuration))
        return over

    def play(self, i: int, j: int, color: Optional[str] = None) -> bool:
        """Select ``i`` then ``j`` and finish the move, without any host."""

        self.select_stick(i)
        self.select_stick(j, color)
        return self.finish_move()

    # ------------------------------------------------------------------
    # game over

    def is_over(self) -> bool:
        """``True`` once the minimized configuration matches the solution."""

        return minimize(self._configuration, self.ordering) == self._ensure_solution()

    def _ensure_solution(self) -> FrozenSet[Stick]:
        if self._solution is None:
            result = buchberger_basis(self._start, self.ordering)
            self._solution = frozenset(minimize(result.basis, self.ordering))
            self._num_moves = result.move_count
            logger.info("Solution has %d stick(s): %s", len(self._solution), ", ".join(map(str, self._solution)))
        return self._solution

    def _clear_selection(self) -> None:
        self._selected = None
        self._candidates = set()
        self._state = SessionState.IDLE


__all__ = [
    "Session",
    "SessionState",
    "RenderConfiguration",
    "AnimateMeeting",
    "AnimateReduction",
    "PresentationCommand",
]
