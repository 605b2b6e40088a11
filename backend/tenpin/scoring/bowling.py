"""Ten-pin bowling scoring engine."""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from ..exceptions import IncompleteGame, InvalidRoll
from .validation import (
    FRAMES_PER_GAME,
    PINS_PER_FRAME,
    ValidationError,
    validate_rolls,
)

logger = logging.getLogger(__name__)


class _ShortLog(Exception):
    """A roll needed to resolve a frame has not been recorded yet."""


class Game:
    """A single game, kept as the flat log of pins knocked down per roll.

    Frame boundaries, strikes and spares are derived from the log every time
    the game is scored, so nothing else needs to be kept in sync with it.
    """

    def __init__(self, rolls: Optional[Iterable[int]] = None, *, strict: bool = False) -> None:
        self._rolls: List[int] = []
        self.strict = strict
        for pins in rolls or ():
            self.record(pins)

    def __len__(self) -> int:
        return len(self._rolls)

    def __repr__(self) -> str:
        return f"Game(rolls={self._rolls!r})"

    @property
    def rolls(self) -> Tuple[int, ...]:
        return tuple(self._rolls)

    def record(self, pins: int) -> None:
        """Append one roll to the log.

        Outside strict mode this never fails. In strict mode the roll is
        checked against the frame rules first and ``InvalidRoll`` is raised
        with the log left untouched.
        """
        if self.strict:
            try:
                validate_rolls(self._rolls + [pins])
            except ValidationError as exc:
                raise InvalidRoll(exc.detail) from exc
        self._rolls.append(pins)

    def score(self) -> int:
        total = sum(self.frame_scores())
        logger.debug("scored %d roll(s): %d", len(self._rolls), total)
        return total

    def frame_scores(self) -> List[int]:
        """Score each of the ten frames, raising ``IncompleteGame`` if any
        frame or its bonus rolls cannot be resolved from the log."""
        scores: List[int] = []
        index = 0
        for frame in range(1, FRAMES_PER_GAME + 1):
            try:
                scores.append(self._frame_score(index))
                index += 1 if self._is_strike(index) else 2
            except _ShortLog:
                logger.debug(
                    "frame %d unresolved with %d roll(s)", frame, len(self._rolls)
                )
                raise IncompleteGame(frame, len(self._rolls)) from None
        return scores

    def running_totals(self) -> List[Optional[int]]:
        """Cumulative total after each frame, ``None`` from the first frame
        that cannot be resolved yet."""
        totals: List[Optional[int]] = [None] * FRAMES_PER_GAME
        cumulative = 0
        index = 0
        for frame in range(FRAMES_PER_GAME):
            try:
                cumulative += self._frame_score(index)
                index += 1 if self._is_strike(index) else 2
            except _ShortLog:
                break
            totals[frame] = cumulative
        return totals

    def is_complete(self) -> bool:
        return self.running_totals()[-1] is not None

    def frames(self) -> List[List[int]]:
        """Group the recorded rolls by frame.

        The tenth frame keeps up to two bonus rolls; anything recorded after
        that is not part of the game and is left out.
        """
        grouped: List[List[int]] = []
        index = 0
        while index < len(self._rolls) and len(grouped) < FRAMES_PER_GAME - 1:
            size = 1 if self._rolls[index] == PINS_PER_FRAME else 2
            grouped.append(self._rolls[index:index + size])
            index += size
        if index < len(self._rolls):
            grouped.append(self._rolls[index:index + 3])
        return grouped

    def _roll(self, index: int) -> int:
        if index >= len(self._rolls):
            raise _ShortLog(index)
        return self._rolls[index]

    def _frame_score(self, index: int) -> int:
        # strike first: a strike frame owns a single roll
        if self._is_strike(index):
            return PINS_PER_FRAME + self._sum_of_two(index + 1)
        if self._is_spare(index):
            return PINS_PER_FRAME + self._roll(index + 2)
        return self._sum_of_two(index)

    def _is_strike(self, index: int) -> bool:
        return self._roll(index) == PINS_PER_FRAME

    def _is_spare(self, index: int) -> bool:
        return self._sum_of_two(index) == PINS_PER_FRAME

    def _sum_of_two(self, index: int) -> int:
        return self._roll(index) + self._roll(index + 1)


def init_state(config: Dict) -> Dict:
    return {"config": config, "rolls": []}


def apply(event: Dict, state: Dict) -> Dict:
    if event.get("type") != "ROLL":
        raise ValueError("invalid bowling event")
    pins = event.get("pins", 0)
    if state["config"].get("strict", False):
        try:
            validate_rolls(state["rolls"] + [pins])
        except ValidationError as exc:
            raise InvalidRoll(exc.detail) from exc
    state["rolls"].append(pins)
    return state


def summary(state: Dict) -> Dict:
    game = Game(state["rolls"])
    complete = game.is_complete()
    scores = game.running_totals()
    return {
        "frames": game.frames(),
        "scores": scores,
        "total": scores[-1] if complete else None,
        "complete": complete,
    }
