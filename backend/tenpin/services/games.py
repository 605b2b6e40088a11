import logging
from typing import Optional, Sequence

from ..config import get_strict_rolls
from ..exceptions import InvalidRoll
from ..schemas import BowlingSummaryOut
from ..scoring.bowling import Game
from ..scoring.validation import ValidationError, validate_rolls

logger = logging.getLogger(__name__)


def score_rolls(
    rolls: Sequence[int], *, strict: Optional[bool] = None
) -> BowlingSummaryOut:
    """Score a recorded roll log.

    ``strict`` defaults to ``TENPIN_STRICT_ROLLS``. When enabled the log must
    form a legal (possibly unfinished) game, otherwise ``InvalidRoll`` is
    raised. Unfinished games come back with ``total`` set to ``None``.
    """

    if strict is None:
        strict = get_strict_rolls()
    if strict:
        try:
            rolls = validate_rolls(rolls)
        except ValidationError as exc:
            logger.info("rejected roll log: %s", exc.detail)
            raise InvalidRoll(exc.detail) from exc

    game = Game(rolls)
    complete = game.is_complete()
    return BowlingSummaryOut(
        frames=game.frames(),
        running_totals=game.running_totals(),
        total=game.score() if complete else None,
        complete=complete,
    )
