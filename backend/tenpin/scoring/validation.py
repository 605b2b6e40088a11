from typing import Any, List, Sequence

PINS_PER_FRAME = 10
FRAMES_PER_GAME = 10


class ValidationError(Exception):
    """Raised when recorded rolls do not form a legal game."""

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


def validate_pins(pins: Any, *, index: int | None = None) -> int:
    """Validate a single roll and return it as an ``int``."""

    label = f"Roll #{index}" if index is not None else "Roll"

    # Reject booleans explicitly (bool is a subclass of int in Python)
    if isinstance(pins, bool) or not isinstance(pins, int):
        raise ValidationError(f"{label} must be an integer.")
    if pins < 0:
        raise ValidationError(f"{label} must be >= 0.")
    if pins > PINS_PER_FRAME:
        raise ValidationError(f"{label} must be <= {PINS_PER_FRAME}.")
    return pins


def validate_rolls(rolls: Sequence[Any]) -> List[int]:
    """Validate a roll log against ten-pin frame rules.

    Rules:
    - ``rolls`` must be a sequence of integers (booleans are rejected)
    - Each roll knocks down between 0 and 10 pins
    - In frames 1-9 the two rolls of a frame total at most 10 pins
    - The tenth frame gets a third roll only after a strike or a spare,
      and the pins are only reset after a strike or a spare
    - No rolls are accepted once the tenth frame is finished

    An incomplete log is valid; completeness is decided when scoring.
    """

    if not isinstance(rolls, Sequence) or isinstance(rolls, (str, bytes)):
        raise ValidationError("Rolls must be provided as a sequence of integers.")

    normalized = [validate_pins(raw, index=i) for i, raw in enumerate(rolls, start=1)]

    i = 0
    for _ in range(FRAMES_PER_GAME - 1):
        if i >= len(normalized):
            return normalized
        if normalized[i] == PINS_PER_FRAME:
            i += 1
            continue
        if i + 1 < len(normalized) and normalized[i] + normalized[i + 1] > PINS_PER_FRAME:
            raise ValidationError(
                f"Roll #{i + 2} knocks down more pins than are standing."
            )
        i += 2

    tenth = normalized[i:]
    if len(tenth) < 2:
        return normalized

    first, second = tenth[0], tenth[1]
    if first < PINS_PER_FRAME and first + second > PINS_PER_FRAME:
        raise ValidationError(f"Roll #{i + 2} knocks down more pins than are standing.")

    bonus_earned = first == PINS_PER_FRAME or first + second == PINS_PER_FRAME
    if len(tenth) > 2:
        if not bonus_earned:
            raise ValidationError(f"Roll #{i + 3} is past the end of the game.")
        third = tenth[2]
        if first == PINS_PER_FRAME and second < PINS_PER_FRAME and second + third > PINS_PER_FRAME:
            raise ValidationError(
                f"Roll #{i + 3} knocks down more pins than are standing."
            )
    if len(tenth) > 3:
        raise ValidationError(f"Roll #{i + 4} is past the end of the game.")

    return normalized
