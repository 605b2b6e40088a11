import pytest
from tenpin.scoring.validation import validate_pins, validate_rolls, ValidationError


def test_accepts_valid_logs() -> None:
    assert validate_rolls([10] * 12) == [10] * 12
    validate_rolls([10, 7, 3, 9, 0, 10, 0, 8, 8, 2, 0, 6, 10, 10, 10, 8, 1])
    validate_rolls([0] * 18 + [10, 10, 10])
    validate_rolls([0] * 18 + [10, 3, 7])
    validate_rolls([0] * 18 + [7, 3, 10])


def test_accepts_unfinished_logs() -> None:
    assert validate_rolls([]) == []
    validate_rolls([10, 3])
    validate_rolls([0] * 18 + [10])


@pytest.mark.parametrize(
    "rolls, msg",
    [
        ([11], "<= 10"),                              # too many pins
        ([-1], ">= 0"),                               # negative
        ([True], "integer"),                          # boolean
        (["5"], "integer"),                           # string roll
        ("5555", "sequence of integers"),             # wrong top-level type
        ([6, 6], "roll #2 knocks down more pins"),    # impossible frame
        ([0] * 18 + [6, 5], "roll #20 knocks down"),  # impossible tenth frame
        ([0] * 18 + [3, 4, 1], "roll #21 is past"),   # no bonus earned
        ([0] * 18 + [10, 3, 8], "roll #21 knocks"),   # bonus pins not reset
        ([10] * 13, "roll #13 is past"),              # rolls after the game
    ],
    ids=[
        "too-many-pins",
        "negative",
        "boolean",
        "string-roll",
        "not-a-sequence",
        "impossible-frame",
        "impossible-tenth",
        "no-bonus-earned",
        "bonus-pins-not-reset",
        "after-game-over",
    ],
)
def test_rejects_invalid_logs(rolls, msg) -> None:
    with pytest.raises(ValidationError) as exc:
        validate_rolls(rolls)  # type: ignore[arg-type]
    assert msg.lower() in str(exc.value).lower()


def test_validate_pins_names_the_roll() -> None:
    assert validate_pins(7) == 7
    with pytest.raises(ValidationError, match="Roll #3"):
        validate_pins(12, index=3)
