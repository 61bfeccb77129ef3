import pytest

from tenpin.exceptions import InvalidRoll
from tenpin.services.validation import validate_pins


@pytest.mark.parametrize("pins, expected", [(0, 0), (10, 10), ("7", 7), (4.0, 4)])
def test_accepts_valid_pins(pins, expected) -> None:
    assert validate_pins(pins) == expected


@pytest.mark.parametrize(
    "pins, msg",
    [
        (-1, "between 0 and 10"),
        (11, "between 0 and 10"),
        (True, "not a boolean"),
        ("x", "integer"),
        (None, "integer"),
        (3.5, "integer"),
    ],
    ids=["negative", "too-many", "boolean", "non-integer", "none", "fractional"],
)
def test_rejects_invalid_pins(pins, msg) -> None:
    with pytest.raises(InvalidRoll) as exc:
        validate_pins(pins)
    assert msg.lower() in str(exc.value).lower()


def test_custom_max_value() -> None:
    with pytest.raises(InvalidRoll, match="between 0 and 5"):
        validate_pins(6, max_value=5)
