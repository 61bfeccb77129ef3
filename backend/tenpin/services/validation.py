from typing import Any

from ..exceptions import InvalidRoll

MAX_PINS = 10


def validate_pins(pins: Any, *, max_value: int = MAX_PINS) -> int:
    """Validate a single roll and return it as an ``int``.

    Rules:
    - Booleans are rejected (``bool`` is a subclass of ``int`` in Python)
    - The value must be an integer (integral strings are accepted)
    - The value must be between 0 and ``max_value`` inclusive
    """

    if isinstance(pins, bool):
        raise InvalidRoll("Pins must be an integer (not a boolean).")
    if isinstance(pins, float) and not pins.is_integer():
        raise InvalidRoll("Pins must be an integer.")
    try:
        value = int(pins)
    except (TypeError, ValueError):
        raise InvalidRoll("Pins must be an integer.")

    if not 0 <= value <= max_value:
        raise InvalidRoll(f"Pins must be between 0 and {max_value}.")
    return value
