"""Internal application services (pure helpers, no I/O)."""

from .validation import validate_pins
from .users import UserRegistry

__all__ = [
    "validate_pins",
    "UserRegistry",
]
