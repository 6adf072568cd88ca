"""
validators.py

Shared codes for input validation in huffcodec.
"""


from typing import Any

def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_bit(bit: Any) -> None:
    """Validate that bit is 0 or 1."""
    if bit not in (0, 1):
        raise ValueError("Bit must be 0 or 1")


def validate_byte_value(value: Any, name: str) -> None:
    """Validate that value fits in one unsigned byte."""
    validate_type(value, name, int)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be between 0 and 255")
