"""
exceptions.py

Errors raised by the huffcodec core.
"""


class HuffmanError(ValueError):
    """Base class for every huffcodec failure."""


class EmptyInputError(HuffmanError):
    """Raised when there are no symbols to build a tree from."""


class DegenerateInputError(HuffmanError):
    """Raised when single-symbol input is disabled in the coder settings."""


class MalformedBitstreamError(HuffmanError):
    """Raised when a compressed stream does not decode to a valid tree and payload."""
