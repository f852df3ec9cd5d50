"""
Error types shared by the PSF codec and the editor.
"""


class FormatError(ValueError):
    """Raised when font data is not a readable PSF1 file."""


class InvariantViolation(AssertionError):
    """Raised when a bitmap is accessed or shrunk outside its bounds.

    These indicate a programming error and are never caught by the editor.
    """
