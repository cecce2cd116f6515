"""
Exceptions raised by the seam carving core.

Both concrete errors also derive from ValueError, so callers that only
guard against bad arguments keep working.
"""


class SeamCarvingError(Exception):
    """Base class for seam carving failures."""


class DimensionExhaustedError(SeamCarvingError, ValueError):
    """More seams were requested than the image can lose.

    Removing ``requested`` seams must leave at least one column (vertical)
    or row (horizontal), so ``requested`` has to be below ``available``.
    """

    def __init__(self, direction: str, requested: int, available: int):
        self.direction = direction
        self.requested = requested
        self.available = available
        axis = 'width' if direction == 'vertical' else 'height'
        super().__init__(
            f"Cannot remove {requested} {direction} seams from an image of "
            f"{axis} {available}"
        )


class InvalidSeamMaskError(SeamCarvingError, ValueError):
    """A seam mask does not mark exactly one pixel per row/column."""
