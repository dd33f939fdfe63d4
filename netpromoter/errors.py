"""
Error types for netpromoter.

A single failure mode exists: a raw rating outside the 0-10 scale.
Batch operations collect those failures into one aggregate error.
"""

from typing import Any, List


class InvalidRating(ValueError):
    """Raised when a raw rating falls outside the valid scale."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(value)

    def __str__(self):
        return f"Invalid rating value: {self.value}"

    def __eq__(self, other):
        if not isinstance(other, InvalidRating):
            return NotImplemented
        return self.value == other.value

    def __hash__(self):
        return hash((InvalidRating, self.value))


class InvalidRatingsError(ValueError):
    """
    Raised by batch operations when one or more items were rejected.

    Valid items from the same batch have already been committed by the time
    this is raised (except on the Survey.from_responses path).
    """

    def __init__(self, errors: List[Any]):
        self.errors = list(errors)
        super().__init__(self.errors)

    def __str__(self):
        return f"{len(self.errors)} invalid rating(s): " + ", ".join(
            str(getattr(e, "value", e)) for e in self.errors
        )

    def __len__(self):
        return len(self.errors)

    def __iter__(self):
        return iter(self.errors)
