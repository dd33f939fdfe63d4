"""
Rating and Classification data models.

A Rating is a validated 0-10 answer to the "how likely are you to
recommend" question. Classification is derived from it, never stored.
"""

import numbers
from dataclasses import dataclass
from enum import IntEnum

import config.settings as settings
from netpromoter.errors import InvalidRating


@dataclass(frozen=True, order=True)
class Rating:
    """
    Validated NPS rating.
    Compares and orders by its integer value.
    """
    value: int

    def __post_init__(self):
        # bool is an int subclass but never a meaningful rating
        if isinstance(self.value, bool) or not isinstance(self.value, numbers.Integral):
            raise TypeError(
                f"Rating must be an integer, got {type(self.value).__name__}"
            )
        if not (settings.MIN_RATING <= self.value <= settings.MAX_RATING):
            raise InvalidRating(self.value)
        # numpy and other integral types are stored as plain int
        object.__setattr__(self, "value", int(self.value))

    @classmethod
    def try_from(cls, raw: int) -> "Rating":
        """
        Convert a raw integer into a Rating.

        Raises:
            InvalidRating: If raw is outside 0-10
            TypeError: If raw is not an integer
        """
        if isinstance(raw, cls):
            return raw
        return cls(raw)

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __str__(self):
        return str(self.value)


class Classification(IntEnum):
    """Loyalty segment, ordered Detractor < Passive < Promoter."""
    DETRACTOR = 0
    PASSIVE = 1
    PROMOTER = 2

    @classmethod
    def from_rating(cls, rating: Rating) -> "Classification":
        if rating.value <= settings.DETRACTOR_MAX:
            return cls.DETRACTOR
        if rating.value <= settings.PASSIVE_MAX:
            return cls.PASSIVE
        return cls.PROMOTER

    @property
    def label(self) -> str:
        return self.name.capitalize()


def classify(rating: Rating) -> Classification:
    """Map a Rating onto its loyalty segment."""
    return Classification.from_rating(rating)
