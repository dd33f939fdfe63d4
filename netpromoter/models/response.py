"""
Survey response data model.

Represents one participant's answer: a caller-chosen respondent id
paired with a validated Rating.
"""

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Tuple, TypeVar, Union

from netpromoter.errors import InvalidRating
from netpromoter.models.rating import Classification, Rating

T = TypeVar("T")


@dataclass(frozen=True, order=True)
class Response(Generic[T]):
    """
    Immutable survey response.
    Orders by respondent_id first, then by score.
    """
    respondent_id: T
    score: Rating

    def __post_init__(self):
        # Accept raw integers and validate them; frozen, so bypass __setattr__
        object.__setattr__(self, "score", Rating.try_from(self.score))

    @classmethod
    def new(cls, respondent_id: T, raw_rating: Union[int, Rating]) -> "Response[T]":
        """
        Build a response from a raw rating.

        Raises:
            InvalidRating: If raw_rating is outside 0-10
        """
        return cls(respondent_id, raw_rating)

    @property
    def classification(self) -> Classification:
        return Classification.from_rating(self.score)


def parse_responses(
    pairs: Iterable[Tuple[T, Any]]
) -> Iterator[Union[Response[T], InvalidRating]]:
    """
    Validate (respondent_id, raw_rating) pairs one by one.

    Yields a Response for each valid pair and the InvalidRating error for
    each invalid one, preserving input order. Feed the result into
    Survey.from_results for a best-effort import.
    """
    for respondent_id, raw_rating in pairs:
        try:
            yield Response(respondent_id, raw_rating)
        except InvalidRating as e:
            yield e
