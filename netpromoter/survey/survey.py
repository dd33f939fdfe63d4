"""
Survey - keyed collection of responses for one measurement period.

Stores at most one Response per respondent id (last write wins) and
derives the Net Promoter Score from the stored ratings.
"""

import logging
from typing import (
    Any, Callable, Dict, Generic, Iterable, Iterator, List, Optional, Tuple, TypeVar
)

import config.settings as settings
from netpromoter.errors import InvalidRating, InvalidRatingsError
from netpromoter.models.rating import Classification
from netpromoter.models.response import Response
from netpromoter.survey.id_generators import SequentialIdGenerator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Survey(Generic[T]):
    """
    Aggregate container of survey responses.

    Responses are keyed by respondent id and always iterated in ascending
    id order, so identical inputs give reproducible listings.

    Score caching uses a dirty flag: every successful mutation drops the
    cached value and score() recomputes it on the next call.
    """

    def __init__(self):
        self._responses: Dict[T, Response[T]] = {}  # respondent_id -> Response
        self._score_cache: Optional[int] = None

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_responses(
        cls,
        pairs: Iterable[Tuple[T, int]],
        convert: Optional[Callable[[InvalidRating], Any]] = None
    ) -> "Survey[T]":
        """
        Build a survey from (respondent_id, raw_rating) pairs.

        Unlike add_multiple_responses, a failure here discards the partially
        built survey: only the errors reach the caller.

        Args:
            pairs: Raw (respondent_id, rating) pairs
            convert: Optional mapping applied to each collected error

        Raises:
            InvalidRatingsError: If any pair had an invalid rating
        """
        survey = cls()
        try:
            survey.add_multiple_responses(pairs)
        except InvalidRatingsError as e:
            if convert is None:
                raise
            raise InvalidRatingsError([convert(err) for err in e.errors]) from e
        return survey

    @classmethod
    def from_results(cls, items: Iterable[Any]) -> "Survey[T]":
        """
        Best-effort import from already validated items.

        Each item is either a Response or an exception (as yielded by
        parse_responses). Exceptions are skipped; their count is logged.
        """
        survey = cls()
        skipped = 0
        valid = []
        for item in items:
            if isinstance(item, Exception):
                skipped += 1
                continue
            valid.append(item)
        survey.extend(valid)
        if skipped:
            logger.warning(f"Skipped {skipped} failed item(s) during import")
        return survey

    # ------------------------------------------------------------------
    # Insertion
    # ------------------------------------------------------------------

    def add_response(self, respondent_id: T, raw_rating: int) -> None:
        """
        Insert or overwrite a single response.

        Raises:
            InvalidRating: If raw_rating is outside 0-10 (survey unchanged)
        """
        response = Response(respondent_id, raw_rating)
        self._store(response)
        logger.debug(f"Stored response for {respondent_id!r}: {response.score}")

    def add_multiple_responses(self, pairs: Iterable[Tuple[T, int]]) -> None:
        """
        Insert many responses, attempting every pair.

        Valid pairs are committed even when others in the same call fail.

        Raises:
            InvalidRatingsError: One error per invalid pair, in input order
        """
        errors = self._insert_pairs(pairs)
        if errors:
            raise InvalidRatingsError(errors)

    def add_bulk_responses(
        self,
        id_generator: Callable[[], T],
        ratings_with_counts: Iterable[Tuple[int, int]]
    ) -> None:
        """
        Insert `count` responses for each (rating, count) group.

        The generator is called exactly `count` times per group, also for
        invalid ratings, so ids are consumed either way.

        Args:
            id_generator: Zero-argument callable returning the next id
            ratings_with_counts: (raw_rating, count) pairs

        Raises:
            InvalidRatingsError: All errors across groups, group order preserved
            ValueError: If a count is negative
        """
        groups = list(ratings_with_counts)
        for rating, count in groups:
            if count < 0:
                raise ValueError(f"Invalid count for rating {rating}: {count}")

        errors: List[InvalidRating] = []
        for rating, count in groups:
            batch = [(id_generator(), rating) for _ in range(count)]
            errors.extend(self._insert_pairs(batch))

        if errors:
            raise InvalidRatingsError(errors)

    def add_bulk_responses_auto_id(
        self,
        ratings_with_counts: Iterable[Tuple[int, int]]
    ) -> None:
        """
        Bulk insert with integer ids 1, 2, 3, ... minted in call order.

        The sequence restarts at settings.AUTO_ID_START on every call, so a
        second call overwrites the ids handed out by the first.

        Raises:
            TypeError: If the survey already holds non-integer ids
            InvalidRatingsError: As for add_bulk_responses
        """
        foreign = [
            rid for rid in self._responses
            if isinstance(rid, bool) or not isinstance(rid, int)
        ]
        if foreign:
            raise TypeError(
                f"Auto ids require an integer-keyed survey, found {foreign[0]!r}"
            )
        generator = SequentialIdGenerator(start=settings.AUTO_ID_START)
        self.add_bulk_responses(generator, ratings_with_counts)

    def extend(self, responses: Iterable[Response[T]]) -> None:
        """Insert already validated responses keyed by their respondent id."""
        for response in responses:
            if not isinstance(response, Response):
                raise TypeError(f"Expected Response, got {type(response).__name__}")
            self._store(response)

    def drain(self) -> List[Tuple[T, Response[T]]]:
        """
        Remove and return every (respondent_id, response) pair in id order.
        The survey is empty afterwards.
        """
        items = [(rid, self._responses[rid]) for rid in self._ordered_ids()]
        self._responses.clear()
        self._invalidate()
        return items

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def responses(self) -> List[Response[T]]:
        """All stored responses, ordered by respondent id."""
        return [self._responses[rid] for rid in self._ordered_ids()]

    def segment(self, classification: Classification) -> List[Response[T]]:
        """Responses in the given segment, in respondent id order."""
        return [r for r in self.responses() if r.classification == classification]

    def segments(self) -> Dict[Classification, List[Response[T]]]:
        """Every classification mapped to its responses."""
        grouped: Dict[Classification, List[Response[T]]] = {c: [] for c in Classification}
        for response in self.responses():
            grouped[response.classification].append(response)
        return grouped

    def score(self) -> int:
        """
        Net Promoter Score in [-100, 100].

        Each percentage is truncated separately before subtracting:
        100 * promoters // n - 100 * detractors // n. An empty survey
        scores 0.
        """
        if self._score_cache is None:
            self._score_cache = self._calculate_score()
        return self._score_cache

    def get(self, respondent_id: T) -> Optional[Response[T]]:
        """Retrieve a response by respondent id. Returns None if not found."""
        return self._responses.get(respondent_id)

    def __len__(self) -> int:
        return len(self._responses)

    def __contains__(self, respondent_id: object) -> bool:
        return respondent_id in self._responses

    def __iter__(self) -> Iterator[Response[T]]:
        return iter(self.responses())

    def __repr__(self) -> str:
        return f"Survey(responses={len(self._responses)})"

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _insert_pairs(self, pairs: Iterable[Tuple[T, int]]) -> List[InvalidRating]:
        """Insert every valid pair; return the errors for the rest."""
        errors: List[InvalidRating] = []
        inserted = 0
        for respondent_id, raw_rating in pairs:
            try:
                response = Response(respondent_id, raw_rating)
            except InvalidRating as e:
                errors.append(e)
                continue
            self._store(response)
            inserted += 1

        logger.info(f"Inserted {inserted} response(s), survey now holds {len(self)}")
        if errors:
            logger.warning(f"Rejected {len(errors)} response(s) with invalid ratings")
        return errors

    def _store(self, response: Response[T]) -> None:
        self._responses[response.respondent_id] = response
        self._invalidate()

    def _invalidate(self) -> None:
        self._score_cache = None

    def _ordered_ids(self) -> List[T]:
        return sorted(self._responses)

    def _calculate_score(self) -> int:
        total = len(self._responses)
        if total == 0:
            return 0

        promoters = len(self.segment(Classification.PROMOTER))
        detractors = len(self.segment(Classification.DETRACTOR))

        promoter_percent = 100 * promoters // total
        detractor_percent = 100 * detractors // total
        return promoter_percent - detractor_percent
