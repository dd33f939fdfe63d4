"""
netpromoter - Net Promoter Score aggregation.

Validates 0-10 ratings, classifies respondents into Detractors, Passives
and Promoters, and computes the survey score in [-100, 100].
"""

from netpromoter.errors import InvalidRating, InvalidRatingsError
from netpromoter.models.rating import Classification, Rating, classify
from netpromoter.models.response import Response, parse_responses
from netpromoter.survey.id_generators import SequentialIdGenerator
from netpromoter.survey.survey import Survey

__all__ = [
    "Classification",
    "InvalidRating",
    "InvalidRatingsError",
    "Rating",
    "Response",
    "SequentialIdGenerator",
    "Survey",
    "classify",
    "parse_responses",
]
