"""
Segment counting and tabular views of a survey.

Hands survey contents to report layers as plain dicts or pandas
DataFrames. Nothing here writes files.
"""

import logging
from collections import Counter
from typing import Dict

import pandas as pd

from netpromoter.models.rating import Classification
from netpromoter.survey.survey import Survey

logger = logging.getLogger(__name__)

SEGMENT_COLUMNS = ["Segment", "Count", "Percent"]
RESPONSE_COLUMNS = ["respondent_id", "rating", "classification"]


class SegmentCounter:
    """
    Counts responses per classification for a single survey.
    """

    def count(self, survey: Survey) -> Dict:
        """
        Count segment membership.

        Returns:
            Dict with total_responses and a segment_counts mapping of
            classification label to count (all three labels present)
        """
        counts = Counter(response.classification for response in survey)

        count_data = {
            "total_responses": len(survey),
            "segment_counts": {c.label: counts.get(c, 0) for c in Classification},
            "score": survey.score(),
        }

        logger.info(
            f"Counted {count_data['total_responses']} responses "
            f"(score: {count_data['score']})"
        )

        return count_data


def segment_table(survey: Survey) -> pd.DataFrame:
    """
    One row per classification, Detractor first.

    Percent uses the same truncating integer division as Survey.score(),
    so Promoter Percent minus Detractor Percent equals the score.
    """
    count_data = SegmentCounter().count(survey)
    total = count_data["total_responses"]

    rows = []
    for classification in Classification:
        count = count_data["segment_counts"][classification.label]
        rows.append({
            "Segment": classification.label,
            "Count": count,
            "Percent": 100 * count // total if total else 0,
        })

    return pd.DataFrame(rows, columns=SEGMENT_COLUMNS)


def responses_frame(survey: Survey) -> pd.DataFrame:
    """Every stored response as a row, in respondent id order."""
    rows = [
        {
            "respondent_id": response.respondent_id,
            "rating": int(response.score),
            "classification": response.classification.label,
        }
        for response in survey
    ]

    if not rows:
        logger.warning("Survey is empty, creating empty response table")
        return pd.DataFrame(columns=RESPONSE_COLUMNS)

    return pd.DataFrame(rows, columns=RESPONSE_COLUMNS)
