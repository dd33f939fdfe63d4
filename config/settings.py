"""
Configuration settings for netpromoter.

Centralized constants for the rating scale and survey behaviour.
"""

import os

# Rating scale (inclusive)
MIN_RATING = 0
MAX_RATING = 10

# Classification boundaries (inclusive upper bounds)
DETRACTOR_MAX = 6  # 0-6 are detractors
PASSIVE_MAX = 8  # 7-8 are passives, everything above is a promoter

# Auto-generated respondent ids start here on every bulk call
AUTO_ID_START = int(os.getenv("NPS_AUTO_ID_START", "1"))
