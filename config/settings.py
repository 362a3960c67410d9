"""
Configuration settings for CSAT Pulse.

Centralized configuration for column detection, classification thresholds,
and pipeline defaults.
"""

import os
from pathlib import Path

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
OUTPUT_ROOT = PROJECT_ROOT / "output"

# Data source
GOOGLE_SHEET_ID = os.getenv("GOOGLE_SHEET_ID", "")
SHEETS_CSV_URL_TEMPLATE = "https://docs.google.com/spreadsheets/d/{sheet_id}/gviz/tq?tqx=out:csv"

# Column detection (candidate order matters for the exact-match pass)
NAME_COLUMN_CANDIDATES = ["restaurant", "name", "store", "venue", "location"]
RATING_COLUMN_CANDIDATES = ["rating", "score", "stars", "rate"]

# Rating bands (inclusive)
POSITIVE_RATING_RANGE = (4, 5)
NEGATIVE_RATING_RANGE = (1, 2)

# Ranking
LOW_VOLUME_THRESHOLD = 10  # Restaurants with fewer reviews are not ranked
RANKING_LIMIT = 10  # Size of the best/worst lists

# Risk thresholds on negative_ratio (inclusive lower bounds)
CRITICAL_THRESHOLD = 0.4
NEEDS_IMPROVEMENT_THRESHOLD = 0.2
MONITOR_THRESHOLD = 0.1

# Ingestion
USE_MOCK_DATA = False
MOCK_REVIEWS_PER_RESTAURANT = 20

# Logging
LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# Notes:
#
# 1. Thresholds are fixed numbers, not statistical tests. A restaurant with
#    9 reviews is excluded from ranking no matter how extreme its ratios are.
#
# 2. The risk thresholds are checked from highest to lowest. Changing one
#    value must keep CRITICAL > NEEDS_IMPROVEMENT > MONITOR or the levels
#    stop partitioning [0, 1].
