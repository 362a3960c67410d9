"""
Review Aggregator.

Groups raw review rows by restaurant name and counts
total, positive, and negative reviews.
"""

import logging
import re
from typing import Dict, Iterable, Optional

from src.models.restaurant import Accumulator, ColumnSelection, Row
import config.settings as settings

logger = logging.getLogger(__name__)

# Numeric cell formats accepted by spreadsheet exports
DECIMAL_PATTERN = re.compile(r"^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$")
INFINITY_PATTERN = re.compile(r"^[+-]?Infinity$")
PREFIXED_INT_PATTERN = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")


def parse_rating(raw: Optional[str]) -> Optional[float]:
    """
    Parse a rating cell.

    A blank cell reads as 0, which counts toward total but neither band.
    Decimal, scientific, Infinity, and 0x/0o/0b integer forms are accepted.

    Returns:
        Rating as float, or None if the cell is not numeric
    """
    text = (raw or "").strip()
    if not text:
        return 0.0
    if DECIMAL_PATTERN.match(text) or INFINITY_PATTERN.match(text):
        return float(text.replace("Infinity", "inf"))
    if PREFIXED_INT_PATTERN.match(text):
        return float(int(text, 0))
    return None


class ReviewAggregator:
    """
    Counts reviews per restaurant for a single dataset.

    Each call to aggregate() starts from empty accumulators.
    """

    def __init__(
        self,
        positive_range=settings.POSITIVE_RATING_RANGE,
        negative_range=settings.NEGATIVE_RATING_RANGE
    ):
        """
        Initialize aggregator.

        Args:
            positive_range: Inclusive (low, high) rating band counted as positive
            negative_range: Inclusive (low, high) rating band counted as negative
        """
        self.positive_range = positive_range
        self.negative_range = negative_range
        self.last_skipped = {"empty_name": 0, "invalid_rating": 0}

    def aggregate(
        self,
        rows: Iterable[Row],
        selection: ColumnSelection
    ) -> Dict[str, Accumulator]:
        """
        Aggregate rows into per-restaurant counts.

        Args:
            rows: Raw rows (field name -> string value)
            selection: Resolved name and rating fields

        Returns:
            Dict of restaurant name -> Accumulator, in first-seen order
        """
        groups: Dict[str, Accumulator] = {}
        skipped = {"empty_name": 0, "invalid_rating": 0}
        row_count = 0

        for row in rows:
            row_count += 1
            name = (row.get(selection.name_field) or "").strip()
            if not name:
                skipped["empty_name"] += 1
                logger.debug(f"Skipping row {row_count}: empty name")
                continue

            rating = parse_rating(row.get(selection.rating_field))
            if rating is None:
                skipped["invalid_rating"] += 1
                logger.debug(
                    f"Skipping row {row_count}: non-numeric rating "
                    f"{row.get(selection.rating_field)!r}"
                )
                continue

            group = groups.setdefault(name, Accumulator())
            group.total += 1
            if self.positive_range[0] <= rating <= self.positive_range[1]:
                group.positive += 1
            if self.negative_range[0] <= rating <= self.negative_range[1]:
                group.negative += 1

        self.last_skipped = skipped

        logger.info(
            f"Aggregated {row_count} rows into {len(groups)} restaurants "
            f"(skipped {skipped['empty_name']} with empty name, "
            f"{skipped['invalid_rating']} with invalid rating)"
        )

        return groups


# Notes:
#
# 1. Grouping uses the trimmed name as-is. No case folding or punctuation
#    cleanup, so near-duplicate spellings stay separate restaurants.
#
# 2. A rating of 3, or anything outside 1-5, still counts toward total.
#    That keeps positive + negative <= total and lowers both ratios.
#
# 3. A blank or missing rating cell reads as 0: it counts toward total only.
#    Text such as "n/a", "inf", or "1_0" is not a number and the row is skipped.
