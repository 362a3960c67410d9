"""
View Filter.

Selects the restaurants shown in the table for the current view state.
"""

import logging
from typing import List

from src.models.restaurant import RestaurantStats, ViewState, ALL_RISK_LEVELS

logger = logging.getLogger(__name__)


def filter_view(records: List[RestaurantStats], view: ViewState) -> List[RestaurantStats]:
    """
    Apply search, risk level, and low-volume filters (all must match).

    Args:
        records: Badge-annotated restaurants
        view: Current filter parameters

    Returns:
        Matching records in their original order
    """
    visible = list(records)

    if view.search:
        needle = view.search.lower()
        visible = [r for r in visible if needle in r.name.lower()]

    if view.risk_filter != ALL_RISK_LEVELS:
        visible = [r for r in visible if r.risk_level == view.risk_filter]

    if view.show_low_volume:
        visible = [r for r in visible if r.low_volume]

    logger.debug(f"View filter kept {len(visible)} of {len(records)} restaurants ({view})")
    return visible
