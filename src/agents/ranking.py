"""
Ranker and Badge Assigner.

Builds the best/worst lists among restaurants with enough reviews
and annotates every restaurant with a display badge.
"""

import logging
from dataclasses import replace
from typing import List, Optional, Set, Tuple

from src.models.restaurant import (
    RestaurantStats,
    BADGE_LOW_VOLUME,
    BADGE_TOP_PERFORMER,
    BADGE_CRITICAL,
    BADGE_NEEDS_IMPROVEMENT,
)
import config.settings as settings

logger = logging.getLogger(__name__)


def assign_badge(record: RestaurantStats, best_names: Set[str]) -> Optional[str]:
    """
    Pick the badge for a restaurant. First match wins:
    low volume, top performer, critical, needs improvement.
    """
    if record.low_volume:
        return BADGE_LOW_VOLUME
    if record.name in best_names:
        return BADGE_TOP_PERFORMER
    if record.negative_ratio >= settings.CRITICAL_THRESHOLD:
        return BADGE_CRITICAL
    if record.negative_ratio >= settings.NEEDS_IMPROVEMENT_THRESHOLD:
        return BADGE_NEEDS_IMPROVEMENT
    return None


def rank_restaurants(
    records: List[RestaurantStats],
    limit: int = settings.RANKING_LIMIT
) -> Tuple[List[RestaurantStats], List[RestaurantStats], List[RestaurantStats]]:
    """
    Rank restaurants and assign badges.

    Args:
        records: Unranked records (from derive_metrics)
        limit: Maximum size of each ranked list

    Returns:
        (annotated, best, worst). annotated holds badge-carrying copies of
        every record in input order; best and worst reference those copies.
    """
    eligible = [r for r in records if not r.low_volume]

    # sorted() is stable, so ties keep input order
    best = sorted(eligible, key=lambda r: r.positive_ratio, reverse=True)[:limit]
    worst = sorted(eligible, key=lambda r: r.negative_ratio, reverse=True)[:limit]

    best_names = {r.name for r in best}
    annotated = [replace(r, badge=assign_badge(r, best_names)) for r in records]

    by_name = {r.name: r for r in annotated}
    best = [by_name[r.name] for r in best]
    worst = [by_name[r.name] for r in worst]

    if not eligible:
        logger.warning(
            f"No restaurants with at least {settings.LOW_VOLUME_THRESHOLD} reviews, "
            f"rankings are empty"
        )
    else:
        logger.info(
            f"Ranked {len(eligible)} of {len(records)} restaurants "
            f"(best={len(best)}, worst={len(worst)})"
        )

    return annotated, best, worst


# Notes:
#
# 1. Badges and worst-list membership are computed independently. A
#    restaurant can sit in the worst ten with a negative ratio under 0.2
#    and carry no badge.
#
# 2. Low-volume restaurants never enter either list, whatever their ratios.
