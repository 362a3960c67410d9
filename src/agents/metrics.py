"""
Metrics Deriver.

Turns per-restaurant counts into ratios, a low-volume flag,
and a risk level.
"""

import logging
from typing import Dict, List

from src.models.restaurant import (
    Accumulator,
    RestaurantStats,
    CRITICAL,
    NEEDS_IMPROVEMENT,
    MONITOR,
    HEALTHY,
)
import config.settings as settings

logger = logging.getLogger(__name__)


def risk_level(negative_ratio: float) -> str:
    """Classify a negative ratio. Thresholds are inclusive, checked highest first."""
    if negative_ratio >= settings.CRITICAL_THRESHOLD:
        return CRITICAL
    if negative_ratio >= settings.NEEDS_IMPROVEMENT_THRESHOLD:
        return NEEDS_IMPROVEMENT
    if negative_ratio >= settings.MONITOR_THRESHOLD:
        return MONITOR
    return HEALTHY


def derive_stats(name: str, group: Accumulator) -> RestaurantStats:
    """Build the unranked record for one restaurant."""
    total = group.total
    positive_ratio = group.positive / total if total else 0.0
    negative_ratio = group.negative / total if total else 0.0

    return RestaurantStats(
        name=name,
        total=total,
        positive=group.positive,
        negative=group.negative,
        positive_ratio=positive_ratio,
        negative_ratio=negative_ratio,
        low_volume=total < settings.LOW_VOLUME_THRESHOLD,
        risk_level=risk_level(negative_ratio)
    )


def derive_metrics(groups: Dict[str, Accumulator]) -> List[RestaurantStats]:
    """
    Derive records for every restaurant.

    Args:
        groups: Restaurant name -> Accumulator (from ReviewAggregator)

    Returns:
        Unranked records in the same order as groups
    """
    records = [derive_stats(name, group) for name, group in groups.items()]

    low_volume = sum(1 for r in records if r.low_volume)
    logger.info(
        f"Derived metrics for {len(records)} restaurants "
        f"({low_volume} below {settings.LOW_VOLUME_THRESHOLD} reviews)"
    )
    return records
