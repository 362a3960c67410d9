"""
Report utility.

Text rendering of a dataset result and CSV/metadata export.
"""

import json
import logging
import os
from datetime import datetime, timezone
from typing import List, Optional

import pandas as pd

from src.models.restaurant import DatasetResult, RestaurantStats
import config.settings as settings

logger = logging.getLogger(__name__)

EMPTY_RANKING_MESSAGE = "No ranked restaurants (not enough data or sheet empty)."

EXPORT_COLUMNS = [
    "name", "total", "positive", "negative",
    "positive_ratio", "negative_ratio", "lowVolume", "riskLevel", "badge"
]

NOTES = [
    "positive_ratio = count(rating 4-5) / total reviews",
    "negative_ratio = count(rating 1-2) / total reviews",
    f"Low Volume = restaurants with < {settings.LOW_VOLUME_THRESHOLD} reviews (these are not ranked)",
    "Risk levels applied to negative_ratio: >=40% Critical, 20-39% Needs Improvement, "
    "10-19% Monitor, <10% Healthy",
    "Average rating is not used anywhere.",
]


def percent(ratio: float) -> int:
    """Ratio as a whole percentage, halves rounded up."""
    return int(ratio * 100 + 0.5)


def _format_best(best: List[RestaurantStats]) -> List[str]:
    lines = [f"Top {settings.RANKING_LIMIT} - Best Restaurants (by positive ratio)"]
    if not best:
        return lines + [f"  {EMPTY_RANKING_MESSAGE}"]
    for i, r in enumerate(best, start=1):
        lines.append(
            f"  {i}. {r.name} - {percent(r.positive_ratio)}% positive, "
            f"{r.total} reviews [{r.badge or r.risk_level}] ({r.risk_level})"
        )
    return lines


def _format_worst(worst: List[RestaurantStats]) -> List[str]:
    lines = [f"Top {settings.RANKING_LIMIT} - Worst Restaurants (by negative ratio)"]
    if not worst:
        return lines + [f"  {EMPTY_RANKING_MESSAGE}"]
    for i, r in enumerate(worst, start=1):
        lines.append(
            f"  {i}. {r.name} - {percent(r.negative_ratio)}% negative, "
            f"{r.total} reviews [{r.badge or r.risk_level}]"
        )
    return lines


def _format_table(records: List[RestaurantStats]) -> List[str]:
    lines = ["All Restaurants"]
    if not records:
        return lines + ["  No restaurants match the current filters."]
    for r in records:
        line = (
            f"  {r.name} | {r.total} reviews | "
            f"+{percent(r.positive_ratio)}% / -{percent(r.negative_ratio)}% | "
            f"{r.risk_level}"
        )
        if r.badge:
            line += f" | {r.badge}"
        lines.append(line)
    return lines


def format_report(
    result: DatasetResult,
    visible: Optional[List[RestaurantStats]] = None
) -> str:
    """
    Render the dashboard as plain text.

    Args:
        result: Dataset result from DashboardPipeline
        visible: Filtered restaurants for the table (defaults to all)

    Returns:
        Multi-line report
    """
    table = result.restaurants if visible is None else visible

    sections = [
        _format_best(result.best),
        _format_worst(result.worst),
        _format_table(table),
        ["Notes:"] + [f"  - {note}" for note in NOTES],
    ]
    return "\n\n".join("\n".join(section) for section in sections)


def export_report(
    result: DatasetResult,
    output_dir: str,
    stem: str = "csat_report"
) -> str:
    """
    Export all restaurants to CSV with a metadata JSON alongside.

    Args:
        result: Dataset result to export
        output_dir: Directory for the output files
        stem: File name without extension

    Returns:
        Path to the CSV file
    """
    df = pd.DataFrame(
        [r.to_dict() for r in result.restaurants],
        columns=EXPORT_COLUMNS
    )

    os.makedirs(output_dir, exist_ok=True)
    output_path = os.path.join(output_dir, f"{stem}.csv")
    df.to_csv(output_path, index=False)

    logger.info(f"Report saved to {output_path} ({len(df)} restaurants)")

    metadata_path = os.path.join(output_dir, f"{stem}_metadata.json")
    metadata = {
        "total_restaurants": len(result.restaurants),
        "low_volume_restaurants": sum(1 for r in result.restaurants if r.low_volume),
        "best": [r.name for r in result.best],
        "worst": [r.name for r in result.worst],
        "thresholds": {
            "low_volume": settings.LOW_VOLUME_THRESHOLD,
            "critical": settings.CRITICAL_THRESHOLD,
            "needs_improvement": settings.NEEDS_IMPROVEMENT_THRESHOLD,
            "monitor": settings.MONITOR_THRESHOLD
        },
        "generated_at": datetime.now(timezone.utc).isoformat()
    }

    with open(metadata_path, 'w') as f:
        json.dump(metadata, f, indent=2)

    logger.info(f"Metadata saved to {metadata_path}")

    return output_path
