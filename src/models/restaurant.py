"""
Restaurant data models.

Column selection, per-restaurant accumulators, derived statistics,
dataset results, and the view filter state.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


# Risk levels (derived from negative_ratio)
CRITICAL = "Critical"
NEEDS_IMPROVEMENT = "Needs Improvement"
MONITOR = "Monitor"
HEALTHY = "Healthy"
RISK_LEVELS = (CRITICAL, NEEDS_IMPROVEMENT, MONITOR, HEALTHY)
ALL_RISK_LEVELS = "All"  # View filter sentinel

# Badges
BADGE_LOW_VOLUME = "Low Volume – Not Ranked"
BADGE_TOP_PERFORMER = "Top Performer"
BADGE_CRITICAL = "Critical"
BADGE_NEEDS_IMPROVEMENT = "Needs Improvement"

# A raw row as delivered by the data source: field name -> field value.
# The first row's keys define the schema.
Row = Dict[str, str]

COLUMN_DETECTION_ERROR = (
    'Could not detect name or rating column. '
    'Expected columns like "restaurant" and "rating".'
)


class ColumnDetectionError(ValueError):
    """Raised when the name or rating column cannot be identified."""

    def __init__(self, message: str = COLUMN_DETECTION_ERROR):
        super().__init__(message)


@dataclass(frozen=True)
class ColumnSelection:
    """Field names used as restaurant name and rating."""
    name_field: str
    rating_field: str


@dataclass
class Accumulator:
    """
    Running review counts for a single restaurant.
    Ratings outside both bands only count toward total.
    """
    total: int = 0
    positive: int = 0
    negative: int = 0


@dataclass(frozen=True)
class RestaurantStats:
    """
    Final per-restaurant record.
    Immutable. The ranker attaches the badge by building a copy.
    """
    name: str
    total: int
    positive: int
    negative: int
    positive_ratio: float
    negative_ratio: float
    low_volume: bool
    risk_level: str
    badge: Optional[str] = None

    def __post_init__(self):
        # Validate risk level
        if self.risk_level not in RISK_LEVELS:
            raise ValueError(
                f"Invalid risk level: {self.risk_level}. Must be one of {', '.join(RISK_LEVELS)}"
            )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "name": self.name,
            "total": self.total,
            "positive": self.positive,
            "negative": self.negative,
            "positive_ratio": self.positive_ratio,
            "negative_ratio": self.negative_ratio,
            "lowVolume": self.low_volume,
            "riskLevel": self.risk_level,
            "badge": self.badge
        }


@dataclass
class DatasetResult:
    """Annotated restaurants plus the two ranked lists."""
    restaurants: List[RestaurantStats] = field(default_factory=list)
    best: List[RestaurantStats] = field(default_factory=list)
    worst: List[RestaurantStats] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "all": [r.to_dict() for r in self.restaurants],
            "best": [r.to_dict() for r in self.best],
            "worst": [r.to_dict() for r in self.worst]
        }


@dataclass
class DatasetError:
    """Pipeline result when column detection fails."""
    error: str

    def to_dict(self) -> dict:
        return {"error": self.error}


@dataclass
class ViewState:
    """User-controlled filter parameters for the restaurant table."""
    search: str = ""
    risk_filter: str = ALL_RISK_LEVELS
    show_low_volume: bool = False

    def __post_init__(self):
        if self.risk_filter != ALL_RISK_LEVELS and self.risk_filter not in RISK_LEVELS:
            raise ValueError(
                f"Invalid risk filter: {self.risk_filter}. "
                f"Must be '{ALL_RISK_LEVELS}' or one of {', '.join(RISK_LEVELS)}"
            )


# Notes:
#
# 1. Restaurant names are the grouping key exactly as trimmed. "Joe's Diner"
#    and "joe's diner" are two restaurants.
#
# 2. to_dict() emits lowVolume/riskLevel (camelCase) next to the snake_case
#    ratio keys. Export consumers read those exact names.
