"""
Pipeline Orchestrator.

Runs column detection, aggregation, metrics, and ranking over a set of
raw rows, and applies the view filter to the latest dataset.
"""

import logging
from typing import List, Optional, Union

from src.agents.column_resolver import resolve_columns
from src.agents.aggregation import ReviewAggregator
from src.agents.metrics import derive_metrics
from src.agents.ranking import rank_restaurants
from src.agents.view_filter import filter_view
from src.models.restaurant import (
    ColumnDetectionError,
    DatasetError,
    DatasetResult,
    RestaurantStats,
    Row,
    ViewState,
)
import config.settings as settings

logger = logging.getLogger(__name__)

AnalysisResult = Union[DatasetResult, DatasetError]


class DashboardPipeline:
    """
    Orchestrates one synchronous pass over a dataset.

    Coordinates:
    1. Column Resolver → 2. Aggregator → 3. Metrics Deriver
    → 4. Ranker & Badge Assigner

    The View Filter runs separately over the last dataset, so changing
    filters does not recompute the aggregation.
    """

    def __init__(self, ranking_limit: int = settings.RANKING_LIMIT):
        """
        Initialize pipeline.

        Args:
            ranking_limit: Maximum size of the best/worst lists
        """
        self.ranking_limit = ranking_limit
        self.aggregator = ReviewAggregator()

        self._last_rows: Optional[List[Row]] = None
        self._last_result: Optional[AnalysisResult] = None

    @property
    def result(self) -> Optional[AnalysisResult]:
        """Result of the most recent analyze() call."""
        return self._last_result

    def analyze(self, rows: Optional[List[Row]]) -> Optional[AnalysisResult]:
        """
        Compute the dataset result for a set of raw rows.

        Args:
            rows: Raw rows, or None if no data has been loaded

        Returns:
            DatasetResult, DatasetError if column detection fails,
            or None when there is no input
        """
        if rows is None:
            logger.info("No rows loaded, nothing to show")
            self._last_rows = None
            self._last_result = None
            return None

        if rows is self._last_rows and self._last_result is not None:
            logger.debug("Rows unchanged, reusing previous result")
            return self._last_result

        result = self._run(rows)
        self._last_rows = rows
        self._last_result = result
        return result

    def visible(self, view: ViewState) -> Optional[List[RestaurantStats]]:
        """
        Filter the latest dataset for display.

        Returns:
            Visible restaurants, or None if there is no successful dataset
        """
        if not isinstance(self._last_result, DatasetResult):
            return None
        return filter_view(self._last_result.restaurants, view)

    def _run(self, rows: List[Row]) -> AnalysisResult:
        """Run stages 1-4 on rows."""
        logger.info(f"Analyzing {len(rows)} rows")

        # STAGE 1: Column detection
        field_names = list(rows[0].keys()) if rows else []
        try:
            selection = resolve_columns(field_names)
        except ColumnDetectionError as e:
            logger.error(f"Column detection failed: {e}")
            return DatasetError(error=str(e))

        # STAGE 2: Aggregation
        groups = self.aggregator.aggregate(rows, selection)

        # STAGE 3: Metrics
        records = derive_metrics(groups)

        # STAGE 4: Ranking and badges
        annotated, best, worst = rank_restaurants(records, limit=self.ranking_limit)

        logger.info(
            f"Analysis complete: {len(annotated)} restaurants, "
            f"{len(best)} best, {len(worst)} worst"
        )
        return DatasetResult(restaurants=annotated, best=best, worst=worst)
