"""
Ingestion Agent.

Loads raw review rows from a Google Sheet (CSV export), a local CSV file,
or a deterministic mock generator for demos and tests.
"""

import logging
import os
from typing import List, Optional

import pandas as pd

from src.models.restaurant import Row
import config.settings as settings

logger = logging.getLogger(__name__)


class IngestionError(RuntimeError):
    """Raised when review rows cannot be loaded."""


# Mock restaurants: (name, rating cycle, review count override)
MOCK_RESTAURANTS = [
    ("Harbor Grill", [5, 5, 4, 5, 4, 5, 5, 4, 5, 3], None),
    ("Luigi's Trattoria", [5, 4, 4, 3, 5, 4, 2, 5, 4, 4], None),
    ("Noodle Bar 88", [4, 2, 5, 3, 1, 4, 4, 2, 3, 5], None),
    ("Burger Shack", [1, 2, 5, 1, 3, 2, 4, 1, 2, 3], None),
    ("Green Bowl", [5, 4, 5, 5, 4, 4, 5, 5, 4, 5], None),
    ("Taco Corner", [1, 1, 2, 5], 4),
]

MOCK_COMMENTS = {
    1: "Cold food and we waited forever.",
    2: "Order was wrong and staff seemed rushed.",
    3: "It was fine, nothing special.",
    4: "Good food, friendly service.",
    5: "Fantastic meal, will come back!",
}


class IngestionAgent:
    """
    Fetches review rows for the dashboard.

    Rows are returned as plain dicts of strings. Column detection and
    per-row validation happen later in the pipeline.
    """

    def __init__(self, use_mock_data: bool = False):
        """
        Initialize ingestion agent.

        Args:
            use_mock_data: If True, fetch_sheet() returns mock rows
        """
        self.use_mock_data = use_mock_data

        if use_mock_data:
            logger.info("Initialized IngestionAgent in MOCK mode")
        else:
            logger.info("Initialized IngestionAgent in REAL mode")

    @staticmethod
    def sheet_csv_url(sheet_id: str) -> str:
        """Build the CSV export URL for the first sheet of a Google Sheet."""
        return settings.SHEETS_CSV_URL_TEMPLATE.format(sheet_id=sheet_id.strip())

    def fetch_sheet(self, sheet_id: str) -> List[Row]:
        """
        Fetch rows from a Google Sheet.

        Args:
            sheet_id: Sheet ID (not the full URL)

        Returns:
            List of raw rows

        Raises:
            IngestionError: If the ID is missing or the fetch fails
        """
        if self.use_mock_data:
            return self.generate_mock_rows()

        if not sheet_id or not sheet_id.strip():
            raise IngestionError("Please provide a Google Sheets ID.")

        url = self.sheet_csv_url(sheet_id)
        logger.info(f"Fetching sheet {sheet_id.strip()} as CSV")

        try:
            rows = self._read_csv(url)
        except Exception as e:
            logger.error(f"Failed to fetch sheet {sheet_id}: {e}")
            raise IngestionError(f"Failed to fetch sheet: {e}") from e

        logger.info(f"Fetched {len(rows)} rows from sheet {sheet_id.strip()}")
        return rows

    def load_csv(self, path: str) -> List[Row]:
        """
        Load rows from a local CSV file.

        Raises:
            IngestionError: If the file is missing or unreadable
        """
        if not os.path.exists(path):
            raise IngestionError(f"CSV file not found: {path}")

        try:
            rows = self._read_csv(path)
        except Exception as e:
            logger.error(f"Failed to read {path}: {e}")
            raise IngestionError(f"Failed to read CSV {path}: {e}") from e

        logger.info(f"Loaded {len(rows)} rows from {path}")
        return rows

    def _read_csv(self, source: str) -> List[Row]:
        """Parse CSV with a header row, keeping every cell as a string."""
        try:
            df = pd.read_csv(
                source,
                dtype=str,
                keep_default_na=False,
                skip_blank_lines=True
            )
        except pd.errors.EmptyDataError:
            logger.warning(f"No CSV content in {source}")
            return []

        df.columns = [str(col) for col in df.columns]
        return df.to_dict(orient="records")

    def generate_mock_rows(
        self,
        reviews_per_restaurant: Optional[int] = None
    ) -> List[Row]:
        """
        Generate synthetic review rows.

        Covers every risk level plus one low-volume restaurant.
        Output is deterministic.
        """
        count = reviews_per_restaurant or settings.MOCK_REVIEWS_PER_RESTAURANT
        rows = []

        for name, ratings, override in MOCK_RESTAURANTS:
            for i in range(override or count):
                rating = ratings[i % len(ratings)]
                rows.append({
                    "restaurant": name,
                    "rating": str(rating),
                    "comment": MOCK_COMMENTS[rating]
                })

        logger.info(f"Generated {len(rows)} mock rows for {len(MOCK_RESTAURANTS)} restaurants")
        return rows
