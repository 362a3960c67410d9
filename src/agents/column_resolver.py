"""
Column Resolver.

Detects which fields hold the restaurant name and the rating
from the header of a review sheet.
"""

import logging
from typing import List, Optional, Sequence

from src.models.restaurant import ColumnSelection, ColumnDetectionError
import config.settings as settings

logger = logging.getLogger(__name__)


def find_column(field_names: Sequence[str], candidates: List[str]) -> Optional[str]:
    """
    Find the field matching one of the candidate keywords.

    Exact (case-insensitive) matches win, checked in candidate order.
    Otherwise the first field, in field order, containing any candidate
    as a substring is returned.

    Args:
        field_names: Field names in header order
        candidates: Keywords in priority order

    Returns:
        Matching field name, or None
    """
    lowered = [name.lower() for name in field_names]

    for candidate in candidates:
        candidate = candidate.lower()
        if candidate in lowered:
            return field_names[lowered.index(candidate)]

    for name, lower_name in zip(field_names, lowered):
        for candidate in candidates:
            if candidate.lower() in lower_name:
                return name

    return None


def resolve_columns(
    field_names: Sequence[str],
    name_candidates: List[str] = None,
    rating_candidates: List[str] = None
) -> ColumnSelection:
    """
    Resolve the name and rating fields for a dataset.

    Args:
        field_names: Keys of the first raw row, in order
        name_candidates: Override for settings.NAME_COLUMN_CANDIDATES
        rating_candidates: Override for settings.RATING_COLUMN_CANDIDATES

    Returns:
        ColumnSelection

    Raises:
        ColumnDetectionError: If either column cannot be found
    """
    field_names = list(field_names)
    name_field = find_column(field_names, name_candidates or settings.NAME_COLUMN_CANDIDATES)
    rating_field = find_column(field_names, rating_candidates or settings.RATING_COLUMN_CANDIDATES)

    if not name_field or not rating_field:
        logger.warning(
            f"Column detection failed for fields {field_names} "
            f"(name={name_field}, rating={rating_field})"
        )
        raise ColumnDetectionError()

    logger.info(f"Detected columns: name='{name_field}', rating='{rating_field}'")
    return ColumnSelection(name_field=name_field, rating_field=rating_field)
