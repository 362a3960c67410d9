"""
Unit tests for restaurant data models.
"""

import pytest
from dataclasses import FrozenInstanceError, replace
from src.models.restaurant import (
    RestaurantStats,
    DatasetResult,
    DatasetError,
    ViewState,
    ColumnDetectionError,
    COLUMN_DETECTION_ERROR,
)


def _record(**overrides):
    values = dict(
        name="Harbor Grill",
        total=12,
        positive=9,
        negative=1,
        positive_ratio=0.75,
        negative_ratio=1 / 12,
        low_volume=False,
        risk_level="Healthy"
    )
    values.update(overrides)
    return RestaurantStats(**values)


def test_restaurant_stats_risk_level_validation():
    """Test RestaurantStats rejects unknown risk levels."""
    assert _record().risk_level == "Healthy"

    with pytest.raises(ValueError):
        _record(risk_level="Dangerous")


def test_restaurant_stats_is_immutable():
    """Test records cannot be changed; badges go on copies."""
    record = _record()

    with pytest.raises(FrozenInstanceError):
        record.badge = "Top Performer"
    with pytest.raises(FrozenInstanceError):
        record.total = 99

    badged = replace(record, badge="Top Performer")
    assert badged.badge == "Top Performer"
    assert record.badge is None


def test_restaurant_stats_to_dict():
    """Test dict keys match the dashboard export format."""
    data = _record(badge="Top Performer").to_dict()

    assert data["name"] == "Harbor Grill"
    assert data["lowVolume"] is False
    assert data["riskLevel"] == "Healthy"
    assert data["badge"] == "Top Performer"
    assert data["positive_ratio"] == 0.75


def test_dataset_result_to_dict():
    record = _record()
    result = DatasetResult(restaurants=[record], best=[record], worst=[])

    data = result.to_dict()
    assert set(data.keys()) == {"all", "best", "worst"}
    assert data["all"][0]["name"] == "Harbor Grill"
    assert data["worst"] == []


def test_dataset_error_to_dict():
    error = DatasetError(error=COLUMN_DETECTION_ERROR)
    assert error.to_dict() == {"error": COLUMN_DETECTION_ERROR}


def test_column_detection_error_message():
    """Test default message is the user-facing detection error."""
    err = ColumnDetectionError()
    assert str(err) == (
        'Could not detect name or rating column. '
        'Expected columns like "restaurant" and "rating".'
    )
    assert isinstance(err, ValueError)


def test_view_state_defaults():
    view = ViewState()
    assert view.search == ""
    assert view.risk_filter == "All"
    assert view.show_low_volume is False


def test_view_state_rejects_unknown_risk_filter():
    ViewState(risk_filter="Needs Improvement")  # valid

    with pytest.raises(ValueError, match="Invalid risk filter"):
        ViewState(risk_filter="needs improvement")


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
