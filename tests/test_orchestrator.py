"""
Tests for the DashboardPipeline end-to-end flow.
"""

import pytest
from src.orchestrator import DashboardPipeline
from src.models.restaurant import DatasetError, DatasetResult, ViewState, COLUMN_DETECTION_ERROR


def _reviews(name, ratings, name_field="restaurant", rating_field="rating"):
    return [{name_field: name, rating_field: str(r), "comment": ""} for r in ratings]


@pytest.fixture
def rows():
    return (
        _reviews("Harbor Grill", [5] * 9 + [4, 3, 5])
        + _reviews("Burger Shack", [1, 2, 1, 5, 3, 2, 1, 4, 1, 2])
        + _reviews("Noodle Bar", [5, 4, 2, 3, 4, 5, 4, 1, 5, 4])
        + _reviews("Taco Corner", [1, 1, 2])
        + [{"restaurant": "", "rating": "5", "comment": ""}]
        + [{"restaurant": "Harbor Grill", "rating": "great", "comment": ""}]
    )


def test_no_input_means_nothing_to_show():
    pipeline = DashboardPipeline()
    assert pipeline.analyze(None) is None
    assert pipeline.visible(ViewState()) is None


def test_full_pipeline(rows):
    result = DashboardPipeline().analyze(rows)

    assert isinstance(result, DatasetResult)
    by_name = {r.name: r for r in result.restaurants}
    assert list(by_name) == ["Harbor Grill", "Burger Shack", "Noodle Bar", "Taco Corner"]

    harbor = by_name["Harbor Grill"]
    assert harbor.total == 12
    assert harbor.badge == "Top Performer"
    assert harbor.risk_level == "Healthy"

    burger = by_name["Burger Shack"]
    assert burger.negative == 7
    assert burger.risk_level == "Critical"
    # Only three restaurants rank, so all of them are in the best list
    assert burger.badge == "Top Performer"

    taco = by_name["Taco Corner"]
    assert taco.low_volume is True
    assert taco.badge == "Low Volume – Not Ranked"

    assert [r.name for r in result.best] == ["Harbor Grill", "Noodle Bar", "Burger Shack"]
    assert [r.name for r in result.worst] == ["Burger Shack", "Noodle Bar", "Harbor Grill"]


def test_mixed_ratings_single_restaurant():
    rows = [
        {"restaurant": "A", "rating": "5"},
        {"restaurant": "A", "rating": "1"},
        {"restaurant": "A", "rating": "3"},
    ]

    result = DashboardPipeline().analyze(rows)
    record = result.restaurants[0]

    assert (record.total, record.positive, record.negative) == (3, 1, 1)
    assert record.positive_ratio == pytest.approx(0.3333, abs=1e-3)
    assert record.negative_ratio == pytest.approx(0.3333, abs=1e-3)
    assert record.low_volume is True
    assert record.risk_level == "Needs Improvement"
    assert record.badge == "Low Volume – Not Ranked"
    assert result.best == []
    assert result.worst == []


def test_blank_rating_lowers_ratios():
    rows = [{"restaurant": "A", "rating": "5"}, {"restaurant": "A", "rating": ""}]

    record = DashboardPipeline().analyze(rows).restaurants[0]

    assert record.total == 2
    assert record.positive == 1
    assert record.positive_ratio == 0.5
    assert record.negative_ratio == 0


def test_column_detection_error():
    rows = [{"id": "1", "comment": "Nice"}]

    result = DashboardPipeline().analyze(rows)

    assert isinstance(result, DatasetError)
    assert result.to_dict() == {"error": COLUMN_DETECTION_ERROR}


def test_empty_rows_cannot_detect_columns():
    assert isinstance(DashboardPipeline().analyze([]), DatasetError)


def test_all_rows_malformed_is_not_an_error():
    rows = [{"restaurant": "", "rating": "5"}, {"restaurant": "A", "rating": "bad"}]

    result = DashboardPipeline().analyze(rows)

    assert isinstance(result, DatasetResult)
    assert result.restaurants == []
    assert result.best == []
    assert result.worst == []


def test_alternate_headers():
    rows = _reviews("Harbor Grill", [5] * 10, name_field="Venue", rating_field="Stars")

    result = DashboardPipeline().analyze(rows)

    assert result.restaurants[0].name == "Harbor Grill"
    assert result.restaurants[0].positive == 10


def test_rerun_is_identical(rows):
    first = DashboardPipeline().analyze(rows)
    second = DashboardPipeline().analyze(list(rows))

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_same_rows_object_reuses_result(rows):
    pipeline = DashboardPipeline()

    first = pipeline.analyze(rows)
    assert pipeline.analyze(rows) is first
    assert pipeline.result is first

    changed = rows + _reviews("New Place", [5])
    assert pipeline.analyze(changed) is not first
    assert "New Place" in [r.name for r in pipeline.result.restaurants]


def test_visible_uses_last_result(rows):
    pipeline = DashboardPipeline()
    pipeline.analyze(rows)

    assert [r.name for r in pipeline.visible(ViewState(risk_filter="Critical"))] == [
        "Burger Shack", "Taco Corner"
    ]
    assert [r.name for r in pipeline.visible(ViewState(show_low_volume=True))] == ["Taco Corner"]


def test_visible_after_error_is_none():
    pipeline = DashboardPipeline()
    pipeline.analyze([{"id": "1"}])
    assert pipeline.visible(ViewState()) is None


# Run tests if executed directly
if __name__ == "__main__":
    pytest.main([__file__, "-v"])
