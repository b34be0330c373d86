import pytest
from pydantic import ValidationError

from src.data_parser.fallback import FallbackGenerator, create_fallback_result
from src.shared_lib.models import ChartPayload, ParseResult, SeriesSpec


def test_failed_result_needs_no_data():
    result = ParseResult(success=False, error="Empty input")
    assert result.labels == []
    assert result.to_dict()["error"] == "Empty input"


def test_success_requires_equal_lengths():
    with pytest.raises(ValidationError):
        ParseResult(success=True, labels=["A", "B"], data=[1.0])


def test_success_requires_two_points():
    with pytest.raises(ValidationError):
        ParseResult(success=True, labels=["A"], data=[1.0])


def test_series_longer_than_labels_rejected():
    with pytest.raises(ValidationError):
        ParseResult(
            success=True,
            labels=["A", "B"],
            data=[1.0, 2.0],
            multi_series=[SeriesSpec(label="S", data=[1.0, 2.0, 3.0])],
        )


def test_aliases_accepted_on_input_and_output():
    result = ParseResult(success=True, labels=["A", "B"], data=[1, 2], isPercentage=True)
    assert result.is_percentage is True
    assert result.to_dict()["isPercentage"] is True


def test_payload_requires_chart_type_on_success():
    with pytest.raises(ValidationError):
        ChartPayload(success=True, labels=["A", "B"], data=[1, 2])


def test_payload_rejects_unknown_chart_type():
    with pytest.raises(ValidationError):
        ChartPayload(success=True, labels=["A", "B"], data=[1, 2], chart_type="scatter")


def test_payload_to_dict_keys(bar_payload):
    payload = bar_payload.to_dict()
    assert payload["chartType"] == "bar"
    assert payload["chartTypeReason"] == "Default comparison chart"
    assert payload["chartTypeOverridden"] is False
    assert bar_payload.point_count == 3


def test_fallback_result():
    result = create_fallback_result()
    assert result.parser == "fallback"
    assert result.title == "Sample Data"
    assert result.warning == FallbackGenerator.WARNING
    assert result.data == [25, 35, 20, 20]


def test_fallback_results_are_independent():
    first = create_fallback_result()
    first.labels.append("mutated")
    assert len(create_fallback_result().labels) == 4
