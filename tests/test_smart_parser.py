import pytest

from src.data_parser.agent import SmartDataParser, build_default_detectors, parse_user_input
from src.data_parser.core.settings import DETECTOR_ORDER
from src.data_parser.detectors import BaseDetector, DetectorMatch, NotApplicable


class ExplodingDetector(BaseDetector):
    name = "Exploding"

    def detect(self, text):
        raise RuntimeError("boom")


class FixedDetector(BaseDetector):
    name = "Fixed"

    def __init__(self, match):
        self.match = match

    def detect(self, text):
        return self.match


def test_json_labels_and_data(parser):
    result = parser.parse('{"labels":["A","B"],"data":[1,2]}')
    assert result.success
    assert result.labels == ["A", "B"]
    assert result.data == [1, 2]
    assert result.parser == "JSON"


def test_csv_vertical(parser):
    result = parser.parse("Label,Value\nA,10\nB,20")
    assert result.labels == ["A", "B"]
    assert result.data == [10, 20]
    assert result.parser == "CSV"


def test_csv_horizontal(parser):
    result = parser.parse("A,B,C\n10,20,30")
    assert result.labels == ["A", "B", "C"]
    assert result.data == [10, 20, 30]
    assert result.parser == "CSV"


def test_key_value_percentages(parser):
    result = parser.parse("JavaScript: 10%, Python: 75%")
    assert result.labels == ["JavaScript", "Python"]
    assert result.data == [10, 75]
    assert result.is_percentage is True
    assert result.parser == "KeyValue"


def test_unparseable_text_uses_fallback(parser):
    result = parser.parse("asdf")
    assert result.success
    assert result.parser == "fallback"
    assert result.warning is not None
    assert result.labels == ["Category A", "Category B", "Category C", "Category D"]
    assert result.data == [25, 35, 20, 20]


@pytest.mark.parametrize("text", ["", "   ", "\n\t", None, 42, ["a", "b"]])
def test_empty_or_non_string_input_fails(parser, text):
    result = parser.parse(text)
    assert result.success is False
    assert result.error == "Empty input"
    assert result.labels == []


@pytest.mark.parametrize(
    "text",
    [
        "asdf",
        "1",
        "Revenue: 1,200, Costs: 800",
        "Sales were 100 in January, 200 in February",
        "1 2 3 4 5 6 7 8 9 10 11 12",
        '{"labels": ["A", "B", "C"], "data": [1, 2]}',
        "Category,Jan,Feb,Mar\nSales,100,200\nCosts,80,90,70",
        "| a | b |\n| c | d |",
        "Продажи: 100, Расходы: 200",
    ],
)
def test_successful_results_are_aligned(parser, text):
    result = parser.parse(text)
    assert result.success
    assert len(result.labels) == len(result.data) >= 2


def test_parse_is_repeatable(parser):
    text = "Category,Jan,Feb\nSales,100,200\nCosts,80,90"
    assert parser.parse(text) == parser.parse(text)


def test_input_is_trimmed_before_detection(parser):
    result = parser.parse('   \n {"A": 1, "B": 2}  \n')
    assert result.parser == "JSON"


def test_default_detector_order():
    assert [d.name for d in build_default_detectors()] == DETECTOR_ORDER


def test_detector_exception_falls_through():
    match = DetectorMatch(labels=["x", "y"], data=[1.0, 2.0])
    parser = SmartDataParser(detectors=[ExplodingDetector(), FixedDetector(match)])
    result = parser.parse("anything")
    assert result.parser == "Fixed"
    assert result.labels == ["x", "y"]


def test_match_below_threshold_is_skipped():
    short = FixedDetector(DetectorMatch(labels=["only"], data=[1.0]))
    parser = SmartDataParser(detectors=[short])
    assert parser.parse("anything").parser == "fallback"


def test_mismatched_lengths_are_truncated(parser):
    result = parser.parse('{"labels": ["A", "B", "C"], "data": [1, 2]}')
    assert result.labels == ["A", "B"]
    assert result.data == [1, 2]


def test_multi_series_is_truncated_to_labels():
    match = DetectorMatch(
        labels=["Jan", "Feb"],
        data=[1.0, 2.0],
        multi_series=[("Sales", [1.0, 2.0, 3.0])],
    )
    result = SmartDataParser(detectors=[FixedDetector(match)]).parse("x")
    assert result.multi_series[0].data == [1.0, 2.0]


def test_not_applicable_everywhere_uses_fallback():
    never = FixedDetector(NotApplicable("never"))
    assert SmartDataParser(detectors=[never]).parse("10 20").parser == "fallback"


def test_parse_user_input_uses_global_parser():
    assert parse_user_input("10 20 30").parser == "NumbersOnly"


def test_to_dict_uses_camel_case(parser):
    payload = parser.parse("Category,Jan,Feb\nSales,100,200\nCosts,80,90").to_dict()
    assert payload["multiSeries"] == [
        {"label": "Sales", "data": [100, 200]},
        {"label": "Costs", "data": [80, 90]},
    ]
    assert "isPercentage" in payload
