import json
import math
from datetime import datetime, timedelta
from pathlib import Path

from src.shared_lib.models import ChartPayload
from src.shared_lib.utils.json_serialization import json_dumps, sanitize_for_json


def test_non_finite_floats_become_null():
    assert sanitize_for_json([1.5, math.nan, math.inf]) == [1.5, None, None]


def test_common_python_types():
    data = sanitize_for_json(
        {
            "when": datetime(2024, 1, 2, 3, 4, 5),
            "took": timedelta(seconds=1.5),
            "where": Path("charts") / "a.html",
            1: ("x", {"y"}),
        }
    )
    assert data == {
        "when": "2024-01-02T03:04:05",
        "took": 1.5,
        "where": str(Path("charts") / "a.html"),
        "1": ["x", ["y"]],
    }


def test_models_use_camel_case(bar_payload):
    data = json.loads(json_dumps({"payload": bar_payload}))
    assert data["payload"]["chartType"] == "bar"
    assert "chart_type" not in data["payload"]


def test_unknown_objects_fall_back_to_str():
    class Marker:
        def __str__(self):
            return "marker"

    assert json_dumps([Marker()]) == '["marker"]'


def test_failed_payload_round_trip():
    payload = ChartPayload(success=False, error="Empty input")
    assert json.loads(json_dumps(payload))["chartType"] is None
