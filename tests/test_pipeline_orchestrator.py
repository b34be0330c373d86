from src.pipeline_orchestrator import USER_OVERRIDE_REASON, ChartPipeline, run_chart_pipeline


def test_empty_input_has_no_chart_type():
    payload = run_chart_pipeline("   ")
    assert payload.success is False
    assert payload.error == "Empty input"
    assert payload.chart_type is None


def test_suggested_chart_type(pipeline):
    payload = pipeline.process("Jan 10, Feb 20, Mar 15")
    assert payload.parser == "NaturalLanguage"
    assert payload.labels == ["Jan", "Feb", "Mar"]
    assert payload.chart_type == "line"
    assert payload.chart_type_reason == "Time series data detected"
    assert payload.chart_type_overridden is False


def test_csv_horizontal_suggests_pie():
    payload = run_chart_pipeline("A,B,C\n10,20,30")
    assert payload.to_dict()["chartType"] == "pie"


def test_override_wins(pipeline):
    payload = pipeline.process("Jan 10, Feb 20, Mar 15", chart_type="Bar (comparison)")
    assert payload.chart_type == "bar"
    assert payload.chart_type_reason == USER_OVERRIDE_REASON
    assert payload.chart_type_overridden is True


def test_override_matching_suggestion_is_not_flagged(pipeline):
    payload = pipeline.process("Jan 10, Feb 20, Mar 15", chart_type="line")
    assert payload.chart_type == "line"
    assert payload.chart_type_reason == USER_OVERRIDE_REASON
    assert payload.chart_type_overridden is False


def test_invalid_override_is_ignored(pipeline, caplog):
    with caplog.at_level("WARNING"):
        payload = pipeline.process("Jan 10, Feb 20, Mar 15", chart_type="scatter")
    assert payload.chart_type == "line"
    assert payload.chart_type_overridden is False
    assert "scatter" in caplog.text


def test_labels_are_normalized(pipeline):
    payload = pipeline.process('{"labels": ["north  east", "south"], "data": [1, 2]}')
    assert payload.labels == ["North east", "South"]


def test_fallback_payload_keeps_warning(pipeline):
    payload = pipeline.process("asdf")
    assert payload.success
    assert payload.parser == "fallback"
    assert payload.warning
    assert payload.chart_type == "doughnut"


def test_multi_series_and_title_pass_through(pipeline):
    payload = pipeline.process("Category,Jan,Feb\nSales,100,200\nCosts,80,90")
    assert payload.title == "Sales"
    assert [s.label for s in payload.multi_series] == ["Sales", "Costs"]
    assert payload.chart_type == "line"


def test_percentages_pass_through():
    payload = ChartPipeline().process("JavaScript: 10%, Python: 75%")
    assert payload.is_percentage is True
    assert payload.chart_type == "pie"
