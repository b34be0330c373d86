from src.pipeline_session import SessionStatistics


def test_empty_statistics():
    stats = SessionStatistics()
    assert stats.success_rate == 0.0
    assert stats.fallback_rate == 0.0
    assert stats.average_time == 0.0


def test_record_input():
    stats = SessionStatistics()
    stats.record_input("success", 0.010, parser="CSV", chart_type="pie")
    stats.record_input("success", 0.030, parser="CSV", chart_type="bar", overridden=True)
    stats.record_input("fallback", 0.020, parser="fallback", chart_type="doughnut")
    stats.record_input("error", 0.0)

    assert stats.total_inputs == 4
    assert stats.successful_inputs == 2
    assert stats.fallback_inputs == 1
    assert stats.failed_inputs == 1
    assert stats.overridden_inputs == 1
    assert stats.success_rate == 50.0
    assert stats.fallback_rate == 25.0
    assert abs(stats.average_time - 15.0) < 1e-9
    assert stats.slowest_time == 0.030
    assert stats.parsers.most_common(1) == [("CSV", 2)]
    assert sum(stats.chart_types.values()) == 3


def test_reset():
    stats = SessionStatistics()
    stats.record_input("success", 0.5, parser="JSON", chart_type="bar")
    stats.reset()
    assert stats.total_inputs == 0
    assert stats.total_time == 0.0
    assert not stats.parsers


def test_to_dict():
    stats = SessionStatistics()
    stats.record_input("success", 0.002, parser="KeyValue", chart_type="pie")
    data = stats.to_dict()
    assert data["parsers"] == {"KeyValue": 1}
    assert data["chart_types"] == {"pie": 1}
    assert data["success_rate"] == 100.0
