import json

from src.pipeline_session import InteractivePipelineSession, main


class ExplodingPipeline:
    def process(self, text, chart_type=None):
        raise RuntimeError("boom")


def output(session):
    return session.console.file.getvalue()


def test_process_input_success(session):
    result = session.process_input("A,B,C\n10,20,30")
    assert result.status == "success"
    assert result.parser == "CSV"
    assert result.chart_type == "pie"
    assert result.total_time >= 0
    assert session.last_result is result
    assert "Parse Result" in output(session)


def test_process_input_fallback(session):
    result = session.process_input("hello there")
    assert result.is_fallback
    assert result.has_data
    assert "Showing sample chart" in output(session)


def test_empty_input_is_an_error_result(session):
    result = session.process_input("   ")
    assert result.is_error
    assert result.errors == ["Empty input"]
    assert not result.has_data


def test_pipeline_exception_is_reported(console, tmp_path):
    session = InteractivePipelineSession(
        output_dir=str(tmp_path), console=console, pipeline=ExplodingPipeline()
    )
    result = session.process_input("A,B\n1,2")
    assert result.is_error
    assert result.payload is None
    assert result.errors == ["boom"]
    assert session.statistics.failed_inputs == 1


def test_statistics_follow_inputs(session):
    session.process_input("A,B,C\n10,20,30")
    session.process_input("hello there")
    session.process_input("")

    stats = session.statistics
    assert stats.total_inputs == 3
    assert stats.successful_inputs == 1
    assert stats.fallback_inputs == 1
    assert stats.failed_inputs == 1
    assert stats.parsers["CSV"] == 1
    assert stats.parsers["fallback"] == 1
    assert len(session.history) == 3


def test_chart_command_reruns_last_input(session):
    session.process_input("A,B,C\n10,20,30")

    assert session.command_handler.handle("/chart bar") is True
    assert session.chart_type_override == "bar"
    assert session.last_result.chart_type == "bar"
    assert session.last_result.payload.chart_type_overridden is True
    assert session.statistics.overridden_inputs == 1
    assert len(session.history) == 2


def test_chart_auto_clears_override(session):
    session.chart_type_override = "bar"
    session.process_input("A,B,C\n10,20,30")

    session.command_handler.handle("/chart auto")
    assert session.chart_type_override is None
    assert session.last_result.chart_type == "pie"


def test_chart_command_rejects_unknown_type(session):
    session.command_handler.handle("/chart scatter")
    assert session.chart_type_override is None
    assert "Unknown chart type: scatter" in output(session)
    assert session.history == []


def test_initial_override_is_sanitized(console, pipeline, tmp_path):
    session = InteractivePipelineSession(
        output_dir=str(tmp_path), chart_type="Donut", console=console, pipeline=pipeline
    )
    assert session.chart_type_override == "doughnut"


def test_exit_and_unknown_commands(session):
    assert session.command_handler.handle("/exit") is False
    assert session.command_handler.handle("/QUIT") is False
    assert session.command_handler.handle("/nope") is True
    assert "Unknown command: /nope" in output(session)


def test_json_command(session):
    session.process_input("A,B,C\n10,20,30")
    session.command_handler.handle("/json")
    assert '"chartType"' in output(session)


def test_save_command_writes_html(session, tmp_path):
    session.process_input("A,B,C\n10,20,30")
    session.command_handler.handle("/save shares")
    assert (tmp_path / "charts" / "shares.html").exists()


def test_save_without_chart(session):
    session.command_handler.handle("/save")
    assert "No chart to save" in output(session)


def test_export_command(session, tmp_path):
    session.process_input("A,B,C\n10,20,30")
    target = tmp_path / "session.json"

    session.command_handler.handle(f"/export {target}")

    exported = json.loads(target.read_text(encoding="utf-8"))
    assert exported["statistics"]["total_inputs"] == 1
    assert exported["history"][0]["payload"]["chartType"] == "pie"


def test_paste_command(session, monkeypatch):
    monkeypatch.setattr(session, "read_multiline", lambda: "Label,Value\nA,10\nB,20")
    session.command_handler.handle("/paste")
    assert session.last_result.parser == "CSV"
    assert session.last_result.payload.labels == ["A", "B"]


def test_history_and_stats_commands(session):
    session.process_input("A,B,C\n10,20,30")
    session.command_handler.handle("/history")
    session.command_handler.handle("/stats")
    text = output(session)
    assert "Input History" in text
    assert "Session Statistics" in text


def test_main_prints_payload(capsys):
    assert main(["A,B\n10,20"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["labels"] == ["A", "B"]
    assert payload["chartType"] == "pie"


def test_main_with_chart_override(capsys):
    assert main(["A,B\n10,20", "--chart", "line"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["chartType"] == "line"
    assert payload["chartTypeReason"] == "Selected by user"


def test_main_empty_text_fails(capsys):
    assert main([" "]) == 1
    assert json.loads(capsys.readouterr().out)["error"] == "Empty input"
