import plotly.graph_objects as go
import pytest

from src.plotly_generator import ChartFigureBuilder
from src.plotly_generator.core import CHART_TRACE_KINDS
from src.plotly_generator.generators import GeneratorRouter
from src.shared_lib.models import ChartPayload, SeriesSpec


def make_payload(chart_type, **overrides):
    fields = dict(
        success=True,
        labels=["North", "South", "East"],
        data=[120, 80, 95],
        chart_type=chart_type,
    )
    fields.update(overrides)
    return ChartPayload(**fields)


@pytest.mark.parametrize("chart_type, trace_type", sorted(CHART_TRACE_KINDS.items()))
def test_trace_type_per_chart_type(chart_type, trace_type):
    fig = ChartFigureBuilder().build(make_payload(chart_type))
    assert isinstance(fig, go.Figure)
    assert fig.data[0].type == trace_type


def test_doughnut_has_hole_pie_does_not():
    builder = ChartFigureBuilder()
    assert builder.build(make_payload("pie")).data[0].hole == 0
    assert builder.build(make_payload("doughnut")).data[0].hole == 0.5


def test_line_uses_markers():
    fig = ChartFigureBuilder().build(make_payload("line"))
    assert fig.data[0].mode == "lines+markers"


def test_multi_series_bar_draws_one_trace_per_series():
    payload = make_payload(
        "bar",
        labels=["Jan", "Feb"],
        data=[100, 200],
        multi_series=[
            SeriesSpec(label="Sales", data=[100, 200]),
            SeriesSpec(label="Costs", data=[80, 90]),
        ],
    )
    fig = ChartFigureBuilder().build(payload)
    assert [trace.name for trace in fig.data] == ["Sales", "Costs"]
    assert fig.layout.barmode == "group"
    assert fig.layout.showlegend is True


def test_percentage_values_get_suffix():
    fig = ChartFigureBuilder().build(make_payload("bar", is_percentage=True))
    assert "%{y:,}%" in fig.data[0].hovertemplate
    assert fig.layout.yaxis.ticksuffix == "%"


def test_title_defaults():
    builder = ChartFigureBuilder()
    assert builder.build(make_payload("bar")).layout.title.text == "Chart"
    assert builder.build(make_payload("bar", title="Sales")).layout.title.text == "Sales"


def test_unsuccessful_payload_is_rejected():
    with pytest.raises(ValueError):
        ChartFigureBuilder().build(ChartPayload(success=False, error="Empty input"))


def test_router_rejects_unknown_type():
    with pytest.raises(ValueError, match="not supported"):
        GeneratorRouter().get_generator("scatter")


def test_router_register_requires_generator_subclass():
    with pytest.raises(TypeError):
        GeneratorRouter().register("table", dict)


def test_router_supported_types():
    assert GeneratorRouter().get_supported_chart_types() == ["bar", "line", "pie", "doughnut"]


def test_pipeline_payload_renders(pipeline):
    payload = pipeline.process("A,B,C\n10,20,30")
    fig = ChartFigureBuilder().build(payload)
    assert list(fig.data[0].labels) == ["A", "B", "C"]
    assert list(fig.data[0].values) == [10, 20, 30]
