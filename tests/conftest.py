import io

import pytest
from rich.console import Console

from src.data_parser.agent import SmartDataParser
from src.pipeline_orchestrator import ChartPipeline
from src.pipeline_session.session import InteractivePipelineSession
from src.shared_lib.models.schema import ChartPayload


@pytest.fixture
def parser():
    return SmartDataParser()


@pytest.fixture
def pipeline(parser):
    return ChartPipeline(parser=parser)


@pytest.fixture
def console():
    return Console(file=io.StringIO(), width=120, color_system=None)


@pytest.fixture
def session(console, pipeline, tmp_path):
    return InteractivePipelineSession(
        output_dir=str(tmp_path / "charts"),
        console=console,
        pipeline=pipeline,
    )


@pytest.fixture
def bar_payload():
    return ChartPayload(
        success=True,
        labels=["North", "South", "East"],
        data=[120, 80, 95],
        title="Sales",
        parser="Table",
        chart_type="bar",
        chart_type_reason="Default comparison chart",
    )
