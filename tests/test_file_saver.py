import plotly.graph_objects as go

from src.plotly_generator import ChartFigureBuilder, FileSaver


def make_figure():
    return go.Figure(data=[go.Bar(x=["A", "B"], y=[4, 5])])


def test_creates_output_dir(tmp_path):
    target = tmp_path / "nested" / "charts"
    FileSaver(output_dir=target)
    assert target.is_dir()


def test_save_html_with_filename(tmp_path):
    path = FileSaver(output_dir=tmp_path).save_html(make_figure(), filename="sales.html")
    assert path == tmp_path / "sales.html"
    assert "<html>" in path.read_text(encoding="utf-8")


def test_save_html_appends_extension(tmp_path):
    path = FileSaver(output_dir=tmp_path).save_html(make_figure(), filename="sales")
    assert path.name == "sales.html"
    assert path.exists()


def test_auto_filename_names_trace_type(tmp_path):
    path = FileSaver(output_dir=tmp_path).save_html(make_figure())
    assert path.name.startswith("chart_bar_")
    assert path.suffix == ".html"


def test_list_saved_files(tmp_path):
    saver = FileSaver(output_dir=tmp_path)
    saver.save_html(make_figure(), filename="a")
    saver.save_html(make_figure(), filename="b")
    (tmp_path / "notes.txt").write_text("x")

    assert [p.name for p in saver.list_saved_files("html")] == ["a.html", "b.html"]
    assert len(saver.list_saved_files()) == 3


def test_builder_save(tmp_path, bar_payload):
    path = ChartFigureBuilder().save(bar_payload, output_dir=tmp_path, filename="sales")
    assert path.parent == tmp_path
    assert path.exists()
