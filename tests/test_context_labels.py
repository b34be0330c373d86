import pytest

from src.data_parser.tools import ContextLabelInferrer, infer_context_labels


@pytest.mark.parametrize(
    "text, count, expected",
    [
        ("monthly revenue", 3, ["Q1", "Q2", "Q3"]),
        ("sales per day", 5, ["Mon", "Tue", "Wed", "Thu", "Fri"]),
        ("yearly totals", 8, ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug"]),
        ("by category", 3, ["Category A", "Category B", "Category C"]),
        ("per customer segment", 2, ["Category A", "Category B"]),
        ("top product sales", 2, ["Product 1", "Product 2"]),
        ("SKU counts", 3, ["Product 1", "Product 2", "Product 3"]),
        ("revenue by region", 3, ["North", "South", "East"]),
        ("sales by country", 1, ["North"]),
        ("12 15", 2, ["Item 1", "Item 2"]),
    ],
)
def test_keyword_families(text, count, expected):
    assert infer_context_labels(text, count) == expected


def test_first_family_wins():
    # "type" (category) is checked before "product"
    assert infer_context_labels("product type", 2) == ["Category A", "Category B"]
    # temporal beats everything
    assert infer_context_labels("region by quarter", 2) == ["Q1", "Q2"]


def test_keywords_are_case_insensitive():
    assert ContextLabelInferrer().infer("REGION", 2) == ["North", "South"]


def test_regions_do_not_wrap():
    labels = infer_context_labels("area", 8)
    assert len(labels) == 8
    assert labels[-1] == "Northwest"


def test_deterministic():
    assert infer_context_labels("weekly", 6) == infer_context_labels("weekly", 6)
