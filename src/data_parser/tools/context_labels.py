"""
Context label inference.

When a text carries numbers but no usable words, labels are synthesized from
keywords found anywhere in the text ("monthly", "per region", "product
sales"...). Matching is case-insensitive substring matching, and only the
first keyword family found applies.
"""

import re
import logging
from typing import List

logger = logging.getLogger(__name__)


QUARTERS = ["Q1", "Q2", "Q3", "Q4"]
WEEKDAYS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
MONTHS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
REGIONS = ["North", "South", "East", "West", "Central", "Northeast", "Southeast", "Northwest"]


class ContextLabelInferrer:
    """
    Synthesizes ``count`` labels from contextual keywords.

    Keyword families, checked in order:
    - temporal (month, quarter, year, week, day): quarters, weekdays or months
    - category (category, type, group, segment): Category A, Category B, ...
    - product (product, item, sku): Product 1, Product 2, ...
    - region (region, country, city, area): North, South, East, ...
    - otherwise: Item 1, Item 2, ...
    """

    TEMPORAL_PATTERN = re.compile(r"month|quarter|year|week|day", re.IGNORECASE)
    CATEGORY_PATTERN = re.compile(r"categor|type|group|segment", re.IGNORECASE)
    PRODUCT_PATTERN = re.compile(r"product|item|sku", re.IGNORECASE)
    REGION_PATTERN = re.compile(r"region|country|city|area", re.IGNORECASE)

    def infer(self, text: str, count: int) -> List[str]:
        """
        Build labels for ``count`` values found in ``text``.

        Args:
            text: Original user input
            count: Number of labels wanted

        Returns:
            List of labels. Temporal and region families have fixed
            vocabularies, so they can return fewer than ``count`` labels.

        Example:
            >>> ContextLabelInferrer().infer("sales per quarter: 10 20 30", 3)
            ['Q1', 'Q2', 'Q3']
        """
        if self.TEMPORAL_PATTERN.search(text):
            logger.debug("Temporal context detected")
            return self._temporal_labels(count)

        if self.CATEGORY_PATTERN.search(text):
            logger.debug("Category context detected")
            return [f"Category {chr(65 + i)}" for i in range(count)]

        if self.PRODUCT_PATTERN.search(text):
            logger.debug("Product context detected")
            return [f"Product {i + 1}" for i in range(count)]

        if self.REGION_PATTERN.search(text):
            logger.debug("Region context detected")
            return REGIONS[:count]

        return [f"Item {i + 1}" for i in range(count)]

    @staticmethod
    def _temporal_labels(count: int) -> List[str]:
        if count <= 4:
            return QUARTERS[:count]
        if count <= 7:
            return WEEKDAYS[:count]
        return MONTHS[:count]


def infer_context_labels(text: str, count: int) -> List[str]:
    """
    Convenience function wrapping ``ContextLabelInferrer.infer``.

    Examples:
        >>> infer_context_labels("revenue by region", 3)
        ['North', 'South', 'East']
        >>> infer_context_labels("12 15", 2)
        ['Item 1', 'Item 2']
    """
    return ContextLabelInferrer().infer(text, count)
