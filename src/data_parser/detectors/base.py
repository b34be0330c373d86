"""
BaseDetector - common interface for every format detector.

A detector implements one parsing strategy. It never raises for user input:
``detect()`` answers with a tagged outcome, either a ``DetectorMatch`` holding
the extracted labels/values or a ``NotApplicable`` explaining why the
strategy does not fit. ``run()`` is the dispatcher-facing entry point and
turns any unexpected exception into ``NotApplicable`` as well.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from src.shared_lib.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class DetectorMatch:
    """Labels and values extracted by a detector, not yet validated."""

    labels: List[str]
    data: List[float]
    title: Optional[str] = None
    multi_series: Optional[List[Tuple[str, List[float]]]] = None
    is_percentage: Optional[bool] = None

    def meets_threshold(self, minimum: int) -> bool:
        return len(self.labels) >= minimum and len(self.data) >= minimum


@dataclass(frozen=True)
class NotApplicable:
    """The detector's strategy does not fit the input."""

    reason: str
    details: dict = field(default_factory=dict)


DetectorOutcome = Union[DetectorMatch, NotApplicable]


class BaseDetector(ABC):
    """
    Abstract base class for format detectors.

    Subclasses set ``name`` (reported as ``ParseResult.parser``) and implement
    ``detect``. Detectors are stateless: compiled patterns live on the class.

    Example Subclass:
        >>> class SemicolonPairsDetector(BaseDetector):
        ...     name = "SemicolonPairs"
        ...
        ...     def detect(self, text):
        ...         return NotApplicable("not implemented")
    """

    name: str = "base"

    @abstractmethod
    def detect(self, text: str) -> DetectorOutcome:
        """
        Try to interpret ``text`` with this detector's strategy.

        Args:
            text: Trimmed, non-empty user input

        Returns:
            DetectorMatch on success, NotApplicable otherwise
        """

    def run(self, text: str) -> DetectorOutcome:
        """
        Run ``detect`` and convert unexpected failures into ``NotApplicable``.

        Args:
            text: Trimmed, non-empty user input

        Returns:
            The detector outcome; never raises
        """
        try:
            return self.detect(text)
        except Exception as e:
            logger.debug(f"[{self.name}] failed: {e}")
            return NotApplicable(
                reason=f"{type(e).__name__}: {e}",
                details={"error_type": type(e).__name__},
            )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"
