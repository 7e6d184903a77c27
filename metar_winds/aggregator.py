"""Thread-safe accumulation of wind classifications per compass sector."""

import threading
import logging
from typing import Iterable, Tuple

from metar_winds.models import WindClassification, WindDistribution, WindKind, SECTOR_COUNT

logger = logging.getLogger(__name__)


class InvariantViolation(Exception):
    """Raised when a classification breaks an internal invariant (a defect, not bad input)."""

    def __init__(self, message: str, classification: WindClassification = None):
        super().__init__(message)
        self.classification = classification


class DistributionAggregator:
    """
    Owner of the per-sector wind counts.

    record() is the only mutator and is serialized with a lock, so workers
    on several threads can feed the same aggregator. Counts only ever grow.

    Example:
        aggregator = DistributionAggregator()
        aggregator.record(DirectionClassifier.classify("24015KT"))
        aggregator.counts  # (0, 0, 0, 0, 0, 1, 0, 0)
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._counts = [0] * SECTOR_COUNT
        self._fixed_count = 0
        self._variable_count = 0

    def record(self, classification: WindClassification) -> None:
        """
        Record one classified wind token.

        FIXED increments its sector, VARIABLE increments all sectors once,
        UNRECOGNIZED leaves the counts unchanged.

        Raises:
            InvariantViolation: FIXED classification without a sector in [0, 7]
        """
        if classification.kind == WindKind.UNRECOGNIZED:
            return

        if classification.kind == WindKind.FIXED:
            sector = classification.sector
            if sector is None or not 0 <= sector < SECTOR_COUNT:
                raise InvariantViolation(
                    f"Sector index {sector!r} out of range for {classification.token!r}",
                    classification,
                )
            with self._lock:
                self._counts[sector] += 1
                self._fixed_count += 1
            return

        with self._lock:
            for i in range(SECTOR_COUNT):
                self._counts[i] += 1
            self._variable_count += 1

    def record_all(self, classifications: Iterable[WindClassification]) -> None:
        for classification in classifications:
            self.record(classification)

    @property
    def counts(self) -> Tuple[int, ...]:
        """Current counts, indexed by sector."""
        with self._lock:
            return tuple(self._counts)

    def snapshot(self) -> WindDistribution:
        """Consistent, immutable copy of the current distribution."""
        with self._lock:
            return WindDistribution(
                counts=tuple(self._counts),
                fixed_count=self._fixed_count,
                variable_count=self._variable_count,
            )

    def __repr__(self) -> str:
        return f"DistributionAggregator(counts={list(self.counts)})"
