"""Concurrent wind-distribution pipeline over a set of bulletin texts."""

import time
import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from typing import List, Optional, Sequence

from metar_winds.config import DEFAULT_STATION, get_max_workers
from metar_winds.models import WindClassification, WindDistribution
from metar_winds.parsers import ReportSplitter, WindExtractor
from metar_winds.classifier import DirectionClassifier
from metar_winds.aggregator import DistributionAggregator

logger = logging.getLogger(__name__)


@dataclass
class BlobResult:
    """Outcome of processing one bulletin text."""

    report_count: int
    classifications: List[WindClassification]

    @property
    def wind_count(self) -> int:
        return len(self.classifications)


@dataclass
class WindRunResult:
    """Final distribution of a run together with bookkeeping."""

    distribution: WindDistribution
    blob_count: int
    report_count: int
    wind_count: int
    elapsed_seconds: float


class WindPipeline:
    """
    Split, extract and classify bulletin texts, then aggregate the results.

    One worker per bulletin text runs the splitter, extractor and classifier
    on blob-local data. The orchestrating thread knows how many texts were
    submitted and drains exactly that many results into a single
    DistributionAggregator.

    Example:
        pipeline = WindPipeline(station="EGLL")
        result = pipeline.run(DirectorySource("./metarfiles").read_blobs())
        print(result.distribution.counts)
    """

    def __init__(
        self,
        station: str = DEFAULT_STATION,
        max_workers: Optional[int] = None,
        aggregator: Optional[DistributionAggregator] = None,
    ):
        """
        Initialize pipeline.

        Args:
            station: ICAO identifier whose METAR reports are counted
            max_workers: Worker threads; defaults to config.get_max_workers()
            aggregator: Aggregator to feed. A fresh one is created if None,
                        pass one in to accumulate over several runs.
        """
        self.extractor = WindExtractor(station)
        self.max_workers = get_max_workers(max_workers)
        self.aggregator = aggregator if aggregator is not None else DistributionAggregator()

    @property
    def station(self) -> str:
        return self.extractor.station

    def process_blob(self, text: str) -> BlobResult:
        """
        Run the splitter, extractor and classifier over one bulletin text.

        Does not touch the aggregator.
        """
        reports = ReportSplitter.split(text)
        winds = self.extractor.extract_all(reports)
        classifications = DirectionClassifier.classify_all(winds)
        logger.debug(
            "Blob processed: %d reports, %d %s wind groups",
            len(reports), len(winds), self.station,
        )
        return BlobResult(report_count=len(reports), classifications=classifications)

    def run(self, blobs: Sequence[str]) -> WindRunResult:
        """
        Process all bulletin texts and aggregate their wind classifications.

        Args:
            blobs: Bulletin texts, one per input file. Order does not matter.

        Returns:
            WindRunResult with the aggregator's distribution after the run
        """
        start = time.perf_counter()
        expected = len(blobs)
        report_count = 0
        wind_count = 0

        if expected:
            workers = min(self.max_workers, expected)
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [executor.submit(self.process_blob, blob) for blob in blobs]

                for future in as_completed(futures):
                    # Worker defects propagate from result()
                    blob_result = future.result()
                    self.aggregator.record_all(blob_result.classifications)
                    report_count += blob_result.report_count
                    wind_count += blob_result.wind_count

        elapsed = time.perf_counter() - start
        distribution = self.aggregator.snapshot()
        logger.info(
            f"Processed {expected} bulletins for {self.station}: "
            f"{report_count} reports, {wind_count} wind groups in {elapsed:.3f}s"
        )
        return WindRunResult(
            distribution=distribution,
            blob_count=expected,
            report_count=report_count,
            wind_count=wind_count,
            elapsed_seconds=elapsed,
        )


def count_winds(blobs: Sequence[str], station: str = DEFAULT_STATION,
                max_workers: Optional[int] = None) -> WindDistribution:
    """Convenience wrapper returning only the distribution for a set of texts."""
    return WindPipeline(station=station, max_workers=max_workers).run(blobs).distribution
