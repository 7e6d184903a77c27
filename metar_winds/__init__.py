"""
Wind direction distribution from METAR bulletin files.

This package scans aviation weather bulletins, extracts the wind group of
every METAR report for one station and counts wind directions per 45°
compass sector.

The main public API includes:
- ReportSplitter: Split bulletin text into candidate METAR reports
- WindExtractor: Extract wind groups for a target station
- DirectionClassifier: Classify wind groups into compass sectors
- DistributionAggregator: Thread-safe per-sector counts
- WindPipeline: Concurrent orchestration over many bulletins
- DirectorySource: Read bulletins from a directory

Example:
    from metar_winds import DirectorySource, WindPipeline

    blobs = DirectorySource("./metarfiles").read_blobs()
    result = WindPipeline(station="EGLL").run(blobs)
    print(result.distribution)  # [n0 n1 n2 n3 n4 n5 n6 n7]
"""

from metar_winds.models import (
    Sector,
    WindKind,
    WindClassification,
    WindDistribution,
    SECTOR_COUNT,
)
from metar_winds.parsers import ReportSplitter, WindExtractor
from metar_winds.classifier import DirectionClassifier, sector_for_direction
from metar_winds.aggregator import DistributionAggregator, InvariantViolation
from metar_winds.pipeline import WindPipeline, WindRunResult, BlobResult, count_winds
from metar_winds.sources import BulletinSource, BulletinSourceError, DirectorySource

__version__ = '0.1.0'
__all__ = [
    'Sector',
    'WindKind',
    'WindClassification',
    'WindDistribution',
    'SECTOR_COUNT',
    'ReportSplitter',
    'WindExtractor',
    'DirectionClassifier',
    'sector_for_direction',
    'DistributionAggregator',
    'InvariantViolation',
    'WindPipeline',
    'WindRunResult',
    'BlobResult',
    'count_winds',
    'BulletinSource',
    'BulletinSourceError',
    'DirectorySource',
]
