from .report_splitter import ReportSplitter
from .wind_extractor import WindExtractor

__all__ = [
    'ReportSplitter',
    'WindExtractor',
]
