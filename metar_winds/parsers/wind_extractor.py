"""Extraction of wind groups from METAR reports of a single station."""

import re
import logging
from typing import Iterable, List, Optional

from metar_winds.config import DEFAULT_STATION

logger = logging.getLogger(__name__)


class WindExtractor:
    """
    Pull the wind group out of METAR reports for one station.

    A qualifying report looks like:

        [digits] METAR ... <STATION> <digits>Z [A-Z ]* <wind> ... =

    where <wind> is either five digits followed by KT (direction and speed)
    or VRB followed by two digits and KT (variable wind). Only the first
    match of a report is used; reports that do not match yield nothing.

    Example:
        extractor = WindExtractor("EGLL")
        extractor.extract("METAR EGLL 0900Z 24015KT ==")  # '24015KT'
    """

    WIND_GROUP = r'(\d{5}KT|VRB\d{2}KT)'

    def __init__(self, station: str = DEFAULT_STATION):
        """
        Initialize extractor.

        Args:
            station: ICAO identifier of the station whose reports are kept
        """
        station = (station or "").strip().upper()
        if not station:
            raise ValueError("Station identifier must not be empty")
        self.station = station
        self.pattern = re.compile(
            r'\d*\s*METAR'                      # optional bulletin sequence, marker
            r'.*' + re.escape(station) + r' '   # target station
            r'\d*Z '                            # observation time
            r'[A-Z ]*'                          # AUTO, COR and similar groups
            + self.WIND_GROUP +
            r'.*=',                             # rest of the report up to terminator
            re.ASCII,
        )

    def extract(self, report: str) -> Optional[str]:
        """
        Extract the wind token from a candidate report.

        Args:
            report: Candidate report string

        Returns:
            Wind token such as "24015KT" or "VRB03KT", or None if the report
            does not qualify
        """
        match = self.pattern.search(report)
        if match is None:
            return None
        return match.group(1)

    def extract_all(self, reports: Iterable[str]) -> List[str]:
        """Extract wind tokens from all qualifying reports, in order."""
        winds = []
        for report in reports:
            wind = self.extract(report)
            if wind is not None:
                winds.append(wind)
        return winds

    def __repr__(self) -> str:
        return f"WindExtractor(station={self.station!r})"
