"""
Splitter turning raw bulletin text into candidate METAR report strings.

Bulletin files interleave METAR reports, TAF sections and comment lines.
Reports may span several lines and are closed by a '=' terminator.
"""

import re
import logging
from typing import Iterator, List

logger = logging.getLogger(__name__)


class ReportSplitter:
    """
    Split bulletin text into candidate METAR reports.

    Lines are scanned in order. Non-comment lines are trimmed of spaces and
    concatenated (no separator) into a buffer that is emitted whenever a line
    carries a '=' terminator. The first line mentioning TAF ends the scan of
    the whole text, including any METAR reports that follow it. A trailing
    buffer with no terminator is dropped.

    Example:
        reports = ReportSplitter.split(
            "201905010020 METAR EGLL 010020Z 24006KT 9999 NCD 08/04 Q1021=\\n"
        )
        # ['201905010020 METAR EGLL 010020Z 24006KT 9999 NCD 08/04 Q1021=']
    """

    # Start of a TAF section, anywhere on the line
    TAF_PATTERN = re.compile(r'TAF')

    # Comment line: anything containing '#'
    COMMENT_PATTERN = re.compile(r'\w*#.*')

    # Report terminator, anywhere on the line
    TERMINATOR_PATTERN = re.compile(r'=')

    @classmethod
    def is_taf_line(cls, line: str) -> bool:
        return cls.TAF_PATTERN.search(line) is not None

    @classmethod
    def is_comment_line(cls, line: str) -> bool:
        return cls.COMMENT_PATTERN.search(line) is not None

    @classmethod
    def is_terminator_line(cls, line: str) -> bool:
        return cls.TERMINATOR_PATTERN.search(line) is not None

    @classmethod
    def iter_reports(cls, text: str) -> Iterator[str]:
        """
        Lazily yield candidate reports from bulletin text.

        Args:
            text: Raw content of one bulletin file

        Yields:
            Candidate report strings, in order of appearance
        """
        buffer = ""
        for line in text.split("\n"):
            if cls.is_taf_line(line):
                break
            if not cls.is_comment_line(line):
                buffer += line.strip(" ")
            if cls.is_terminator_line(line):
                yield buffer
                buffer = ""

    @classmethod
    def split(cls, text: str) -> List[str]:
        """
        Split bulletin text into candidate reports.

        Args:
            text: Raw content of one bulletin file

        Returns:
            List of candidate report strings (possibly empty)
        """
        reports = list(cls.iter_reports(text))
        logger.debug("Split %d candidate reports from %d characters", len(reports), len(text))
        return reports
