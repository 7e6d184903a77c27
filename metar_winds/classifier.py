"""Classification of wind tokens into compass sectors."""

import re
import math
import logging
from typing import Iterable, List

from metar_winds.models import WindClassification, WindKind, SECTOR_COUNT, SECTOR_WIDTH

logger = logging.getLogger(__name__)


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, ties away from zero (2.5 -> 3, -2.5 -> -3)."""
    if value < 0:
        return -int(math.floor(-value + 0.5))
    return int(math.floor(value + 0.5))


def sector_for_direction(degrees: float) -> int:
    """
    Map a wind direction to a sector index.

    sector = round(degrees / 45) mod 8, rounding half away from zero.
    Boundaries sit at 22.5°, 67.5°, ... so 22° is North and 23° Northeast,
    and 360° wraps back to North.

    Args:
        degrees: Direction the wind is blowing from

    Returns:
        Sector index in [0, 7]
    """
    return round_half_away_from_zero(degrees / SECTOR_WIDTH) % SECTOR_COUNT


class DirectionClassifier:
    """
    Classify wind tokens as fixed-direction, variable or unrecognized.

    Example:
        DirectionClassifier.classify("24015KT").sector  # 5 (Southwest)
        DirectionClassifier.classify("VRB04KT").kind    # WindKind.VARIABLE
    """

    VARIABLE_PATTERN = re.compile(r'VRB(\d{2})KT', re.ASCII)
    FIXED_PATTERN = re.compile(r'(\d{3})(\d{2})KT', re.ASCII)

    @classmethod
    def classify(cls, token: str) -> WindClassification:
        """
        Classify a single wind token.

        Args:
            token: Wind group such as "24015KT" or "VRB03KT"

        Returns:
            WindClassification; UNRECOGNIZED when neither pattern matches or
            the direction cannot be read
        """
        variable = cls.VARIABLE_PATTERN.search(token)
        if variable:
            return WindClassification(
                token=token,
                kind=WindKind.VARIABLE,
                speed=int(variable.group(1)),
            )

        fixed = cls.FIXED_PATTERN.search(token)
        if fixed:
            try:
                direction = int(fixed.group(1))
                speed = int(fixed.group(2))
            except ValueError:
                logger.debug("Unreadable wind direction in %r", token)
                return WindClassification(token=token, kind=WindKind.UNRECOGNIZED)
            return WindClassification(
                token=token,
                kind=WindKind.FIXED,
                direction=direction,
                speed=speed,
                sector=sector_for_direction(direction),
            )

        return WindClassification(token=token, kind=WindKind.UNRECOGNIZED)

    @classmethod
    def classify_all(cls, tokens: Iterable[str]) -> List[WindClassification]:
        return [cls.classify(token) for token in tokens]
