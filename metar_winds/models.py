"""Wind classification and distribution data models."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Dict, Any, List

SECTOR_COUNT = 8
SECTOR_WIDTH = 360.0 / SECTOR_COUNT


class Sector(Enum):
    """
    Compass sector of 45° width, indexed clockwise from North.

    Sector i covers directions within ±22.5° of i * 45°.
    """

    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7

    @property
    def label(self) -> str:
        """Human readable sector name, e.g. 'Southwest'."""
        return _SECTOR_LABELS[self]

    @property
    def heading(self) -> int:
        """Centre heading of the sector in degrees."""
        return int(self.value * SECTOR_WIDTH)


_SECTOR_LABELS = {
    Sector.N: "North",
    Sector.NE: "Northeast",
    Sector.E: "East",
    Sector.SE: "Southeast",
    Sector.S: "South",
    Sector.SW: "Southwest",
    Sector.W: "West",
    Sector.NW: "Northwest",
}


class WindKind(Enum):
    """Outcome of classifying a wind token."""

    FIXED = "FIXED"
    VARIABLE = "VARIABLE"
    UNRECOGNIZED = "UNRECOGNIZED"


@dataclass(frozen=True)
class WindClassification:
    """
    Classified wind token.

    Attributes:
        token: Raw wind group, e.g. "24015KT" or "VRB03KT"
        kind: FIXED, VARIABLE or UNRECOGNIZED
        direction: Direction in degrees (FIXED only)
        speed: Speed in knots (informational, not counted)
        sector: Sector index 0-7 (FIXED only)
    """

    token: str
    kind: WindKind
    direction: Optional[int] = None
    speed: Optional[int] = None
    sector: Optional[int] = None

    @property
    def is_variable(self) -> bool:
        return self.kind == WindKind.VARIABLE

    @property
    def is_counted(self) -> bool:
        """Whether recording this classification changes the distribution."""
        return self.kind in (WindKind.FIXED, WindKind.VARIABLE)


@dataclass(frozen=True)
class WindDistribution:
    """
    Snapshot of wind-direction frequency per compass sector.

    A variable wind increments every sector once, so
    sum(counts) == fixed_count + SECTOR_COUNT * variable_count.
    """

    counts: Tuple[int, ...] = field(default_factory=lambda: (0,) * SECTOR_COUNT)
    fixed_count: int = 0
    variable_count: int = 0

    def __post_init__(self):
        if len(self.counts) != SECTOR_COUNT:
            raise ValueError(f"Expected {SECTOR_COUNT} sector counts, got {len(self.counts)}")

    @property
    def total(self) -> int:
        return sum(self.counts)

    @property
    def classified_count(self) -> int:
        """Number of wind tokens that contributed to the counts."""
        return self.fixed_count + self.variable_count

    def count_for(self, sector: Sector) -> int:
        return self.counts[sector.value]

    def dominant_sector(self) -> Optional[Sector]:
        """
        Sector with the highest count.

        Returns:
            The first sector (clockwise from North) with the maximum count,
            or None if nothing has been recorded.
        """
        if self.total == 0:
            return None
        best = max(range(SECTOR_COUNT), key=lambda i: (self.counts[i], -i))
        return Sector(best)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'counts': list(self.counts),
            'sectors': {sector.name: self.counts[sector.value] for sector in Sector},
            'fixed_count': self.fixed_count,
            'variable_count': self.variable_count,
        }

    def to_rows(self) -> List[Dict[str, Any]]:
        """One row per sector, in sector order."""
        return [
            {
                'sector': sector.name,
                'label': sector.label,
                'heading': sector.heading,
                'count': self.counts[sector.value],
            }
            for sector in Sector
        ]

    def to_dataframe(self):
        """Distribution as a pandas DataFrame (sector, label, heading, count)."""
        import pandas as pd
        return pd.DataFrame(self.to_rows(), columns=['sector', 'label', 'heading', 'count'])

    def __str__(self) -> str:
        return "[" + " ".join(str(c) for c in self.counts) + "]"
