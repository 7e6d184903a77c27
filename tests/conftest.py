import pytest
from pathlib import Path

# Bulletin as found in the archive files: sequence number, METAR line, '=' terminator
EGLL_BULLETIN = (
    "# EGLL observations 2019-05-01\n"
    "201905010020 METAR EGLL 010020Z AUTO 24006KT 9999 NCD 08/04 Q1021=\n"
    "201905010050 METAR EGLL 010050Z 25008KT 9999 FEW040 08/04 Q1021=\n"
    "201905010120 METAR EGLL 010120Z VRB02KT CAVOK 07/04 Q1021=\n"
    "201905010150 METAR EGKK 010150Z 09012KT 9999 FEW030 06/03 Q1020=\n"
    "201905010220 METAR EGLL 010220Z 00000KT 9999 NCD 06/04 Q1021=\n"
)

TAF_BULLETIN = (
    "201905010500 TAF EGLL 010458Z 0106/0212 24008KT 9999 SCT035=\n"
    "201905010520 METAR EGLL 010520Z 24006KT 9999 NCD 08/04 Q1021=\n"
)


@pytest.fixture
def egll_bulletin() -> str:
    """Bulletin with three fixed, one variable and one foreign-station report."""
    return EGLL_BULLETIN


@pytest.fixture
def taf_bulletin() -> str:
    """Bulletin opening with a TAF section."""
    return TAF_BULLETIN


@pytest.fixture
def bulletin_dir(tmp_path) -> Path:
    """Return a directory holding a few bulletin files."""
    directory = tmp_path / 'metarfiles'
    directory.mkdir()
    (directory / '20190501.txt').write_text(EGLL_BULLETIN)
    (directory / '20190502.txt').write_text(TAF_BULLETIN)
    (directory / '20190503.txt').write_text(
        "201905030020 METAR EGLL 030020Z 09010KT 9999 FEW040 10/04 Q1018=\n"
    )
    return directory
