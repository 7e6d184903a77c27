"""Tests for the wind pipeline orchestration."""

from itertools import permutations

import pytest

from metar_winds.aggregator import DistributionAggregator, InvariantViolation
from metar_winds.classifier import DirectionClassifier
from metar_winds.models import WindClassification, WindKind, SECTOR_COUNT
from metar_winds.pipeline import WindPipeline, count_winds

EGLL_COUNTS = (2, 1, 1, 1, 1, 2, 2, 1)


class TestProcessBlob:
    """Test the per-bulletin stages."""

    def test_scenario_single_report(self):
        result = WindPipeline(station="EGLL").process_blob("METAR EGLL 0900Z 24015KT ==\n")

        assert result.report_count == 1
        assert result.wind_count == 1
        assert result.classifications[0].direction == 240
        assert result.classifications[0].sector == 5

    def test_bulletin(self, egll_bulletin):
        result = WindPipeline(station="EGLL").process_blob(egll_bulletin)

        assert result.report_count == 5
        assert [c.token for c in result.classifications] == ["24006KT", "25008KT", "VRB02KT", "00000KT"]

    def test_does_not_touch_aggregator(self, egll_bulletin):
        pipeline = WindPipeline(station="EGLL")
        pipeline.process_blob(egll_bulletin)
        assert pipeline.aggregator.counts == (0,) * SECTOR_COUNT


class TestRun:
    """Test full runs over several bulletins."""

    def test_single_bulletin(self, egll_bulletin):
        result = WindPipeline(station="EGLL").run([egll_bulletin])

        assert result.distribution.counts == EGLL_COUNTS
        assert result.distribution.fixed_count == 3
        assert result.distribution.variable_count == 1
        assert result.blob_count == 1
        assert result.report_count == 5
        assert result.wind_count == 4
        assert result.elapsed_seconds >= 0

    def test_no_blobs(self):
        result = WindPipeline().run([])

        assert result.distribution.counts == (0,) * SECTOR_COUNT
        assert result.blob_count == 0

    def test_blob_without_reports_leaves_counts(self, egll_bulletin, taf_bulletin):
        pipeline = WindPipeline(station="EGLL")
        pipeline.run([egll_bulletin])
        before = pipeline.aggregator.counts

        pipeline.run([taf_bulletin, "# nothing here\n", ""])

        assert pipeline.aggregator.counts == before

    def test_order_independent(self, egll_bulletin, taf_bulletin):
        blobs = [
            egll_bulletin,
            taf_bulletin,
            "METAR EGLL 0900Z 09010KT=\nMETAR EGLL 0930Z VRB01KT=\n",
        ]
        results = {
            WindPipeline(station="EGLL", max_workers=2).run(list(order)).distribution.counts
            for order in permutations(blobs)
        }
        assert len(results) == 1

    def test_many_blobs_exact_counts(self):
        blobs = ["METAR EGLL 0900Z 18010KT=\nMETAR EGLL 0930Z VRB02KT=\n"] * 50
        distribution = WindPipeline(station="EGLL", max_workers=8).run(blobs).distribution

        assert distribution.counts[4] == 100
        assert distribution.total == 50 + 8 * 50

    def test_shared_aggregator_accumulates(self, egll_bulletin):
        aggregator = DistributionAggregator()
        WindPipeline(station="EGLL", aggregator=aggregator).run([egll_bulletin])
        WindPipeline(station="EGLL", aggregator=aggregator).run([egll_bulletin])

        assert aggregator.counts == tuple(2 * c for c in EGLL_COUNTS)

    def test_station_filter(self, egll_bulletin):
        distribution = WindPipeline(station="EGKK").run([egll_bulletin]).distribution
        assert distribution.counts == (0, 0, 1, 0, 0, 0, 0, 0)

    def test_worker_defect_propagates(self, monkeypatch, egll_bulletin):
        def broken(token):
            return WindClassification(token=token, kind=WindKind.FIXED, sector=9)

        monkeypatch.setattr(DirectionClassifier, "classify", staticmethod(broken))

        with pytest.raises(InvariantViolation):
            WindPipeline(station="EGLL").run([egll_bulletin])


def test_non_ascii_wind_not_counted():
    distribution = WindPipeline(station="EGLL").run(["METAR EGLL 0900Z \u0662\u0664\u0660\u0661\u0665KT=\n"]).distribution
    assert distribution.counts == (0,) * SECTOR_COUNT


def test_count_winds(egll_bulletin):
    assert count_winds([egll_bulletin], station="EGLL", max_workers=1).counts == EGLL_COUNTS
