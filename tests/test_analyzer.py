"""
Unit Tests for ClimateAnalyzer (A1-A4, B1-B3, C1)
"""

import pytest

from clima.analyzer import DELTA_HEADER, RECORD_HEADER, TASKS, ClimateAnalyzer
from clima.errors import IngestError, NotFound, RangeError


@pytest.fixture
def analyzer(base_records):
    return ClimateAnalyzer(records=base_records)


def _temps(records):
    return [r.temperature_celsius for r in records]


class TestConstruction:
    def test_empty_base_raises_ingest_error(self):
        with pytest.raises(IngestError):
            ClimateAnalyzer(records=[])

    def test_from_csv_loads_dataset(self, csv_file):
        a = ClimateAnalyzer.from_csv(str(csv_file))
        assert len(a.records) == 10
        assert a.dataset_path == str(csv_file)

    def test_from_csv_when_missing_file_then_ingest_error(self, tmp_path):
        with pytest.raises(IngestError):
            ClimateAnalyzer.from_csv(str(tmp_path / "nope.csv"))


class TestSingleCountry:
    def test_a1_lowest_and_highest_by_month(self, analyzer):
        assert analyzer.lowest_by_month("united states", 1).temperature_celsius == 5.0
        assert analyzer.highest_by_month("United States", 1).temperature_celsius == 15.0

    def test_a1_unknown_country_raises_not_found(self, analyzer):
        with pytest.raises(NotFound):
            analyzer.lowest_by_month("Atlantis", 1)

    def test_a1_bad_month_raises_range_error(self, analyzer):
        with pytest.raises(RangeError):
            analyzer.highest_by_month("Canada", 13)

    def test_a2_lowest_and_highest_by_year(self, analyzer):
        low = analyzer.lowest_by_year("Canada", 2000)
        high = analyzer.highest_by_year("Canada", 2000)
        assert (low.temperature_celsius, low.month) == (1.0, "Jan")
        assert (high.temperature_celsius, high.month) == (18.0, "Jul")

    def test_a2_missing_year_raises_not_found(self, analyzer):
        with pytest.raises(NotFound):
            analyzer.lowest_by_year("Canada", 2001)

    def test_a3_range_for_country_is_sorted(self, analyzer):
        out = analyzer.within_range_for_country("United States", 5, 15)
        assert _temps(out) == [5.0, 8.0, 15.0]

    def test_a4_lowest_and_highest_overall(self, analyzer):
        assert analyzer.lowest_for_country("Mexico").temperature_celsius == 12.0
        assert analyzer.highest_for_country("Mexico").year == 2016


class TestAllCountries:
    def test_b1_lowest_by_month(self, analyzer):
        out = analyzer.top10_lowest_by_month(1)
        assert [(r.country, r.temperature_celsius) for r in out] == [
            ("Canada", -3.0), ("United States", 5.0), ("Mexico", 12.0),
        ]

    def test_b1_highest_by_month(self, analyzer):
        out = analyzer.top10_highest_by_month(1)
        assert [(r.country, r.temperature_celsius) for r in out] == [
            ("Canada", 1.0), ("Mexico", 14.0), ("United States", 15.0),
        ]

    def test_b1_bad_month_raises_range_error(self, analyzer):
        with pytest.raises(RangeError):
            analyzer.top10_lowest_by_month(0)

    def test_b1_month_without_data_raises_not_found(self, analyzer):
        with pytest.raises(NotFound):
            analyzer.top10_highest_by_month(3)

    def test_b2_lowest_and_highest(self, analyzer):
        assert _temps(analyzer.top10_lowest()) == [-3.0, 5.0, 12.0]
        assert _temps(analyzer.top10_highest()) == [18.0, 20.0, 25.0]

    def test_b2_caps_at_ten_countries(self, rec):
        records = [rec(float(i), country=f"Country{i:02d}", code=f"C{i:02d}") for i in range(12)]
        a = ClimateAnalyzer(records=records)
        assert _temps(a.top10_lowest()) == [float(i) for i in range(10)]
        assert _temps(a.top10_highest()) == [float(i) for i in range(2, 12)]

    def test_b3_all_within_range(self, analyzer):
        assert _temps(analyzer.all_within_range(10, 20)) == [12.0, 14.0, 15.0, 18.0, 20.0]

    def test_b3_empty_range_raises_not_found(self, analyzer):
        with pytest.raises(NotFound):
            analyzer.all_within_range(100, 200)


class TestTop10Delta:
    def test_c1_deltas_sorted_ascending(self, analyzer):
        out = analyzer.top10_delta(1, 2000, 2016)
        assert [(r.country, r.temperature_celsius) for r in out] == [
            ("Mexico", 2.0), ("United States", 3.0), ("Canada", 4.0),
        ]
        assert all(r.is_delta and r.year == 16 for r in out)

    def test_c1_single_country_gives_single_delta(self, rec):
        a = ClimateAnalyzer(records=[rec(5.0, 2000, code="USA"), rec(9.0, 2001, code="USA")])
        out = a.top10_delta(1, 2000, 2001)
        assert len(out) == 1
        assert out[0].temperature_celsius == pytest.approx(4.0)
        assert out[0].year == 1

    def test_c1_no_overlap_returns_empty_list(self, rec):
        a = ClimateAnalyzer(records=[rec(5.0, 2000, country="USA"), rec(3.0, 2001, country="CAN")])
        assert a.top10_delta(1, 2000, 2001) == []

    def test_c1_keeps_lowest_delta_per_country(self, rec):
        records = [rec(5.0, 2000), rec(7.0, 2000), rec(10.0, 2001)]
        out = ClimateAnalyzer(records=records).top10_delta(1, 2000, 2001)
        assert _temps(out) == [pytest.approx(3.0)]

    def test_c1_missing_year_raises_not_found(self, analyzer):
        with pytest.raises(NotFound):
            analyzer.top10_delta(1, 2000, 1990)

    def test_c1_bad_month_raises_range_error(self, analyzer):
        with pytest.raises(RangeError):
            analyzer.top10_delta(13, 2000, 2016)


class TestRunTask:
    def test_catalogue_covers_every_analysis(self):
        assert sorted(TASKS) == ["A1", "A2", "A3", "A4", "B1", "B2", "B3", "C1"]
        assert TASKS["C1"].header == DELTA_HEADER
        assert TASKS["B3"].header == RECORD_HEADER
        assert TASKS["A1"].stem == "taskA1"

    def test_a1_caption_and_records(self, analyzer):
        res = analyzer.run_task("a1", "lowest", country="Canada", month=1)
        assert res.caption == "Task A1 : Lowest Temperature for CANADA in Jan"
        assert _temps(res.records) == [-3.0]

    def test_b3_caption_keeps_float_text(self, analyzer):
        res = analyzer.run_task("B3", low=10.0, high=20.0)
        assert res.caption == "Task B3 : all Temperatures Between 10.0 - 20.0"

    def test_c1_caption(self, analyzer):
        res = analyzer.run_task("C1", month=1, year1=2000, year2=2016)
        assert res.caption == ("Task C1 : Top 10 Countries with the Greatest Temperature "
                               "Differences in Jan from 2000-2016")

    def test_missing_variant_raises_value_error(self, analyzer):
        with pytest.raises(ValueError, match="variant"):
            analyzer.run_task("B2")

    def test_missing_parameter_raises_value_error(self, analyzer):
        with pytest.raises(ValueError, match="month"):
            analyzer.run_task("B1", "highest")
