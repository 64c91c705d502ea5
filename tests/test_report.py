"""Tests for sustainability report figures."""

from dataclasses import replace
from datetime import date

import pytest

from farmmetrics.data.records import FertilizerApplication, FinancialEntry
from farmmetrics.scoring.report import (
    COST_CATEGORIES,
    RECOMMENDATIONS,
    Rating,
    build_sustainability_report,
    cost_breakdown,
    organic_application_ratio,
    organic_practices_adoption,
    rate_score,
    recommend,
    water_savings,
)


class TestRateScore:
    @pytest.mark.parametrize(
        "score,expected",
        [
            (100, Rating.EXCELLENT),
            (80, Rating.EXCELLENT),
            (79.9, Rating.GOOD),
            (60, Rating.GOOD),
            (59, Rating.MODERATE),
            (40, Rating.MODERATE),
            (39.9, Rating.POOR),
            (0, Rating.POOR),
        ],
    )
    def test_bands(self, score, expected):
        assert rate_score(score) == expected

    def test_every_band_has_a_description(self):
        assert all(rating.description for rating in Rating)


class TestReportFigures:
    """Tests for the headline report numbers."""

    def test_water_savings_against_baseline(self, north_field):
        """40 acres x 100 gal baseline, 3500 gal used."""
        assert water_savings([north_field]) == pytest.approx(500.0)

    def test_water_savings_never_negative(self, north_field):
        assert water_savings([replace(north_field, size="10")]) == 0.0

    def test_water_savings_unusable_size(self, bare_field):
        assert water_savings([bare_field]) == 0.0

    def test_organic_ratio_by_count(self, north_field):
        assert organic_application_ratio([north_field]) == pytest.approx(0.5)

    def test_organic_ratio_default(self, bare_field):
        assert organic_application_ratio([bare_field]) == pytest.approx(0.5)

    def test_organic_ratio_across_entities(self, north_field, bare_field):
        manured = replace(
            bare_field,
            fertilizer_history=(FertilizerApplication(type="Manure", amount=50, date=None),),
        )
        assert organic_application_ratio([north_field, manured]) == pytest.approx(2 / 3)

    def test_adoption_averages_organic_matter(self, north_field, bare_field):
        """Missing organic matter counts as 0: (3 + 0) / 2 rounds to 2."""
        assert organic_practices_adoption([north_field]) == 3
        assert organic_practices_adoption([north_field, bare_field]) == 2

    def test_adoption_is_percent_not_scaled(self, north_field):
        """Organic matter is already a percent; 250 caps at 100."""
        rich = replace(north_field, organic_matter_percent=250.0)
        assert organic_practices_adoption([rich]) == 100

    def test_adoption_no_entities(self):
        assert organic_practices_adoption([]) == 0


class TestRecommend:
    def test_only_weak_scored_metrics(self):
        metrics = {
            "water_efficiency": 79.0,
            "organic_score": 80.0,
            "harvest_efficiency": None,
            "soil_quality": 95.0,
            "rotation": 10.0,
        }
        assert recommend(metrics) == [RECOMMENDATIONS["water_efficiency"], RECOMMENDATIONS["rotation"]]

    def test_all_strong(self):
        assert recommend({m: 90.0 for m in RECOMMENDATIONS}) == []


class TestBuildSustainabilityReport:
    """Tests for assembling a full report."""

    def test_report_for_one_field(self, north_field, weather_series):
        report = build_sustainability_report([north_field], weather_series)
        assert report is not None
        assert report.score.display == 87
        assert report.rating == Rating.EXCELLENT
        assert report.water_savings == pytest.approx(500.0)
        assert report.chemical_reduction == 50
        assert report.organic_practices_adoption == 3
        assert report.recommendations == [RECOMMENDATIONS["rotation"]]

    def test_crop_filter_applies_to_figures(self, north_field, bare_field, weather_series):
        report = build_sustainability_report([north_field, bare_field], weather_series, crop="wheat")
        assert report.score.entity_count == 1
        assert report.water_savings == 0.0
        assert report.organic_practices_adoption == 0

    def test_unavailable(self, north_field):
        assert build_sustainability_report([north_field], []) is None
        assert build_sustainability_report([], []) is None


class TestCostBreakdown:
    """Tests for grouping expenses into cost categories."""

    def test_groups_expenses(self, financial_entries):
        totals = cost_breakdown(financial_entries)
        assert list(totals) == list(COST_CATEGORIES)
        assert totals["Seeds"] == pytest.approx(1200.0)
        assert totals["Fertilizer"] == pytest.approx(800.0)
        assert totals["Labor"] == pytest.approx(2000.0)
        assert totals["Other"] == 0.0

    def test_unknown_type_is_other(self):
        entries = [
            FinancialEntry(date=date(2024, 1, 1), category="expense", type="Insurance", amount=300.0),
            FinancialEntry(date=date(2024, 1, 1), category="expense", type=" fuel ", amount=50.0),
        ]
        totals = cost_breakdown(entries)
        assert totals["Other"] == pytest.approx(300.0)
        assert totals["Fuel"] == pytest.approx(50.0)

    def test_filters_by_entity(self, financial_entries):
        totals = cost_breakdown(financial_entries, entity_ids={1})
        assert totals["Fertilizer"] == 0.0
        assert totals["Seeds"] == pytest.approx(1200.0)
