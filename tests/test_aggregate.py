"""Tests for sustainability aggregation."""

import random
from dataclasses import replace
from datetime import date

import pytest

from farmmetrics.scoring.aggregate import (
    METRIC_WEIGHTS,
    aggregate_sustainability,
    average_metrics,
    combine_metric_scores,
    filter_by_crop,
    score_entity,
    weather_multiplier,
)

NORTH_HARVEST = 100 - 20 * 10 / 190 - 5
NORTH_METRICS = {
    "water_efficiency": 99.125,
    "organic_score": 84.0,
    "harvest_efficiency": NORTH_HARVEST,
    "soil_quality": 93.5,
    "rotation": 50.0,
}


def weighted(metrics):
    return sum(metrics[m] * w for m, w in METRIC_WEIGHTS.items())


class TestMetricWeights:
    def test_weights_sum_to_one(self):
        assert sum(METRIC_WEIGHTS.values()) == pytest.approx(1.0)


class TestScoreEntity:
    """Tests for per-entity sub-scores."""

    def test_full_history(self, north_field, weather_series):
        scores = score_entity(north_field, weather_series)
        assert scores.entity_id == 1
        for metric, expected in NORTH_METRICS.items():
            assert scores.as_dict()[metric] == pytest.approx(expected)

    def test_empty_histories_are_no_data(self, bare_field, weather_series):
        scores = score_entity(bare_field, weather_series)
        assert scores.water_efficiency is None
        assert scores.harvest_efficiency is None
        assert scores.rotation is None
        assert scores.organic_score == pytest.approx(70.0)
        assert scores.soil_quality == pytest.approx(70.0)


class TestAverageMetrics:
    def test_skips_entities_without_data(self, north_field, bare_field, weather_series):
        averages = average_metrics([score_entity(e, weather_series) for e in (north_field, bare_field)])
        assert averages["water_efficiency"] == pytest.approx(99.125)
        assert averages["organic_score"] == pytest.approx(77.0)
        assert averages["soil_quality"] == pytest.approx(81.75)
        assert averages["rotation"] == pytest.approx(50.0)

    def test_no_scores(self):
        assert all(v is None for v in average_metrics([]).values())


class TestWeatherMultiplier:
    """Tests for today's weather adjustment."""

    def test_unknown_weather(self):
        assert weather_multiplier(None) == 1.0

    def test_mild_dry_day(self, make_obs):
        assert weather_multiplier(make_obs(date(2024, 6, 1), "Clear")) == 1.0

    def test_wet_day(self, make_obs):
        assert weather_multiplier(make_obs(date(2024, 6, 1), "Rain")) == pytest.approx(0.95)

    def test_extreme_heat(self, make_obs):
        assert weather_multiplier(make_obs(date(2024, 6, 1), "Clear", temp_f=104.0)) == pytest.approx(0.95)

    def test_extreme_cold(self, make_obs):
        assert weather_multiplier(make_obs(date(2024, 1, 1), "Snow", temp_f=14.0)) == pytest.approx(0.95)

    def test_wet_and_extreme_stack(self, make_obs):
        assert weather_multiplier(make_obs(date(2024, 6, 1), "Thunderstorm", temp_f=104.0)) == pytest.approx(0.9025)

    def test_missing_temperature_is_neutral(self, make_obs):
        assert weather_multiplier(make_obs(date(2024, 6, 1), "Clear", temp_f=None)) == 1.0
        assert weather_multiplier(make_obs(date(2024, 6, 1), "Rain", temp_f=None)) == pytest.approx(0.95)


class TestCombineMetricScores:
    """Tests for weighting and renormalization."""

    def test_all_metrics_present(self):
        assert combine_metric_scores(NORTH_METRICS) == pytest.approx(weighted(NORTH_METRICS))

    def test_single_metric_is_renormalized(self):
        """Only rotation has data: the overall score is rotation itself."""
        averages = {m: None for m in METRIC_WEIGHTS} | {"rotation": 60.0}
        assert combine_metric_scores(averages) == pytest.approx(60.0)

    def test_missing_metric_does_not_drag_score_down(self):
        averages = {m: 80.0 for m in METRIC_WEIGHTS} | {"water_efficiency": None}
        assert combine_metric_scores(averages) == pytest.approx(80.0)

    def test_zero_is_data(self):
        averages = {m: None for m in METRIC_WEIGHTS} | {"rotation": 0.0, "soil_quality": 100.0}
        assert combine_metric_scores(averages) == pytest.approx(100.0 * 0.20 / 0.35)

    def test_no_data(self):
        assert combine_metric_scores({m: None for m in METRIC_WEIGHTS}) is None
        assert combine_metric_scores({}) is None

    def test_weather_adjustment(self, make_obs):
        averages = {m: 80.0 for m in METRIC_WEIGHTS}
        assert combine_metric_scores(averages, make_obs(date(2024, 6, 1), "Rain")) == pytest.approx(76.0)


class TestFilterByCrop:
    """Tests for crop selection."""

    def test_case_insensitive(self, north_field, bare_field):
        assert filter_by_crop([north_field, bare_field], "corn") == [north_field]
        assert filter_by_crop([north_field, bare_field], " WHEAT ") == [bare_field]

    @pytest.mark.parametrize("crop", [None, "", "all", "All"])
    def test_no_filter(self, north_field, bare_field, crop):
        assert filter_by_crop([north_field, bare_field], crop) == [north_field, bare_field]

    def test_no_match(self, north_field):
        assert filter_by_crop([north_field], "Rice") == []


class TestAggregateSustainability:
    """Tests for the overall sustainability score."""

    def test_single_entity(self, north_field, weather_series):
        result = aggregate_sustainability([north_field], weather_series)
        assert result is not None
        assert result.entity_count == 1
        assert result.overall == pytest.approx(weighted(NORTH_METRICS))
        assert result.display == 87

    def test_entity_without_history_renormalizes(self, bare_field, weather_series):
        """Only organic and soil have data, both at 70."""
        result = aggregate_sustainability([bare_field], weather_series)
        assert result.overall == pytest.approx(70.0)
        assert result.metrics["water_efficiency"] is None

    def test_no_entities(self, weather_series):
        assert aggregate_sustainability([], weather_series) is None

    def test_no_weather(self, north_field):
        assert aggregate_sustainability([north_field], []) is None

    def test_crop_filter(self, north_field, bare_field, weather_series):
        result = aggregate_sustainability([north_field, bare_field], weather_series, crop="Wheat")
        assert result.entity_count == 1
        assert result.overall == pytest.approx(70.0)

    def test_crop_filter_without_match(self, north_field, weather_series):
        assert aggregate_sustainability([north_field], weather_series, crop="Rice") is None

    def test_as_of_wet_day(self, north_field, weather_series):
        result = aggregate_sustainability([north_field], weather_series, as_of=date(2024, 6, 3))
        assert result.overall == pytest.approx(weighted(NORTH_METRICS) * 0.95)

    def test_as_of_without_weather_is_unadjusted(self, north_field, weather_series):
        result = aggregate_sustainability([north_field], weather_series, as_of=date(2030, 1, 1))
        assert result.overall == pytest.approx(weighted(NORTH_METRICS))

    def test_today_without_temperature_is_unadjusted(self, north_field, weather_series, make_obs):
        today = make_obs(date(2024, 6, 8), "Sunny", temp_f=None)
        result = aggregate_sustainability([north_field], [today] + weather_series)
        assert result.overall == pytest.approx(weighted(NORTH_METRICS))

    def test_order_independent(self, north_field, bare_field, weather_series):
        fields = [north_field, bare_field, replace(north_field, id=3, size="10")]
        expected = aggregate_sustainability(fields, weather_series).overall
        shuffled_weather = weather_series[:1] + random.Random(7).sample(weather_series[1:], 6)
        for seed in range(5):
            shuffled = random.Random(seed).sample(fields, len(fields))
            assert aggregate_sustainability(shuffled, shuffled_weather).overall == pytest.approx(expected)

    def test_deterministic(self, north_field, bare_field, weather_series):
        first = aggregate_sustainability([north_field, bare_field], weather_series)
        second = aggregate_sustainability([north_field, bare_field], weather_series)
        assert first == second

    def test_bounded(self, north_field, bare_field, weather_series):
        result = aggregate_sustainability([north_field, bare_field], weather_series)
        assert 0 <= result.overall <= 100
