from dataclasses import replace
from decimal import Decimal

from dealcalc.engine.metrics import compute_property_metrics
from dealcalc.engine.projection import build_projections


class TestSingleFamilyMetrics:
    def test_screening_ratios(self, canonical_inputs):
        year_one = build_projections(canonical_inputs)[0]
        metrics = compute_property_metrics(canonical_inputs, year_one)

        # 300000 / 24000
        assert metrics.gross_rent_multiplier == Decimal("12.5000")
        # 2000 / 300000
        assert metrics.one_percent_rule_value == Decimal("0.6667")
        # 8220 / 22800
        assert metrics.operating_expense_ratio == Decimal("36.0526")
        assert metrics.passes_fifty_percent_rule

    def test_break_even_occupancy(self, canonical_inputs):
        year_one = build_projections(canonical_inputs)[0]
        metrics = compute_property_metrics(canonical_inputs, year_one)
        expected = (
            (year_one.total_operating_expenses + year_one.debt_service)
            / year_one.gross_rent * 100
        )
        assert abs(metrics.break_even_occupancy - expected) < Decimal("0.0001")
        # Negative leverage: break-even occupancy is above 100%
        assert metrics.break_even_occupancy > 100

    def test_size_metrics(self, canonical_inputs):
        year_one = build_projections(canonical_inputs)[0]
        metrics = compute_property_metrics(canonical_inputs, year_one)
        assert metrics.price_per_sqft == Decimal("200.00")
        assert metrics.rent_per_sqft == Decimal("16.00")
        assert metrics.price_per_bedroom == Decimal("100000.00")
        assert metrics.price_per_unit == Decimal("0")

    def test_turnover_impact(self, sfr_with_turnover):
        year_one = build_projections(sfr_with_turnover)[0]
        metrics = compute_property_metrics(sfr_with_turnover, year_one)
        # 750 / 24000
        assert metrics.turnover_cost_impact == Decimal("3.1250")

    def test_missing_size_data(self, canonical_inputs):
        bare = replace(canonical_inputs, square_footage=0, bedrooms=0)
        metrics = compute_property_metrics(bare, build_projections(bare)[0])
        assert metrics.price_per_sqft == Decimal("0")
        assert metrics.price_per_bedroom == Decimal("0")


class TestMultiFamilyMetrics:
    def test_per_unit(self, mf_inputs):
        year_one = build_projections(mf_inputs)[0]
        metrics = compute_property_metrics(mf_inputs, year_one)

        assert metrics.price_per_unit == Decimal("150000.00")
        # 112800 / 72 unit-months
        assert metrics.average_rent_per_unit == Decimal("1566.67")
        # 900000 / 4400 sqft
        assert metrics.price_per_sqft == Decimal("204.55")
        # NOI 106032 - 26268 = 79764 over 6 units
        assert metrics.noi_per_unit == Decimal("13294.00")
        assert metrics.price_per_bedroom == Decimal("0")
