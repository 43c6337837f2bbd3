from decimal import Decimal

import pytest

from dealcalc.engine.disposition import analyze_exit
from dealcalc.engine.errors import ContractViolationError
from dealcalc.engine.projection import build_projections
from dealcalc.models.results import YearlyProjection


class TestAnalyzeExit:
    def test_basic_sale(self):
        final = YearlyProjection(
            year=10,
            property_value=Decimal("615000"),
            mortgage_balance=Decimal("375000"),
        )
        result = analyze_exit(final, Decimal("6"))

        assert result.projected_sale_price == Decimal("615000")
        assert result.selling_costs == Decimal("36900.00")
        assert result.mortgage_payoff == Decimal("375000")
        assert result.net_proceeds_from_sale == Decimal("203100.00")

    def test_exit_identity(self, canonical_inputs):
        final = build_projections(canonical_inputs)[-1]
        result = analyze_exit(final, canonical_inputs.growth.selling_costs_pct)
        assert result.projected_sale_price == final.property_value
        assert result.mortgage_payoff == final.mortgage_balance
        assert result.net_proceeds_from_sale == (
            result.projected_sale_price - result.selling_costs - result.mortgage_payoff
        )

    def test_paid_off_loan(self):
        final = YearlyProjection(year=30, property_value=Decimal("500000"))
        result = analyze_exit(final, Decimal("5"))
        assert result.mortgage_payoff == Decimal("0")
        assert result.net_proceeds_from_sale == Decimal("475000.00")

    def test_underwater_sale_is_negative(self):
        final = YearlyProjection(
            year=2,
            property_value=Decimal("200000"),
            mortgage_balance=Decimal("195000"),
        )
        result = analyze_exit(final, Decimal("6"))
        assert result.net_proceeds_from_sale == Decimal("-7000.00")

    def test_empty_series_rejected(self):
        with pytest.raises(ContractViolationError):
            analyze_exit(None, Decimal("6"))
