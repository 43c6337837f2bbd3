"""Property disposition (sale) at the end of the projection.

No capital gains tax is modeled. Pure functions. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from dealcalc.engine.errors import ContractViolationError
from dealcalc.models.results import ExitAnalysis, YearlyProjection

TWO_PLACES = Decimal("0.01")


def analyze_exit(
    final_year: YearlyProjection | None,
    selling_costs_pct: Decimal,
) -> ExitAnalysis:
    """Sell at the final year's value and pay off the remaining balance.

    Args:
        final_year: Last projection of the series
        selling_costs_pct: Agent fees + closing, percent of sale price
    """
    if final_year is None:
        raise ContractViolationError("Exit analysis requires a non-empty projection series")

    sale_price = final_year.property_value
    selling_costs = (sale_price * selling_costs_pct / 100).quantize(
        TWO_PLACES, ROUND_HALF_UP
    )
    payoff = final_year.mortgage_balance

    return ExitAnalysis(
        projected_sale_price=sale_price,
        selling_costs=selling_costs,
        mortgage_payoff=payoff,
        net_proceeds_from_sale=sale_price - selling_costs - payoff,
    )
