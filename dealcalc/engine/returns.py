"""Return metrics over the whole hold: IRR, equity multiple, year-1 ratios.

Pure functions. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from dealcalc.engine.cashflow import cap_rate, cash_on_cash, dscr
from dealcalc.engine.errors import ContractViolationError
from dealcalc.engine.irr import compute_equity_multiple, compute_irr
from dealcalc.models.results import ExitAnalysis, ReturnsSummary, YearlyProjection

FOUR_PLACES = Decimal("0.0001")


def cash_flow_stream(
    initial_investment: Decimal,
    projections: list[YearlyProjection],
    exit_analysis: ExitAnalysis,
) -> list[Decimal]:
    """[-investment, CF1, ..., CFn + net sale proceeds]."""
    flows = [-initial_investment] + [p.cash_flow for p in projections]
    flows[-1] += exit_analysis.net_proceeds_from_sale
    return flows


def summarize(
    initial_investment: Decimal,
    projections: list[YearlyProjection],
    exit_analysis: ExitAnalysis,
) -> ReturnsSummary:
    if not projections:
        raise ContractViolationError("Returns summary requires a non-empty projection series")

    first, final = projections[0], projections[-1]
    # Year 1 is uncompounded, so its value is the purchase price
    purchase_price = first.property_value

    flows = cash_flow_stream(initial_investment, projections, exit_analysis)
    irr = compute_irr(flows)

    total_cash_flow = sum((p.cash_flow for p in projections), Decimal("0"))
    total_return = total_cash_flow + exit_analysis.net_proceeds_from_sale - initial_investment

    avg_coc = sum((p.cash_on_cash for p in projections), Decimal("0")) / len(projections)
    if initial_investment == 0:
        roi = Decimal("0")
    else:
        roi = (total_return / initial_investment * 100).quantize(FOUR_PLACES, ROUND_HALF_UP)

    return ReturnsSummary(
        total_initial_investment=initial_investment,
        total_cash_flow=total_cash_flow,
        total_appreciation=final.property_value - purchase_price,
        total_return=total_return,
        irr=irr.irr,
        irr_converged=irr.converged,
        irr_method=irr.method,
        cap_rate=cap_rate(first.noi, purchase_price),
        cash_on_cash=cash_on_cash(first.cash_flow, initial_investment),
        dscr=dscr(first.noi, first.debt_service),
        equity_multiple=compute_equity_multiple(
            initial_investment + total_return, initial_investment
        ),
        average_cash_on_cash=avg_coc.quantize(FOUR_PLACES, ROUND_HALF_UP),
        return_on_investment=roi,
        cash_flows=flows,
    )
