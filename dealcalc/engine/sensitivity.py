"""Best / worst case sensitivity: re-run the projection under shifted assumptions.

Best case:  rent +5%, expenses -5%, vacancy -2pts (min 1%), appreciation 20% better, rate -0.5pts
Worst case: rent -5%, expenses +10%, vacancy +3pts, appreciation 30% worse, rate +1pt

Appreciation shifts by a share of its own magnitude, so a declining market
improves in the best case (-10% becomes -8%) and never drops to -100% or below.
"""

from dataclasses import dataclass, replace
from decimal import Decimal

from dealcalc.engine.disposition import analyze_exit
from dealcalc.engine.projection import build_projections
from dealcalc.engine.returns import summarize
from dealcalc.engine.validation import validate_inputs
from dealcalc.models.inputs import PropertyInputs
from dealcalc.models.results import SensitivityAnalysis, SensitivityCase


@dataclass(frozen=True)
class Shock:
    rent_factor: Decimal
    expense_factor: Decimal
    vacancy_delta: Decimal  # Percentage points
    appreciation_factor: Decimal  # Applied to the magnitude: >1 improves, <1 worsens
    rate_delta: Decimal  # Percentage points


BEST_CASE = Shock(
    rent_factor=Decimal("1.05"),
    expense_factor=Decimal("0.95"),
    vacancy_delta=Decimal("-2"),
    appreciation_factor=Decimal("1.2"),
    rate_delta=Decimal("-0.5"),
)
WORST_CASE = Shock(
    rent_factor=Decimal("0.95"),
    expense_factor=Decimal("1.10"),
    vacancy_delta=Decimal("3"),
    appreciation_factor=Decimal("0.7"),
    rate_delta=Decimal("1"),
)

MIN_VACANCY = Decimal("1")
MIN_APPRECIATION = Decimal("-99")


def _scaled(value: Decimal | None, factor: Decimal) -> Decimal | None:
    return None if value is None else value * factor


def _shifted_appreciation(rate: Decimal, shock: Shock) -> Decimal:
    shifted = rate + abs(rate) * (shock.appreciation_factor - 1)
    return max(MIN_APPRECIATION, shifted)


def apply_shock(inputs: PropertyInputs, shock: Shock) -> PropertyInputs:
    growth = inputs.growth
    vacancy = min(Decimal("100"), max(MIN_VACANCY, growth.vacancy_rate + shock.vacancy_delta))
    turnover = growth.turnover
    if turnover is not None:
        turnover = replace(turnover, prep_fee=turnover.prep_fee * shock.expense_factor)

    f = shock.expense_factor
    return replace(
        inputs,
        interest_rate=max(Decimal("0"), inputs.interest_rate + shock.rate_delta),
        monthly_rent=inputs.monthly_rent * shock.rent_factor,
        unit_types=tuple(
            replace(u, monthly_rent=u.monthly_rent * shock.rent_factor)
            for u in inputs.unit_types
        ),
        property_tax_rate=inputs.property_tax_rate * f,
        property_tax_amount=_scaled(inputs.property_tax_amount, f),
        insurance_rate=inputs.insurance_rate * f,
        insurance_amount=_scaled(inputs.insurance_amount, f),
        maintenance_cost=_scaled(inputs.maintenance_cost, f),
        maintenance_pct=inputs.maintenance_pct * f,
        management_rate=inputs.management_rate * f,
        growth=replace(
            growth,
            vacancy_rate=vacancy,
            annual_appreciation=_shifted_appreciation(growth.annual_appreciation, shock),
            turnover=turnover,
        ),
    )


def run_case(inputs: PropertyInputs, shock: Shock) -> SensitivityCase:
    shocked = apply_shock(inputs, shock)
    validate_inputs(shocked)
    projections = build_projections(shocked)
    exit_analysis = analyze_exit(projections[-1], shocked.growth.selling_costs_pct)
    summary = summarize(shocked.total_initial_investment, projections, exit_analysis)
    year_one = projections[0]

    return SensitivityCase(
        cash_flow=year_one.cash_flow,
        cash_on_cash=summary.cash_on_cash,
        noi=year_one.noi,
        dscr=summary.dscr,
        total_return=summary.total_return,
        vacancy_rate=shocked.growth.vacancy_rate,
        interest_rate=shocked.interest_rate,
        appreciation_rate=shocked.growth.annual_appreciation,
    )


def sensitivity_analysis(inputs: PropertyInputs) -> SensitivityAnalysis:
    return SensitivityAnalysis(
        best_case=run_case(inputs, BEST_CASE),
        worst_case=run_case(inputs, WORST_CASE),
    )
