"""Pro forma orchestrator: composes all engine sub-modules into a full analysis.

Pure computation. No I/O. Dataclasses in, AnalysisResult out.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from dealcalc.engine.debt import compute_loan
from dealcalc.engine.disposition import analyze_exit
from dealcalc.engine.metrics import compute_property_metrics
from dealcalc.engine.projection import build_projections
from dealcalc.engine.returns import summarize
from dealcalc.engine.sensitivity import sensitivity_analysis
from dealcalc.engine.validation import validate_inputs
from dealcalc.models.inputs import PropertyInputs
from dealcalc.models.results import (
    AnalysisResult,
    AnnualSnapshot,
    MonthlySnapshot,
    YearlyProjection,
)

logger = logging.getLogger(__name__)

TWO_PLACES = Decimal("0.01")


def _monthly(amount: Decimal) -> Decimal:
    return (amount / 12).quantize(TWO_PLACES, ROUND_HALF_UP)


def _snapshots(
    year_one: YearlyProjection, monthly_payment: Decimal
) -> tuple[MonthlySnapshot, AnnualSnapshot]:
    # Operating cash flow, before one-time capital improvements
    operating_cash_flow = year_one.noi - year_one.debt_service

    annual = AnnualSnapshot(
        gross_income=year_one.gross_rent,
        effective_income=year_one.effective_gross_income,
        operating_expenses=year_one.total_operating_expenses,
        noi=year_one.noi,
        debt_service=year_one.debt_service,
        cash_flow=operating_cash_flow,
    )

    debt = monthly_payment.quantize(TWO_PLACES, ROUND_HALF_UP)
    operating = _monthly(year_one.total_operating_expenses)
    monthly = MonthlySnapshot(
        gross_income=_monthly(year_one.gross_rent),
        effective_income=_monthly(year_one.effective_gross_income),
        operating_expenses=operating,
        debt_service=debt,
        total_expenses=operating + debt,
        cash_flow=_monthly(operating_cash_flow),
        breakdown={
            "property_tax": _monthly(year_one.property_tax),
            "insurance": _monthly(year_one.insurance),
            "maintenance": _monthly(year_one.maintenance),
            "management": _monthly(year_one.management),
            "vacancy": _monthly(year_one.vacancy_loss),
            "turnover": _monthly(year_one.turnover_cost),
        },
    )
    return monthly, annual


def run_analysis(inputs: PropertyInputs, include_sensitivity: bool = True) -> AnalysisResult:
    """Run complete analysis.

    Returns AnalysisResult with yearly projections, exit analysis,
    returns summary, year-1 snapshots, property metrics and, optionally,
    best/worst case sensitivity.
    """
    validate_inputs(inputs)

    loan = compute_loan(inputs.loan_amount, inputs.interest_rate, inputs.loan_term_years)
    projections = build_projections(inputs, loan)
    exit_analysis = analyze_exit(projections[-1], inputs.growth.selling_costs_pct)
    summary = summarize(inputs.total_initial_investment, projections, exit_analysis)

    monthly, annual = _snapshots(projections[0], loan.monthly_payment)

    logger.debug(
        "Analyzed %s deal: price=%s years=%d noi1=%s irr=%s%% (%s)",
        inputs.property_type.value,
        inputs.purchase_price,
        len(projections),
        projections[0].noi,
        summary.irr,
        summary.irr_method.value,
    )

    return AnalysisResult(
        yearly_projections=projections,
        exit_analysis=exit_analysis,
        returns_summary=summary,
        monthly=monthly,
        annual=annual,
        property_metrics=compute_property_metrics(inputs, projections[0]),
        sensitivity=sensitivity_analysis(inputs) if include_sensitivity else None,
    )
