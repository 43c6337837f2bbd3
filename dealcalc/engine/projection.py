"""Multi-year projection: compounds rent, value and expenses year by year.

Pure computation. No I/O.
"""

from decimal import Decimal, ROUND_HALF_UP

from dealcalc.engine.cashflow import ExpenseBases, cash_on_cash, compute_period
from dealcalc.engine.debt import LoanState, compute_loan, yearly_debt_summary
from dealcalc.engine.errors import InvalidInputError
from dealcalc.models.inputs import PropertyInputs
from dealcalc.models.results import YearlyProjection

TWO_PLACES = Decimal("0.01")
HUNDRED = Decimal("100")


def _growth_factor(rate_pct: Decimal, year: int) -> Decimal:
    """Compounding factor for a 1-indexed year; year 1 is the base year."""
    return (1 + rate_pct / HUNDRED) ** (year - 1)


def property_value(inputs: PropertyInputs, year: int) -> Decimal:
    value = inputs.purchase_price * _growth_factor(inputs.growth.annual_appreciation, year)
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def gross_rent(inputs: PropertyInputs, year: int) -> Decimal:
    """Gross scheduled rent for a 1-indexed year."""
    return inputs.base_annual_rent * _growth_factor(inputs.growth.annual_rent_growth, year)


def expense_bases(inputs: PropertyInputs, year: int) -> ExpenseBases:
    """Dollar-denominated expenses inflated to the given year."""
    inflation = _growth_factor(inputs.growth.inflation_rate, year)

    def inflate(amount: Decimal | None) -> Decimal | None:
        return None if amount is None else amount * inflation

    turnover = inputs.growth.turnover
    return ExpenseBases(
        maintenance=inflate(inputs.maintenance_cost),
        turnover_prep_fee=turnover.prep_fee * inflation if turnover else Decimal("0"),
        property_tax_override=inflate(inputs.property_tax_amount),
        insurance_override=inflate(inputs.insurance_amount),
    )


def build_projections(
    inputs: PropertyInputs,
    loan: LoanState | None = None,
) -> list[YearlyProjection]:
    """One YearlyProjection per year of the horizon, in order."""
    years = inputs.growth.projection_years
    if years <= 0:
        raise InvalidInputError(f"Projection years must be positive: {years}")

    if loan is None:
        loan = compute_loan(inputs.loan_amount, inputs.interest_rate, inputs.loan_term_years)
    yearly_debt = yearly_debt_summary(loan, years)

    projections: list[YearlyProjection] = []
    prior_value: Decimal | None = None

    for year in range(1, years + 1):
        value = property_value(inputs, year)
        period = compute_period(
            inputs,
            gross_rent=gross_rent(inputs, year),
            property_value=value,
            bases=expense_bases(inputs, year),
        )

        debt_year = yearly_debt[year - 1]
        debt_service = debt_year["debt_service"]
        capital_improvements = (
            inputs.capital_improvements if year == 1 else Decimal("0")
        ).quantize(TWO_PLACES, ROUND_HALF_UP)

        # Capital improvements sit below NOI
        cash_flow = period.noi - debt_service - capital_improvements

        balance = debt_year["ending_balance"]
        appreciation = Decimal("0.00") if prior_value is None else value - prior_value
        prior_value = value

        projections.append(YearlyProjection(
            year=year,
            property_value=value,
            appreciation=appreciation,
            gross_rent=period.gross_rent,
            vacancy_loss=period.vacancy_loss,
            effective_gross_income=period.effective_gross_income,
            property_tax=period.property_tax,
            insurance=period.insurance,
            maintenance=period.maintenance,
            management=period.management,
            turnover_cost=period.turnover_cost,
            total_operating_expenses=period.total_operating_expenses,
            capital_improvements=capital_improvements,
            noi=period.noi,
            debt_service=debt_service,
            principal_paid=debt_year["principal"],
            interest_paid=debt_year["interest"],
            cash_flow=cash_flow,
            mortgage_balance=balance,
            equity=value - balance,
            total_return=cash_flow + appreciation,
            cash_on_cash=cash_on_cash(cash_flow, inputs.total_initial_investment),
        ))

    return projections
