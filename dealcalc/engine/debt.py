"""Fixed-rate loan payment, balance and amortization schedule.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from dealcalc.engine.errors import InvalidInputError

TWO_PLACES = Decimal("0.01")
ZERO = Decimal("0")


@dataclass(frozen=True)
class AmortizationPayment:
    period: int
    payment: Decimal
    principal: Decimal
    interest: Decimal
    balance: Decimal


@dataclass(frozen=True)
class LoanState:
    loan_amount: Decimal
    annual_rate: Decimal  # Percent
    term_years: int
    monthly_payment: Decimal  # Unrounded; round when reporting

    @property
    def monthly_rate(self) -> Decimal:
        return self.annual_rate / 1200

    @property
    def total_payments(self) -> int:
        return self.term_years * 12

    @property
    def annual_debt_service(self) -> Decimal:
        return (self.monthly_payment * 12).quantize(TWO_PLACES, ROUND_HALF_UP)

    def balance_after(self, n_periods: int) -> Decimal:
        """Outstanding principal after n payments, to the cent.

        Closed-form future value of the annuity, clamped at zero.
        """
        if n_periods <= 0:
            return self.loan_amount.quantize(TWO_PLACES, ROUND_HALF_UP)
        if n_periods >= self.total_payments:
            return ZERO.quantize(TWO_PLACES)

        r = self.monthly_rate
        if r == 0:
            balance = self.loan_amount - self.monthly_payment * n_periods
        else:
            growth = (1 + r) ** n_periods
            balance = self.loan_amount * growth - self.monthly_payment * (growth - 1) / r
        return max(ZERO, balance).quantize(TWO_PLACES, ROUND_HALF_UP)

    def payments_in_year(self, year: int) -> int:
        """Number of scheduled payments falling in a 1-indexed year."""
        remaining = self.total_payments - (year - 1) * 12
        return max(0, min(12, remaining))


def monthly_payment(principal: Decimal, annual_rate: Decimal, term_years: int) -> Decimal:
    """Fixed monthly payment. annual_rate is a percent (6 means 6%)."""
    n = term_years * 12
    if principal == 0:
        return ZERO
    r = annual_rate / 1200
    if r == 0:
        return principal / n

    # M = P * [r(1+r)^n] / [(1+r)^n - 1]
    factor = (1 + r) ** n
    return principal * (r * factor) / (factor - 1)


def compute_loan(loan_amount: Decimal, annual_rate: Decimal, term_years: int) -> LoanState:
    if loan_amount < 0:
        raise InvalidInputError(f"Loan amount cannot be negative: {loan_amount}")
    if term_years <= 0:
        raise InvalidInputError(f"Loan term must be positive: {term_years}")
    if annual_rate < 0:
        raise InvalidInputError(f"Interest rate cannot be negative: {annual_rate}")

    return LoanState(
        loan_amount=loan_amount,
        annual_rate=annual_rate,
        term_years=term_years,
        monthly_payment=monthly_payment(loan_amount, annual_rate, term_years),
    )


def amortization_schedule(
    loan: LoanState,
    n_periods: int | None = None,
) -> list[AmortizationPayment]:
    """Month-by-month schedule, full term unless n_periods is given."""
    r = loan.monthly_rate
    if n_periods is None:
        n_periods = loan.total_payments
    n_periods = min(n_periods, loan.total_payments)

    payments: list[AmortizationPayment] = []
    balance = loan.loan_amount
    for period in range(1, n_periods + 1):
        interest = balance * r
        principal_paid = loan.monthly_payment - interest

        # Final payment absorbs rounding drift
        if principal_paid > balance or period == loan.total_payments:
            principal_paid = balance
        balance -= principal_paid

        payments.append(AmortizationPayment(
            period=period,
            payment=(interest + principal_paid).quantize(TWO_PLACES, ROUND_HALF_UP),
            principal=principal_paid.quantize(TWO_PLACES, ROUND_HALF_UP),
            interest=interest.quantize(TWO_PLACES, ROUND_HALF_UP),
            balance=balance.quantize(TWO_PLACES, ROUND_HALF_UP),
        ))

    return payments


def yearly_debt_summary(loan: LoanState, years: int) -> list[dict[str, Decimal]]:
    """Aggregate debt by year.

    Returns list of dicts with keys: year, principal, interest, debt_service, ending_balance.
    Debt service stops once the loan is paid off.
    """
    yearly: list[dict[str, Decimal]] = []
    for year in range(1, years + 1):
        opening = loan.balance_after((year - 1) * 12)
        ending = loan.balance_after(year * 12)
        debt_service = (loan.monthly_payment * loan.payments_in_year(year)).quantize(
            TWO_PLACES, ROUND_HALF_UP
        )
        principal = opening - ending
        yearly.append({
            "year": Decimal(year),
            "principal": principal,
            "interest": max(ZERO, debt_service - principal),
            "debt_service": debt_service,
            "ending_balance": ending,
        })
    return yearly
