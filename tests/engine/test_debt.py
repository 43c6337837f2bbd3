from decimal import Decimal

import pytest

from dealcalc.engine.debt import (
    amortization_schedule,
    compute_loan,
    monthly_payment,
    yearly_debt_summary,
)
from dealcalc.engine.errors import InvalidInputError


class TestMonthlyPayment:
    def test_standard_mortgage(self):
        """$240K loan at 6% for 30 years."""
        pmt = monthly_payment(Decimal("240000"), Decimal("6"), 30)
        # Expected: ~$1,438.92
        assert abs(pmt - Decimal("1438.92")) < Decimal("0.01")

    def test_zero_rate_is_straight_line(self):
        loan = compute_loan(Decimal("240000"), Decimal("0"), 30)
        assert loan.monthly_payment == Decimal("240000") / 360

    def test_zero_principal(self):
        assert monthly_payment(Decimal("0"), Decimal("6"), 30) == Decimal("0")


class TestComputeLoan:
    def test_negative_amount(self):
        with pytest.raises(InvalidInputError):
            compute_loan(Decimal("-1"), Decimal("6"), 30)

    def test_zero_term(self):
        with pytest.raises(InvalidInputError):
            compute_loan(Decimal("240000"), Decimal("6"), 0)

    def test_negative_rate(self):
        with pytest.raises(InvalidInputError):
            compute_loan(Decimal("240000"), Decimal("-0.5"), 30)

    def test_annual_debt_service(self):
        loan = compute_loan(Decimal("240000"), Decimal("6"), 30)
        assert abs(loan.annual_debt_service - Decimal("1438.92") * 12) < Decimal("0.12")


class TestBalanceAfter:
    def test_starts_at_loan_amount(self):
        loan = compute_loan(Decimal("240000"), Decimal("6"), 30)
        assert loan.balance_after(0) == Decimal("240000.00")

    def test_zero_at_term(self):
        loan = compute_loan(Decimal("240000"), Decimal("6"), 30)
        assert loan.balance_after(360) == Decimal("0")
        assert loan.balance_after(361) == Decimal("0")

    def test_non_increasing(self):
        loan = compute_loan(Decimal("240000"), Decimal("6"), 30)
        balances = [loan.balance_after(n) for n in range(0, 361)]
        for prev, cur in zip(balances, balances[1:]):
            assert cur <= prev
        assert all(b >= 0 for b in balances)

    def test_zero_rate_balance(self):
        loan = compute_loan(Decimal("120000"), Decimal("0"), 10)
        assert loan.balance_after(60) == Decimal("60000.00")
        assert loan.balance_after(120) == Decimal("0")

    def test_known_ten_year_balance(self):
        """6% / 30yr keeps roughly 83.7% of principal after 10 years."""
        loan = compute_loan(Decimal("240000"), Decimal("6"), 30)
        assert Decimal("200000") < loan.balance_after(120) < Decimal("201500")

    def test_short_loan_reaches_zero(self):
        loan = compute_loan(Decimal("50000"), Decimal("7"), 5)
        assert loan.balance_after(59) > 0
        assert loan.balance_after(60) == Decimal("0")


class TestAmortizationSchedule:
    def test_payment_count(self):
        loan = compute_loan(Decimal("240000"), Decimal("6"), 30)
        assert len(amortization_schedule(loan)) == 360

    def test_partial_schedule(self):
        loan = compute_loan(Decimal("240000"), Decimal("6"), 30)
        assert len(amortization_schedule(loan, n_periods=84)) == 84

    def test_first_payment_mostly_interest(self):
        loan = compute_loan(Decimal("240000"), Decimal("6"), 30)
        first = amortization_schedule(loan, n_periods=1)[0]
        # 240000 * 0.06/12 = $1,200.00
        assert first.interest == Decimal("1200.00")
        assert first.principal == Decimal("238.92")

    def test_final_balance_zero(self):
        loan = compute_loan(Decimal("240000"), Decimal("6"), 30)
        assert amortization_schedule(loan)[-1].balance == Decimal("0.00")

    def test_matches_closed_form(self):
        loan = compute_loan(Decimal("240000"), Decimal("6"), 30)
        schedule = amortization_schedule(loan)
        for months in (12, 60, 120, 240):
            closed = loan.balance_after(months)
            assert abs(schedule[months - 1].balance - closed) <= Decimal("0.01")


class TestYearlyDebtSummary:
    def test_length(self):
        loan = compute_loan(Decimal("240000"), Decimal("6"), 30)
        assert len(yearly_debt_summary(loan, 10)) == 10

    def test_principal_sums_to_loan(self):
        loan = compute_loan(Decimal("240000"), Decimal("6"), 30)
        yearly = yearly_debt_summary(loan, 30)
        assert sum(y["principal"] for y in yearly) == Decimal("240000.00")

    def test_debt_service_constant_during_loan(self):
        loan = compute_loan(Decimal("240000"), Decimal("6"), 30)
        yearly = yearly_debt_summary(loan, 10)
        assert {y["debt_service"] for y in yearly} == {loan.annual_debt_service}

    def test_interest_plus_principal_is_debt_service(self):
        loan = compute_loan(Decimal("240000"), Decimal("6"), 30)
        for y in yearly_debt_summary(loan, 10):
            assert y["interest"] + y["principal"] == y["debt_service"]

    def test_no_debt_service_after_payoff(self):
        loan = compute_loan(Decimal("50000"), Decimal("7"), 5)
        yearly = yearly_debt_summary(loan, 7)
        assert yearly[4]["ending_balance"] == Decimal("0")
        assert yearly[5]["debt_service"] == Decimal("0")
        assert yearly[6]["principal"] == Decimal("0")
