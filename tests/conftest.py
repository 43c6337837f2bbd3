"""Canonical test fixtures used across all engine tests.

Fixture: $300K single-family rental, $60K down, 6% rate, 30yr fixed,
$2,000/mo rent, 10-year hold.
"""

import pytest
from dataclasses import replace
from decimal import Decimal

from dealcalc.models.inputs import (
    GrowthAssumptions,
    PropertyInputs,
    PropertyType,
    TurnoverAssumptions,
    UnitType,
)


@pytest.fixture
def canonical_growth() -> GrowthAssumptions:
    return GrowthAssumptions(
        projection_years=10,
        annual_rent_growth=Decimal("2"),
        annual_appreciation=Decimal("3"),
        inflation_rate=Decimal("2"),
        vacancy_rate=Decimal("5"),
        selling_costs_pct=Decimal("6"),
    )


@pytest.fixture
def canonical_inputs(canonical_growth) -> PropertyInputs:
    """$300K SFR with standard assumptions, no turnover model."""
    return PropertyInputs(
        property_type=PropertyType.SFR,
        purchase_price=Decimal("300000"),
        down_payment=Decimal("60000"),
        interest_rate=Decimal("6"),
        loan_term_years=30,
        monthly_rent=Decimal("2000"),
        property_tax_rate=Decimal("1.2"),
        insurance_rate=Decimal("0.5"),
        management_rate=Decimal("8"),
        growth=canonical_growth,
        square_footage=1500,
        bedrooms=3,
    )


@pytest.fixture
def sfr_with_turnover(canonical_inputs, canonical_growth) -> PropertyInputs:
    """Same deal with default turnover model, closing costs and a year-1 rehab."""
    return replace(
        canonical_inputs,
        closing_costs=Decimal("5000"),
        capital_improvements=Decimal("10000"),
        growth=replace(canonical_growth, turnover=TurnoverAssumptions()),
    )


@pytest.fixture
def mf_inputs() -> PropertyInputs:
    """Six-unit building: four 1BR and two 2BR."""
    return PropertyInputs(
        property_type=PropertyType.MF,
        purchase_price=Decimal("900000"),
        down_payment=Decimal("225000"),
        closing_costs=Decimal("15000"),
        interest_rate=Decimal("6.5"),
        loan_term_years=30,
        unit_types=(
            UnitType(name="1BR", count=4, sqft=650, monthly_rent=Decimal("1400")),
            UnitType(name="2BR", count=2, sqft=900, monthly_rent=Decimal("1900")),
        ),
        property_tax_rate=Decimal("1.1"),
        insurance_rate=Decimal("0.4"),
        maintenance_cost=Decimal("6000"),
        management_rate=Decimal("6"),
        growth=GrowthAssumptions(
            projection_years=7,
            annual_rent_growth=Decimal("3"),
            annual_appreciation=Decimal("3"),
            inflation_rate=Decimal("2.5"),
            vacancy_rate=Decimal("6"),
            selling_costs_pct=Decimal("5"),
        ),
    )
