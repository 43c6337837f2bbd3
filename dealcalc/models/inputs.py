from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class PropertyType(Enum):
    SFR = "sfr"
    MF = "mf"


@dataclass(frozen=True)
class UnitType:
    """One row of a multi-family unit mix."""
    name: str
    count: int
    sqft: int
    monthly_rent: Decimal


@dataclass(frozen=True)
class TurnoverAssumptions:
    """Expected cost of replacing a tenant (single-family only)."""
    average_tenancy_years: Decimal = Decimal("2")
    prep_fee: Decimal = Decimal("500")  # Cleaning, paint, touch-ups
    commission_months: Decimal = Decimal("0.5")  # Leasing fee as months of rent


@dataclass(frozen=True)
class GrowthAssumptions:
    projection_years: int = 5
    annual_rent_growth: Decimal = Decimal("3")  # Percent
    annual_appreciation: Decimal = Decimal("3")  # Percent
    inflation_rate: Decimal = Decimal("2")  # Percent, applied to operating expenses
    vacancy_rate: Decimal = Decimal("5")  # Percent
    selling_costs_pct: Decimal = Decimal("6")  # Agent fees + closing at exit
    turnover: TurnoverAssumptions | None = None


@dataclass(frozen=True)
class PropertyInputs:
    # Purchase
    purchase_price: Decimal
    down_payment: Decimal
    property_type: PropertyType = PropertyType.SFR
    closing_costs: Decimal = Decimal("0")
    capital_improvements: Decimal = Decimal("0")  # One-time, paid in year 1

    # Financing (fixed rate)
    interest_rate: Decimal = Decimal("7")  # Annual, percent
    loan_term_years: int = 30

    # Income
    monthly_rent: Decimal = Decimal("0")  # SFR
    unit_types: tuple[UnitType, ...] = ()  # MF

    # Expenses. Dollar amounts, when given, win over the matching rate.
    property_tax_rate: Decimal = Decimal("0")  # % of property value
    property_tax_amount: Decimal | None = None  # Annual
    insurance_rate: Decimal = Decimal("0")  # % of property value
    insurance_amount: Decimal | None = None  # Annual
    maintenance_cost: Decimal | None = None  # Annual
    maintenance_pct: Decimal = Decimal("5")  # % of gross rent, used without maintenance_cost
    management_rate: Decimal = Decimal("0")  # % of gross rent

    growth: GrowthAssumptions = field(default_factory=GrowthAssumptions)

    # Descriptive, only used for per-sqft / per-bedroom metrics
    square_footage: int = 0
    bedrooms: int = 0

    @property
    def loan_amount(self) -> Decimal:
        return self.purchase_price - self.down_payment

    @property
    def total_initial_investment(self) -> Decimal:
        """Cash in at closing. Capital improvements come out of year 1 cash flow instead."""
        return self.down_payment + self.closing_costs

    @property
    def monthly_gross_rent(self) -> Decimal:
        if self.property_type is PropertyType.MF:
            return sum(
                (u.monthly_rent * u.count for u in self.unit_types), Decimal("0")
            )
        return self.monthly_rent

    @property
    def base_annual_rent(self) -> Decimal:
        return self.monthly_gross_rent * 12

    @property
    def total_units(self) -> int:
        if self.property_type is PropertyType.MF:
            return sum(u.count for u in self.unit_types)
        return 1

    @property
    def total_sqft(self) -> int:
        if self.property_type is PropertyType.MF:
            return sum(u.sqft * u.count for u in self.unit_types)
        return self.square_footage

    @property
    def tracks_turnover(self) -> bool:
        return self.property_type is PropertyType.SFR and self.growth.turnover is not None
