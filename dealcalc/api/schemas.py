"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from dealcalc.models.results import IRRMethod


# ---- Request schemas ----

class UnitTypeRequest(BaseModel):
    name: str = "unit"
    count: int = Field(1, ge=1)
    sqft: int = Field(0, ge=0)
    monthly_rent: Decimal = Field(..., ge=0)


class TurnoverRequest(BaseModel):
    """Tenant turnover model; single-family only."""
    average_tenancy_years: Decimal | None = Field(None, gt=0)
    prep_fee: Decimal | None = Field(None, ge=0)
    commission_months: Decimal | None = Field(None, ge=0)


class LongTermAssumptionsRequest(BaseModel):
    projection_years: int | None = Field(None, ge=1, le=100)
    annual_rent_growth: Decimal | None = Field(None, gt=-100)
    annual_appreciation: Decimal | None = Field(None, gt=-100)
    inflation_rate: Decimal | None = Field(None, ge=0)
    vacancy_rate: Decimal | None = Field(None, ge=0, le=100)
    selling_costs_pct: Decimal | None = Field(None, ge=0, le=100)


class AnalyzeRequest(BaseModel):
    purchase_price: Decimal = Field(..., gt=0)
    down_payment: Decimal = Field(..., ge=0)
    interest_rate: Decimal = Field(..., ge=0, description="Annual rate, percent")
    loan_term_years: int = Field(30, ge=1)

    # Income: monthly_rent for SFR, unit_types for MF
    monthly_rent: Decimal = Field(Decimal("0"), ge=0)
    unit_types: list[UnitTypeRequest] = []

    # Expenses (percent rates; dollar amounts override the rate)
    property_tax_rate: Decimal = Field(Decimal("0"), ge=0)
    property_tax_amount: Decimal | None = Field(None, ge=0)
    insurance_rate: Decimal = Field(Decimal("0"), ge=0)
    insurance_amount: Decimal | None = Field(None, ge=0)
    maintenance_cost: Decimal | None = Field(None, ge=0)
    maintenance_pct: Decimal = Field(Decimal("5"), ge=0)
    management_rate: Decimal = Field(Decimal("0"), ge=0)

    closing_costs: Decimal = Field(Decimal("0"), ge=0)
    capital_improvements: Decimal = Field(Decimal("0"), ge=0)

    long_term_assumptions: LongTermAssumptionsRequest | None = None
    turnover: TurnoverRequest | None = None

    square_footage: int = Field(0, ge=0)
    bedrooms: int = Field(0, ge=0)

    include_sensitivity: bool = True


# ---- Response schemas ----

class YearlyProjectionResponse(BaseModel):
    year: int
    property_value: Decimal
    appreciation: Decimal
    gross_rent: Decimal
    vacancy_loss: Decimal
    effective_gross_income: Decimal
    property_tax: Decimal
    insurance: Decimal
    maintenance: Decimal
    management: Decimal
    turnover_cost: Decimal
    total_operating_expenses: Decimal
    capital_improvements: Decimal
    noi: Decimal
    debt_service: Decimal
    principal_paid: Decimal
    interest_paid: Decimal
    cash_flow: Decimal
    mortgage_balance: Decimal
    equity: Decimal
    total_return: Decimal
    cash_on_cash: Decimal


class ExitAnalysisResponse(BaseModel):
    projected_sale_price: Decimal
    selling_costs: Decimal
    mortgage_payoff: Decimal
    net_proceeds_from_sale: Decimal


class ReturnsSummaryResponse(BaseModel):
    total_initial_investment: Decimal
    total_cash_flow: Decimal
    total_appreciation: Decimal
    total_return: Decimal
    irr: Decimal
    irr_converged: bool
    irr_method: IRRMethod
    cap_rate: Decimal
    cash_on_cash: Decimal
    dscr: Decimal
    equity_multiple: Decimal
    average_cash_on_cash: Decimal
    return_on_investment: Decimal


class MonthlyResponse(BaseModel):
    gross_income: Decimal
    effective_income: Decimal
    operating_expenses: Decimal
    debt_service: Decimal
    total_expenses: Decimal
    cash_flow: Decimal
    breakdown: dict[str, Decimal]


class AnnualResponse(BaseModel):
    gross_income: Decimal
    effective_income: Decimal
    operating_expenses: Decimal
    noi: Decimal
    debt_service: Decimal
    cash_flow: Decimal


class PropertyMetricsResponse(BaseModel):
    operating_expense_ratio: Decimal
    break_even_occupancy: Decimal
    gross_rent_multiplier: Decimal
    one_percent_rule_value: Decimal
    passes_fifty_percent_rule: bool
    turnover_cost_impact: Decimal
    price_per_sqft: Decimal
    rent_per_sqft: Decimal
    price_per_bedroom: Decimal
    price_per_unit: Decimal
    noi_per_unit: Decimal
    average_rent_per_unit: Decimal
    operating_expense_per_unit: Decimal


class SensitivityCaseResponse(BaseModel):
    cash_flow: Decimal
    cash_on_cash: Decimal
    noi: Decimal
    dscr: Decimal
    total_return: Decimal
    vacancy_rate: Decimal
    interest_rate: Decimal
    appreciation_rate: Decimal


class SensitivityResponse(BaseModel):
    best_case: SensitivityCaseResponse
    worst_case: SensitivityCaseResponse


class AnalysisResponse(BaseModel):
    property_type: str
    yearly_projections: list[YearlyProjectionResponse]
    exit_analysis: ExitAnalysisResponse
    returns_summary: ReturnsSummaryResponse
    monthly: MonthlyResponse
    annual: AnnualResponse
    property_metrics: PropertyMetricsResponse
    sensitivity: SensitivityResponse | None = None
