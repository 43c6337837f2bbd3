from dataclasses import asdict, dataclass, field
from decimal import Decimal
from enum import Enum


@dataclass(frozen=True)
class PeriodSnapshot:
    """Income and operating expenses for a single period."""
    gross_rent: Decimal
    vacancy_loss: Decimal
    effective_gross_income: Decimal
    property_tax: Decimal
    insurance: Decimal
    maintenance: Decimal
    management: Decimal
    turnover_cost: Decimal
    total_operating_expenses: Decimal  # Excludes vacancy (already out of EGI)
    noi: Decimal


@dataclass(frozen=True)
class YearlyProjection:
    year: int

    # Value
    property_value: Decimal = Decimal("0")
    appreciation: Decimal = Decimal("0")  # Change vs prior year; 0 in year 1

    # Income
    gross_rent: Decimal = Decimal("0")
    vacancy_loss: Decimal = Decimal("0")
    effective_gross_income: Decimal = Decimal("0")

    # Expenses
    property_tax: Decimal = Decimal("0")
    insurance: Decimal = Decimal("0")
    maintenance: Decimal = Decimal("0")
    management: Decimal = Decimal("0")
    turnover_cost: Decimal = Decimal("0")
    total_operating_expenses: Decimal = Decimal("0")
    capital_improvements: Decimal = Decimal("0")  # Year 1 only, below NOI

    # Operations
    noi: Decimal = Decimal("0")
    debt_service: Decimal = Decimal("0")
    principal_paid: Decimal = Decimal("0")
    interest_paid: Decimal = Decimal("0")
    cash_flow: Decimal = Decimal("0")

    # Equity
    mortgage_balance: Decimal = Decimal("0")
    equity: Decimal = Decimal("0")
    total_return: Decimal = Decimal("0")  # Cash flow + appreciation

    cash_on_cash: Decimal = Decimal("0")


@dataclass(frozen=True)
class ExitAnalysis:
    projected_sale_price: Decimal
    selling_costs: Decimal
    mortgage_payoff: Decimal
    net_proceeds_from_sale: Decimal


class IRRMethod(Enum):
    NEWTON = "newton"
    BISECTION = "bisection"
    NONE = "none"  # No root attempted or found


@dataclass(frozen=True)
class IRRResult:
    irr: Decimal  # Percent
    converged: bool
    method: IRRMethod
    iterations: int = 0


@dataclass(frozen=True)
class ReturnsSummary:
    total_initial_investment: Decimal
    total_cash_flow: Decimal
    total_appreciation: Decimal
    total_return: Decimal
    irr: Decimal  # Percent
    irr_converged: bool
    irr_method: IRRMethod
    cap_rate: Decimal  # Percent, year 1
    cash_on_cash: Decimal  # Percent, year 1
    dscr: Decimal  # Year 1
    equity_multiple: Decimal
    average_cash_on_cash: Decimal = Decimal("0")
    return_on_investment: Decimal = Decimal("0")  # Percent
    cash_flows: list[Decimal] = field(default_factory=list)  # Stream used for IRR


@dataclass(frozen=True)
class MonthlySnapshot:
    gross_income: Decimal
    effective_income: Decimal
    operating_expenses: Decimal
    debt_service: Decimal
    total_expenses: Decimal
    cash_flow: Decimal
    breakdown: dict[str, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class AnnualSnapshot:
    gross_income: Decimal
    effective_income: Decimal
    operating_expenses: Decimal
    noi: Decimal
    debt_service: Decimal
    cash_flow: Decimal


@dataclass(frozen=True)
class PropertyMetrics:
    operating_expense_ratio: Decimal = Decimal("0")
    break_even_occupancy: Decimal = Decimal("0")
    gross_rent_multiplier: Decimal = Decimal("0")
    one_percent_rule_value: Decimal = Decimal("0")
    passes_fifty_percent_rule: bool = False
    turnover_cost_impact: Decimal = Decimal("0")
    price_per_sqft: Decimal = Decimal("0")

    # SFR
    rent_per_sqft: Decimal = Decimal("0")
    price_per_bedroom: Decimal = Decimal("0")

    # MF
    price_per_unit: Decimal = Decimal("0")
    noi_per_unit: Decimal = Decimal("0")
    average_rent_per_unit: Decimal = Decimal("0")
    operating_expense_per_unit: Decimal = Decimal("0")


@dataclass(frozen=True)
class SensitivityCase:
    cash_flow: Decimal
    cash_on_cash: Decimal
    noi: Decimal
    dscr: Decimal
    total_return: Decimal
    vacancy_rate: Decimal
    interest_rate: Decimal
    appreciation_rate: Decimal


@dataclass(frozen=True)
class SensitivityAnalysis:
    best_case: SensitivityCase
    worst_case: SensitivityCase


@dataclass
class AnalysisResult:
    yearly_projections: list[YearlyProjection]
    exit_analysis: ExitAnalysis
    returns_summary: ReturnsSummary
    monthly: MonthlySnapshot | None = None
    annual: AnnualSnapshot | None = None
    property_metrics: PropertyMetrics = field(default_factory=PropertyMetrics)
    sensitivity: SensitivityAnalysis | None = None

    def as_dict(self) -> dict:
        """Plain nested structure: Decimals and Enums stay as-is for the caller to encode."""
        return asdict(self)
