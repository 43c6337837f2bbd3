"""Single-period cash flow: EGI, itemized operating expenses, NOI.

Also the year-1 ratios (cap rate, CoC return, DSCR).

Pure functions: Decimal in, Decimal out. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from dealcalc.models.inputs import PropertyInputs
from dealcalc.models.results import PeriodSnapshot

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")
HUNDRED = Decimal("100")

MAX_TURNOVER_PROBABILITY = Decimal("0.9")
BASELINE_VACANCY = Decimal("5")  # Turnover probability is normalized to a 5% vacancy market


@dataclass(frozen=True)
class ExpenseBases:
    """Expense inputs for one period, already inflated by the caller."""
    maintenance: Decimal | None = None  # Annual dollars; None means % of rent
    turnover_prep_fee: Decimal = Decimal("0")
    property_tax_override: Decimal | None = None
    insurance_override: Decimal | None = None


def _money(value: Decimal) -> Decimal:
    return value.quantize(TWO_PLACES, ROUND_HALF_UP)


def vacancy_loss(gross_rent: Decimal, vacancy_rate: Decimal) -> Decimal:
    return _money(gross_rent * vacancy_rate / HUNDRED)


def effective_gross_income(gross_rent: Decimal, vacancy_rate: Decimal) -> Decimal:
    """EGI = gross rent - vacancy loss."""
    return _money(gross_rent) - vacancy_loss(gross_rent, vacancy_rate)


def turnover_probability(average_tenancy_years: Decimal, vacancy_rate: Decimal) -> Decimal:
    """Annual chance of a tenant turnover, capped at 90%.

    Base rate is 1 / tenancy length, scaled by vacancy relative to a 5% market.
    """
    if average_tenancy_years <= 0:
        return MAX_TURNOVER_PROBABILITY
    base = 1 / average_tenancy_years
    return min(MAX_TURNOVER_PROBABILITY, base * (vacancy_rate / BASELINE_VACANCY))


def turnover_cost(
    gross_rent: Decimal,
    prep_fee: Decimal,
    commission_months: Decimal,
    probability: Decimal,
) -> Decimal:
    """Annualized expected turnover cost: (prep + leasing commission) * probability."""
    one_month_rent = gross_rent / 12
    return _money((prep_fee + one_month_rent * commission_months) * probability)


def compute_period(
    inputs: PropertyInputs,
    gross_rent: Decimal,
    property_value: Decimal,
    bases: ExpenseBases,
) -> PeriodSnapshot:
    """Income and expense snapshot for one year of operation."""
    vacancy_rate = inputs.growth.vacancy_rate
    vacancy = vacancy_loss(gross_rent, vacancy_rate)
    egi = effective_gross_income(gross_rent, vacancy_rate)

    # Tax and insurance follow property value unless a dollar amount was supplied
    if bases.property_tax_override is not None:
        prop_tax = _money(bases.property_tax_override)
    else:
        prop_tax = _money(property_value * inputs.property_tax_rate / HUNDRED)
    if bases.insurance_override is not None:
        insurance = _money(bases.insurance_override)
    else:
        insurance = _money(property_value * inputs.insurance_rate / HUNDRED)

    if bases.maintenance is not None:
        maintenance = _money(bases.maintenance)
    else:
        maintenance = _money(gross_rent * inputs.maintenance_pct / HUNDRED)

    management = _money(gross_rent * inputs.management_rate / HUNDRED)

    turnover = Decimal("0.00")
    if inputs.tracks_turnover:
        model = inputs.growth.turnover
        turnover = turnover_cost(
            gross_rent,
            bases.turnover_prep_fee,
            model.commission_months,
            turnover_probability(model.average_tenancy_years, vacancy_rate),
        )

    # Vacancy is already netted out of EGI, so it stays out of this total
    total = prop_tax + insurance + maintenance + management + turnover

    return PeriodSnapshot(
        gross_rent=_money(gross_rent),
        vacancy_loss=vacancy,
        effective_gross_income=egi,
        property_tax=prop_tax,
        insurance=insurance,
        maintenance=maintenance,
        management=management,
        turnover_cost=turnover,
        total_operating_expenses=total,
        noi=egi - total,
    )


def cap_rate(noi: Decimal, purchase_price: Decimal) -> Decimal:
    """Cap rate (%) = NOI / purchase price."""
    if purchase_price == 0:
        return Decimal("0")
    return (noi / purchase_price * HUNDRED).quantize(FOUR_PLACES, ROUND_HALF_UP)


def cash_on_cash(cash_flow: Decimal, total_initial_investment: Decimal) -> Decimal:
    """Cash-on-cash return (%) = annual cash flow / total cash invested."""
    if total_initial_investment == 0:
        return Decimal("0")
    return (cash_flow / total_initial_investment * HUNDRED).quantize(
        FOUR_PLACES, ROUND_HALF_UP
    )


def dscr(noi: Decimal, annual_debt_service: Decimal) -> Decimal:
    """Debt Service Coverage Ratio = NOI / annual debt service."""
    if annual_debt_service == 0:
        return Decimal("0")
    return (noi / annual_debt_service).quantize(FOUR_PLACES, ROUND_HALF_UP)
