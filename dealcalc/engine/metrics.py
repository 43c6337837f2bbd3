"""Property-level screening metrics from the year-1 projection."""

from decimal import Decimal, ROUND_HALF_UP

from dealcalc.models.inputs import PropertyInputs, PropertyType
from dealcalc.models.results import PropertyMetrics, YearlyProjection

TWO_PLACES = Decimal("0.01")
FOUR_PLACES = Decimal("0.0001")


def _ratio(
    numerator: Decimal,
    denominator: Decimal,
    scale: int = 1,
    places: Decimal = FOUR_PLACES,
) -> Decimal:
    if not denominator:
        return Decimal("0")
    return (Decimal(numerator) * scale / Decimal(denominator)).quantize(places, ROUND_HALF_UP)


def compute_property_metrics(inputs: PropertyInputs, year_one: YearlyProjection) -> PropertyMetrics:
    price = inputs.purchase_price
    gross = year_one.gross_rent
    opex = year_one.total_operating_expenses
    units = inputs.total_units

    common = dict(
        operating_expense_ratio=_ratio(opex, year_one.effective_gross_income, 100),
        break_even_occupancy=_ratio(opex + year_one.debt_service, gross, 100),
        gross_rent_multiplier=_ratio(price, gross),
        one_percent_rule_value=_ratio(inputs.monthly_gross_rent, price, 100),
        passes_fifty_percent_rule=bool(gross) and opex <= gross * Decimal("0.5"),
        turnover_cost_impact=_ratio(year_one.turnover_cost, gross, 100),
        price_per_sqft=_ratio(price, inputs.total_sqft, places=TWO_PLACES),
    )

    if inputs.property_type is PropertyType.MF:
        return PropertyMetrics(
            **common,
            price_per_unit=_ratio(price, units, places=TWO_PLACES),
            noi_per_unit=_ratio(year_one.noi, units, places=TWO_PLACES),
            average_rent_per_unit=_ratio(gross, units * 12, places=TWO_PLACES),
            operating_expense_per_unit=_ratio(opex, units, places=TWO_PLACES),
        )

    return PropertyMetrics(
        **common,
        rent_per_sqft=_ratio(gross, inputs.square_footage, places=TWO_PLACES),
        price_per_bedroom=_ratio(price, inputs.bedrooms, places=TWO_PLACES),
    )
