"""Up-front input checks so every later stage can assume a well-formed deal."""

from decimal import Decimal

from dealcalc.engine.errors import InvalidInputError
from dealcalc.models.inputs import PropertyInputs, PropertyType

ZERO = Decimal("0")


def validate_inputs(inputs: PropertyInputs) -> None:
    """Raise InvalidInputError naming the first out-of-domain field."""
    if inputs.purchase_price <= 0:
        raise InvalidInputError("purchase_price must be positive")
    if not ZERO <= inputs.down_payment <= inputs.purchase_price:
        raise InvalidInputError("down_payment must be between 0 and purchase_price")
    if inputs.loan_term_years <= 0:
        raise InvalidInputError("loan_term_years must be positive")

    non_negative = {
        "interest_rate": inputs.interest_rate,
        "closing_costs": inputs.closing_costs,
        "capital_improvements": inputs.capital_improvements,
        "monthly_rent": inputs.monthly_rent,
        "property_tax_rate": inputs.property_tax_rate,
        "insurance_rate": inputs.insurance_rate,
        "maintenance_pct": inputs.maintenance_pct,
        "management_rate": inputs.management_rate,
        "property_tax_amount": inputs.property_tax_amount,
        "insurance_amount": inputs.insurance_amount,
        "maintenance_cost": inputs.maintenance_cost,
        "inflation_rate": inputs.growth.inflation_rate,
        "selling_costs_pct": inputs.growth.selling_costs_pct,
    }
    for name, value in non_negative.items():
        if value is not None and value < 0:
            raise InvalidInputError(f"{name} cannot be negative")

    growth = inputs.growth
    if growth.projection_years <= 0:
        raise InvalidInputError("projection_years must be positive")
    if not ZERO <= growth.vacancy_rate <= 100:
        raise InvalidInputError("vacancy_rate must be between 0 and 100")
    # Negative growth is allowed (declining markets) but not below -100%
    if growth.annual_rent_growth <= -100 or growth.annual_appreciation <= -100:
        raise InvalidInputError("growth rates must be greater than -100")

    if growth.turnover is not None and growth.turnover.average_tenancy_years <= 0:
        raise InvalidInputError("average_tenancy_years must be positive")

    if inputs.property_type is PropertyType.MF:
        if not inputs.unit_types:
            raise InvalidInputError("multi-family deals need at least one unit type")
        for unit in inputs.unit_types:
            if unit.count <= 0 or unit.monthly_rent < 0 or unit.sqft < 0:
                raise InvalidInputError(f"invalid unit type {unit.name!r}")
