"""Analysis routes: validated deal in, full projection out."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from dealcalc.api.deps import get_settings
from dealcalc.api.schemas import AnalysisResponse, AnalyzeRequest
from dealcalc.config import Settings
from dealcalc.engine.errors import InvalidInputError
from dealcalc.engine.proforma import run_analysis
from dealcalc.models.inputs import (
    GrowthAssumptions,
    PropertyInputs,
    PropertyType,
    TurnoverAssumptions,
    UnitType,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["analysis"])


def _pick(value, default):
    return default if value is None else value


def _build_growth(
    req: AnalyzeRequest, property_type: PropertyType, cfg: Settings
) -> GrowthAssumptions:
    lt = req.long_term_assumptions
    turnover = None
    if property_type is PropertyType.SFR:
        t = req.turnover
        turnover = TurnoverAssumptions(
            average_tenancy_years=_pick(t and t.average_tenancy_years, cfg.default_tenancy_years),
            prep_fee=_pick(t and t.prep_fee, cfg.default_turnover_prep_fee),
            commission_months=_pick(t and t.commission_months, cfg.default_commission_months),
        )

    return GrowthAssumptions(
        projection_years=_pick(lt and lt.projection_years, cfg.default_projection_years),
        annual_rent_growth=_pick(lt and lt.annual_rent_growth, cfg.default_rent_growth),
        annual_appreciation=_pick(lt and lt.annual_appreciation, cfg.default_appreciation),
        inflation_rate=_pick(lt and lt.inflation_rate, cfg.default_inflation_rate),
        vacancy_rate=_pick(lt and lt.vacancy_rate, cfg.default_vacancy_rate),
        selling_costs_pct=_pick(lt and lt.selling_costs_pct, cfg.default_selling_costs_pct),
        turnover=turnover,
    )


def build_inputs(
    req: AnalyzeRequest, property_type: PropertyType, cfg: Settings
) -> PropertyInputs:
    """Map the request onto the engine's input record, filling configured defaults."""
    return PropertyInputs(
        property_type=property_type,
        purchase_price=req.purchase_price,
        down_payment=req.down_payment,
        closing_costs=req.closing_costs,
        capital_improvements=req.capital_improvements,
        interest_rate=req.interest_rate,
        loan_term_years=req.loan_term_years,
        monthly_rent=req.monthly_rent,
        unit_types=tuple(
            UnitType(name=u.name, count=u.count, sqft=u.sqft, monthly_rent=u.monthly_rent)
            for u in req.unit_types
        ),
        property_tax_rate=req.property_tax_rate,
        property_tax_amount=req.property_tax_amount,
        insurance_rate=req.insurance_rate,
        insurance_amount=req.insurance_amount,
        maintenance_cost=req.maintenance_cost,
        maintenance_pct=req.maintenance_pct,
        management_rate=req.management_rate,
        growth=_build_growth(req, property_type, cfg),
        square_footage=req.square_footage,
        bedrooms=req.bedrooms,
    )


@router.post("/analyze/{property_type}", response_model=AnalysisResponse)
async def analyze(
    property_type: str,
    req: AnalyzeRequest,
    cfg: Settings = Depends(get_settings),
):
    """Primary endpoint: deal inputs → projections, exit analysis and returns."""
    try:
        kind = PropertyType(property_type.lower())
    except ValueError:
        raise HTTPException(
            status_code=400, detail='Invalid property type. Must be "sfr" or "mf".'
        )

    logger.info("Received %s analysis request", kind.value)
    inputs = build_inputs(req, kind, cfg)

    try:
        result = run_analysis(inputs, include_sensitivity=req.include_sensitivity)
    except InvalidInputError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if not result.returns_summary.irr_converged:
        logger.info("IRR for %s deal is an estimate (method=%s)",
                    kind.value, result.returns_summary.irr_method.value)

    return AnalysisResponse(property_type=kind.value, **result.as_dict())
