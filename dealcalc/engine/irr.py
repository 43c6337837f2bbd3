"""IRR computation: Newton's method with a bisection fallback.

Pure functions. No I/O.
"""

import logging
import math
from decimal import Decimal, ROUND_HALF_UP

from scipy.optimize import bisect

from dealcalc.models.results import IRRMethod, IRRResult

logger = logging.getLogger(__name__)

FOUR_PLACES = Decimal("0.0001")

DEFAULT_GUESS = 0.10
MAX_ITERATIONS = 1000
TOLERANCE = 1e-7
DERIVATIVE_STEP = 1e-7
MIN_DERIVATIVE = 1e-12
BISECTION_BRACKET = (-0.99, 10.0)


def npv(rate: float, cash_flows: list[float]) -> float:
    """Net present value of annual cash flows; cash_flows[0] is at t=0."""
    return sum(cf / (1 + rate) ** t for t, cf in enumerate(cash_flows))


def _newton(cash_flows: list[float], guess: float) -> tuple[float, bool, int]:
    """Returns (rate, converged, iterations).

    On failure the rate is the iterate with the smallest |NPV| seen.
    """
    rate = guess
    best_rate, best_npv = rate, math.inf

    for iteration in range(1, MAX_ITERATIONS + 1):
        try:
            value = npv(rate, cash_flows)
            derivative = (
                npv(rate + DERIVATIVE_STEP, cash_flows)
                - npv(rate - DERIVATIVE_STEP, cash_flows)
            ) / (2 * DERIVATIVE_STEP)
        except ArithmeticError:
            return best_rate, False, iteration

        if abs(value) < best_npv:
            best_rate, best_npv = rate, abs(value)
        if abs(value) < TOLERANCE:
            return rate, True, iteration

        # Flat NPV curve: another step would be meaningless
        if abs(derivative) < MIN_DERIVATIVE:
            return best_rate, False, iteration

        next_rate = rate - value / derivative
        if not math.isfinite(next_rate):
            return best_rate, False, iteration
        # Rates at or below -100% are undefined: move halfway toward -100% instead
        if next_rate <= -1:
            rate = (rate - 1) / 2
            continue
        if abs(next_rate - rate) < TOLERANCE:
            return next_rate, True, iteration
        rate = next_rate

    return best_rate, False, MAX_ITERATIONS


def _bisection(cash_flows: list[float]) -> tuple[float, bool, int] | None:
    low, high = BISECTION_BRACKET
    try:
        root, info = bisect(
            npv, low, high, args=(cash_flows,),
            xtol=1e-10, maxiter=MAX_ITERATIONS, full_output=True, disp=False,
        )
    except (ValueError, ArithmeticError):
        # No sign change across the bracket
        return None
    return root, info.converged, info.iterations


def _as_percent(rate: float) -> Decimal:
    return Decimal(str(rate * 100)).quantize(FOUR_PLACES, ROUND_HALF_UP)


def compute_irr(cash_flows: list[Decimal], guess: float = DEFAULT_GUESS) -> IRRResult:
    """Compute IRR (as a percent) from a vector of annual cash flows.

    cash_flows[0] should be negative (initial investment).
    cash_flows[-1] should include sale proceeds.

    Newton's method from `guess`; bisection over [-99%, 1000%] if Newton fails.
    Without both an inflow and an outflow there is no IRR, and 0 is returned.
    """
    if len(cash_flows) < 2:
        return IRRResult(irr=Decimal("0"), converged=False, method=IRRMethod.NONE)

    cf_float = [float(cf) for cf in cash_flows]
    if not (any(cf > 0 for cf in cf_float) and any(cf < 0 for cf in cf_float)):
        return IRRResult(irr=Decimal("0"), converged=False, method=IRRMethod.NONE)

    rate, converged, iterations = _newton(cf_float, guess)
    if converged:
        return IRRResult(
            irr=_as_percent(rate), converged=True,
            method=IRRMethod.NEWTON, iterations=iterations,
        )

    fallback = _bisection(cf_float)
    if fallback is None:
        logger.warning(
            "IRR did not converge after %d Newton iterations and the bisection "
            "bracket has no root; returning best estimate %.6f",
            iterations, rate,
        )
        return IRRResult(
            irr=_as_percent(rate), converged=False,
            method=IRRMethod.NEWTON, iterations=iterations,
        )

    root, bisect_converged, bisect_iterations = fallback
    logger.warning(
        "IRR fell back to bisection after %d Newton iterations (root %.6f)",
        iterations, root,
    )
    return IRRResult(
        irr=_as_percent(root), converged=bisect_converged,
        method=IRRMethod.BISECTION, iterations=iterations + bisect_iterations,
    )


def compute_equity_multiple(
    total_cash_returned: Decimal, total_cash_invested: Decimal
) -> Decimal:
    """Equity multiple = total cash out / total cash in."""
    if total_cash_invested == 0:
        return Decimal("0")
    return (total_cash_returned / total_cash_invested).quantize(FOUR_PLACES, ROUND_HALF_UP)
