import math
from decimal import ROUND_HALF_UP, Decimal, localcontext


def round_half_away(value: float, precision: int) -> float:
    """
    Round ``value`` to ``precision`` decimal places, ties away from zero.

    Same result as ``round(x * 10**p) / 10**p`` with half-away rounding, but
    the scaling is done in decimal on the float's shortest repr, so values
    such as 2.675 round to 2.68 rather than suffering binary-scaling error.
    """

    value = float(value)
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + precision + 2)
        rounded = float(exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP))
    if rounded == 0.0:
        rounded = 0.0  # drop the sign of -0.0
    return rounded
