"""
Pricing: weight to money.

Pure math: weight × price per kg × quantity. Money is rounded half-up to cents
with Decimal so values like 0.125 round to 0.13, not 0.12.
Any non-positive input prices to zero, same permissive policy as the calculators.
"""

import enum
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation, localcontext

from .schemas import PriceResult

CENTS = Decimal("0.01")


class PricingModel(str, enum.Enum):
    PER_KG = "per_kg"
    PER_UNIT = "per_unit"
    PER_METER = "per_meter"


def _decimal(value) -> Decimal:
    if value is None or isinstance(value, bool):
        return Decimal(0)
    try:
        number = Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return Decimal(0)
    if not number.is_finite():
        return Decimal(0)
    return number


def round2(value) -> float:
    """Round half-up to 2 decimal places, at whatever magnitude."""
    number = _decimal(value)
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, number.adjusted() + 3)
        return float(number.quantize(CENTS, rounding=ROUND_HALF_UP))


def _price(unit_amount: Decimal, quantity: Decimal) -> PriceResult:
    return PriceResult(
        unit_price=round2(unit_amount),
        total=round2(unit_amount * quantity),
    )


def compute_price(weight_kg, price_per_kg, quantity=1) -> PriceResult:
    """
    Price of `quantity` pieces weighing `weight_kg` each.

    unit_price = weight × price per kg
    total      = weight × price per kg × quantity
    """
    weight = _decimal(weight_kg)
    price = _decimal(price_per_kg)
    qty = _decimal(quantity)
    if weight <= 0 or price <= 0 or qty <= 0:
        return PriceResult()
    return _price(weight * price, qty)


def price_by_model(model, price, weight_kg=0.0, length_m=0.0, quantity=1) -> PriceResult:
    """
    Price under one of the pricing models:
      per_kg   : price × weight per piece
      per_unit : price per piece
      per_meter: price × length per piece
    """
    try:
        model = PricingModel(model)
    except ValueError:
        raise ValueError(
            f"Unknown pricing model: {model}. "
            f"Available: {[m.value for m in PricingModel]}"
        )
    if model is PricingModel.PER_KG:
        return compute_price(weight_kg, price, quantity)

    amount = _decimal(price)
    qty = _decimal(quantity)
    if model is PricingModel.PER_METER:
        length = _decimal(length_m)
        if length <= 0:
            return PriceResult()
        amount = amount * length
    if amount <= 0 or qty <= 0:
        return PriceResult()
    return _price(amount, qty)
