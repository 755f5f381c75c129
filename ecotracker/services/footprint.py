import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from enum import Enum
from typing import Any, Mapping, Type

from pydantic import ValidationError

from ..schemas import (
    ActivityInput,
    CategoryBreakdown,
    DietType,
    FootprintReport,
    FootprintResult,
    HeatingType,
    TransportMode,
)
from .emission_factors import DEFAULT_FACTORS, EmissionFactors

DAYS_PER_YEAR = 365
WEEKS_PER_YEAR = 52
MONTHS_PER_YEAR = 12
KG_PER_TONNE = 1000

REGIONAL_AVERAGE_TONNES = 5.0

# (upper bound, grade), checked in order
GRADE_THRESHOLDS = ((2.0, "A"), (4.0, "B"), (6.0, "C"))

# the numeric input that drives each category
CATEGORY_FIELDS = {
    "transport": "transport.distanceKm",
    "energy": "energy.electricityKwh",
    "diet": "diet.foodWasteKg",
}

# wide enough for every digit of the largest finite float
ROUNDING_PRECISION = 400


class InvalidInput(ValueError):
    """An activity field is out of range or not a known option."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> "InvalidInput":
        first = exc.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or "activity"
        return cls(field, first.get("msg", "invalid value"))


def _round_half_up(value: float, places: int) -> float:
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = ROUNDING_PRECISION
        return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _factor(table: Mapping, enum_cls: Type[Enum], value: Any, field: str) -> float:
    try:
        key = enum_cls(value)
    except ValueError:
        raise InvalidInput(field, f"unknown option {value!r}") from None
    if key not in table:
        raise InvalidInput(field, f"no emission factor for {key.value!r}")
    return table[key]


def _amount(value: Any, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(field, "must be a number")
    if not math.isfinite(value) or value < 0:
        raise InvalidInput(field, "must be a finite, non-negative number")
    return float(value)


def _coerce(activity: ActivityInput | Mapping[str, Any]) -> ActivityInput:
    if isinstance(activity, ActivityInput):
        return activity
    if isinstance(activity, Mapping):
        try:
            return ActivityInput.model_validate(dict(activity))
        except ValidationError as exc:
            raise InvalidInput.from_validation_error(exc) from exc
    raise TypeError(f"expected ActivityInput or mapping, got {type(activity).__name__}")


def transport_tonnes(activity: ActivityInput, factors: EmissionFactors = DEFAULT_FACTORS) -> float:
    distance = _amount(activity.transport.distanceKm, "transport.distanceKm")
    per_km = _factor(factors.transport_kg_per_km, TransportMode, activity.transport.mode, "transport.mode")
    return distance * per_km * DAYS_PER_YEAR / KG_PER_TONNE


def energy_tonnes(activity: ActivityInput, factors: EmissionFactors = DEFAULT_FACTORS) -> float:
    # heating reuses the electricity reading; there is no separate fuel input
    kwh = _amount(activity.energy.electricityKwh, "energy.electricityKwh")
    heating = _factor(factors.heating_kg_per_kwh, HeatingType, activity.energy.heatingType, "energy.heatingType")
    grid = kwh * factors.electricity_kg_per_kwh * MONTHS_PER_YEAR / KG_PER_TONNE
    heat = kwh * heating * MONTHS_PER_YEAR / KG_PER_TONNE
    return grid + heat


def diet_tonnes(activity: ActivityInput, factors: EmissionFactors = DEFAULT_FACTORS) -> float:
    baseline = _factor(factors.diet_tonnes_per_year, DietType, activity.diet.dietType, "diet.dietType")
    waste_kg = _amount(activity.diet.foodWasteKg, "diet.foodWasteKg")
    waste = waste_kg * factors.food_waste_kg_per_kg * WEEKS_PER_YEAR / KG_PER_TONNE
    return baseline + waste


def calculate(
    activity: ActivityInput | Mapping[str, Any],
    factors: EmissionFactors = DEFAULT_FACTORS,
) -> FootprintResult:
    """Estimate the annual footprint of ``activity`` in tonnes CO2e.

    Accepts a validated ``ActivityInput`` or a plain mapping of the same
    shape. Raises ``InvalidInput`` naming the offending field when a value
    is negative, non-finite, not one of the known options, or so large
    that the annual total overflows.
    """
    activity = _coerce(activity)

    transport = transport_tonnes(activity, factors)
    energy = energy_tonnes(activity, factors)
    diet = diet_tonnes(activity, factors)
    total = transport + energy + diet
    if not math.isfinite(total):
        parts = {"transport": transport, "energy": energy, "diet": diet}
        culprit = max(parts, key=parts.get)
        raise InvalidInput(CATEGORY_FIELDS[culprit], "too large to estimate")

    def share(part: float) -> float:
        if total == 0:
            return 0.0
        return _round_half_up(part / total * 100, 0)

    return FootprintResult(
        totalTonnesPerYear=_round_half_up(total, 2),
        breakdownPercent=CategoryBreakdown(
            transport=share(transport),
            energy=share(energy),
            diet=share(diet),
        ),
    )


def update_activity(activity: ActivityInput, category: str, field: str, value: Any) -> ActivityInput:
    """Return a copy of ``activity`` with ``category.field`` set to ``value``."""
    if category not in ActivityInput.model_fields:
        raise InvalidInput(category, "unknown category")
    section = getattr(activity, category)
    if field not in type(section).model_fields:
        raise InvalidInput(f"{category}.{field}", "unknown field")

    data = activity.model_dump()
    data[category][field] = value
    try:
        return ActivityInput.model_validate(data)
    except ValidationError as exc:
        raise InvalidInput.from_validation_error(exc) from exc


def impact_grade(total_tonnes: float) -> str:
    for upper, grade in GRADE_THRESHOLDS:
        if total_tonnes < upper:
            return grade
    return "D"


def compare_to_average(total_tonnes: float) -> str:
    return "below" if total_tonnes < REGIONAL_AVERAGE_TONNES else "above"


def build_report(activity: ActivityInput | Mapping[str, Any]) -> FootprintReport:
    result = calculate(activity)
    total = result.totalTonnesPerYear
    return FootprintReport(
        result=result,
        grade=impact_grade(total),
        comparedToAverage=compare_to_average(total),
    )
