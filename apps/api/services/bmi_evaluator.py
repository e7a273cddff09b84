"""
BMI Evaluation Service

Computes Body Mass Index from weight and height, classifies it, and
builds the ordered message sequence for the caller.
BMI = weight_kg / (height_m)²

The evaluator is pure: it performs no I/O. When the caller grants
permission it returns a BmiRecord; persisting that record and writing
the messages to a log sink are left to the caller (see bmi_service).
"""
import math
from dataclasses import dataclass, field
from enum import Enum
from decimal import Decimal
from numbers import Real
from typing import List, Optional

from core.bmi_config import BMIConfig, HeightUnit, bmi_config

PERMISSION_ACCEPTED = "Permission Accepted"
BIOSECURITY_ADVISORY = "BIOSECURITY MEASURES ARE IN EFFECT"

# Lower bound of each band, inclusive
NORMAL_LOWER = 18.5
OVERWEIGHT_LOWER = 25.0
OBESE_LOWER = 30.0


class Category(str, Enum):
    """Standard adult BMI bands."""
    UNDERWEIGHT = "Underweight"
    NORMAL = "Normal"
    OVERWEIGHT = "Overweight"
    OBESE = "Obese"


class InvalidInput(ValueError):
    """Weight or height is missing, non-numeric, non-finite, or not positive."""

    def __init__(self, field_name: str, value):
        self.field = field_name
        self.value = value
        super().__init__(f"{field_name} must be a positive finite number, got {value!r}")


@dataclass(frozen=True)
class BmiRecord:
    """A caller's last permitted submission."""
    owner: str
    weight: float
    height: float
    bmi: float
    category: Category


@dataclass
class Evaluation:
    """Result of a single compute() call."""
    bmi: float
    bmi_display: int
    category: Category
    messages: List[str] = field(default_factory=list)
    record: Optional[BmiRecord] = None


def _validate(field_name: str, value) -> float:
    # bool is a Real subclass; True must not pass as 1.0
    if value is None or isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise InvalidInput(field_name, value)
    try:
        converted = float(value)
    except (OverflowError, ValueError):
        # ints beyond float range, Decimal("sNaN")
        raise InvalidInput(field_name, value)
    value = converted
    if not math.isfinite(value) or value <= 0:
        raise InvalidInput(field_name, value)
    return value


def height_in_meters(height: float, unit: HeightUnit) -> float:
    """Normalize a submitted height to meters."""
    if unit == HeightUnit.CENTIMETERS:
        return height / 100.0
    return height


def calculate_bmi(weight_kg: float, height: float, unit: HeightUnit = HeightUnit.CENTIMETERS) -> float:
    """
    Calculate BMI from weight (kg) and height in the given unit.

    Raises:
        InvalidInput: if either value is not a positive finite number

    Examples:
        >>> round(calculate_bmi(52, 127.0), 2)
        32.24
        >>> calculate_bmi(70, 1.75, HeightUnit.METERS) > 22.8
        True
    """
    weight_kg = _validate("weight", weight_kg)
    height = _validate("height", height)
    height_m = height_in_meters(height, unit)
    # Extreme magnitudes can underflow the square or overflow the quotient
    if height_m ** 2 == 0:
        raise InvalidInput("height", height)
    bmi = weight_kg / (height_m ** 2)
    if not math.isfinite(bmi):
        raise InvalidInput("weight", weight_kg)
    return bmi


def classify(bmi: float) -> Category:
    """Map a BMI value to its band. Each band includes its lower edge."""
    if bmi < NORMAL_LOWER:
        return Category.UNDERWEIGHT
    if bmi < OVERWEIGHT_LOWER:
        return Category.NORMAL
    if bmi < OBESE_LOWER:
        return Category.OVERWEIGHT
    return Category.OBESE


def display_bmi(bmi: float) -> int:
    """Whole-number BMI for messages, truncated toward zero."""
    return math.trunc(bmi)


def compute(
    weight,
    height,
    permit: bool,
    owner: str,
    config: Optional[BMIConfig] = None,
) -> Evaluation:
    """
    Evaluate one submission.

    Validates both inputs before anything else is computed, so an invalid
    call yields neither messages nor a record.

    Args:
        weight: Weight in kilograms
        height: Height in the configured unit (centimeters by default)
        permit: Caller consents to their submission being stored
        owner: Caller identity, used in the first message and as record key
        config: BMI settings; the process-wide bmi_config when omitted

    Returns:
        Evaluation with the BMI, its category, the ordered messages and,
        when permitted, the record to persist

    Raises:
        InvalidInput: weight or height missing, non-finite, or not positive
    """
    config = config or bmi_config

    bmi = calculate_bmi(weight, height, config.height_unit)
    category = classify(bmi)
    bmi_display = display_bmi(bmi)

    messages = [
        f"{owner} You are {category.value}",
        f"BMI: {bmi_display}",
    ]

    record = None
    if permit:
        record = BmiRecord(
            owner=owner,
            weight=float(weight),
            height=float(height),
            bmi=bmi,
            category=category,
        )
        messages.append(PERMISSION_ACCEPTED)
        if bmi >= config.advisory_threshold:
            messages.append(BIOSECURITY_ADVISORY)

    return Evaluation(
        bmi=bmi,
        bmi_display=bmi_display,
        category=category,
        messages=messages,
        record=record,
    )
