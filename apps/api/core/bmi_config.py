"""
BMI Configuration

Backend-configurable settings for BMI evaluation.
Allows adjustment of the height unit and the advisory threshold without code changes.
"""
from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class HeightUnit(str, Enum):
    """Unit in which callers submit height."""
    CENTIMETERS = "cm"
    METERS = "m"


class BMIConfig(BaseSettings):
    """
    Configurable BMI settings.

    These can be adjusted via environment variables (BMI_ prefix)
    without requiring code changes.
    """
    model_config = SettingsConfigDict(
        env_prefix="BMI_",
        case_sensitive=False,
        extra="ignore",
    )

    # Unit of the submitted height.
    # Default: cm (weight=52, height=127.0 -> BMI 32)
    height_unit: HeightUnit = HeightUnit.CENTIMETERS

    # BMI at or above which the biosecurity advisory is emitted
    # for permitted submissions.
    # Default: 30.0 (the Obese boundary)
    advisory_threshold: float = Field(default=30.0, gt=0)


# Global config instance
bmi_config = BMIConfig()
