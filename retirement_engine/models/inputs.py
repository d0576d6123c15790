"""Pydantic models for engine requests.

This module defines the validated input contract for every engine operation:
- ScenarioInputsPretax: pre-tax (401(k)-style) accumulation and distribution
- ScenarioInputsPosttax: after-tax (Roth/LIRP) accumulation and distribution
- BenefitTaxationInputs: standalone Social Security taxation request
- HeirsInputs: inherited pre-tax balance taxation request

All monetary and rate fields use Decimal. Floats are converted through their
shortest string form so 0.07 arrives as Decimal("0.07"). Both snake_case and
camelCase field names are accepted.
"""

from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from retirement_engine.core.config import settings


class FilingStatus(str, Enum):
    """Filing status that selects provisional income thresholds."""

    SINGLE = "single"
    MARRIED_JOINT = "married_joint"


class DistributionMode(str, Enum):
    """How an accumulated balance is turned into annual income."""

    INTEREST = "interest"
    SWR = "swr"
    FIXED_PERIOD = "fixed_period"


class HeirsMode(str, Enum):
    """Payout schedule for an inherited pre-tax balance."""

    LUMP = "lump"
    TEN_YEAR = "ten_year"


_FILING_STATUS_ALIASES = {
    "mfj": FilingStatus.MARRIED_JOINT,
    "joint": FilingStatus.MARRIED_JOINT,
    "married_filing_jointly": FilingStatus.MARRIED_JOINT,
}

_HEIRS_MODE_ALIASES = {
    "10yr": HeirsMode.TEN_YEAR,
    "10_year": HeirsMode.TEN_YEAR,
}


def normalize_filing_status(value: object) -> object:
    """Map filing status spellings onto FilingStatus values.

    Args:
        value: Raw filing status from a request.

    Returns:
        The canonical value, or the input unchanged when it is not a string
        so pydantic reports the type error.
    """
    if isinstance(value, str):
        text = value.strip().lower()
        return _FILING_STATUS_ALIASES.get(text, text)
    return value


def _to_decimal_input(value: object) -> object:
    """Convert floats through str() so binary noise never reaches Decimal."""
    if isinstance(value, float):
        return str(value)
    return value


# Type aliases for bounded fields
Rate = Annotated[Decimal, Field(ge=Decimal("0"), le=Decimal("1"))]
Money = Annotated[Decimal, Field(ge=Decimal("0"), le=Decimal("10000000"))]
Benefit = Annotated[Decimal, Field(ge=Decimal("0"), le=Decimal("500000"))]
GrowthRate = Annotated[Decimal, Field(ge=Decimal("-0.5"), le=Decimal("0.5"))]
Years = Annotated[int, Field(ge=1, le=50)]


class _EngineInput(BaseModel):
    """Shared configuration for request models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )


class _DistributionInputs(_EngineInput):
    """Accumulation and draw fields shared by both vehicles."""

    years: Years = Field(description="Years of contributions before retirement")
    growth_rate: GrowthRate = Field(description="Annual growth rate during accumulation")
    distribution_mode: DistributionMode = Field(description="Draw strategy in retirement")
    retirement_return: Annotated[Decimal, Field(ge=Decimal("0"), le=Decimal("0.5"))] = Field(
        default_factory=lambda: settings.default_retirement_return,
        validate_default=True,
        description="Return earned on the balance during retirement",
    )
    swr_rate: Annotated[Decimal, Field(ge=Decimal("0"), le=Decimal("0.2"))] = Field(
        default_factory=lambda: settings.default_swr_rate,
        validate_default=True,
        description="Safe withdrawal rate for swr mode",
    )
    fixed_years: Years = Field(
        default_factory=lambda: settings.default_fixed_years,
        validate_default=True,
        description="Depletion horizon for fixed_period mode",
    )

    @field_validator("growth_rate", "retirement_return", "swr_rate", mode="before")
    @classmethod
    def coerce_rate(cls, v: object) -> object:
        """Convert float rates to exact decimals."""
        return _to_decimal_input(v)


class ScenarioInputsPretax(_DistributionInputs):
    """Pre-tax vehicle request.

    Contributions are deducted at the current marginal rate; distributions are
    taxed at the retirement rate and count toward provisional income.
    """

    annual_contribution: Annotated[Decimal, Field(gt=Decimal("0"), le=Decimal("10000000"))] = Field(
        description="Pre-tax amount contributed each year"
    )
    current_tax_rate: Rate = Field(description="Marginal rate while contributing")
    retirement_tax_rate: Rate = Field(description="Marginal rate applied in retirement")
    annual_benefit: Benefit = Field(description="Annual Social Security benefit")
    filing_status: FilingStatus = Field(
        default_factory=lambda: FilingStatus(settings.default_filing_status),
        description="Filing status for provisional income thresholds",
    )

    @field_validator(
        "annual_contribution",
        "current_tax_rate",
        "retirement_tax_rate",
        "annual_benefit",
        mode="before",
    )
    @classmethod
    def coerce_amount(cls, v: object) -> object:
        """Convert float amounts to exact decimals."""
        return _to_decimal_input(v)

    @field_validator("filing_status", mode="before")
    @classmethod
    def validate_filing_status(cls, v: object) -> object:
        """Accept common filing status spellings."""
        return normalize_filing_status(v)


class ScenarioInputsPosttax(_DistributionInputs):
    """After-tax vehicle request.

    Contributions are made from taxed dollars and distributions are tax free,
    so no tax rate or filing status is needed.
    """

    annual_contribution_after_tax: Annotated[
        Decimal, Field(gt=Decimal("0"), le=Decimal("10000000"))
    ] = Field(description="After-tax amount contributed each year")
    annual_benefit: Benefit = Field(
        default=Decimal("0"), description="Annual Social Security benefit"
    )

    @field_validator("annual_contribution_after_tax", "annual_benefit", mode="before")
    @classmethod
    def coerce_amount(cls, v: object) -> object:
        """Convert float amounts to exact decimals."""
        return _to_decimal_input(v)


class BenefitTaxationInputs(_EngineInput):
    """Standalone Social Security taxation request."""

    benefit: Benefit = Field(description="Annual Social Security benefit")
    other_income: Money = Field(description="Other ordinary income for the year")
    filing_status: FilingStatus = Field(
        default_factory=lambda: FilingStatus(settings.default_filing_status),
        description="Filing status for provisional income thresholds",
    )
    tax_rate: Rate = Field(description="Marginal rate applied to the taxable benefit")

    @field_validator("benefit", "other_income", "tax_rate", mode="before")
    @classmethod
    def coerce_amount(cls, v: object) -> object:
        """Convert float amounts to exact decimals."""
        return _to_decimal_input(v)

    @field_validator("filing_status", mode="before")
    @classmethod
    def validate_filing_status(cls, v: object) -> object:
        """Accept common filing status spellings."""
        return normalize_filing_status(v)


class HeirsInputs(_EngineInput):
    """Inherited pre-tax balance request."""

    pretax_balance: Annotated[Decimal, Field(ge=Decimal("0"))] = Field(
        description="Pre-tax balance passed to the beneficiary"
    )
    beneficiary_tax_rate: Rate = Field(description="Beneficiary's marginal rate")
    mode: HeirsMode = Field(default=HeirsMode.LUMP, description="Payout schedule")

    @field_validator("pretax_balance", "beneficiary_tax_rate", mode="before")
    @classmethod
    def coerce_amount(cls, v: object) -> object:
        """Convert float amounts to exact decimals."""
        return _to_decimal_input(v)

    @field_validator("mode", mode="before")
    @classmethod
    def validate_mode(cls, v: object) -> object:
        """Accept the short "10yr" spelling."""
        if isinstance(v, str):
            text = v.strip().lower()
            return _HEIRS_MODE_ALIASES.get(text, text)
        return v
