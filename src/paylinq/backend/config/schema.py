"""Pydantic models describing the statutory payroll configuration schema."""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)
from typing_extensions import Self


class ConfigurationError(ValueError):
    """Raised when configuration values violate schema expectations."""


class ImmutableModel(BaseModel):
    """Base class that freezes instances and rejects unknown fields."""

    model_config = ConfigDict(
        frozen=True, extra="forbid", populate_by_name=True, allow_inf_nan=False
    )


class TaxBracket(ImmutableModel):
    """One marginal wage-tax band.

    ``min`` is inclusive and ``max`` is the upper edge of the band, ``None``
    marking the open-ended top bracket. ``fixed_amount`` is levied once when
    income reaches into the band, on top of the marginal ``rate``.
    """

    min: float = Field(default=0.0, alias="income_min")
    max: float | None = Field(default=None, alias="income_max")
    rate: float
    fixed_amount: float = 0.0

    @model_validator(mode="after")
    def _validate_values(self) -> Self:
        if self.rate < 0:
            raise ConfigurationError("Tax rates must be non-negative")
        if self.min < 0:
            raise ConfigurationError("Bracket lower bounds must be non-negative")
        if self.max is not None and self.max <= self.min:
            raise ConfigurationError("Bracket upper bounds must exceed their lower bound")
        if self.fixed_amount < 0:
            raise ConfigurationError("Bracket fixed amounts must be non-negative")
        return self


class FlatRateContribution(ImmutableModel):
    """A flat-rate levy on gross pay with an optional annual ceiling."""

    rate: float
    annual_cap: float | None = None
    description: str | None = None

    @model_validator(mode="after")
    def _validate_rate(self) -> Self:
        if self.rate < 0:
            raise ConfigurationError("Contribution rates must be non-negative")
        if self.annual_cap is not None and self.annual_cap < 0:
            raise ConfigurationError("Contribution caps must be non-negative")
        return self


class SocialContributionConfig(ImmutableModel):
    """AOV (old-age pension) and AWW (widows and orphans) contribution rates."""

    aov: FlatRateContribution
    aww: FlatRateContribution


class PayFrequencyConfig(ImmutableModel):
    """Pay frequencies accepted for a year and their periods per year."""

    periods_per_year: Mapping[str, int]
    default: str = "monthly"

    @field_validator("periods_per_year", mode="before")
    @classmethod
    def _coerce_periods(cls, value: Any) -> Mapping[str, int]:
        if isinstance(value, Mapping):
            return {str(key): int(periods) for key, periods in value.items()}
        raise ConfigurationError("Pay frequencies must be provided as a mapping")

    @model_validator(mode="after")
    def _validate_default(self) -> Self:
        if not self.periods_per_year:
            raise ConfigurationError("At least one pay frequency must be configured")
        if self.default not in self.periods_per_year:
            raise ConfigurationError(
                f"Default pay frequency '{self.default}' is not a configured frequency"
            )
        return self

    @computed_field
    @property
    def frequencies(self) -> tuple[str, ...]:
        return tuple(self.periods_per_year)


class OvertimeConfig(ImmutableModel):
    """Default overtime premium applied to hourly workers."""

    default_multiplier: float = 1.5

    @model_validator(mode="after")
    def _validate_multiplier(self) -> Self:
        if self.default_multiplier <= 0:
            raise ConfigurationError("Overtime multipliers must be positive")
        return self


class YearConfiguration(ImmutableModel):
    """Structured representation of one payroll year's statutory settings."""

    year: int
    meta: Mapping[str, Any] = Field(default_factory=dict)
    wage_tax: Sequence[TaxBracket]
    social_contributions: SocialContributionConfig
    pay_frequencies: PayFrequencyConfig
    overtime: OvertimeConfig = Field(default_factory=OvertimeConfig)

    @field_validator("wage_tax", mode="before")
    @classmethod
    def _coerce_brackets(cls, value: Any) -> Sequence[Any]:
        if isinstance(value, Mapping):
            value = value.get("brackets")
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            brackets = tuple(value)
            if brackets:
                return brackets
        raise ConfigurationError("Wage tax configuration must list at least one bracket")

    @field_validator("meta", mode="before")
    @classmethod
    def _coerce_meta(cls, value: Any) -> Mapping[str, Any]:
        if value is None:
            return {}
        if not isinstance(value, Mapping):
            raise ConfigurationError("Configuration 'meta' must be a mapping when provided")
        return dict(value)


class PayrollYearManifestEntry(ImmutableModel):
    """Entry describing a supported payroll year in the manifest."""

    year: int
    filename: str | None = None
    status: str = "active"
    notes_url: str | None = None

    @computed_field
    @property
    def resolved_filename(self) -> str:
        return self.filename or f"{self.year}.yaml"


class PayrollYearManifest(ImmutableModel):
    """Manifest describing the available payroll year configuration files."""

    years: Sequence[PayrollYearManifestEntry]

    @model_validator(mode="after")
    def _validate_years(self) -> Self:
        seen: set[int] = set()
        for entry in self.years:
            if entry.year in seen:
                raise ConfigurationError(
                    f"Duplicate year {entry.year} declared in the configuration manifest"
                )
            seen.add(entry.year)
        return self

    def get_entry(self, year: int) -> PayrollYearManifestEntry:
        for entry in self.years:
            if entry.year == year:
                return entry
        raise KeyError(year)

    @computed_field
    @property
    def supported_years(self) -> tuple[int, ...]:
        return tuple(sorted(entry.year for entry in self.years))


__all__ = [
    "ConfigurationError",
    "FlatRateContribution",
    "ImmutableModel",
    "OvertimeConfig",
    "PayFrequencyConfig",
    "PayrollYearManifest",
    "PayrollYearManifestEntry",
    "SocialContributionConfig",
    "TaxBracket",
    "YearConfiguration",
]
