"""Pure payroll calculation functions."""

from .contributions import (
    DEFAULT_AOV_RATE,
    DEFAULT_AWW_RATE,
    SocialContributions,
    calculate_social_contributions,
)
from .earnings import (
    DEFAULT_OVERTIME_MULTIPLIER,
    PERIODS_PER_YEAR,
    PayFrequency,
    calculate_hourly_pay,
    calculate_salary_pay,
    periods_per_year,
)
from .net_pay import calculate_net_pay
from .utils import format_percentage, round_currency, round_rate
from .withholding import (
    SURINAME_TAX_BRACKETS,
    calculate_flat_rate_tax,
    calculate_tax_withholding,
)

__all__ = [
    "DEFAULT_AOV_RATE",
    "DEFAULT_AWW_RATE",
    "DEFAULT_OVERTIME_MULTIPLIER",
    "PERIODS_PER_YEAR",
    "PayFrequency",
    "SURINAME_TAX_BRACKETS",
    "SocialContributions",
    "calculate_flat_rate_tax",
    "calculate_hourly_pay",
    "calculate_net_pay",
    "calculate_salary_pay",
    "calculate_social_contributions",
    "calculate_tax_withholding",
    "format_percentage",
    "periods_per_year",
    "round_currency",
    "round_rate",
]
