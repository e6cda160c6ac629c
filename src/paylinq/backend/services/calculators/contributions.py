"""AOV and AWW social contributions withheld from gross pay."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Final

from .utils import round_currency
from .withholding import calculate_flat_rate_tax

DEFAULT_AOV_RATE: Final = 0.08
DEFAULT_AWW_RATE: Final = 0.015


@dataclass(frozen=True)
class SocialContributions:
    """Per-period contribution amounts; ``total`` sums the rounded parts."""

    aov: float
    aww: float
    total: float

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


def calculate_social_contributions(
    gross_pay: float,
    aov_rate: float = DEFAULT_AOV_RATE,
    aww_rate: float = DEFAULT_AWW_RATE,
    *,
    aov_cap: float | None = None,
    aww_cap: float | None = None,
) -> SocialContributions:
    """Compute old-age (AOV) and widows-and-orphans (AWW) contributions.

    Each contribution is rounded to cents on its own before the two are
    added, so ``total`` always equals ``aov + aww`` as shown on a payslip.
    The optional caps bound each contribution for the period.
    """

    aov = calculate_flat_rate_tax(gross_pay, aov_rate, aov_cap)
    aww = calculate_flat_rate_tax(gross_pay, aww_rate, aww_cap)
    return SocialContributions(aov=aov, aww=aww, total=round_currency(aov + aww))


__all__ = [
    "DEFAULT_AOV_RATE",
    "DEFAULT_AWW_RATE",
    "SocialContributions",
    "calculate_social_contributions",
]
