"""Progressive wage-tax withholding and flat-rate levies."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final

from paylinq.backend.config.schema import TaxBracket

from .utils import round_currency

_LOGGER = logging.getLogger(__name__)

SURINAME_TAX_BRACKETS: Final[tuple[TaxBracket, ...]] = (
    TaxBracket(min=0, max=15_000, rate=0.0),
    TaxBracket(min=15_000, max=30_000, rate=0.08),
    TaxBracket(min=30_000, max=50_000, rate=0.15),
    TaxBracket(min=50_000, max=None, rate=0.25),
)


def calculate_tax_withholding(
    income: float, brackets: Sequence[TaxBracket] = SURINAME_TAX_BRACKETS
) -> float:
    """Calculate marginal tax on ``income`` across ascending ``brackets``.

    Each bracket taxes only the slice of income between its ``min`` and
    ``max``. Income equal to a bracket's ``min`` contributes nothing to that
    bracket, so a value sitting exactly on a boundary is taxed entirely by the
    lower band. Bracket ordering is not checked here; see
    :func:`paylinq.backend.config.validator.validate_bracket_table`.
    """

    if income <= 0:
        return 0.0

    total = 0.0

    for bracket in brackets:
        if income <= bracket.min:
            break

        upper = income if bracket.max is None else min(income, bracket.max)
        taxable = upper - bracket.min
        total += taxable * bracket.rate + bracket.fixed_amount

        _LOGGER.debug(
            "Bracket %s-%s taxed %.2f at %s",
            bracket.min,
            bracket.max,
            taxable,
            bracket.rate,
        )

    return round_currency(total)


def calculate_flat_rate_tax(
    income: float, rate: float, cap: float | None = None
) -> float:
    """Apply a single ``rate`` to ``income``, limited to ``cap`` when given."""

    amount = income * rate
    if cap is not None and amount > cap:
        amount = cap
    return round_currency(amount)


__all__ = [
    "SURINAME_TAX_BRACKETS",
    "calculate_flat_rate_tax",
    "calculate_tax_withholding",
]
