"""
Summary Aggregation

Reduces a sequence of period records to SummaryStats:
- Totals (sessions, energy, revenue)
- Peak usage (busiest period by session count)
- Averages per period, rounded half away from zero
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Sequence, Union

from charging_api.exceptions import EmptyDataSetError
from charging_api.models import PeriodRecord, SummaryStats

from .constants import AVERAGE_DECIMALS

Number = Union[int, float, Decimal]


def _digits_needed(value: Decimal, extra: int = 0) -> int:
    """Significant digits that hold every digit of ``value`` plus ``extra`` more."""
    _, digits, exponent = value.as_tuple()
    return len(digits) + abs(exponent) + extra


def round_half_away_from_zero(value: Number, ndigits: int = 0) -> Union[int, float]:
    """
    Round to ``ndigits`` places with ties going away from zero.

    Python's built-in round() uses banker's rounding (round(2.5) == 2),
    which does not match what dashboard users expect from an average.
    Works for values of any magnitude: the decimal context is widened so
    quantize never runs out of precision.

    Args:
        value: Finite number to round
        ndigits: Decimal places to keep

    Returns:
        int when ndigits is 0, otherwise float

    Examples:
        >>> round_half_away_from_zero(2.5)
        3
        >>> round_half_away_from_zero(-2.5)
        -3
        >>> round_half_away_from_zero(1.005, 2)
        1.01
    """
    if not isinstance(value, Decimal):
        # str() keeps the shortest repr, so 1.005 is not seen as 1.00499...
        value = Decimal(str(value))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _digits_needed(value, ndigits + 2))
        rounded = value.quantize(Decimal(1).scaleb(-ndigits), rounding=ROUND_HALF_UP)
    if ndigits <= 0:
        return int(rounded)
    return float(rounded)


def average(total: Number, count: int, ndigits: int = AVERAGE_DECIMALS) -> Union[int, float]:
    """
    Mean of ``count`` values summing to ``total``, rounded to ``ndigits`` places.

    The division is carried out with enough digits that a tie is never
    produced by truncating the quotient.

    Examples:
        >>> average(5, 2)
        3
        >>> average(6860, 343, 2)
        20.0
    """
    total = Decimal(str(total))
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, _digits_needed(total, len(str(count)) + ndigits + 2))
        exact = total / Decimal(count)
    return round_half_away_from_zero(exact, ndigits)


def summarize(records: Sequence[PeriodRecord]) -> SummaryStats:
    """
    Calculate summary statistics for a set of period records.

    peak_usage is the largest per-period session count, not the largest
    peak-hour count.

    Args:
        records: Non-empty sequence of PeriodRecord

    Returns:
        SummaryStats with totals, peak usage and rounded averages

    Raises:
        EmptyDataSetError: If records is empty

    Examples:
        >>> stats = summarize([
        ...     PeriodRecord("Week 1", 1, 20, 4),
        ...     PeriodRecord("Week 2", 4, 80, 16),
        ... ])
        >>> stats.peak_usage, stats.avg_sessions, stats.avg_energy
        (4, 3, 50)
    """
    records = list(records)
    if not records:
        raise EmptyDataSetError()

    count = len(records)
    total_sessions = sum(r.sessions for r in records)
    total_energy = sum(r.energy for r in records)
    total_revenue = sum(r.revenue for r in records)

    return SummaryStats(
        total_sessions=total_sessions,
        total_energy=total_energy,
        total_revenue=total_revenue,
        peak_usage=max(r.sessions for r in records),
        avg_sessions=average(total_sessions, count),
        avg_energy=average(total_energy, count),
        avg_revenue=average(total_revenue, count),
    )
