"""Amount and date generators plus the ``YYYY-MM-DD`` formatter.

Inverted bounds are swapped rather than rejected: ``generate_amount(2000,
1000)`` behaves like ``generate_amount(1000, 2000)`` and a date window whose
start lies after its end is reordered.  Swaps are logged at DEBUG level.

Amounts round half away from zero on the exact binary value of the draw,
and date windows are measured on the epoch timeline, so a window crossing a
daylight-saving change still spans exactly ``days * 86400`` seconds.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, localcontext

from ..rng import RandomSource, resolve_source
from ..utils.logging import get_logger

__all__ = ["generate_amount", "generate_date", "format_date"]

logger = get_logger(__name__)

_SECONDS_PER_DAY = 86400


def _round_half_up(value: float, decimals: int) -> float:
    with localcontext() as ctx:
        ctx.prec = decimals + 32
        quantum = Decimal(1).scaleb(-decimals)
        return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def generate_amount(
    min_amount: float = 1000,
    max_amount: float = 1000000,
    decimals: int = 2,
    *,
    seed: int | None = None,
    source: RandomSource | None = None,
) -> float:
    """Return an amount in ``[min_amount, max_amount]`` rounded to ``decimals``."""

    if min_amount > max_amount:
        logger.debug("swapping inverted amount bounds %s > %s", min_amount, max_amount)
        min_amount, max_amount = max_amount, min_amount
    rng = resolve_source(source, seed)
    amount = rng.next() * (max_amount - min_amount) + min_amount
    return _round_half_up(amount, decimals)


def generate_date(
    days_ago: float = 30,
    days_future: float = 0,
    *,
    seed: int | None = None,
    source: RandomSource | None = None,
    now: datetime | None = None,
) -> datetime:
    """Return a point in ``[now - days_ago, now + days_future]``.

    ``now`` defaults to the current local time.  The result is naive local
    time for a naive ``now`` and shares ``now``'s timezone otherwise.  With
    both offsets at zero the window collapses to ``now`` itself (one draw is
    still consumed).
    """

    anchor = now or datetime.now()
    ts = anchor.timestamp()
    start = ts - days_ago * _SECONDS_PER_DAY
    end = ts + days_future * _SECONDS_PER_DAY
    if start > end:
        logger.debug("swapping inverted date window %s > %s", start, end)
        start, end = end, start
    r = resolve_source(source, seed).next()
    if start == end:
        return anchor
    return datetime.fromtimestamp(start + (end - start) * r, tz=anchor.tzinfo)


def format_date(value: date) -> str:
    """Format a :class:`date` or :class:`datetime` as ``YYYY-MM-DD``."""

    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
