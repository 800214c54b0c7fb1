"""Contact detail generators: Kenyan mobile numbers and placeholder emails."""

from __future__ import annotations

from ..rng import RandomSource, draw_choice, draw_int, resolve_source

__all__ = ["MOBILE_PREFIXES", "DEFAULT_EMAIL_DOMAIN", "generate_phone_number", "generate_email"]

# Leading digit of the national significant number for Kenyan mobile ranges.
MOBILE_PREFIXES: tuple[str, ...] = ("7", "1")

DEFAULT_EMAIL_DOMAIN = "example.com"


def generate_phone_number(
    *, seed: int | None = None, source: RandomSource | None = None
) -> str:
    """Return an E.164 Kenyan mobile number such as ``+254711249614``."""

    rng = resolve_source(source, seed)
    prefix = draw_choice(rng, MOBILE_PREFIXES)
    digits = draw_int(rng, 90000000, 10000000)
    return f"+254{prefix}{digits}"


def generate_email(
    domain: str = DEFAULT_EMAIL_DOMAIN,
    *,
    seed: int | None = None,
    source: RandomSource | None = None,
) -> str:
    """Return ``taxpayer<n>@<domain>`` with ``n`` in ``[0, 1000000)``."""

    rng = resolve_source(source, seed)
    return f"taxpayer{draw_int(rng, 1000000)}@{domain}"
