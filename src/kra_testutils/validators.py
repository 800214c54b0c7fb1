"""Format predicates paired with the generators.

The TCC and e-slip patterns are deliberately looser than their generators
(6-8 and 9-12 digits) so that values sourced from real KRA responses also
pass.  Predicates never raise; anything that is not a ``str`` is rejected.
"""

from __future__ import annotations

import re
from typing import Any

import phonenumbers
from phonenumbers import NumberParseException

__all__ = [
    "PIN_RX",
    "TCC_RX",
    "ESLIP_RX",
    "OBLIGATION_ID_RX",
    "TAX_PERIOD_RX",
    "PHONE_RX",
    "validate_pin_format",
    "validate_tcc_format",
    "validate_eslip_format",
    "validate_obligation_id_format",
    "validate_tax_period_format",
    "validate_phone_number_format",
]

# ``\d`` would also match non-ASCII digits.
PIN_RX: re.Pattern[str] = re.compile(r"^P[0-9]{9}[A-Z]$")
TCC_RX: re.Pattern[str] = re.compile(r"^TCC[0-9]{6,8}$")
ESLIP_RX: re.Pattern[str] = re.compile(r"^ESLIP[0-9]{9,12}$")
OBLIGATION_ID_RX: re.Pattern[str] = re.compile(r"^OBL[0-9]{3}$")
TAX_PERIOD_RX: re.Pattern[str] = re.compile(r"^[0-9]{4}(0[1-9]|1[0-2])$")
PHONE_RX: re.Pattern[str] = re.compile(r"^\+254[17][0-9]{8}$")


def _matches(rx: re.Pattern[str], value: Any) -> bool:
    return isinstance(value, str) and rx.fullmatch(value) is not None


def validate_pin_format(pin: Any) -> bool:
    """Return ``True`` for ``P`` + 9 digits + uppercase letter."""

    return _matches(PIN_RX, pin)


def validate_tcc_format(tcc: Any) -> bool:
    """Return ``True`` for ``TCC`` + 6 to 8 digits."""

    return _matches(TCC_RX, tcc)


def validate_eslip_format(eslip: Any) -> bool:
    """Return ``True`` for ``ESLIP`` + 9 to 12 digits."""

    return _matches(ESLIP_RX, eslip)


def validate_obligation_id_format(obligation_id: Any) -> bool:
    return _matches(OBLIGATION_ID_RX, obligation_id)


def validate_tax_period_format(period: Any) -> bool:
    return _matches(TAX_PERIOD_RX, period)


def validate_phone_number_format(phone: Any) -> bool:
    """Return ``True`` for a ``+254`` mobile number that ``phonenumbers`` deems possible."""

    if not _matches(PHONE_RX, phone):
        return False
    try:
        parsed = phonenumbers.parse(phone, "KE")
    except NumberParseException:
        return False
    return parsed.country_code == 254 and phonenumbers.is_possible_number(parsed)
