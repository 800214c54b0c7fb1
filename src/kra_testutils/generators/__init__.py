"""Fixture generators for KRA identifiers, contacts, names and values."""

from .bulk import generate_eslips, generate_many, generate_pins, generate_tccs
from .contact import generate_email, generate_phone_number
from .identifiers import (
    generate_eslip,
    generate_obligation_id,
    generate_pin,
    generate_tax_period,
    generate_tcc,
)
from .names import generate_taxpayer_name
from .values import format_date, generate_amount, generate_date

__all__ = [
    "format_date",
    "generate_amount",
    "generate_date",
    "generate_email",
    "generate_eslip",
    "generate_eslips",
    "generate_many",
    "generate_obligation_id",
    "generate_phone_number",
    "generate_pin",
    "generate_pins",
    "generate_tax_period",
    "generate_taxpayer_name",
    "generate_tcc",
    "generate_tccs",
]
