"""Utility functions for fintrack."""

from fintrack.utils.amount_parser import parse_amount
from fintrack.utils.date_parser import get_date_range, parse_date
from fintrack.utils.enum_parser import parse_direction, parse_person_type, parse_status

__all__ = [
    "parse_amount",
    "parse_date",
    "get_date_range",
    "parse_direction",
    "parse_person_type",
    "parse_status",
]
