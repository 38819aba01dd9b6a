"""Utility functions for ledgerload."""

from ledgerload.utils.date_parser import parse_date, parse_transaction_date
from ledgerload.utils.amount_parser import parse_amount
from ledgerload.utils.account_resolver import AccountResolver, resolve_account

__all__ = [
    "parse_date",
    "parse_transaction_date",
    "parse_amount",
    "AccountResolver",
    "resolve_account",
]
