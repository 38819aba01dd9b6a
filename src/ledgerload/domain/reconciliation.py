"""Reconciliation of a reference CSV against stored transactions.

Each reference row is classified as a perfect match (all five compared
fields equal), a set of near matches (exactly one field differs), or
unmatched. Nothing is written to storage.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional, Union

from ledgerload.database.base import Database
from ledgerload.domain.csv_rows import ColumnIndex, RawFields
from ledgerload.domain.entities import (
    Account,
    Direction,
    MatchField,
    MatchResult,
    ReferenceRow,
    Transaction,
)
from ledgerload.utils.account_resolver import AccountResolver
from ledgerload.utils.amount_parser import parse_amount
from ledgerload.utils.csv_tokenizer import decode_csv, split_fields, tokenize
from ledgerload.utils.date_parser import parse_transaction_date

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NormalizedReference:
    """The five compared values of a reference row."""

    external_transaction_id: str
    amount: Decimal
    account_id: int
    transaction_date: date
    direction: Direction


def read_reference_rows(content: str) -> list[ReferenceRow]:
    """Tokenize a reference CSV into raw rows.

    Short rows are padded with blank values so they still show up, unmatched,
    in the output.

    Raises:
        InsufficientRowsError: If the file has no data rows
        MissingColumnsError: If required columns are missing from the header
    """
    header_map, lines = tokenize(content)
    columns = ColumnIndex.from_header(header_map)
    rows = []
    for line in lines:
        fields = RawFields.extract(split_fields(line.text.strip()), columns)
        rows.append(
            ReferenceRow(
                external_transaction_id=fields.id or "",
                account_number=fields.account_number or "",
                direction=fields.direction or "",
                amount=fields.amount or "",
                transaction_date=fields.transaction_date or "",
            )
        )
    return rows


def normalize_reference(row: ReferenceRow, accounts: AccountResolver) -> Optional[NormalizedReference]:
    """Normalize a reference row, or return None if it cannot be compared."""
    account_id = accounts.resolve(row.account_number)
    direction = Direction.parse(row.direction)
    if account_id is None or direction is None:
        return None
    try:
        amount = parse_amount(row.amount)
        transaction_date = parse_transaction_date(row.transaction_date)
    except ValueError:
        return None
    return NormalizedReference(
        external_transaction_id=row.external_transaction_id,
        amount=amount,
        account_id=account_id,
        transaction_date=transaction_date,
        direction=direction,
    )


def mismatched_fields(reference: NormalizedReference, txn: Transaction) -> list[MatchField]:
    """Return the compared fields on which a stored transaction differs."""
    checks = (
        (MatchField.EXTERNAL_TRANSACTION_ID, txn.external_transaction_id == reference.external_transaction_id),
        (MatchField.AMOUNT, abs(txn.amount) == reference.amount),
        (MatchField.ACCOUNT, txn.account_id == reference.account_id),
        (MatchField.TRANSACTION_DATE, txn.transaction_date == reference.transaction_date),
        (MatchField.DIRECTION, txn.direction == reference.direction),
    )
    return [match_field for match_field, equal in checks if not equal]


class Matcher:
    """Classifies reference rows against an immutable snapshot of transactions."""

    def __init__(self, transactions: Iterable[Transaction], accounts: Iterable[Account]):
        self.transactions = list(transactions)
        accounts = list(accounts)
        self.accounts = AccountResolver.from_accounts(accounts)
        self._names = {acc.account_number: acc.name for acc in accounts}

    def classify(self, row: ReferenceRow) -> MatchResult:
        """Classify a single reference row."""
        result = MatchResult(
            transaction_date=row.transaction_date,
            account=self._names.get(row.account_number) or row.account_number,
            account_number=row.account_number,
            external_transaction_id=row.external_transaction_id,
            direction=row.direction,
            amount=row.amount,
        )

        reference = normalize_reference(row, self.accounts)
        if reference is None:
            logger.debug("Reference row %s cannot be compared", row.external_transaction_id)
            return result

        near: list[tuple[Transaction, MatchField]] = []
        for txn in self.transactions:
            differences = mismatched_fields(reference, txn)
            if not differences:
                result.matching_transaction_ids.append(txn.id)
            elif len(differences) == 1:
                near.append((txn, differences[0]))

        if result.matching_transaction_ids:
            result.perfect_match = True
            return result

        result.near_matches = [txn for txn, _ in near]
        result.near_match_fields = {txn.id: match_field for txn, match_field in near}
        return result

    def match(self, rows: Iterable[ReferenceRow]) -> list[MatchResult]:
        """Classify reference rows, keeping their order."""
        return [self.classify(row) for row in rows]


class ReconciliationService:
    """Service comparing reference CSV files with stored transactions."""

    def __init__(self, db: Database):
        """Initialize reconciliation service.

        Args:
            db: Database instance
        """
        self.db = db

    def compare_csv(self, content: Union[bytes, str]) -> list[MatchResult]:
        """Compare a reference CSV with every stored transaction.

        Args:
            content: Reference CSV as raw bytes or decoded text

        Returns:
            One MatchResult per reference row, in file order
        """
        if isinstance(content, bytes):
            content = decode_csv(content)
        rows = read_reference_rows(content)
        matcher = Matcher(self.db.list_transactions(), self.db.list_accounts())
        results = matcher.match(rows)
        logger.info(
            "Reconciled %d reference rows: %d perfect, %d with near matches",
            len(results),
            sum(1 for r in results if r.perfect_match),
            sum(1 for r in results if r.near_matches),
        )
        return results
