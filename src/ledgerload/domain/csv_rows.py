"""CSV row validation and normalization.

Turns tokenized CSV lines into either validated transactions or rejected
rows. Header problems abort the whole batch; row problems only exclude the
row, with a reason from the fixed ``RejectionReason`` vocabulary.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from ledgerload.domain.entities import (
    Direction,
    RejectedRow,
    RejectionReason,
    ValidatedTransaction,
)
from ledgerload.domain.errors import MissingColumnsError
from ledgerload.utils.account_resolver import AccountResolver
from ledgerload.utils.amount_parser import parse_amount
from ledgerload.utils.csv_tokenizer import CSVLine, split_fields
from ledgerload.utils.date_parser import parse_transaction_date

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("id", "account_number", "direction", "amount", "transaction_date")


@dataclass(frozen=True)
class ColumnIndex:
    """Positions of the required columns within a row."""

    id: int
    account_number: int
    direction: int
    amount: int
    transaction_date: int

    @classmethod
    def from_header(cls, header_map: dict[str, int]) -> "ColumnIndex":
        """Resolve required columns from a header index map.

        Raises:
            MissingColumnsError: If any required column is absent
        """
        missing = [col for col in REQUIRED_COLUMNS if col not in header_map]
        if missing:
            raise MissingColumnsError(missing)
        return cls(**{col: header_map[col] for col in REQUIRED_COLUMNS})

    @property
    def max_index(self) -> int:
        return max(self.id, self.account_number, self.direction, self.amount, self.transaction_date)


@dataclass
class RawFields:
    """Trimmed required fields of one row; None where the row is too short."""

    id: Optional[str]
    account_number: Optional[str]
    direction: Optional[str]
    amount: Optional[str]
    transaction_date: Optional[str]

    @classmethod
    def extract(cls, values: list[str], columns: ColumnIndex) -> "RawFields":
        def value_at(index: int) -> Optional[str]:
            return values[index].strip() if index < len(values) else None

        return cls(
            id=value_at(columns.id),
            account_number=value_at(columns.account_number),
            direction=value_at(columns.direction),
            amount=value_at(columns.amount),
            transaction_date=value_at(columns.transaction_date),
        )


@dataclass
class ValidationResult:
    """Outcome of validating every data row of a batch."""

    transactions: list[ValidatedTransaction] = field(default_factory=list)
    rejections: list[RejectedRow] = field(default_factory=list)


class RowValidator:
    """Validates and normalizes data rows against a header and account table."""

    def __init__(self, header_map: dict[str, int], accounts: AccountResolver):
        """Initialize row validator.

        Args:
            header_map: Lower-cased header name to column index
            accounts: Account number lookup, loaded once for the batch

        Raises:
            MissingColumnsError: If the header lacks a required column
        """
        self.columns = ColumnIndex.from_header(header_map)
        self.accounts = accounts

    def validate_row(self, line: CSVLine) -> Union[ValidatedTransaction, RejectedRow]:
        """Validate a single data line.

        Checks run in a fixed order and stop at the first failure.
        """
        values = split_fields(line.text.strip())
        fields = RawFields.extract(values, self.columns)
        external_id = fields.id or f"row_{line.number}"

        def reject(reason: RejectionReason) -> RejectedRow:
            logger.debug("Row %d rejected: %s", line.number, reason)
            return RejectedRow(
                external_transaction_id=external_id,
                reason=reason,
                csv_row_value=line.text,
            )

        if len(values) <= self.columns.max_index:
            return reject(RejectionReason.INSUFFICIENT_COLUMNS)
        if not fields.id:
            return reject(RejectionReason.MISSING_ID)
        if not fields.account_number:
            return reject(RejectionReason.MISSING_ACCOUNT_NUMBER)
        if not fields.direction:
            return reject(RejectionReason.MISSING_DIRECTION)
        if not fields.amount:
            return reject(RejectionReason.MISSING_AMOUNT)
        if not fields.transaction_date:
            return reject(RejectionReason.MISSING_TRANSACTION_DATE)

        account_id = self.accounts.resolve(fields.account_number)
        if account_id is None:
            return reject(RejectionReason.NO_MATCHING_ACCOUNT_NUMBER)

        direction = Direction.parse(fields.direction)
        if direction is None:
            return reject(RejectionReason.INVALID_DIRECTION)

        try:
            amount = parse_amount(fields.amount)
        except ValueError:
            return reject(RejectionReason.INVALID_AMOUNT)

        try:
            transaction_date = parse_transaction_date(fields.transaction_date)
        except ValueError:
            return reject(RejectionReason.INVALID_TRANSACTION_DATE)

        return ValidatedTransaction(
            account_id=account_id,
            amount=amount,
            transaction_date=transaction_date,
            direction=direction,
            external_transaction_id=fields.id,
            csv_row_value=line.text,
        )

    def validate(self, lines: Iterable[CSVLine]) -> ValidationResult:
        """Validate every data line, preserving input order."""
        result = ValidationResult()
        for line in lines:
            outcome = self.validate_row(line)
            if isinstance(outcome, RejectedRow):
                result.rejections.append(outcome)
            else:
                result.transactions.append(outcome)
        return result
