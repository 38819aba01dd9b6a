"""Domain model entities for ledgerload.

These are pure data classes representing business concepts, independent of
database schema. The engine passes these between the tokenizer, validator,
duplicate detector, writer and matcher without touching the ORM.
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional


class Direction(str, Enum):
    """Money flow of a transaction relative to its account."""

    INCOMING = "Incoming"
    OUTGOING = "Outgoing"

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional["Direction"]:
        """Normalize a CSV direction token.

        Accepts "I", "Incoming", "O" and "Outgoing" in any case.
        Returns None for anything else.
        """
        if text is None:
            return None
        token = text.strip().lower()
        if token in ("i", "incoming"):
            return cls.INCOMING
        if token in ("o", "outgoing"):
            return cls.OUTGOING
        return None

    def signed(self, amount: Decimal) -> Decimal:
        """Return the balance effect of moving ``amount`` in this direction."""
        magnitude = abs(amount)
        return magnitude if self is Direction.INCOMING else -magnitude


class RejectionReason(str, Enum):
    """Closed vocabulary of row-level rejection reasons."""

    INSUFFICIENT_COLUMNS = "insufficient columns"
    MISSING_ID = "missing id"
    MISSING_ACCOUNT_NUMBER = "missing account number"
    MISSING_DIRECTION = "missing direction"
    MISSING_AMOUNT = "missing amount"
    MISSING_TRANSACTION_DATE = "missing transaction date"
    NO_MATCHING_ACCOUNT_NUMBER = "no matching account number"
    INVALID_DIRECTION = "invalid direction"
    INVALID_AMOUNT = "invalid amount"
    INVALID_TRANSACTION_DATE = "invalid transaction date"
    FLAGGED_AS_DUPLICATE = "flagged as duplicate"

    def __str__(self) -> str:
        return self.value


class MatchField(str, Enum):
    """Fields compared when reconciling a reference row."""

    EXTERNAL_TRANSACTION_ID = "external_transaction_id"
    AMOUNT = "amount"
    ACCOUNT = "account"
    TRANSACTION_DATE = "transaction_date"
    DIRECTION = "direction"


@dataclass(frozen=True)
class Account:
    """Bank account domain entity."""

    id: int
    name: str
    account_number: str
    balance: Decimal


@dataclass(frozen=True)
class Transaction:
    """Stored transaction domain entity."""

    id: int
    account_id: int
    transaction_upload_id: Optional[int]
    amount: Decimal
    transaction_date: date
    direction: Direction
    external_transaction_id: Optional[str]


@dataclass(frozen=True)
class NewTransaction:
    """A fully-formed transaction that has not been stored yet."""

    account_id: int
    amount: Decimal
    transaction_date: date
    direction: Direction
    external_transaction_id: Optional[str] = None
    transaction_upload_id: Optional[int] = None


@dataclass(frozen=True)
class TransactionUpload:
    """One ingestion call."""

    id: int
    upload_date: date
    file_name: str
    file_size: int
    incoming_transaction_count: int
    outgoing_transaction_count: int
    status: str
    error_message: Optional[str]


@dataclass(frozen=True)
class FailedTransactionImport:
    """Audit record of one rejected CSV row."""

    id: int
    transaction_upload_id: int
    external_transaction_id: str
    error_message: str
    csv_row_value: str


@dataclass(frozen=True)
class ValidatedTransaction:
    """A CSV row that passed validation and normalization."""

    account_id: int
    amount: Decimal
    transaction_date: date
    direction: Direction
    external_transaction_id: str
    csv_row_value: str

    @property
    def duplicate_key(self) -> tuple[int, Decimal, str]:
        """Composite key used by duplicate suppression."""
        return (self.account_id, self.amount, self.external_transaction_id)


@dataclass(frozen=True)
class RejectedRow:
    """A CSV row excluded from the batch, kept for the audit trail."""

    external_transaction_id: str
    reason: RejectionReason
    csv_row_value: str


@dataclass(frozen=True)
class UploadSummary:
    """Result of a successful ingestion call."""

    message: str
    transaction_upload_id: int
    status: str
    error_message: Optional[str]


@dataclass(frozen=True)
class ReferenceRow:
    """One row of a reference CSV, exactly as it was read."""

    external_transaction_id: str
    account_number: str
    direction: str
    amount: str
    transaction_date: str


@dataclass
class MatchResult:
    """Classification of one reference row against stored transactions."""

    transaction_date: str
    account: str
    account_number: str
    external_transaction_id: str
    direction: str
    amount: str
    perfect_match: bool = False
    matching_transaction_ids: list[int] = field(default_factory=list)
    near_matches: list[Transaction] = field(default_factory=list)
    near_match_fields: dict[int, MatchField] = field(default_factory=dict)
