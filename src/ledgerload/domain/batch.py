"""Upload batch handed to the transaction writer."""

from collections import defaultdict
from dataclasses import dataclass, field, replace
from decimal import Decimal
from typing import Optional

from ledgerload.domain.duplicates import DuplicateDetector
from ledgerload.domain.entities import Direction, RejectedRow, ValidatedTransaction

STATUS_COMPLETED = "completed"


@dataclass
class UploadBatch:
    """Everything one ingestion call persists in a single atomic unit."""

    file_name: str
    file_size: int
    transactions: list[ValidatedTransaction] = field(default_factory=list)
    rejections: list[RejectedRow] = field(default_factory=list)
    status: str = STATUS_COMPLETED

    @property
    def incoming_count(self) -> int:
        return sum(1 for t in self.transactions if t.direction is Direction.INCOMING)

    @property
    def outgoing_count(self) -> int:
        return sum(1 for t in self.transactions if t.direction is Direction.OUTGOING)

    @property
    def error_message(self) -> Optional[str]:
        """Rejection count summary, or None when every row survived."""
        if not self.rejections:
            return None
        return f"{len(self.rejections)} transaction(s) failed validation or were duplicates"

    @property
    def external_ids(self) -> list[str]:
        return [t.external_transaction_id for t in self.transactions if t.external_transaction_id]

    def balance_deltas(self) -> dict[int, Decimal]:
        """Net balance change per account.

        Incoming adds the amount, outgoing subtracts it; the stored sign of
        the amount never matters.
        """
        deltas: dict[int, Decimal] = defaultdict(Decimal)
        for txn in self.transactions:
            deltas[txn.account_id] += txn.direction.signed(txn.amount)
        return dict(deltas)

    def exclude_duplicates(self, detector: DuplicateDetector) -> "UploadBatch":
        """Copy of the batch with already stored rows moved to the rejections."""
        survivors, duplicates = detector.partition(self.transactions)
        return replace(self, transactions=survivors, rejections=self.rejections + duplicates)
