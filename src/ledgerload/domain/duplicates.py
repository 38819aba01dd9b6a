"""Duplicate suppression for CSV uploads."""

import logging
from decimal import Decimal
from typing import Iterable, Optional

from ledgerload.domain.entities import RejectedRow, RejectionReason, ValidatedTransaction

logger = logging.getLogger(__name__)

DuplicateKey = tuple[int, Decimal, Optional[str]]


class DuplicateDetector:
    """Filters out rows whose (account, amount, external id) already exists.

    Only previously stored transactions count. Two identical rows in the same
    file are both kept; the date is not part of the key.
    """

    def __init__(self, existing_keys: Iterable[DuplicateKey]):
        """Initialize detector.

        Args:
            existing_keys: Keys of stored transactions that have an external ID
        """
        self.existing_keys = set(existing_keys)

    def is_duplicate(self, transaction: ValidatedTransaction) -> bool:
        return transaction.duplicate_key in self.existing_keys

    def partition(
        self, transactions: Iterable[ValidatedTransaction]
    ) -> tuple[list[ValidatedTransaction], list[RejectedRow]]:
        """Split validated rows into survivors and duplicate rejections.

        Returns:
            Tuple of (transactions to insert, rejected duplicates), both in input order
        """
        survivors = []
        duplicates = []
        for txn in transactions:
            if self.is_duplicate(txn):
                logger.debug(
                    "Flagged %s as duplicate for account %d", txn.external_transaction_id, txn.account_id
                )
                duplicates.append(
                    RejectedRow(
                        external_transaction_id=txn.external_transaction_id,
                        reason=RejectionReason.FLAGGED_AS_DUPLICATE,
                        csv_row_value=txn.csv_row_value,
                    )
                )
            else:
                survivors.append(txn)
        return survivors, duplicates
