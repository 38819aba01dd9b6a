"""CSV import domain service."""

import logging
from typing import Optional

from ledgerload.database.base import Database
from ledgerload.domain.batch import UploadBatch
from ledgerload.domain.csv_rows import RowValidator
from ledgerload.domain.entities import (
    FailedTransactionImport,
    TransactionUpload,
    UploadSummary,
)
from ledgerload.domain.errors import (
    FILE_MUST_BE_CSV,
    NO_FILE_UPLOADED,
    UploadRejectedError,
)
from ledgerload.utils.account_resolver import AccountResolver
from ledgerload.utils.csv_tokenizer import decode_csv, tokenize

logger = logging.getLogger(__name__)


class CSVImportService:
    """Service for ingesting bank-statement CSV uploads."""

    def __init__(self, db: Database):
        """Initialize CSV import service.

        Args:
            db: Database instance
        """
        self.db = db

    def upload_csv(self, content: Optional[bytes], file_name: Optional[str]) -> UploadSummary:
        """Ingest one CSV upload.

        The header and every row are validated first. Rows that fail are
        recorded as failed imports. The rest go to the store, which drops
        duplicates of stored rows and writes the survivors together with the
        balance changes, the upload record and the failed imports in one
        atomic unit.

        Args:
            content: Raw file bytes
            file_name: Name of the uploaded file

        Returns:
            UploadSummary for the stored upload

        Raises:
            UploadRejectedError: If no file was given or it is not a .csv file
            InsufficientRowsError: If the file has no data rows
            MissingColumnsError: If required columns are missing from the header
            PersistenceError: If the atomic write failed and was rolled back
        """
        if not content or not file_name:
            raise UploadRejectedError(NO_FILE_UPLOADED)
        if not file_name.lower().endswith(".csv"):
            raise UploadRejectedError(FILE_MUST_BE_CSV)

        header_map, lines = tokenize(decode_csv(content))

        # Header is checked before any account lookup or row processing
        validator = RowValidator(header_map, AccountResolver(self.db.get_account_number_map()))
        validated = validator.validate(lines)

        # Duplicates are screened inside the write, under its lock
        batch = UploadBatch(
            file_name=file_name,
            file_size=len(content),
            transactions=validated.transactions,
            rejections=validated.rejections,
        )
        upload = self.db.write_upload_batch(batch)
        inserted = upload.incoming_transaction_count + upload.outgoing_transaction_count

        logger.info(
            "Upload %s: %d inserted, %d invalid, %d duplicates",
            file_name,
            inserted,
            len(validated.rejections),
            len(validated.transactions) - inserted,
        )
        return UploadSummary(
            message=f"Upload completed. {inserted} transactions inserted.",
            transaction_upload_id=upload.id,
            status=upload.status,
            error_message=upload.error_message,
        )

    def get_upload(self, upload_id: int) -> Optional[TransactionUpload]:
        return self.db.get_transaction_upload(upload_id)

    def list_uploads(self) -> list[TransactionUpload]:
        """List all uploads, oldest first."""
        return self.db.list_transaction_uploads()

    def list_failed_imports(self, upload_id: Optional[int] = None) -> list[FailedTransactionImport]:
        """List rejected rows, optionally for one upload."""
        return self.db.list_failed_imports(transaction_upload_id=upload_id)
