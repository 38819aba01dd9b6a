"""Mapper functions to convert between domain models and SQLAlchemy models."""

from decimal import Decimal

from ledgerload.domain import entities as domain
from ledgerload.database.models import (
    Account as ORMAccount,
    Transaction as ORMTransaction,
    TransactionUpload as ORMTransactionUpload,
    FailedTransactionImport as ORMFailedTransactionImport,
)


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        name=orm_account.name,
        account_number=orm_account.account_number,
        balance=Decimal(orm_account.balance),
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        account_id=orm_transaction.account_id,
        transaction_upload_id=orm_transaction.transaction_upload_id,
        amount=Decimal(orm_transaction.amount),
        transaction_date=orm_transaction.transaction_date,
        direction=domain.Direction(orm_transaction.direction),
        external_transaction_id=orm_transaction.external_transaction_id,
    )


def transaction_upload_to_domain(orm_upload: ORMTransactionUpload) -> domain.TransactionUpload:
    """Convert SQLAlchemy TransactionUpload model to domain entity."""
    return domain.TransactionUpload(
        id=orm_upload.id,
        upload_date=orm_upload.upload_date,
        file_name=orm_upload.file_name,
        file_size=orm_upload.file_size,
        incoming_transaction_count=orm_upload.incoming_transaction_count,
        outgoing_transaction_count=orm_upload.outgoing_transaction_count,
        status=orm_upload.status,
        error_message=orm_upload.error_message,
    )


def failed_import_to_domain(
    orm_failed: ORMFailedTransactionImport,
) -> domain.FailedTransactionImport:
    """Convert SQLAlchemy FailedTransactionImport model to domain entity."""
    return domain.FailedTransactionImport(
        id=orm_failed.id,
        transaction_upload_id=orm_failed.transaction_upload_id,
        external_transaction_id=orm_failed.external_transaction_id,
        error_message=orm_failed.error_message,
        csv_row_value=orm_failed.csv_row_value,
    )
