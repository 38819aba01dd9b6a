"""Shared domain error messages and error types."""

from typing import Sequence


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DependencyError(DomainError):
    """Operation blocked due to dependent domain data."""


class PersistenceError(DomainError):
    """The atomic write failed and was rolled back."""


class UploadRejectedError(ValidationError):
    """The upload payload itself is unusable (no file, wrong extension)."""


class InsufficientRowsError(ValidationError):
    """The CSV has no data rows."""

    def __init__(self) -> None:
        super().__init__("CSV file must contain at least a header row and one data row")


class MissingColumnsError(ValidationError):
    """The CSV header lacks one or more required columns."""

    def __init__(self, columns: Sequence[str]) -> None:
        self.columns = list(columns)
        super().__init__(f"Missing required columns: {', '.join(self.columns)}")


class DuplicateAccountNumberError(ConflictError):
    """Another account already uses the account number."""

    def __init__(self, account_number: str) -> None:
        self.account_number = account_number
        super().__init__(duplicate_account_number(account_number))


class AccountNumberLockedError(DependencyError):
    """The account number cannot change once transactions reference it."""

    def __init__(self) -> None:
        super().__init__(
            "You may not update an account number for accounts with existing transactions."
        )


NO_FILE_UPLOADED = "No file uploaded"
FILE_MUST_BE_CSV = "File must be a CSV file"


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def duplicate_account_number(account_number: str) -> str:
    """Return message for a duplicate account number."""
    return (
        f"An account with account number '{account_number}' already exists. "
        "Account numbers must be unique."
    )


def upload_failed(error: Exception) -> str:
    """Return message for a failed atomic upload write."""
    return f"Error processing file upload: {error}"
