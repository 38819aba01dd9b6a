"""SQLAlchemy models for ledgerload database."""

from datetime import date
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    Date,
    Numeric,
    create_engine,
    event,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

Base = declarative_base()


class Account(Base):
    """Bank account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False)
    account_number = Column(String, unique=True, nullable=False)
    balance = Column(Numeric(12, 2), nullable=False, default=0)

    # Relationships
    transactions = relationship("Transaction", back_populates="account")


class TransactionUpload(Base):
    """One CSV ingestion call."""

    __tablename__ = "transaction_uploads"

    id = Column(Integer, primary_key=True)
    upload_date = Column(Date, default=date.today, nullable=False)
    file_name = Column(String, nullable=False)
    file_size = Column(Integer, nullable=False)
    incoming_transaction_count = Column(Integer, nullable=False, default=0)
    outgoing_transaction_count = Column(Integer, nullable=False, default=0)
    status = Column(String, nullable=False)
    error_message = Column(String, nullable=True)

    # Relationships
    transactions = relationship("Transaction", back_populates="transaction_upload")
    failed_imports = relationship("FailedTransactionImport", back_populates="transaction_upload")


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    account_id = Column(Integer, ForeignKey("accounts.id"), nullable=False)
    transaction_upload_id = Column(Integer, ForeignKey("transaction_uploads.id"), nullable=True)
    amount = Column(Numeric(12, 2), nullable=False)
    transaction_date = Column(Date, nullable=False)
    direction = Column(String, nullable=False)
    external_transaction_id = Column(String, nullable=True)

    # Relationships
    account = relationship("Account", back_populates="transactions")
    transaction_upload = relationship("TransactionUpload", back_populates="transactions")


class FailedTransactionImport(Base):
    """Rejected CSV row kept for operator inspection."""

    __tablename__ = "failed_transaction_imports"

    id = Column(Integer, primary_key=True)
    transaction_upload_id = Column(Integer, ForeignKey("transaction_uploads.id"), nullable=False)
    external_transaction_id = Column(String, nullable=False)
    error_message = Column(String, nullable=False)
    csv_row_value = Column(String, nullable=False)

    # Relationships
    transaction_upload = relationship("TransactionUpload", back_populates="failed_imports")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    if engine.dialect.name == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
