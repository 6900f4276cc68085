"""SQLAlchemy models for fintrack database."""

from datetime import datetime, date, UTC
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    Enum as SQLEnum,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session

from fintrack.domain.entities import Direction, PersonType, TransactionStatus

Base = declarative_base()


class User(Base):
    """Owner of transactions."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String, unique=True, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    transactions = relationship("Transaction", back_populates="user")


class Subject(Base):
    """Party of a transaction, keyed by tax ID."""

    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=True)
    tax_id = Column(String, unique=True, nullable=False)
    address = Column(String, nullable=True)
    phone = Column(String, nullable=True)
    person_type = Column(SQLEnum(PersonType), nullable=False)

    banks = relationship("Bank", back_populates="subject", cascade="all, delete-orphan")


class Bank(Base):
    """Bank account owned by a subject."""

    __tablename__ = "banks"

    id = Column(Integer, primary_key=True)
    bank_name = Column(String, nullable=True)
    account_number = Column(String, unique=True, nullable=False)
    correspondent_account = Column(String, unique=True, nullable=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False)

    subject = relationship("Subject", back_populates="banks")


class Category(Base):
    """Transaction category."""

    __tablename__ = "categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    direction = Column(SQLEnum(Direction), nullable=False)

    transactions = relationship("Transaction", back_populates="category")


class RegTransaction(Base):
    """Accumulation register entry: amount and direction of one transaction."""

    __tablename__ = "reg_transactions"

    id = Column(Integer, primary_key=True)
    direction = Column(SQLEnum(Direction), nullable=False)
    amount = Column(Numeric(8, 2), nullable=False)
    entry_date = Column(Date, default=date.today, nullable=False)

    transaction = relationship("Transaction", back_populates="register", uselist=False)


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    status = Column(SQLEnum(TransactionStatus), nullable=False, default=TransactionStatus.NEW)
    date_time = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)
    comment = Column(String, nullable=True)
    reg_transaction_id = Column(Integer, ForeignKey("reg_transactions.id"), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)
    sender_id = Column(Integer, ForeignKey("subjects.id"), nullable=False)
    recipient_id = Column(Integer, ForeignKey("subjects.id"), nullable=False)
    sender_bank_id = Column(Integer, ForeignKey("banks.id"), nullable=True)
    recipient_bank_id = Column(Integer, ForeignKey("banks.id"), nullable=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False)

    # Relationships
    register = relationship(
        "RegTransaction",
        back_populates="transaction",
        cascade="all, delete-orphan",
        single_parent=True,
    )
    category = relationship("Category", back_populates="transactions")
    sender = relationship("Subject", foreign_keys=[sender_id])
    recipient = relationship("Subject", foreign_keys=[recipient_id])
    sender_bank = relationship("Bank", foreign_keys=[sender_bank_id])
    recipient_bank = relationship("Bank", foreign_keys=[recipient_bank_id])
    user = relationship("User", back_populates="transactions")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
