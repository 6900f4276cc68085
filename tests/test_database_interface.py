"""Tests for the Database interface returning domain models."""

from datetime import datetime, UTC
from decimal import Decimal

import pytest

from fintrack.domain import entities
from fintrack.domain.entities import Direction, PersonType, TransactionStatus
from fintrack.domain.errors import NotFoundError


@pytest.fixture
def parties(temp_db):
    user_id = temp_db.create_user("alice")
    sender_id = temp_db.create_subject(tax_id="7707083893", person_type=PersonType.LEGAL_ENTITY, name="S")
    recipient_id = temp_db.create_subject(tax_id="500100732259", person_type=PersonType.INDIVIDUAL, name="R")
    category_id = temp_db.create_category("Utilities", Direction.CREDIT)
    return {"user": user_id, "sender": sender_id, "recipient": recipient_id, "category": category_id}


def create_transaction(temp_db, parties, amount="10.00"):
    return temp_db.create_transaction(
        user_id=parties["user"],
        category_id=parties["category"],
        sender_id=parties["sender"],
        recipient_id=parties["recipient"],
        amount=Decimal(amount),
        direction=Direction.CREDIT,
        date_time=datetime.now(UTC),
    )


class TestDatabaseInterface:
    """Tests to verify the Database interface returns domain models."""

    def test_get_user_returns_domain_model(self, temp_db):
        temp_db.create_user("alice")

        user = temp_db.get_user_by_username("alice")

        assert isinstance(user, entities.User)
        assert isinstance(user.created_at, datetime)

    def test_get_subject_by_tax_id_returns_domain_model(self, temp_db, parties):
        subject = temp_db.get_subject_by_tax_id("7707083893")

        assert isinstance(subject, entities.Subject)
        assert subject.id == parties["sender"]

    def test_category_lookup_by_name_is_case_insensitive(self, temp_db, parties):
        assert temp_db.get_category_by_name("UTILITIES").id == parties["category"]

    def test_create_transaction_builds_register_entry(self, temp_db, parties):
        transaction_id = create_transaction(temp_db, parties, amount="123.45")

        transaction = temp_db.get_transaction(transaction_id)

        assert isinstance(transaction, entities.Transaction)
        assert isinstance(transaction.register, entities.RegisterEntry)
        assert transaction.amount == Decimal("123.45")
        assert transaction.status == TransactionStatus.NEW
        assert transaction.sender_bank is None

    def test_update_register_entry(self, temp_db, parties):
        transaction = temp_db.get_transaction(create_transaction(temp_db, parties))

        temp_db.update_register_entry(transaction.register.id, amount=Decimal("99.99"), direction=Direction.DEBIT)

        updated = temp_db.get_transaction(transaction.id)
        assert updated.amount == Decimal("99.99")
        assert updated.direction == Direction.DEBIT

    def test_update_transaction_none_leaves_fields(self, temp_db, parties):
        transaction_id = create_transaction(temp_db, parties)

        temp_db.update_transaction(transaction_id, comment="hello")
        temp_db.update_transaction(transaction_id, status=None, comment=None)

        transaction = temp_db.get_transaction(transaction_id)
        assert transaction.comment == "hello"
        assert transaction.status == TransactionStatus.NEW

    def test_update_transaction_reattaches_subject(self, temp_db, parties):
        transaction_id = create_transaction(temp_db, parties)
        assert temp_db.get_transaction(transaction_id).recipient.name == "R"

        temp_db.update_transaction(transaction_id, recipient_id=parties["sender"])

        assert temp_db.get_transaction(transaction_id).recipient.name == "S"

    def test_update_transaction_clears_bank(self, temp_db, parties):
        transaction_id = create_transaction(temp_db, parties)
        bank_id = temp_db.create_bank("40817810000000000001", parties["recipient"])
        temp_db.update_transaction(transaction_id, recipient_bank_id=bank_id)
        assert temp_db.get_transaction(transaction_id).recipient_bank.id == bank_id

        temp_db.update_transaction(transaction_id, recipient_bank_id=bank_id, clear_recipient_bank=True)

        assert temp_db.get_transaction(transaction_id).recipient_bank is None

    def test_update_missing_transaction_raises(self, temp_db):
        with pytest.raises(NotFoundError):
            temp_db.update_transaction(404, comment="x")

    def test_category_transaction_count(self, temp_db, parties):
        create_transaction(temp_db, parties)
        create_transaction(temp_db, parties)

        assert temp_db.get_category_transaction_count(parties["category"]) == 2

    def test_transaction_scope_rolls_back(self, temp_db):
        with pytest.raises(RuntimeError):
            with temp_db.transaction():
                temp_db.create_user("ghost")
                temp_db.create_category("Ghost", Direction.CREDIT)
                raise RuntimeError("boom")

        assert temp_db.get_user_by_username("ghost") is None
        assert temp_db.get_category_by_name("Ghost") is None

    def test_transaction_scope_commits(self, temp_db):
        with temp_db.transaction():
            temp_db.create_user("kept")
            with temp_db.transaction():
                temp_db.create_category("Nested", Direction.DEBIT)

        assert temp_db.get_user_by_username("kept") is not None
        assert temp_db.get_category_by_name("Nested") is not None

    def test_list_banks_by_owner(self, temp_db, parties):
        temp_db.create_bank(account_number="1", subject_id=parties["sender"], bank_name="B1")
        temp_db.create_bank(account_number="2", subject_id=parties["recipient"], bank_name="B2")

        banks = temp_db.list_banks(subject_id=parties["sender"])

        assert [b.account_number for b in banks] == ["1"]
        assert isinstance(banks[0], entities.BankAccount)
