"""Tests for SubjectService."""

import pytest

from fintrack.domain.entities import PersonType, SubjectPatch, UNSET
from fintrack.domain.errors import ConflictError, NotFoundError, ValidationError
from fintrack.domain.subject import is_valid_phone, is_valid_tax_id


@pytest.fixture
def company(subject_service):
    return subject_service.get_or_create_subject(
        tax_id="7707083893",
        name="Horns and Hooves LLC",
        person_type=PersonType.LEGAL_ENTITY,
        address="1 Main St",
        phone="+79001234567",
    )


@pytest.mark.parametrize(
    "tax_id,expected",
    [
        ("7707083893", True),
        ("500100732259", True),
        ("770708389", False),
        ("77070838931", False),
        ("5001007322591", False),
        ("77070838a3", False),
        ("", False),
    ],
)
def test_is_valid_tax_id(tax_id, expected):
    assert is_valid_tax_id(tax_id) is expected


@pytest.mark.parametrize(
    "phone,expected",
    [
        ("+79001234567", True),
        ("89001234567", True),
        ("79001234567", False),
        ("+7900123456", False),
        ("555-1234", False),
    ],
)
def test_is_valid_phone(phone, expected):
    assert is_valid_phone(phone) is expected


class TestGetOrCreateSubject:
    """Tests for resolving subjects by tax ID."""

    def test_creates_missing_subject(self, subject_service, company):
        assert company.id is not None
        assert company.person_type == PersonType.LEGAL_ENTITY
        assert subject_service.get_subject_by_tax_id("7707083893") == company

    def test_overwrites_existing_subject(self, subject_service, company):
        again = subject_service.get_or_create_subject(
            tax_id=" 7707083893 ",
            name="New Name",
            person_type=PersonType.INDIVIDUAL,
            address=None,
            phone=None,
        )

        assert again.id == company.id
        assert again.name == "New Name"
        assert again.person_type == PersonType.INDIVIDUAL
        assert again.address is None
        assert again.phone is None
        assert len(subject_service.list_subjects()) == 1


class TestLookup:
    """Tests for lookups by tax ID."""

    def test_get_missing_returns_none(self, subject_service):
        assert subject_service.get_subject_by_tax_id("0000000000") is None

    def test_require_missing_raises(self, subject_service):
        with pytest.raises(NotFoundError, match="0000000000"):
            subject_service.require_subject_by_tax_id("0000000000")

    def test_lookup_ignores_whitespace(self, subject_service, company):
        assert subject_service.require_subject_by_tax_id("  7707083893\n").id == company.id


class TestUpdateSubject:
    """Tests for partial subject updates."""

    def test_only_supplied_fields_change(self, subject_service, company):
        updated = subject_service.update_subject(company.id, SubjectPatch(name="Renamed"))

        assert updated.name == "Renamed"
        assert updated.address == "1 Main St"
        assert updated.phone == "+79001234567"
        assert updated.tax_id == "7707083893"

    def test_blank_fields_are_ignored(self, subject_service, company):
        updated = subject_service.update_subject(
            company.id, SubjectPatch(name="   ", address="", phone=UNSET)
        )

        assert updated == company

    def test_invalid_tax_id_leaves_subject_untouched(self, subject_service, company):
        with pytest.raises(ValidationError, match="10 or 12 digits"):
            subject_service.update_subject(
                company.id, SubjectPatch(name="Should Not Stick", tax_id="12345")
            )

        assert subject_service.get_subject(company.id) == company

    def test_invalid_phone_leaves_subject_untouched(self, subject_service, company):
        with pytest.raises(ValidationError, match="Invalid phone"):
            subject_service.update_subject(
                company.id, SubjectPatch(name="Should Not Stick", phone="555-1234")
            )

        assert subject_service.get_subject(company.id) == company

    def test_phone_is_stored_trimmed(self, subject_service, company):
        updated = subject_service.update_subject(company.id, SubjectPatch(phone=" 89001112233 "))

        assert updated.phone == "89001112233"

    def test_tax_id_can_be_changed(self, subject_service, company):
        updated = subject_service.update_subject(company.id, SubjectPatch(tax_id="500100732259"))

        assert updated.tax_id == "500100732259"
        assert subject_service.get_subject_by_tax_id("7707083893") is None

    def test_tax_id_of_another_subject_conflicts(self, subject_service, company):
        subject_service.get_or_create_subject(
            tax_id="500100732259",
            name="Ivan",
            person_type=PersonType.INDIVIDUAL,
            address=None,
            phone=None,
        )

        with pytest.raises(ConflictError):
            subject_service.update_subject(company.id, SubjectPatch(tax_id="500100732259"))

    def test_missing_subject(self, subject_service):
        with pytest.raises(NotFoundError):
            subject_service.update_subject(999, SubjectPatch(name="x"))
