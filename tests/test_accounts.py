"""
Tests for services/accounts.py - registration and lookup of users and applicants.
"""

import pytest
from sqlalchemy.exc import IntegrityError

from jobboard.db import repository
from jobboard.db.models import Applicant, User
from jobboard.errors import AuthenticationError, ConflictError, CreationFailedError, NotFoundError, ValidationError
from jobboard.services import accounts


class TestRegister:
    """Test account registration."""

    def test_register_returns_projection_without_credentials(self, session):
        """Registration returns id, name, email and phone only."""
        user = accounts.register(session, User, "  Ada Lovelace  ", "ada@example.com", "hash-1")

        assert user == {"id": user["id"], "full_name": "Ada Lovelace", "email": "ada@example.com", "phone": ""}
        assert user["id"].isdigit()
        assert "password_hash" not in user

    def test_register_stores_applicant_extras(self, session):
        """Applicants keep their city and resume reference."""
        created = accounts.register(
            session, Applicant, "Grace Hopper", "grace@example.com", "hash-2",
            phone="0800000000", city="Chiang Mai", resume_url="https://files.example.com/cv.pdf",
        )

        stored = repository.find_by_id(session, Applicant, int(created["id"]))
        assert stored.city == "Chiang Mai"
        assert stored.resume_url == "https://files.example.com/cv.pdf"
        assert created["phone"] == "0800000000"

    @pytest.mark.parametrize("model", [User, Applicant])
    def test_duplicate_email_conflicts(self, session, model):
        """A second registration with the same email in the same group is a conflict."""
        accounts.register(session, model, "First Person", "same@example.com", "hash-a")

        with pytest.raises(ConflictError, match="Email already registered"):
            accounts.register(session, model, "Other Person", "same@example.com", "hash-b", phone="123")

    def test_same_email_allowed_across_groups(self, session):
        """Uniqueness is per group: a user and an applicant may share an email."""
        accounts.register(session, User, "Shared Email", "shared@example.com", "hash-a")
        applicant = accounts.register(session, Applicant, "Shared Email", "shared@example.com", "hash-b")

        assert applicant["email"] == "shared@example.com"

    @pytest.mark.parametrize(
        "full_name, email, password_hash",
        [
            (None, "x@example.com", "hash"),
            ("   ", "x@example.com", "hash"),
            ("Name", "", "hash"),
            ("Name", "x@example.com", None),
        ],
    )
    def test_missing_fields_rejected(self, session, full_name, email, password_hash):
        """Name, email and credential token are required."""
        with pytest.raises(ValidationError):
            accounts.register(session, User, full_name, email, password_hash)

        assert repository.list_all(session, User) == []

    def test_unique_index_race_maps_to_conflict(self, session, monkeypatch):
        """If the pre-check misses a concurrent insert, the unique index still yields a conflict."""
        accounts.register(session, User, "First Person", "race@example.com", "hash-a")
        real_find = repository.find_by_email
        calls = []

        def miss_first(session, model, email):
            calls.append(email)
            return None if len(calls) == 1 else real_find(session, model, email)

        monkeypatch.setattr(repository, "find_by_email", miss_first)

        with pytest.raises(ConflictError, match="Email already registered"):
            accounts.register(session, User, "Second Person", "race@example.com", "hash-b")

    def test_other_integrity_failure_is_not_a_conflict(self, session, monkeypatch):
        """Only a row that now holds the email turns an integrity failure into a conflict."""
        def reject(session, record):
            raise IntegrityError("INSERT INTO users", {}, Exception("NOT NULL constraint failed: users.email"))

        monkeypatch.setattr(repository, "insert", reject)

        with pytest.raises(CreationFailedError, match="Error registering account"):
            accounts.register(session, User, "Third Person", "third@example.com", "hash-c")


class TestAuthenticate:
    """Test credential matching."""

    def test_matching_credentials_return_projection(self, session, employer):
        result = accounts.authenticate(session, User, "ada@example.com", "hash-ada")

        assert result == employer

    def test_wrong_token_and_unknown_email_look_the_same(self, session, employer):
        """Wrong token and unknown email raise the same error with the same message."""
        with pytest.raises(AuthenticationError) as wrong_token:
            accounts.authenticate(session, User, "ada@example.com", "not-the-hash")
        with pytest.raises(AuthenticationError) as unknown_email:
            accounts.authenticate(session, User, "nobody@example.com", "hash-ada")

        assert wrong_token.value.message == unknown_email.value.message == "Invalid email or password"

    def test_groups_do_not_share_credentials(self, session, applicant):
        """An applicant cannot log in as an employer user."""
        with pytest.raises(AuthenticationError):
            accounts.authenticate(session, User, "grace@example.com", "hash-grace")

    def test_missing_credentials_rejected(self, session):
        with pytest.raises(ValidationError):
            accounts.authenticate(session, Applicant, "grace@example.com", "")


class TestLookups:
    """Test read-only account projections."""

    def test_user_by_email_splits_name(self, session, employer):
        """First token is the first name; the rest is the last name."""
        profile = accounts.get_by_email(session, User, "ada@example.com")

        assert profile["first_name"] == "Ada"
        assert profile["last_name"] == "King Lovelace"
        assert profile["city"] == ""

    def test_single_word_name_has_empty_last_name(self, session):
        accounts.register(session, User, "Plato", "plato@example.com", "hash")

        profile = accounts.get_by_email(session, User, "plato@example.com")

        assert (profile["first_name"], profile["last_name"]) == ("Plato", "")

    def test_applicant_by_email_is_plain_projection(self, session, applicant):
        assert accounts.get_by_email(session, Applicant, "grace@example.com") == applicant

    def test_unknown_email_not_found(self, session):
        with pytest.raises(NotFoundError, match="Applicant not found"):
            accounts.get_by_email(session, Applicant, "missing@example.com")

    @pytest.mark.parametrize("email", ["", "   ", None])
    def test_blank_email_is_a_validation_error(self, session, email):
        with pytest.raises(ValidationError, match="Email is required"):
            accounts.get_by_email(session, User, email)

    def test_get_by_id(self, session, employer):
        assert accounts.get_by_id(session, User, employer["id"]) == employer

    def test_get_by_id_rejects_malformed_id(self, session):
        with pytest.raises(ValidationError, match="Invalid user ID format"):
            accounts.get_by_id(session, User, "12abc")

    def test_get_by_id_not_found(self, session):
        with pytest.raises(NotFoundError, match="User not found"):
            accounts.get_by_id(session, User, "404")

    def test_list_all_includes_city(self, session, employer, applicant):
        users = accounts.list_all(session, User)
        applicants = accounts.list_all(session, Applicant)

        assert users == [{"id": employer["id"], "full_name": "Ada King Lovelace", "email": "ada@example.com", "city": ""}]
        assert applicants[0]["city"] == "Bangkok"


def test_split_full_name_keeps_inner_spacing():
    assert accounts.split_full_name("Mary  Ann Evans") == ("Mary", " Ann Evans")
