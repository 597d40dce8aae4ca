# jobboard/services/accounts.py
"""
Registration and lookup for both account groups (employer users and applicants).

Email uniqueness is checked per group before the insert; the unique index on
each table is the backstop when two registrations race. Credential tokens are
stored and matched as opaque strings and never leave this module.
"""

import logging

from jobboard.db import repository
from jobboard.db.models import Applicant, User
from jobboard.errors import AuthenticationError, CreationFailedError
from jobboard.services.checks import ensure_exists, ensure_no_duplicate, guarded, parse_id, require_fields

log = logging.getLogger(__name__)

EMAIL_TAKEN = "Email already registered"
INVALID_CREDENTIALS = "Invalid email or password"


def _projection(account) -> dict:
    return {
        "id": str(account.id),
        "full_name": account.full_name,
        "email": account.email,
        "phone": account.phone or "",
    }


def split_full_name(full_name: str) -> tuple[str, str]:
    """Splits on the first space: ('Ada', 'King Lovelace'). No space means an empty last name."""
    first, _, last = full_name.partition(" ")
    return first, last


def _existing_account(session, model, full_name, email, *args, **kwargs):
    return repository.find_by_email(session, model, email)


@guarded(
    "registering account",
    failure=CreationFailedError,
    conflict_message=EMAIL_TAKEN,
    conflict_lookup=_existing_account,
)
def register(session, model, full_name, email, password_hash, phone=None, city=None, resume_url=None) -> dict:
    require_fields(
        "Full name, email, and password hash are required",
        full_name=full_name, email=email, password_hash=password_hash,
    )
    full_name = full_name.strip()
    log.info(f"Registration attempt: group={model.__tablename__}, email={email}")

    ensure_no_duplicate(repository.find_by_email(session, model, email), EMAIL_TAKEN, f"{model.__tablename__} email {email}")

    fields = {"full_name": full_name, "email": email, "password_hash": password_hash, "phone": phone or None}
    if model is Applicant:
        fields.update(city=city or None, resume_url=resume_url or None)
    new_id = repository.insert(session, model(**fields))

    # Re-read for the canonical stored values
    created = repository.find_by_id(session, model, new_id)
    log.info(f"{model.__name__} registered: ID={new_id}, Email={email}")
    return _projection(created)


@guarded("authenticating account")
def authenticate(session, model, email, password_hash) -> dict:
    require_fields("Email and password are required", email=email, password_hash=password_hash)
    account = repository.find_by_credentials(session, model, email, password_hash)
    if account is None:
        log.warning(f"Login failed for {model.__tablename__} email {email}")
        raise AuthenticationError(INVALID_CREDENTIALS)
    log.info(f"Login successful: {model.__name__} ID={account.id}")
    return _projection(account)


@guarded("fetching account by email")
def get_by_email(session, model, email) -> dict:
    require_fields("Email is required", email=email)
    account = ensure_exists(repository.find_by_email(session, model, email), f"{model.__name__} not found")
    result = _projection(account)
    if model is User:
        first_name, last_name = split_full_name(account.full_name)
        result.update(first_name=first_name, last_name=last_name, city="")
    return result


@guarded("fetching account")
def get_by_id(session, model, account_id) -> dict:
    label = "user ID" if model is User else "applicant ID"
    record_id = parse_id(account_id, label)
    account = ensure_exists(repository.find_by_id(session, model, record_id), f"{model.__name__} not found")
    return _projection(account)


@guarded("listing accounts")
def list_all(session, model) -> list[dict]:
    return [
        {
            "id": str(account.id),
            "full_name": account.full_name or "",
            "email": account.email,
            # Employer users carry no city
            "city": getattr(account, "city", None) or "",
        }
        for account in repository.list_all(session, model)
    ]
