# jobboard/services/checks.py
"""
Shared pieces of the check-then-write protocol: input parsing, the duplicate
pre-check and the failure policy applied around every service call.
"""

import logging
import re
from functools import wraps

from sqlalchemy.exc import IntegrityError

from jobboard.errors import ConflictError, InternalError, JobBoardError, NotFoundError, ValidationError

log = logging.getLogger(__name__)

_INTEGER_PATTERN = re.compile(r"^[+-]?\d+$")


def is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == "")


def require_fields(message: str, **fields):
    """Raises ValidationError naming the request when any field is missing or empty."""
    missing = [name for name, value in fields.items() if is_blank(value)]
    if missing:
        log.warning(f"Validation failed, missing fields: {', '.join(missing)}")
        raise ValidationError(message)


def parse_id(value, label: str) -> int:
    """Accepts an int or a string of digits. Anything else is a malformed id."""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {label} format")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and _INTEGER_PATTERN.match(value.strip()):
        return int(value.strip())
    log.warning(f"Rejected malformed {label}: {value!r}")
    raise ValidationError(f"Invalid {label} format")


def ensure_no_duplicate(existing, message: str, context: str):
    """The application-level uniqueness pre-check. The storage constraint is only a backstop."""
    if existing is not None:
        log.warning(f"Duplicate detected for {context} (existing ID={existing.id}).")
        raise ConflictError(message)


def ensure_exists(record, message: str):
    if record is None:
        log.warning(message)
        raise NotFoundError(message)
    return record


def guarded(action: str, failure=InternalError, conflict_message: str | None = None, conflict_lookup=None):
    """
    Decorator: applies the failure policy to a service function whose first argument is the session.

    Outcomes raised by the checks pass through untouched. An IntegrityError becomes
    ConflictError(conflict_message) only when `conflict_lookup`, called after the rollback
    with the same arguments, finds the row that now holds the unique key. Any other
    integrity failure (a foreign key, a NOT NULL) and anything else is logged and
    reported as `failure`. The session is rolled back in every failing case.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(session, *args, **kwargs):
            try:
                return func(session, *args, **kwargs)
            except JobBoardError as e:
                session.rollback()
                log.warning(f"Failed {action}: {e.message}")
                raise
            except IntegrityError as e:
                session.rollback()
                if conflict_message is not None and conflict_lookup is not None:
                    if conflict_lookup(session, *args, **kwargs) is not None:
                        log.warning(f"Uniqueness constraint hit while {action}: {e.orig}")
                        raise ConflictError(conflict_message) from e
                log.error(f"Integrity error while {action}: {e}", exc_info=True)
                raise failure(f"Error {action}") from e
            except Exception as e:
                session.rollback()
                log.error(f"Unexpected error while {action}: {e}", exc_info=True)
                raise failure(f"Error {action}") from e
        return wrapper
    return decorator
