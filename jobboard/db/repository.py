# jobboard/db/repository.py
"""
Parameterized read/write access to the four record collections.

Every function takes an open Session and performs exactly one round-trip
(plus the commit for writes). Ordering of checks is the caller's business.
"""

import logging
from collections import defaultdict

from sqlalchemy.orm import Session

from jobboard.db.models import Application, Applicant, Post, User

log = logging.getLogger(__name__)


def find_by_email(session: Session, model, email: str):
    return session.query(model).filter(model.email == email).first()


def find_by_id(session: Session, model, record_id: int):
    return session.query(model).filter(model.id == record_id).first()


def find_by_credentials(session: Session, model, email: str, password_hash: str):
    """Exact match on the stored (email, token) pair. The token is opaque here."""
    return session.query(model).filter(
        model.email == email, model.password_hash == password_hash
    ).first()


def list_all(session: Session, model) -> list:
    return session.query(model).order_by(model.id).all()


def insert(session: Session, record) -> int:
    """Adds and commits a new row, returning its generated id."""
    session.add(record)
    session.commit()
    session.refresh(record)
    log.debug(f"Inserted {type(record).__name__} ID={record.id}")
    return record.id


def delete_by_id(session: Session, model, record_id: int) -> int:
    affected = session.query(model).filter(model.id == record_id).delete(synchronize_session=False)
    session.commit()
    return affected


def find_posts(session: Session, post_id: int | None = None, user_id: int | None = None) -> list:
    """Returns (post, owner) pairs, newest posted date first."""
    query = session.query(Post, User).join(User, Post.user_id == User.id)
    if post_id is not None:
        query = query.filter(Post.id == post_id)
    if user_id is not None:
        query = query.filter(Post.user_id == user_id)
    return query.order_by(Post.posted_date.desc(), Post.id.desc()).all()


def find_applicant_ids_by_posts(session: Session, post_ids: list[int]) -> dict[int, list[int]]:
    """
    Batch fetch of applicant ids for a whole set of posts, grouped by post.

    Rows keep storage order (application id ascending) within each post.
    """
    grouped = defaultdict(list)
    if not post_ids:
        return grouped
    rows = (
        session.query(Application.post_id, Application.applicant_id)
        .filter(Application.post_id.in_(post_ids))
        .order_by(Application.id)
        .all()
    )
    for post_id, applicant_id in rows:
        grouped[post_id].append(applicant_id)
    return grouped


def find_applications(
        session: Session,
        applicant_id: int | None = None,
        post_id: int | None = None,
        application_id: int | None = None,
) -> list:
    """Returns (application, post, applicant) triples, newest applied first."""
    query = (
        session.query(Application, Post, Applicant)
        .join(Post, Application.post_id == Post.id)
        .join(Applicant, Application.applicant_id == Applicant.id)
    )
    if applicant_id is not None:
        query = query.filter(Application.applicant_id == applicant_id)
    if post_id is not None:
        query = query.filter(Application.post_id == post_id)
    if application_id is not None:
        query = query.filter(Application.id == application_id)
    return query.order_by(Application.applied_at.desc(), Application.id.desc()).all()


def find_application_by_pair(session: Session, applicant_id: int, post_id: int):
    return session.query(Application).filter(
        Application.applicant_id == applicant_id, Application.post_id == post_id
    ).first()
