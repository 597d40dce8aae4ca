# jobboard/services/posts.py

import logging
import math
from datetime import date

from jobboard import config
from jobboard.db import repository
from jobboard.db.models import Post, User
from jobboard.errors import CreationFailedError, ValidationError
from jobboard.services.checks import ensure_exists, guarded, is_blank, parse_id, require_fields

log = logging.getLogger(__name__)

NOT_SPECIFIED = "Not specified"


def _format_amount(amount) -> str:
    value = float(amount)
    return str(int(value)) if value.is_integer() else f"{value:.2f}"


def format_salary(salary_min, salary_max, currency: str | None = None) -> str:
    """Display string for a salary range: 'THB30000 - THB45000', 'THB30000+' or 'Not specified'."""
    prefix = config.SALARY_CURRENCY if currency is None else currency
    if salary_min is not None and salary_max is not None:
        return f"{prefix}{_format_amount(salary_min)} - {prefix}{_format_amount(salary_max)}"
    if salary_min is not None:
        return f"{prefix}{_format_amount(salary_min)}+"
    return NOT_SPECIFIED


def _parse_amount(value, label: str):
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {label} format")
    try:
        amount = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {label} format")
    if not math.isfinite(amount):
        raise ValidationError(f"Invalid {label} format")
    return amount


def _parse_posted_date(value) -> date:
    if is_blank(value):
        return date.today()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip())
    except ValueError:
        raise ValidationError("Invalid posted date format, expected YYYY-MM-DD")


def _serialize(post: Post, owner: User, applicant_ids: list[int]) -> dict:
    return {
        "id": str(post.id),
        "user_id": str(post.user_id),
        "user_name": owner.full_name or owner.email,
        "user_email": owner.email,
        "title": post.title,
        "company": post.company_name,
        "location": post.location,
        "job_type": post.employment_type,
        "description": post.description,
        "posted_date": post.posted_date,
        "salary_min": post.salary_min,
        "salary_max": post.salary_max,
        "salary": format_salary(post.salary_min, post.salary_max),
        "created_at": post.created_at,
        "applicants": [str(applicant_id) for applicant_id in applicant_ids],
    }


def _enrich(session, rows: list) -> list[dict]:
    """Attaches applicant ids to every post with one batch query for the whole result set."""
    applicants_by_post = repository.find_applicant_ids_by_posts(session, [post.id for post, _ in rows])
    return [_serialize(post, owner, applicants_by_post.get(post.id, [])) for post, owner in rows]


@guarded("creating post", failure=CreationFailedError)
def create(
        session,
        user_id,
        title,
        company,
        location,
        employment_type,
        description,
        posted_date=None,
        salary_min=None,
        salary_max=None,
) -> dict:
    require_fields(
        "User ID, title, company, location, employment type, and description are required",
        user_id=user_id, title=title, company=company, location=location,
        employment_type=employment_type, description=description,
    )
    owner_id = parse_id(user_id, "user ID")
    posted_on = _parse_posted_date(posted_date)
    low = _parse_amount(salary_min, "minimum salary")
    high = _parse_amount(salary_max, "maximum salary")

    ensure_exists(repository.find_by_id(session, User, owner_id), "User not found")

    post = Post(
        user_id=owner_id,
        title=title,
        company_name=company,
        location=location,
        employment_type=employment_type,
        description=description,
        posted_date=posted_on,
        salary_min=low,
        salary_max=high,
    )
    new_id = repository.insert(session, post)
    log.info(f"Post created: ID={new_id}, Title={title}, Owner={owner_id}")

    created, owner = repository.find_posts(session, post_id=new_id)[0]
    return _serialize(created, owner, [])


@guarded("fetching post")
def get_by_id(session, post_id) -> dict:
    record_id = parse_id(post_id, "post ID")
    rows = repository.find_posts(session, post_id=record_id)
    ensure_exists(rows[0] if rows else None, "Post not found")
    return _enrich(session, rows)[0]


@guarded("fetching posts")
def list_all(session) -> list[dict]:
    return _enrich(session, repository.find_posts(session))


@guarded("fetching posts for user")
def list_by_user(session, user_id) -> list[dict]:
    owner_id = parse_id(user_id, "user ID")
    return _enrich(session, repository.find_posts(session, user_id=owner_id))


@guarded("deleting post")
def delete(session, post_id) -> int:
    """Deletes without an existence check; an unknown id simply affects zero rows."""
    record_id = parse_id(post_id, "post ID")
    affected = repository.delete_by_id(session, Post, record_id)
    log.info(f"Post delete requested: ID={record_id}, affected={affected}")
    return affected
