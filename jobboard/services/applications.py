# jobboard/services/applications.py
"""
Application submission workflow and application reads.

A (applicant, post) pair moves from no application to submitted exactly once;
there is no withdrawal and no status change afterwards.
"""

import logging

from jobboard.db import repository
from jobboard.db.models import Application, Applicant, Post
from jobboard.errors import CreationFailedError, ValidationError
from jobboard.services.checks import ensure_exists, ensure_no_duplicate, guarded, is_blank, parse_id

log = logging.getLogger(__name__)

ALREADY_APPLIED = "Already applied for this job."


def _summary(application: Application) -> dict:
    return {
        "id": str(application.id),
        "applicant_id": str(application.applicant_id),
        "post_id": str(application.post_id),
        "message": application.message or "",
        "applied_at": application.applied_at,
    }


def _serialize(application, post, applicant) -> dict:
    result = _summary(application)
    result.update(
        job_title=post.title,
        company=post.company_name,
        location=post.location,
        job_type=post.employment_type,
        applicant_name=applicant.full_name,
        applicant_email=applicant.email,
    )
    return result


def _existing_application(session, applicant_id, post_id, message=None):
    """Re-check after a failed insert: only a row for the pair makes it a duplicate."""
    return repository.find_application_by_pair(
        session, parse_id(applicant_id, "applicant ID"), parse_id(post_id, "post ID")
    )


@guarded(
    "submitting application",
    failure=CreationFailedError,
    conflict_message=ALREADY_APPLIED,
    conflict_lookup=_existing_application,
)
def apply(session, applicant_id, post_id, message=None) -> dict:
    if is_blank(applicant_id) or is_blank(post_id):
        raise ValidationError("Applicant ID and post ID are required")
    try:
        applicant_pk = parse_id(applicant_id, "applicant ID")
        post_pk = parse_id(post_id, "post ID")
    except ValidationError:
        raise ValidationError("Invalid applicant ID or post ID format")
    log.info(f"Applicant {applicant_pk} attempting to apply for post {post_pk}")

    ensure_exists(repository.find_by_id(session, Applicant, applicant_pk), "Applicant not found")
    # Checked before the post lookup: a repeat application to a removed post is still a conflict
    ensure_no_duplicate(
        repository.find_application_by_pair(session, applicant_pk, post_pk),
        ALREADY_APPLIED,
        f"applicant {applicant_pk} on post {post_pk}",
    )
    ensure_exists(repository.find_by_id(session, Post, post_pk), "Job post not found")

    new_id = repository.insert(
        session, Application(applicant_id=applicant_pk, post_id=post_pk, message=message or None)
    )
    log.info(f"Applicant {applicant_pk} applied to post {post_pk}. App ID: {new_id}")

    application, post, applicant = repository.find_applications(session, application_id=new_id)[0]
    return _serialize(application, post, applicant)


@guarded("checking application")
def check_applied(session, post_id, applicant_id) -> dict:
    post_pk = parse_id(post_id, "post ID")
    applicant_pk = parse_id(applicant_id, "applicant ID")
    existing = repository.find_application_by_pair(session, applicant_pk, post_pk)
    return {
        "has_applied": existing is not None,
        "application": _summary(existing) if existing is not None else None,
    }


@guarded("fetching applications")
def list_all(session) -> list[dict]:
    return [_serialize(*row) for row in repository.find_applications(session)]


@guarded("fetching applications for applicant")
def list_by_applicant(session, applicant_id) -> list[dict]:
    applicant_pk = parse_id(applicant_id, "applicant ID")
    return [_serialize(*row) for row in repository.find_applications(session, applicant_id=applicant_pk)]


@guarded("fetching applications for post")
def list_by_post(session, post_id) -> list[dict]:
    post_pk = parse_id(post_id, "post ID")
    return [_serialize(*row) for row in repository.find_applications(session, post_id=post_pk)]
