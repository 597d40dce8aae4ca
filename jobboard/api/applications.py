from fastapi import APIRouter, Depends, status

from jobboard.api.deps import get_session
from jobboard.api.schemas import ApplicationCheckOut, ApplicationCreatedOut, ApplicationOut, ApplicationSubmit
from jobboard.services import applications

router = APIRouter()


@router.post("/apply", response_model=ApplicationCreatedOut, status_code=status.HTTP_201_CREATED)
def apply(payload: ApplicationSubmit, session=Depends(get_session)):
    application = applications.apply(session, payload.applicant_id, payload.post_id, payload.message)
    return {"message": "Application submitted successfully", "application": application}


@router.get("/applications", response_model=list[ApplicationOut])
def list_applications(session=Depends(get_session)):
    return applications.list_all(session)


@router.get("/applications/applicant/{applicant_id}", response_model=list[ApplicationOut])
def list_applications_by_applicant(applicant_id: str, session=Depends(get_session)):
    return applications.list_by_applicant(session, applicant_id)


# Older clients still call the per-user path
@router.get("/applications/user/{applicant_id}", response_model=list[ApplicationOut])
def list_applications_by_user(applicant_id: str, session=Depends(get_session)):
    return applications.list_by_applicant(session, applicant_id)


@router.get("/applications/post/{post_id}", response_model=list[ApplicationOut])
def list_applications_by_post(post_id: str, session=Depends(get_session)):
    return applications.list_by_post(session, post_id)


@router.get("/applications/check/{post_id}/{applicant_id}", response_model=ApplicationCheckOut)
def check_applied(post_id: str, applicant_id: str, session=Depends(get_session)):
    return applications.check_applied(session, post_id, applicant_id)
