from fastapi import APIRouter, Depends, status

from jobboard.api.deps import get_session
from jobboard.api.schemas import (
    AccountListItemOut,
    AccountOut,
    AccountRegistration,
    ApplicantCreatedOut,
    Credentials,
    UserCreatedOut,
    UserProfileOut,
)
from jobboard.db.models import Applicant, User
from jobboard.services import accounts


def build_account_router(model, key: str, label: str, created_model, profile_model) -> APIRouter:
    """ The same five endpoints for each account group; `key` names the account in wrapped responses. """
    router = APIRouter()

    @router.post("/login")
    def login(payload: Credentials, session=Depends(get_session)):
        account = accounts.authenticate(session, model, payload.email, payload.password_hash)
        return {"message": "Login successful", key: AccountOut(**account).model_dump(by_alias=True)}

    @router.get("/email/{email}", response_model=profile_model)
    def get_by_email(email: str, session=Depends(get_session)):
        return accounts.get_by_email(session, model, email)

    @router.get("", response_model=list[AccountListItemOut])
    def list_accounts(session=Depends(get_session)):
        return accounts.list_all(session, model)

    @router.get("/{account_id}", response_model=AccountOut)
    def get_by_id(account_id: str, session=Depends(get_session)):
        return accounts.get_by_id(session, model, account_id)

    @router.post("", response_model=created_model, status_code=status.HTTP_201_CREATED)
    def register(payload: AccountRegistration, session=Depends(get_session)):
        account = accounts.register(
            session,
            model,
            payload.full_name,
            payload.email,
            payload.password_hash,
            phone=payload.phone,
            city=payload.city,
            resume_url=payload.resume_url,
        )
        return {"message": f"{label} successfully created", key: account}

    return router


users_router = build_account_router(User, "user", "User", UserCreatedOut, UserProfileOut)
applicants_router = build_account_router(Applicant, "applicant", "Applicant", ApplicantCreatedOut, AccountOut)
