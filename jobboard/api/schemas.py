"""
Request and response shapes for the REST surface.

Request bodies keep the field names the web client already sends (FullName,
UserID, ...). Every request field is optional at this level so that missing
values reach the services and come back as the service's own 400 message.
Responses are rendered with camelCase keys.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RequestBody(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class AccountRegistration(RequestBody):
    full_name: Optional[str] = Field(default=None, alias="FullName")
    email: Optional[str] = Field(default=None, alias="Email")
    password_hash: Optional[str] = Field(default=None, alias="PasswordHash")
    phone: Optional[str] = Field(default=None, alias="PhoneNumber")
    city: Optional[str] = Field(default=None, alias="City")
    resume_url: Optional[str] = Field(default=None, alias="ResumeURL")


class Credentials(RequestBody):
    email: Optional[str] = Field(default=None, alias="Email")
    password_hash: Optional[str] = Field(default=None, alias="PasswordHash")


class PostCreate(RequestBody):
    user_id: Optional[Union[int, str]] = Field(default=None, alias="UserID")
    title: Optional[str] = Field(default=None, alias="Title")
    company: Optional[str] = Field(default=None, alias="CompanyName")
    location: Optional[str] = Field(default=None, alias="Location")
    employment_type: Optional[str] = Field(default=None, alias="EmploymentType")
    description: Optional[str] = Field(default=None, alias="Description")
    posted_date: Optional[str] = Field(default=None, alias="PostedDate")
    salary_min: Optional[Union[float, str]] = Field(default=None, alias="SalaryMin")
    salary_max: Optional[Union[float, str]] = Field(default=None, alias="SalaryMax")


class ApplicationSubmit(RequestBody):
    applicant_id: Optional[Union[int, str]] = Field(
        default=None, validation_alias=AliasChoices("ApplicantID", "UserID", "applicant_id")
    )
    post_id: Optional[Union[int, str]] = Field(
        default=None, validation_alias=AliasChoices("PostID", "post_id")
    )
    message: Optional[str] = Field(default=None, validation_alias=AliasChoices("Message", "message"))


# --- Responses ---

class ResponseBody(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageOut(ResponseBody):
    message: str


class AccountOut(ResponseBody):
    id: str
    full_name: str
    email: str
    phone: str = ""


class UserProfileOut(AccountOut):
    first_name: str
    last_name: str
    city: str = ""


class AccountListItemOut(ResponseBody):
    id: str
    full_name: str
    email: str
    city: str = ""


class UserCreatedOut(ResponseBody):
    message: str
    user: AccountOut


class ApplicantCreatedOut(ResponseBody):
    message: str
    applicant: AccountOut


class PostOut(ResponseBody):
    id: str
    user_id: str
    user_name: str
    user_email: str
    title: str
    company: str
    location: str
    job_type: str
    description: str
    posted_date: date
    salary_min: Optional[float] = None
    salary_max: Optional[float] = None
    salary: str
    created_at: Optional[datetime] = None
    applicants: list[str] = []


class PostCreatedOut(ResponseBody):
    message: str
    post: PostOut


class PostDeletedOut(ResponseBody):
    message: str
    affected_rows: int


class ApplicationSummaryOut(ResponseBody):
    id: str
    applicant_id: str
    post_id: str
    message: str = ""
    applied_at: Optional[datetime] = None


class ApplicationOut(ApplicationSummaryOut):
    job_title: str
    company: Optional[str] = None
    location: Optional[str] = None
    job_type: Optional[str] = None
    applicant_name: str
    applicant_email: str


class ApplicationCreatedOut(ResponseBody):
    message: str
    application: ApplicationOut


class ApplicationCheckOut(ResponseBody):
    has_applied: bool
    application: Optional[ApplicationSummaryOut] = None
