from graphene import Mutation, String, Field

from jobboard.db.models import User, Applicant
from jobboard.gql.types import AccountObject
from jobboard.gql.utils import call_service
from jobboard.services import accounts


class RegisterUser(Mutation):
    """ Creates a new employer account. The password arrives already hashed. """
    class Arguments:
        full_name = String(required=True)
        email = String(required=True)
        password_hash = String(required=True)
        phone = String()
    user = Field(lambda: AccountObject)

    @staticmethod
    def mutate(root, info, full_name, email, password_hash, phone=None):
        user = call_service(accounts.register, User, full_name, email, password_hash, phone=phone)
        return RegisterUser(user=user)


class LoginUser(Mutation):
    """ Matches an employer's email and password hash. """
    class Arguments:
        email = String(required=True)
        password_hash = String(required=True)
    user = Field(lambda: AccountObject)

    @staticmethod
    def mutate(root, info, email, password_hash):
        return LoginUser(user=call_service(accounts.authenticate, User, email, password_hash))


class RegisterApplicant(Mutation):
    """ Creates a new applicant account. """
    class Arguments:
        full_name = String(required=True)
        email = String(required=True)
        password_hash = String(required=True)
        phone = String()
        city = String()
        resume_url = String()
    applicant = Field(lambda: AccountObject)

    @staticmethod
    def mutate(root, info, full_name, email, password_hash, phone=None, city=None, resume_url=None):
        applicant = call_service(
            accounts.register, Applicant, full_name, email, password_hash,
            phone=phone, city=city, resume_url=resume_url,
        )
        return RegisterApplicant(applicant=applicant)


class LoginApplicant(Mutation):
    class Arguments:
        email = String(required=True)
        password_hash = String(required=True)
    applicant = Field(lambda: AccountObject)

    @staticmethod
    def mutate(root, info, email, password_hash):
        return LoginApplicant(applicant=call_service(accounts.authenticate, Applicant, email, password_hash))
