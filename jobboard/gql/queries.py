from graphene import ObjectType, List, Field, ID, String

from jobboard.gql.types import (
    AccountObject, AccountListItemObject, UserProfileObject,
    PostObject, ApplicationObject, ApplicationCheckObject,
)
from jobboard.gql.utils import call_service
from jobboard.db.models import User, Applicant
from jobboard.services import accounts, posts, applications


class Query(ObjectType):
    """ Defines the available GraphQL queries. """

    # Accounts
    users = List(AccountListItemObject, description="Get a list of all employer users.")
    user = Field(AccountObject, id=ID(required=True), description="Get an employer user by ID.")
    user_by_email = Field(UserProfileObject, email=String(required=True), description="Get an employer user by email.")
    applicants = List(AccountListItemObject, description="Get a list of all applicants.")
    applicant = Field(AccountObject, id=ID(required=True), description="Get an applicant by ID.")
    applicant_by_email = Field(AccountObject, email=String(required=True), description="Get an applicant by email.")

    # Posts
    posts = List(PostObject, description="Get all job posts, newest first.")
    post = Field(PostObject, id=ID(required=True), description="Get a specific job post by ID.")
    posts_by_user = List(PostObject, user_id=ID(required=True), description="Get the job posts owned by a user.")

    # Applications
    applications = List(ApplicationObject, description="Get all applications, newest first.")
    applications_by_applicant = List(ApplicationObject, applicant_id=ID(required=True))
    applications_by_post = List(ApplicationObject, post_id=ID(required=True))
    check_applied = Field(
        ApplicationCheckObject,
        post_id=ID(required=True),
        applicant_id=ID(required=True),
        description="Whether an applicant has already applied to a post.",
    )

    # --- RESOLVERS ---

    @staticmethod
    def resolve_users(root, info):
        return call_service(accounts.list_all, User)

    @staticmethod
    def resolve_user(root, info, id):
        return call_service(accounts.get_by_id, User, id)

    @staticmethod
    def resolve_user_by_email(root, info, email):
        return call_service(accounts.get_by_email, User, email)

    @staticmethod
    def resolve_applicants(root, info):
        return call_service(accounts.list_all, Applicant)

    @staticmethod
    def resolve_applicant(root, info, id):
        return call_service(accounts.get_by_id, Applicant, id)

    @staticmethod
    def resolve_applicant_by_email(root, info, email):
        return call_service(accounts.get_by_email, Applicant, email)

    @staticmethod
    def resolve_posts(root, info):
        return call_service(posts.list_all)

    @staticmethod
    def resolve_post(root, info, id):
        return call_service(posts.get_by_id, id)

    @staticmethod
    def resolve_posts_by_user(root, info, user_id):
        return call_service(posts.list_by_user, user_id)

    @staticmethod
    def resolve_applications(root, info):
        return call_service(applications.list_all)

    @staticmethod
    def resolve_applications_by_applicant(root, info, applicant_id):
        return call_service(applications.list_by_applicant, applicant_id)

    @staticmethod
    def resolve_applications_by_post(root, info, post_id):
        return call_service(applications.list_by_post, post_id)

    @staticmethod
    def resolve_check_applied(root, info, post_id, applicant_id):
        return call_service(applications.check_applied, post_id, applicant_id)
