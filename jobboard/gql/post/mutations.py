from graphene import Mutation, String, ID, Int, Float, Date, Field

from jobboard.gql.types import PostObject
from jobboard.gql.utils import call_service
from jobboard.services import posts


class CreatePost(Mutation):
    """ Creates a job post for an existing employer user. """
    class Arguments:
        user_id = ID(required=True)
        title = String(required=True)
        company = String(required=True)
        location = String(required=True)
        employment_type = String(required=True)
        description = String(required=True)
        posted_date = Date(description="Defaults to today.")
        salary_min = Float()
        salary_max = Float()
    post = Field(lambda: PostObject)

    @staticmethod
    def mutate(root, info, user_id, title, company, location, employment_type, description,
               posted_date=None, salary_min=None, salary_max=None):
        post = call_service(
            posts.create, user_id, title, company, location, employment_type, description,
            posted_date=posted_date, salary_min=salary_min, salary_max=salary_max,
        )
        return CreatePost(post=post)


class DeletePost(Mutation):
    """ Deletes a job post. Deleting an unknown post reports zero affected rows. """
    class Arguments:
        id = ID(required=True)
    affected_rows = Int()

    @staticmethod
    def mutate(root, info, id):
        return DeletePost(affected_rows=call_service(posts.delete, id))
