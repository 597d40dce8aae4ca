from graphene import Mutation, String, ID, Field

from jobboard.gql.types import ApplicationObject
from jobboard.gql.utils import call_service
from jobboard.services import applications


class ApplyToPost(Mutation):
    """ Submits an applicant's application to a job post. Each pair may apply once. """
    class Arguments:
        applicant_id = ID(required=True)
        post_id = ID(required=True)
        message = String()
    application = Field(lambda: ApplicationObject)

    @staticmethod
    def mutate(root, info, applicant_id, post_id, message=None):
        application = call_service(applications.apply, applicant_id, post_id, message)
        return ApplyToPost(application=application)
