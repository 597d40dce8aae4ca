from graphene import ObjectType
from jobboard.gql.account.mutations import RegisterUser, LoginUser, RegisterApplicant, LoginApplicant
from jobboard.gql.post.mutations import CreatePost, DeletePost
from jobboard.gql.application.mutations import ApplyToPost


class Mutation(ObjectType):
    """ Aggregates all mutations for the GraphQL schema. """

    # Account Mutations
    register_user = RegisterUser.Field()
    login_user = LoginUser.Field()
    register_applicant = RegisterApplicant.Field()
    login_applicant = LoginApplicant.Field()

    # Post Mutations
    create_post = CreatePost.Field()
    delete_post = DeletePost.Field()

    # Application Mutations
    apply_to_post = ApplyToPost.Field()
