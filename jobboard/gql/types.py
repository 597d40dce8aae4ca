from graphene import ObjectType, String, ID, List, Field, Float, Boolean, Date, DateTime

# Services hand back plain dicts; graphene's default resolver reads them key by key.


class AccountObject(ObjectType):
    id = ID()
    full_name = String()
    email = String()
    phone = String()


class UserProfileObject(ObjectType):
    """ An employer looked up by email, with the display name split in two. """
    id = ID()
    full_name = String()
    first_name = String()
    last_name = String()
    email = String()
    phone = String()
    city = String()


class AccountListItemObject(ObjectType):
    id = ID()
    full_name = String()
    email = String()
    city = String()


class PostObject(ObjectType):
    id = ID()
    user_id = ID()
    user_name = String()
    user_email = String()
    title = String()
    company = String()
    location = String()
    job_type = String()
    description = String()
    posted_date = Date()
    salary_min = Float()
    salary_max = Float()
    salary = String(description="Display form of the salary range, e.g. 'THB30000 - THB45000'.")
    created_at = DateTime()
    applicants = List(ID, description="IDs of applicants who applied to this post.")


class ApplicationSummaryObject(ObjectType):
    id = ID()
    applicant_id = ID()
    post_id = ID()
    message = String()
    applied_at = DateTime()


class ApplicationObject(ObjectType):
    id = ID()
    applicant_id = ID()
    post_id = ID()
    job_title = String()
    company = String()
    location = String()
    job_type = String()
    applicant_name = String()
    applicant_email = String()
    message = String()
    applied_at = DateTime()


class ApplicationCheckObject(ObjectType):
    has_applied = Boolean()
    application = Field(lambda: ApplicationSummaryObject)
