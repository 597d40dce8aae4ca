"""
Tests for the GraphQL surface - resolvers call the same services and report outcomes in extensions.
"""

import pytest
from graphql import parse
from graphql.language.ast import FragmentDefinitionNode

from jobboard.gql.schema import schema
from jobboard.middleware import depth_limit
from jobboard.middleware.depth_limit import QueryDepthMiddleware, selection_depth

REGISTER_USER = """
mutation {
  registerUser(fullName: "Alice Employer", email: "a@x.com", passwordHash: "hash-a") {
    user { id fullName email }
  }
}
"""

REGISTER_APPLICANT = """
mutation {
  registerApplicant(fullName: "Bob Applicant", email: "b@x.com", passwordHash: "hash-b", city: "Phuket") {
    applicant { id }
  }
}
"""


def create_post(user_id):
    return schema.execute(
        """
        mutation ($userId: ID!) {
          createPost(userId: $userId, title: "Plumber", company: "Pipes Co", location: "Bangkok",
                     employmentType: "Contract", description: "Independent contractors",
                     postedDate: "2024-03-01", salaryMin: 15000, salaryMax: 20000) {
            post { id salary postedDate applicants }
          }
        }
        """,
        variable_values={"userId": user_id},
    )


def apply(applicant_id, post_id):
    return schema.execute(
        """
        mutation ($applicantId: ID!, $postId: ID!) {
          applyToPost(applicantId: $applicantId, postId: $postId, message: "Hello") {
            application { id jobTitle applicantName message }
          }
        }
        """,
        variable_values={"applicantId": applicant_id, "postId": post_id},
    )


@pytest.fixture
def seeded(session_factory):
    user = schema.execute(REGISTER_USER).data["registerUser"]["user"]
    applicant = schema.execute(REGISTER_APPLICANT).data["registerApplicant"]["applicant"]
    post = create_post(user["id"]).data["createPost"]["post"]
    return user, applicant, post


class TestGraphQLMutations:

    def test_create_post(self, seeded):
        _, _, post = seeded

        assert post["salary"] == "THB15000 - THB20000"
        assert post["postedDate"] == "2024-03-01"
        assert post["applicants"] == []

    def test_apply_then_conflict(self, seeded):
        _, applicant, post = seeded

        first = apply(applicant["id"], post["id"])
        second = apply(applicant["id"], post["id"])

        assert first.errors is None
        assert first.data["applyToPost"]["application"]["jobTitle"] == "Plumber"
        assert second.errors[0].message == "Already applied for this job."
        assert second.errors[0].extensions == {"code": "CONFLICT", "status": 409}

    def test_login_failure_reports_authentication_error(self, seeded):
        result = schema.execute('mutation { loginUser(email: "a@x.com", passwordHash: "nope") { user { id } } }')

        assert result.data["loginUser"] is None
        assert result.errors[0].extensions["code"] == "AUTHENTICATION_ERROR"

    def test_delete_post(self, seeded):
        _, _, post = seeded

        deleted = schema.execute('mutation ($id: ID!) { deletePost(id: $id) { affectedRows } }', variable_values={"id": post["id"]})
        missing = schema.execute('mutation { deletePost(id: "999") { affectedRows } }')

        assert deleted.data["deletePost"]["affectedRows"] == 1
        assert missing.data["deletePost"]["affectedRows"] == 0


class TestGraphQLQueries:

    def test_post_lists_applicants(self, seeded):
        _, applicant, post = seeded
        apply(applicant["id"], post["id"])

        result = schema.execute('query ($id: ID!) { post(id: $id) { userName applicants } }', variable_values={"id": post["id"]})

        assert result.data["post"] == {"userName": "Alice Employer", "applicants": [applicant["id"]]}

    def test_check_applied_and_listings(self, seeded):
        _, applicant, post = seeded
        before = schema.execute(
            'query ($p: ID!, $a: ID!) { checkApplied(postId: $p, applicantId: $a) { hasApplied } }',
            variable_values={"p": post["id"], "a": applicant["id"]},
        )
        apply(applicant["id"], post["id"])

        listed = schema.execute("{ applications { applicantEmail company } }")

        assert before.data["checkApplied"]["hasApplied"] is False
        assert listed.data["applications"] == [{"applicantEmail": "b@x.com", "company": "Pipes Co"}]

    def test_user_by_email(self, seeded):
        result = schema.execute('{ userByEmail(email: "a@x.com") { firstName lastName } }')

        assert result.data["userByEmail"] == {"firstName": "Alice", "lastName": "Employer"}

    def test_not_found_and_validation_codes(self, session_factory):
        missing = schema.execute('{ post(id: "5") { id } }')
        malformed = schema.execute('{ postsByUser(userId: "five") { id } }')

        assert missing.errors[0].extensions["status"] == 404
        assert malformed.errors[0].extensions["code"] == "VALIDATION_ERROR"


class TestQueryDepthMiddleware:
    """Test the nesting limit applied to GraphQL operations."""

    QUERY = '{ checkApplied(postId: "1", applicantId: "1") { application { id } } }'

    def test_selection_depth_inlines_fragments(self):
        document = parse(
            """
            query { applications { ...AppFields } }
            fragment AppFields on ApplicationObject { id ... on ApplicationObject { jobTitle } }
            """
        )
        operation = document.definitions[0]
        fragments = {d.name.value: d for d in document.definitions if isinstance(d, FragmentDefinitionNode)}

        assert selection_depth(operation.selection_set, fragments) == 2

    def test_within_limit_passes(self, session_factory):
        result = schema.execute(self.QUERY, middleware=[QueryDepthMiddleware(max_depth=3)])

        assert result.errors is None
        assert result.data["checkApplied"]["application"] is None

    def test_too_deep_rejected(self, session_factory):
        result = schema.execute(self.QUERY, middleware=[QueryDepthMiddleware(max_depth=2)])

        assert result.data["checkApplied"] is None
        assert "exceeds maximum depth of 2" in result.errors[0].message

    def test_depth_measured_once_per_operation(self, session_factory, monkeypatch):
        """Sibling top-level fields share one measurement of the operation."""
        measured = []
        real_depth = depth_limit.selection_depth

        def counting_depth(selection_set, fragments, visiting=frozenset()):
            measured.append(selection_set)
            return real_depth(selection_set, fragments, visiting)

        monkeypatch.setattr(depth_limit, "selection_depth", counting_depth)
        middleware = QueryDepthMiddleware(max_depth=3)

        result = schema.execute("{ posts { id } applications { id } users { id } }", middleware=[middleware])

        assert result.errors is None
        assert len([s for s in measured if len(s.selections) == 3]) == 1

        schema.execute("{ posts { id } applications { id } users { id } }", middleware=[middleware])

        assert len([s for s in measured if len(s.selections) == 3]) == 2

    def test_introspection_gets_lenient_limit(self):
        query = "{ __schema { queryType { fields { name type { name } } } } }"

        result = schema.execute(query, middleware=[QueryDepthMiddleware(max_depth=2, introspection_max_depth=10)])

        assert result.errors is None
