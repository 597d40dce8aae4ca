# jobboard/gql/utils.py

import logging

from graphql import GraphQLError

from jobboard.db import database
from jobboard.errors import JobBoardError

log = logging.getLogger(__name__)


def call_service(operation, *args, **kwargs):
    """
    Runs a service operation in its own session and turns its outcome into a GraphQLError.

    The outcome name and the matching HTTP status travel in the error extensions.
    """
    with database.Session() as session:
        try:
            return operation(session, *args, **kwargs)
        except JobBoardError as e:
            log.debug(f"{operation.__name__} ended with {e.code}: {e.message}")
            raise GraphQLError(e.message, extensions={"code": e.code, "status": e.status_code})
