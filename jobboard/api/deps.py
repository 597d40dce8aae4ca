import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from jobboard.db import database
from jobboard.errors import JobBoardError

log = logging.getLogger(__name__)


def get_session():
    """ One session per request; it goes back to the pool when the request ends. """
    with database.Session() as session:
        yield session


def register_exception_handlers(app: FastAPI):
    """ Maps service outcomes and malformed bodies onto {"message": ...} responses. """

    @app.exception_handler(JobBoardError)
    async def job_board_error_handler(request: Request, exc: JobBoardError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        log.warning(f"Malformed request to {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"message": "Invalid request body"})
