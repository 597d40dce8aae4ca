# main.py
import logging

from fastapi import FastAPI
from fastapi.responses import RedirectResponse
from starlette_graphene3 import GraphQLApp, make_playground_handler

from jobboard import config
from jobboard.api.deps import register_exception_handlers
from jobboard.api.router import api_router
from jobboard.db.database import prepare_database
from jobboard.gql.schema import schema
from jobboard.middleware.depth_limit import QueryDepthMiddleware

logging.basicConfig(level=config.LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
log = logging.getLogger(__name__)

log.info(
    f"Starting job board service in {config.APP_ENV.upper()} mode. "
    f"GraphQL depth limits: General={config.GRAPHQL_MAX_DEPTH}, "
    f"Introspection={config.GRAPHQL_INTROSPECTION_MAX_DEPTH}"
)

app = FastAPI(title="Job Board Service")
register_exception_handlers(app)


@app.on_event("startup")
def startup_event():
    prepare_database()


@app.get("/", include_in_schema=False)
async def redirect_to_graphql():
    """
    Redirects the root path to the GraphQL Playground.
    """
    return RedirectResponse(url="/graphql", status_code=307)


@app.get("/api/v1/system/readiness")
def readiness():
    return {"status": "ready"}


app.include_router(api_router)

# --- Mount GraphQLApp with middleware ---
app.mount(
    "/graphql",
    GraphQLApp(
        schema=schema,
        middleware=[
            QueryDepthMiddleware(
                max_depth=config.GRAPHQL_MAX_DEPTH,
                introspection_max_depth=config.GRAPHQL_INTROSPECTION_MAX_DEPTH,
            )
        ],
        on_get=make_playground_handler(),
    ),
)
