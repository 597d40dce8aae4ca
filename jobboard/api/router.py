from fastapi import APIRouter

from jobboard.api import applications, posts
from jobboard.api.accounts import applicants_router, users_router

api_router = APIRouter()
api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(applicants_router, prefix="/applicants", tags=["applicants"])
api_router.include_router(posts.router, prefix="/posts", tags=["posts"])
api_router.include_router(applications.router, tags=["applications"])
